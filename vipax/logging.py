"""Console logging utilities for vipax.

A small level-filtered logger with ANSI colors, plus a machine-aware
subclass that knows how to report run configuration, register dumps and
faults.
"""

import time
import sys
from typing import Any, Dict

from vipax.state import EmulatorState

LEVELS = ("DEBUG", "INFO", "ERROR")

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "ERROR": "\033[31m",
}
RESET = "\033[0m"


class ConsoleLogger:
    """Console logger with colored levels and elapsed-time stamps."""

    def __init__(
        self,
        name: str = "vipax",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        level = log_level.upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level {log_level!r}, expected one of {LEVELS}")
        self.name = name
        self.threshold = LEVELS.index(level)
        self.use_colors = use_colors and sys.stdout.isatty()
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def _format_message(self, level: str, message: str) -> str:
        prefix = f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        tag = f"[{level:>5s}]"
        if self.use_colors:
            tag = f"{LEVEL_COLORS[level]}{tag}{RESET}"
        return f"{prefix}{tag}[{self.name}] {message}"

    def log(self, level: str, message: str):
        """Print ``message`` if ``level`` is at or above the logger's threshold."""
        if LEVELS.index(level) >= self.threshold:
            print(self._format_message(level, message), flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def error(self, message: str):
        self.log("ERROR", message)


class MachineLogger(ConsoleLogger):
    """Logger that reports emulator sessions."""

    def __init__(self, name: str = "vipax", **kwargs):
        super().__init__(name, **kwargs)
        self.cycles = 0

    def log_session_start(self, config: Dict[str, Any]):
        """Log run configuration."""
        self.info("=" * 60)
        self.info("Starting CHIP-8 session:")
        for key, value in config.items():
            self.info(f"  {key}: {value}")
        self.info("=" * 60)

    def log_registers(self, state: EmulatorState, level: str = "DEBUG"):
        """Dump pc, I, timers and V0..VF."""
        self.log(
            level,
            f"PC=0x{int(state.pc):03X} I=0x{int(state.I):03X} "
            f"OP=0x{int(state.opcode):04X} SP={int(state.stack.pointer)} "
            f"DT={int(state.delay_timer)} ST={int(state.sound_timer)}"
        )
        for row in range(0, 16, 4):
            self.log(
                level,
                "  " + " ".join(f"V{r:X}={int(state.V[r]):02X}" for r in range(row, row + 4)),
            )

    def log_fault(self, fault: Exception, state: EmulatorState):
        """Report a machine fault with the state it happened in."""
        self.error(f"{type(fault).__name__}: {fault}")
        self.log_registers(state, level="ERROR")

    def log_session_end(self):
        elapsed = time.time() - self.start_time
        rate = self.cycles / elapsed if elapsed > 0 else 0.0
        self.info(f"Stopped after {self.cycles} cycles in {elapsed:.1f}s ({rate:.0f} Hz)")
