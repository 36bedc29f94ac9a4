"""Command line entry point: ``vipax <scale> <delay> <rom>``."""

import argparse
import time
from typing import Optional, Sequence

from vipax.constants import NUM_KEYS
from vipax.emulator import load_rom, set_keypad, step
from vipax.errors import EmulatorFault, RomLoadError
from vipax.frontend import Platform
from vipax.logging import MachineLogger
from vipax.state import EmulatorState, create_state
from vipax.timers import sound_active


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vipax", description="CHIP-8 interpreter")
    parser.add_argument("scale", type=int, help="window pixels per CHIP-8 pixel")
    parser.add_argument("delay", type=float, help="minimum milliseconds between cycles")
    parser.add_argument("rom", help="path to the program file")
    return parser


def run(state: EmulatorState, platform, delay_ms: float, logger: MachineLogger) -> EmulatorState:
    """Poll input and step the machine whenever ``delay_ms`` has elapsed.

    Returns the last state when the window is closed. Machine faults are
    logged with the faulting state and re-raised. The sound timer is only a
    counter, so buzzer transitions are logged at DEBUG instead of played.
    """
    keys = [False] * NUM_KEYS
    buzzing = sound_active(state)
    last_cycle = time.perf_counter()

    while not platform.process_input(keys):
        now = time.perf_counter()
        if (now - last_cycle) * 1000.0 <= delay_ms:
            continue
        last_cycle = now

        state = set_keypad(state, keys)
        try:
            state = step(state)
        except EmulatorFault as fault:
            logger.log_fault(fault, state)
            raise
        logger.cycles += 1
        if sound_active(state) != buzzing:
            buzzing = not buzzing
            logger.debug(f"Buzzer {'on' if buzzing else 'off'} at cycle {logger.cycles}")
        platform.update(state.display)

    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = MachineLogger()

    try:
        state = load_rom(create_state(), args.rom)
    except RomLoadError as e:
        logger.error(str(e))
        return 1

    logger.log_session_start({"rom": args.rom, "scale": args.scale, "delay_ms": args.delay})

    with Platform("CHIP-8 emulator", args.scale) as platform:
        try:
            run(state, platform, args.delay, logger)
        except EmulatorFault:
            return 1
        finally:
            logger.log_session_end()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
