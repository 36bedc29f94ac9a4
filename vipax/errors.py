"""Faults raised by the CHIP-8 interpreter."""

from typing import Optional

from vipax.constants import MEMORY_SIZE


class EmulatorFault(RuntimeError):
    """Unrecoverable machine fault. The state that raised it must not be stepped again."""

    def __init__(self, message: str, address: Optional[int] = None):
        if address is not None:
            message = f"{message} (address 0x{address:04X})"
        super().__init__(message)
        self.address = address


class AddressingFault(EmulatorFault):
    """Memory access outside the 4K address space."""


class DecodeFault(EmulatorFault):
    """Instruction word with no mapped handler."""

    def __init__(self, instruction: int, address: Optional[int] = None):
        super().__init__(f"Unknown instruction 0x{instruction:04X}", address)
        self.instruction = instruction


class StackOverflow(EmulatorFault):
    """Subroutine call with all stack levels in use."""


class StackUnderflow(EmulatorFault):
    """Return with no matching call."""


class RomLoadError(Exception):
    """Program could not be read or does not fit in memory."""


def check_memory_range(start: int, length: int, memory_size: int = MEMORY_SIZE) -> None:
    """Raise AddressingFault unless ``[start, start + length)`` lies inside memory."""
    if length <= 0:
        return
    if start < 0 or start + length > memory_size:
        raise AddressingFault(f"Access of {length} byte(s) outside memory", start)
