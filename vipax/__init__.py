"""CHIP-8 interpreter package."""

from vipax.state import EmulatorState, StackState, create_state
from vipax.emulator import execute, fetch, step, load_rom, load_program, set_keypad
from vipax.timers import decay_timers
from vipax.decode import DecodedInstruction, decode
from vipax.errors import (
    EmulatorFault, AddressingFault, DecodeFault, StackOverflow, StackUnderflow, RomLoadError,
)
from vipax.constants import *
from vipax.rendering import chip8_display_to_rgb, create_color_scheme

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "load_rom",
    "load_program",
    "set_keypad",
    "decay_timers",
    "DecodedInstruction",
    "decode",
    "EmulatorFault",
    "AddressingFault",
    "DecodeFault",
    "StackOverflow",
    "StackUnderflow",
    "RomLoadError",
    "PROGRAM_START",
    "FONT_START",
    "MEMORY_SIZE",
    "PIXEL_ON",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "chip8_display_to_rgb",
    "create_color_scheme",
]
