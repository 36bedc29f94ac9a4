"""Main CHIP-8 emulator execution engine."""

from typing import Sequence

import jax.numpy as jnp
from vipax.state import EmulatorState
from vipax.decode import decode
from vipax.constants import MAX_PROGRAM_SIZE, MEMORY_SIZE, NUM_KEYS, PROGRAM_START
from vipax.errors import AddressingFault, RomLoadError
from vipax.timers import decay_timers
from vipax.instructions.system import execute_system_instruction
from vipax.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset, execute_skip_if_key
)
from vipax.instructions.alu import execute_alu_operation
from vipax.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from vipax.instructions.display import execute_display
from vipax.instructions.misc import execute_misc_instruction

# Indexed by the top nibble; groups 0x0, 0x8, 0xE and 0xF dispatch again.
INSTRUCTION_TABLE = (
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
)


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    Raises DecodeFault for words with no handler.
    """
    decoded_instruction = decode(instruction)
    return INSTRUCTION_TABLE[decoded_instruction.opcode](state, decoded_instruction)


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> jnp.uint16:
    """Pack two bytes into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def fetch(state: EmulatorState) -> tuple[EmulatorState, jnp.uint16]:
    """Fetch next instruction from memory and advance the pc past it."""
    pc = int(state.pc)
    if pc + 1 >= MEMORY_SIZE:
        raise AddressingFault("Instruction fetch outside memory", pc)
    instruction = _pack_u16(state.memory[pc], state.memory[pc + 1])
    return state.replace(pc=state.pc + 2, opcode=instruction), instruction


def step(state: EmulatorState) -> EmulatorState:
    """Run one fetch/decode/execute cycle followed by one timer tick."""
    state, instruction = fetch(state)
    state = execute(state, int(instruction))
    return decay_timers(state)


def set_keypad(state: EmulatorState, keys: Sequence[bool]) -> EmulatorState:
    """Replace the keypad with 16 key states polled from the input device."""
    keypad = jnp.asarray(keys, dtype=jnp.bool_)
    if keypad.shape != (NUM_KEYS,):
        raise ValueError(f"Expected {NUM_KEYS} key states, got shape {keypad.shape}")
    return state.replace(keypad=keypad)


def load_program(state: EmulatorState, program: bytes) -> EmulatorState:
    """Copy raw program bytes into CHIP-8 memory starting at 0x200."""
    if len(program) > MAX_PROGRAM_SIZE:
        raise RomLoadError(
            f"Program is {len(program)} bytes, at most {MAX_PROGRAM_SIZE} fit in memory"
        )
    if not program:
        return state
    program_array = jnp.array(list(program), dtype=jnp.uint8)
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(program)].set(program_array)
    return state.replace(memory=new_memory)


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    try:
        with open(filename, 'rb') as f:
            rom_data = f.read()
    except OSError as e:
        raise RomLoadError(f"Cannot read ROM '{filename}': {e.strerror or e}") from e
    return load_program(state, rom_data)
