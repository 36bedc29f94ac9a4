"""CHIP-8 control flow instructions."""

import jax
import jax.lax
import jax.numpy as jnp
from vipax.constants import ADDRESS_MASK, NUM_KEYS
from vipax.state import EmulatorState
from vipax.decode import DecodedInstruction
from vipax.errors import DecodeFault
from vipax.stack import push


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=jnp.astype(instruction.nnn, jnp.uint16))


def execute_call(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, state.pc))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
        condition = condition_fn(state, instruction)
        return jax.lax.cond(
            condition,
            lambda s: s.replace(pc=s.pc + 2),
            lambda s: s,
            state
        )
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == state.V[inst.y]
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != state.V[inst.y]
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """BNNN - Jump to address NNN + V0, masked to 12 bits as a whole."""
    jump_address = (instruction.nnn + jnp.astype(state.V[0], jnp.uint16)) & ADDRESS_MASK
    return state.replace(pc=jnp.astype(jump_address, jnp.uint16))


def _key_pressed(state: EmulatorState, instruction: DecodedInstruction) -> jnp.ndarray:
    key_index = state.V[instruction.x] & (NUM_KEYS - 1)
    return state.keypad[key_index]


execute_skip_if_key_pressed = make_skip_instruction(_key_pressed)

execute_skip_if_key_not_pressed = make_skip_instruction(
    lambda state, inst: ~_key_pressed(state, inst)
)


KEY_OPERATIONS = {
    0xE: execute_skip_if_key_pressed,
    0x1: execute_skip_if_key_not_pressed,
}


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """EX9E/EXA1 - Skip if key pressed/not pressed, selected by the low nibble."""
    handler = KEY_OPERATIONS.get(instruction.n)
    if handler is None:
        raise DecodeFault(instruction.raw)
    return handler(state, instruction)
