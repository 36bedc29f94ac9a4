"""CHIP-8 system instructions (0x0xxx)."""

import jax.numpy as jnp
from vipax.state import EmulatorState
from vipax.decode import DecodedInstruction
from vipax.errors import DecodeFault
from vipax.stack import pop


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00E0 - Clear display."""
    return state.replace(display=jnp.zeros_like(state.display))


def execute_return(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack)
    return state.replace(stack=stack, pc=address)


SYSTEM_OPERATIONS = {
    0x0: execute_clear_screen,
    0xE: execute_return,
}


def execute_system_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch system instructions on the low nibble."""
    handler = SYSTEM_OPERATIONS.get(instruction.n)
    if handler is None:
        raise DecodeFault(instruction.raw)
    return handler(state, instruction)
