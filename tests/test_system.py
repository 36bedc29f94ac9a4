"""Tests for system instructions (0xxx) and the call stack."""

import jax.numpy as jnp
import pytest
from vipax import (
    execute,
    step,
    AddressingFault,
    DecodeFault,
    StackOverflow,
    StackUnderflow,
    STACK_SIZE,
    PIXEL_ON,
)


def test_execute_clear_screen(fresh_state):
    """Test 00E0 - Clear display."""
    state = fresh_state.replace(display=fresh_state.display.at[0, 0].set(PIXEL_ON))

    state = execute(state, 0x00E0)

    assert jnp.sum(state.display != 0) == 0
    assert state.display.dtype == jnp.uint32


def test_execute_call_and_return(fresh_state):
    """Test 2NNN (call) and 00EE (return) together."""
    state = fresh_state
    initial_pc = state.pc

    state = execute(state, 0x2300)  # Call 0x300
    assert state.pc == 0x300
    assert state.stack.pointer == 1
    assert state.stack.data[state.stack.pointer - 1] == initial_pc

    state = execute(state, 0x00EE)  # Return
    assert state.pc == initial_pc
    assert state.stack.pointer == 0


def test_nested_calls_return_in_order(fresh_state):
    state = execute(fresh_state, 0x2300)
    state = execute(state, 0x2400)
    assert state.stack.pointer == 2

    state = execute(state, 0x00EE)
    assert state.pc == 0x300
    state = execute(state, 0x00EE)
    assert state.pc == 0x200


def test_call_at_full_depth_overflows(fresh_state):
    state = fresh_state
    for _ in range(STACK_SIZE):
        state = execute(state, 0x2300)
    assert state.stack.pointer == STACK_SIZE

    with pytest.raises(StackOverflow):
        execute(state, 0x2300)


def test_return_with_empty_stack_underflows(fresh_state):
    with pytest.raises(StackUnderflow):
        execute(fresh_state, 0x00EE)


@pytest.mark.parametrize("instruction", [0x0123, 0x00E1, 0x0FFF])
def test_unmapped_system_instruction(fresh_state, instruction):
    with pytest.raises(DecodeFault) as excinfo:
        execute(fresh_state, instruction)
    assert f"0x{instruction:04X}" in str(excinfo.value)


def test_return_past_end_of_memory_faults(fresh_state):
    """A call from the last word returns to 0x1000, which must not wrap to 0x000."""
    memory = (
        fresh_state.memory
        .at[0xFFE].set(0x23).at[0xFFF].set(0x00)  # CALL 0x300
        .at[0x300].set(0x00).at[0x301].set(0xEE)  # RET
    )
    state = fresh_state.replace(memory=memory, pc=jnp.astype(0xFFE, jnp.uint16))

    state = step(state)
    assert state.pc == 0x300
    assert state.stack.data[0] == 0x1000

    state = step(state)
    assert state.pc == 0x1000
    with pytest.raises(AddressingFault):
        step(state)
