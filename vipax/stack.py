"""CHIP-8 stack operations."""

import jax.numpy as jnp
from vipax.constants import STACK_SIZE
from vipax.errors import StackOverflow, StackUnderflow
from vipax.state import StackState


def depth(stack: StackState) -> int:
    """Number of return addresses currently on the stack."""
    return int(stack.pointer)


def push(stack: StackState, address: jnp.ndarray) -> StackState:
    """Push address onto stack.

    The address is stored as-is. A call from the last word of memory pushes
    0x1000, and the return then faults on the next fetch.
    """
    if depth(stack) >= STACK_SIZE:
        raise StackOverflow(f"Call nested deeper than {STACK_SIZE} levels", int(address))
    new_data = stack.data.at[stack.pointer].set(address)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, jnp.ndarray]:
    """Pop address from stack."""
    if depth(stack) == 0:
        raise StackUnderflow("Return with empty stack")
    new_pointer = stack.pointer - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
