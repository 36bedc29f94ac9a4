"""CHIP-8 ALU operations (8xxx).

Each operation maps ``(vx, vy)`` to ``(result, flag)``. ``flag`` is None for
operations that leave VF alone; otherwise it is written to VF after the
result is written to VX, so ``8FY4`` and friends leave the flag in VF.
"""

import jax.numpy as jnp
from vipax.constants import FLAG_REGISTER
from vipax.state import EmulatorState
from vipax.decode import DecodedInstruction
from vipax.errors import DecodeFault


def alu_set(vx: int, vy: int) -> tuple[int, None]:
    """8XY0 - Set: VX = VY."""
    return vy, None


def alu_or(vx: int, vy: int) -> tuple[int, None]:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, None


def alu_and(vx: int, vy: int) -> tuple[int, None]:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, None


def alu_xor(vx: int, vy: int) -> tuple[int, None]:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, None


def alu_add(vx: int, vy: int) -> tuple[int, int]:
    """8XY4 - Add: VX += VY, set carry flag."""
    result = jnp.astype(vx, jnp.int32) + vy
    carry = jnp.astype(result > 255, jnp.uint8)
    return jnp.astype(result & 0xFF, jnp.uint8), carry


def alu_sub_xy(vx: int, vy: int) -> tuple[int, int]:
    """8XY5 - Subtract: VX -= VY, VF = NOT borrow."""
    not_borrow = jnp.astype(vx >= vy, jnp.uint8)
    result = (jnp.astype(vx, jnp.int32) - vy) & 0xFF
    return jnp.astype(result, jnp.uint8), not_borrow


def alu_shift_right(vx: int, vy: int) -> tuple[int, int]:
    """8XY6 - Shift right: VX >>= 1."""
    shifted_bit = vx & 1
    result = vx >> 1
    return result, shifted_bit


def alu_sub_yx(vx: int, vy: int) -> tuple[int, int]:
    """8XY7 - Subtract: VX = VY - VX, VF = NOT borrow."""
    not_borrow = jnp.astype(vy >= vx, jnp.uint8)
    result = (jnp.astype(vy, jnp.int32) - vx) & 0xFF
    return jnp.astype(result, jnp.uint8), not_borrow


def alu_shift_left(vx: int, vy: int) -> tuple[int, int]:
    """8XYE - Shift left: VX <<= 1."""
    shifted_bit = (vx & 0x80) >> 7
    result = (jnp.astype(vx, jnp.int32) << 1) & 0xFF
    return jnp.astype(result, jnp.uint8), shifted_bit


ALU_OPERATIONS = {
    0x0: alu_set,
    0x1: alu_or,
    0x2: alu_and,
    0x3: alu_xor,
    0x4: alu_add,
    0x5: alu_sub_xy,
    0x6: alu_shift_right,
    0x7: alu_sub_yx,
    0xE: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """8XYN - ALU operations dispatcher."""
    operation = ALU_OPERATIONS.get(instruction.n)
    if operation is None:
        raise DecodeFault(instruction.raw)

    vx = state.V[instruction.x]
    vy = state.V[instruction.y]
    result, vf = operation(vx, vy)

    new_V = state.V.at[instruction.x].set(result)
    if vf is not None:
        new_V = new_V.at[FLAG_REGISTER].set(vf)
    return state.replace(V=new_V)
