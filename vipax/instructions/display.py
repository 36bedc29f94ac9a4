"""CHIP-8 display operations."""

import jax.numpy as jnp
from vipax.state import EmulatorState
from vipax.decode import DecodedInstruction
from vipax.errors import check_memory_range
from vipax.constants import FLAG_REGISTER, PIXEL_ON, SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH

# Pre-computed coordinate grids for display operations
xx, yy = jnp.meshgrid(jnp.arange(SCREEN_WIDTH), jnp.arange(SCREEN_HEIGHT), indexing='ij')


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N.

    Only the origin wraps; pixels past the right or bottom edge are clipped.
    """
    check_memory_range(int(state.I), instruction.n)

    sprite_x = jnp.astype(state.V[instruction.x], jnp.int32) % SCREEN_WIDTH
    sprite_y = jnp.astype(state.V[instruction.y], jnp.int32) % SCREEN_HEIGHT

    in_sprite = ((xx >= sprite_x) & (xx < sprite_x + SPRITE_WIDTH)
                 & (yy >= sprite_y) & (yy < sprite_y + instruction.n))

    row_offset = jnp.clip(yy - sprite_y, 0, max(instruction.n - 1, 0))
    col_offset = jnp.clip(xx - sprite_x, 0, SPRITE_WIDTH - 1)
    sprite_bytes = jnp.astype(state.memory[state.I + row_offset], jnp.int32)
    sprite = (((sprite_bytes >> (7 - col_offset)) & 1) == 1) & in_sprite

    collision = jnp.any((state.display != 0) & sprite)
    sprite_pixels = jnp.where(sprite, jnp.uint32(PIXEL_ON), jnp.uint32(0))

    return state.replace(
        display=state.display ^ sprite_pixels,
        V=state.V.at[FLAG_REGISTER].set(jnp.astype(collision, jnp.uint8))
    )
