"""CHIP-8 emulator state structures."""

import os
from typing import Optional

import jax
import jax.numpy as jnp
from flax.struct import PyTreeNode, field

from vipax.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, NUM_KEYS, NUM_REGISTERS,
    SCREEN_WIDTH, SCREEN_HEIGHT, STACK_SIZE,
)


class StackState(PyTreeNode):
    """Return address stack and its depth."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    The display is indexed ``[x, y]`` and holds ``PIXEL_ON`` for lit pixels
    and 0 otherwise. ``opcode`` is the last word returned by ``fetch``.
    """
    rng: jax.random.PRNGKey
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.astype(PROGRAM_START, jnp.uint16))
    opcode: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    display: jnp.ndarray = field(
        default_factory=lambda: jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.uint32))
    stack: StackState = field(default_factory=StackState)
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_KEYS, dtype=jnp.bool_))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))


def _process_seed() -> int:
    return int.from_bytes(os.urandom(4), "little") & 0x7FFFFFFF


def create_state(rng: Optional[jax.random.PRNGKey] = None) -> EmulatorState:
    """Create initial emulator state with font data loaded.

    Without an explicit key the random source is seeded once from OS entropy.
    """
    if rng is None:
        rng = jax.random.PRNGKey(_process_seed())
    state = EmulatorState(rng)
    font = jnp.array(FONT_DATA, dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(font))
