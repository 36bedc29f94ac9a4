"""Test configuration and fixtures for CHIP-8 emulator tests."""

import jax
import pytest
import jax.numpy as jnp
from vipax import create_state, load_program


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state with a fixed random key."""
    return create_state(jax.random.PRNGKey(0))


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def load_words(state, words):
    """Helper to load a program given as 16-bit instruction words."""
    program = b"".join(word.to_bytes(2, "big") for word in words)
    return load_program(state, program)


def set_registers(state, **registers):
    """Helper to set registers by name, e.g. ``set_registers(state, V1=0x10)``."""
    V = state.V
    for name, value in registers.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)


def lit(state, x, y):
    """Whether the pixel at (x, y) is on."""
    return bool(state.display[x, y] != 0)
