"""Tests for timer decay."""

import jax.numpy as jnp
from vipax import decay_timers
from vipax.timers import sound_active


def with_timers(state, delay, sound):
    return state.replace(
        delay_timer=jnp.astype(delay, jnp.uint8),
        sound_timer=jnp.astype(sound, jnp.uint8),
    )


def test_timers_count_down_independently(fresh_state):
    state = decay_timers(with_timers(fresh_state, 5, 2))
    assert int(state.delay_timer) == 4
    assert int(state.sound_timer) == 1


def test_timers_never_wrap(fresh_state):
    state = with_timers(fresh_state, 0, 0)
    for _ in range(3):
        state = decay_timers(state)
    assert int(state.delay_timer) == 0
    assert int(state.sound_timer) == 0
    assert state.delay_timer.dtype == jnp.uint8


def test_full_range(fresh_state):
    state = with_timers(fresh_state, 255, 1)
    state = decay_timers(state)
    assert int(state.delay_timer) == 254
    assert int(state.sound_timer) == 0


def test_sound_active(fresh_state):
    assert sound_active(with_timers(fresh_state, 0, 1))
    assert not sound_active(with_timers(fresh_state, 9, 0))
