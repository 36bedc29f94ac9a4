"""Tests for framebuffer rendering."""

import numpy as np
import pytest
from vipax import chip8_display_to_rgb, create_color_scheme, PIXEL_ON


def test_display_to_rgb(fresh_state):
    display = fresh_state.display.at[1, 2].set(PIXEL_ON)

    rgb = chip8_display_to_rgb(display, scale=1, on_color=(1, 2, 3), off_color=(0, 0, 0))

    assert rgb.shape == (32, 64, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[2, 1]) == (1, 2, 3)
    assert tuple(rgb[1, 2]) == (0, 0, 0)


def test_display_to_rgb_scaled(fresh_state):
    display = fresh_state.display.at[0, 0].set(PIXEL_ON)

    rgb = chip8_display_to_rgb(display, scale=3)

    assert rgb.shape == (96, 192, 3)
    assert (rgb[:3, :3] == (0, 255, 0)).all()
    assert (rgb[3, 3] == (0, 0, 0)).all()


def test_color_schemes():
    assert create_color_scheme("classic") == ((0, 255, 0), (0, 0, 0))
    with pytest.raises(ValueError):
        create_color_scheme("nope")
