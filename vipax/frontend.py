"""pygame window and keyboard acting as the CHIP-8 display and keypad."""

from typing import List

import jax.numpy as jnp
import pygame

from vipax.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from vipax.rendering import chip8_display_to_rgb, create_color_scheme

# COSMAC VIP hex keypad laid over the left side of a QWERTY keyboard:
#   1 2 3 C      1 2 3 4
#   4 5 6 D  <-  Q W E R
#   7 8 9 E      A S D F
#   A 0 B F      Z X C V
KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}


class Platform:
    """Window that shows framebuffer snapshots and reports key states."""

    def __init__(self, title: str, scale: int = 10, color_scheme: str = "classic"):
        self.scale = scale
        self.on_color, self.off_color = create_color_scheme(color_scheme)

        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale))
        pygame.display.set_caption(title)

    def update(self, display: jnp.ndarray):
        """Draw a framebuffer snapshot."""
        rgb = chip8_display_to_rgb(display, self.scale, self.on_color, self.off_color)
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def process_input(self, keys: List[bool]) -> bool:
        """Update ``keys`` in place from pending events. Returns True on quit."""
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    quit_requested = True
                elif event.key in KEY_MAP:
                    keys[KEY_MAP[event.key]] = True
            elif event.type == pygame.KEYUP:
                if event.key in KEY_MAP:
                    keys[KEY_MAP[event.key]] = False
        return quit_requested

    def close(self):
        pygame.quit()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
