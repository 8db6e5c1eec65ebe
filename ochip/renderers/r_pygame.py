#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Frames are kept as a packed 24-bit RGB buffer at the emulated resolution.  On a
changed frame the buffer is wrapped as a surface (no copy), optionally run
through Scale2x smoothing, then stretched with nearest neighbour scaling to
fill a 2:1 window.

Lit pixels use the foreground colour and unlit ones the background colour.
A palette option can replace either, given as "background,foreground" hex.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME

DEFAULT_WINDOW_WIDTH = 512
DEFAULT_COLOURS = (0x222222, 0xDDDDDD)  # Background, foreground


def parse_palette(pygame_palette):
    # Returns (background, foreground) as 3-byte RGB values
    colours = list(DEFAULT_COLOURS)

    if pygame_palette is not None:
        entries = pygame_palette.split(",")

        if len(entries) > len(colours):
            raise RendererError("Only {} palette colours can be defined.".format(len(colours)))

        for colour_num, entry in enumerate(entries):
            if len(entry) != 6:
                raise RendererError("Palette colour '{}' is not 6 hex digits long.".format(entry))

            try:
                colours[colour_num] = int(entry, 16)
            except ValueError:
                raise RendererError("Palette colour '{}' is not valid hex.".format(entry)) from None

    return tuple(colour.to_bytes(3, "big") for colour in colours)


class Renderer(RendererBase):
    def __init__(self, scale=None, pygame_palette=None, smoothing=0, **kwargs):
        self.rgb_map = parse_palette(pygame_palette)
        self.smoothing = smoothing or 0
        self.rgb_buffer = None

        window_width = DEFAULT_WINDOW_WIDTH if scale is None else scale
        self.window_size = (window_width, window_width // 2)

        pygame.display.init()
        self.window = pygame.display.set_mode(self.window_size)
        self.set_title(APP_NAME)

        super().__init__(window_width)

    def set_resolution(self, width, height):
        self.rgb_buffer = memoryview(bytearray(self.rgb_map[0] * (width * height)))
        super().set_resolution(width, height)

    def set_pixel(self, x, y, colour):
        # Written in place, so a frame costs no allocations until it is presented
        offset = (y * self.width + x) * 3
        self.rgb_buffer[offset:offset + 3] = self.rgb_map[1 if colour else 0]

    def refresh_display(self, content_changed=False):
        if not content_changed or not self.width:
            return

        frame_surface = pygame.image.frombuffer(self.rgb_buffer, (self.width, self.height), "RGB")

        for _ in range(self.smoothing):
            frame_surface = pygame.transform.scale2x(frame_surface)

        self.window.blit(pygame.transform.scale(frame_surface, self.window_size), (0, 0))
        pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # Must be called explicitly.  PyGame can segfault if display.quit runs from __del__
        pygame.display.quit()
        super().shutdown()
