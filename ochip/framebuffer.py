#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here by the interpreter, and are read by the host rendering
system when it presents a frame (normally at 60Hz).  The renderer pulls the
contents, so nothing in here knows how or when the screen is drawn.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen using an XOR method against a single plane,
stored row-major in a RAM bank with one byte per pixel.

Collisions (where any pixel was set, but was unset by an XOR), are reported
back to the caller.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import FRAME_WIDTH, FRAME_HEIGHT
from .ram import RAM


class Framebuffer:
    def __init__(self, vid_width=FRAME_WIDTH, vid_height=FRAME_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.plane = RAM(self.vid_size)

    def clear(self):
        self.plane.clear()

    def xor_pixel(self, x, y, allow_wrapping=False):
        # Returns True on collision, False if nothing was erased, and None if the pixel was clipped

        if allow_wrapping:
            x %= self.vid_width
            y %= self.vid_height
        elif x >= self.vid_width or y >= self.vid_height:
            return None

        vram_loc = y * self.vid_width + x
        pixel = self.plane.read(vram_loc)
        self.plane.write(vram_loc, pixel ^ 1)

        return pixel != 0

    def get_pixel(self, x, y):
        return self.plane.read(y * self.vid_width + x) != 0

    def set_pixel(self, x, y, lit):
        self.plane.write(y * self.vid_width + x, int(bool(lit)))

    def snapshot(self):
        # Copy of the plane, one byte per pixel, safe to hold across ticks
        return self.plane.read_block(0, self.vid_size)

    def get_vid_size(self):
        return self.vid_width, self.vid_height
