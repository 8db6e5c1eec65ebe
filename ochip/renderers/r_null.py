#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.  Without a renderer, performance data will also not be shown.

Frames are pulled from the Framebuffer by draw_frame(), which only keeps a
copy of the contents.  If nothing changed since the last frame, subclasses are
not asked to redraw anything.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.last_frame = None
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def draw_frame(self, framebuffer):
        vid_width, vid_height = framebuffer.get_vid_size()

        if (vid_width, vid_height) != (self.width, self.height):
            self.set_resolution(vid_width, vid_height)
            self.last_frame = None

        frame = framebuffer.snapshot()

        if frame == self.last_frame:
            self.refresh_display(False)
            return

        for vram_loc, pixel in enumerate(frame):
            if self.last_frame is None or self.last_frame[vram_loc] != pixel:
                y, x = divmod(vram_loc, vid_width)
                self.set_pixel(x, y, pixel)

        self.last_frame = frame
        self.refresh_display(True)

    def set_pixel(self, x, y, colour):  # pylint: disable=unused-argument
        pass

    def refresh_display(self, content_changed=False):
        pass

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
