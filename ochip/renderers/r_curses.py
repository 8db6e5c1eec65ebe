#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws frames in a standard Linux-style TTY Terminal, the Windows Command
Prompt, or PowerShell.

Everything is drawn into an off-screen pad: row 0 holds the title bar, and the
display starts on row 1.  Each lit pixel is a run of reverse-video spaces, one
per unit of scale, which keeps the picture close to 2:1 in a terminal whose
cells are roughly twice as tall as they are wide.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
from .r_null import Renderer as RendererBase

TITLE_ROWS = 1


class Renderer(RendererBase):
    def __init__(self, scale=None, curses_cursor_mode=0, **kwargs):
        self.pad = None
        self.title = ""
        self.dirty = False
        self.terminal_size = None

        self.screen = curses.initscr()
        curses.curs_set(curses_cursor_mode)
        curses.noecho()
        curses.cbreak()

        # Default horizontal stretch
        super().__init__(2 if scale is None else scale)
        self.lit_cell = " " * self.scale

    def set_resolution(self, width, height):
        # One spare column, as curses can't write the bottom-right cell of a window without it
        self.pad = curses.newpad(height + TITLE_ROWS + 1, width * self.scale + 1)
        super().set_resolution(width, height)
        self._draw_title()

    def set_pixel(self, x, y, colour):
        self.pad.addstr(y + TITLE_ROWS, x * self.scale, self.lit_cell, curses.A_REVERSE if colour else curses.A_NORMAL)
        self.dirty = True

    def refresh_display(self, content_changed=False):
        if self._terminal_resized():
            self.dirty = True

        if self.dirty:
            rows, cols = self.terminal_size
            self.pad.refresh(0, 0, 0, 0, rows - 1, cols - 1)
            self.dirty = False

    def set_title(self, title):
        self.title = title
        self._draw_title()

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        try:
            curses.curs_set(1)
        except curses.error:
            pass  # Not every terminal lets the cursor be shown again

        curses.endwin()
        super().shutdown()

    # Curses-specific, used by the Curses input plugin

    def get_curses_screen(self):
        return self.screen

    def _draw_title(self):
        bar_width = self.width * self.scale

        # The pad has no room for a title until the first frame sets the resolution
        if self.pad is None or bar_width == 0:
            return

        self.pad.addstr(0, 0, self.title[:bar_width].ljust(bar_width), curses.A_REVERSE)
        self.dirty = True

    def _terminal_resized(self):
        terminal_size = self.screen.getmaxyx()  # Doesn't always change on Windows

        if terminal_size == self.terminal_size:
            return False

        self.terminal_size = terminal_size
        self.screen.clear()

        if hasattr(curses, "resizeterm"):  # Missing on Windows
            curses.resizeterm(*terminal_size)

        self.screen.refresh()
        return True
