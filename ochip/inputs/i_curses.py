#!/usr/bin/env python3

"""
Curses TTY Terminal Input Plugin

Terminals deliver characters, not key presses and releases.  A KeyReader thread
blocks on getch() and feeds mapped keys into a queue, and the main thread
drains that queue once per frame.

Every character seen for a key pushes its release deadline forward by
KEYBOARD_FAKE_KEYDOWN_TIME.  Holding a key down relies on the terminal's auto
repeat to keep the deadline moving; once it lapses the key is reported as
released.  Only changes of state are passed on to set_key.

ESC (char 27) or CTRL+C (char 3) asks the emulator to quit.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import queue
from threading import Event, Thread
from time import time
from .i_null import Inputs as InputsBase
from ..constants import KEY_COUNT

KEYBOARD_FAKE_KEYDOWN_TIME = 0.2
QUIT_CHARS = (27, 3)
QUIT_MESSAGE = None


class KeyReader(Thread):
    def __init__(self, curses_screen, keymap_dict, key_queue):
        super().__init__(daemon=True)  # getch() cannot be interrupted, so never wait for this thread on exit
        self.curses_screen = curses_screen
        self.keymap_dict = keymap_dict
        self.key_queue = key_queue
        self.stopping = Event()

    def run(self):
        while not self.stopping.is_set():
            char = self.curses_screen.getch()

            if char < 0:
                continue

            char = ord(chr(char).lower())

            if char in QUIT_CHARS:
                self.key_queue.put(QUIT_MESSAGE)
                return

            hex_key = self.keymap_dict.get(char)

            if hex_key is not None:
                try:
                    self.key_queue.put_nowait(hex_key)
                except queue.Full:
                    pass  # Auto repeat will send it again

    def stop(self):
        self.stopping.set()


class Inputs(InputsBase):
    def __init__(self, keymap, renderer):
        super().__init__(keymap, renderer, force_lowercase=True)

        self.release_deadlines = [0.0] * KEY_COUNT
        self.reported_down = [False] * KEY_COUNT
        self.key_queue = queue.Queue(KEY_COUNT)
        self.reader = KeyReader(renderer.get_curses_screen(), self.keymap_dict, self.key_queue)
        self.reader.start()

    def process_messages(self, set_key):
        now = time()

        while True:
            try:
                hex_key = self.key_queue.get_nowait()
            except queue.Empty:
                break

            if hex_key is QUIT_MESSAGE:
                return True

            self.release_deadlines[hex_key] = now + KEYBOARD_FAKE_KEYDOWN_TIME

        for hex_key, deadline in enumerate(self.release_deadlines):
            down = deadline > now

            if down != self.reported_down[hex_key]:
                self.reported_down[hex_key] = down
                set_key(hex_key, down)

        return False

    def shutdown(self):
        self.reader.stop()
        super().shutdown()
