#!/usr/bin/env python3

"""
Hexadecimal Keypad

Sixteen key states, 0x0-0xF.  Only the host input plugin writes here (via the
Interpreter's set_key), and only instructions read from it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import KEY_COUNT


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.key_down = [False] * KEY_COUNT

    def set_key(self, key, pressed):
        if key < 0 or key >= KEY_COUNT:
            raise KeypadError("Invalid key: {}".format(key))

        self.key_down[key] = bool(pressed)

    def is_key_down(self, key):
        return self.key_down[key & 0xF]

    def get_first_pressed(self):
        # Lowest-numbered key currently held, or None
        for key, down in enumerate(self.key_down):
            if down:
                return key

        return None

    def clear(self):
        self.key_down = [False] * KEY_COUNT
