#!/usr/bin/env python3

"""
PyGame Input Plugin

SDL reports real key press and release events, so each one maps straight onto
a set_key call with no timing guesswork.  Drain the event queue at most once
per frame; polling it more often only costs time.

Closing the window or releasing ESC asks the emulator to quit.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase

# Event type -> key state it reports
KEY_EVENTS = {
    pygame.KEYDOWN: True,
    pygame.KEYUP: False
}


class Inputs(InputsBase):
    def process_messages(self, set_key):
        quit_requested = False

        # Keep draining after a quit request, so the queue is left empty
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
                continue

            pressed = KEY_EVENTS.get(event.type)

            if pressed is None:
                continue

            if not pressed and event.key == pygame.K_ESCAPE:
                quit_requested = True
                continue

            hex_key = self.keymap_dict.get(event.key)

            if hex_key is not None:
                set_key(hex_key, pressed)

        return quit_requested
