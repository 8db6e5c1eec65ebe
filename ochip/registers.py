#!/usr/bin/env python3

"""
Register File

V0-VF are held in a bytearray, so instructions must mask their results to 8
bits before storing them (anything else raises ValueError).  VF doubles as the
carry, borrow and collision flag.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import PROG_START_ADDRESS, V_REG_COUNT


class Registers:
    def __init__(self):
        self.reset()

    def reset(self):
        self.v = memoryview(bytearray(V_REG_COUNT))
        self.pc = PROG_START_ADDRESS  # Program counter
        self.i = 0                    # Index register
        self.dt = 0                   # Delay timer
        self.st = 0                   # Sound timer
