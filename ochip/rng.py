#!/usr/bin/env python3

"""
Random Number Source

Supplies bytes for the RND instruction.  The Interpreter accepts any object
with a generate_number() method, so tests can swap in a fixed sequence.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random


class RandomSource:
    def __init__(self, seed=None):
        # A None seed falls back to system entropy
        self.engine = Random(seed)

    def generate_number(self):
        # Uniform over the full byte range, 0x00-0xFF inclusive
        return self.engine.randint(0, 0xFF)
