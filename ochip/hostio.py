#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries from the host filesystem, ready to be handed to
Interpreter.load_rom().  The system font is built in, so only programs come
from disk.  Missing or unreadable files raise the usual OSError subclasses.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()
