#!/usr/bin/env python3

"""
Opcode Decoder

Wraps a raw 16-bit instruction word.  Every bit pattern is a valid Opcode; only
the Interpreter decides whether it maps to an instruction.

    n   = nibble  (bits 0-3)
    kk  = byte    (bits 0-7)
    nnn = address (bits 0-11)
    x/y = register (bits 8-11 / bits 4-7)
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Opcode:
    __slots__ = ("_word",)

    def __init__(self, word):
        self._word = word & 0xFFFF

    @classmethod
    def from_bytes(cls, data):
        return cls(int.from_bytes(data, "big", signed=False))

    @property
    def prefix(self):
        return (self._word & 0xF000) >> 12

    @property
    def x(self):
        return (self._word & 0xF00) >> 8

    @property
    def y(self):
        return (self._word & 0xF0) >> 4

    @property
    def nibble(self):
        return self._word & 0xF

    @property
    def byte(self):
        return self._word & 0xFF

    @property
    def address(self):
        return self._word & 0xFFF

    @property
    def full(self):
        return self._word

    def __eq__(self, other):
        if isinstance(other, Opcode):
            return self._word == other.full

        if isinstance(other, int):
            return self._word == other

        return NotImplemented

    def __hash__(self):
        return hash(self._word)

    def __repr__(self):
        return "Opcode(0x{:04x})".format(self._word)
