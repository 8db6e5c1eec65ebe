#!/usr/bin/env python3

"""
Stack Emulator

The call stack is kept outside system RAM, as there is no specified location
for it.  It is a fixed array of return addresses plus a stack pointer (SP),
which counts the entries in use.  SP is never exposed to the running program,
but debuggers and renderers can read it.

Overflowing or underflowing the stack is fatal to the running program, and is
reported with a dedicated error so the host can tell the two apart.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class StackOverflowError(StackError):
    pass


class StackUnderflowError(StackError):
    pass


class Stack:
    def __init__(self, size):
        self.size = size
        self.items = [0] * size
        self.sp = 0

    def push(self, item):
        if self.sp >= self.size:
            raise StackOverflowError("Stack overflow")

        self.items[self.sp] = item
        self.sp += 1

    def pop(self):
        if self.sp <= 0:
            raise StackUnderflowError("Stack underflow")

        self.sp -= 1
        return self.items[self.sp]

    def clear(self):
        self.items = [0] * self.size
        self.sp = 0

    def get_value(self, index):
        if index < 0 or index >= self.size:
            raise IndexError("Invalid stack index: {}".format(index))

        return self.items[index]

    def get_items(self):
        # For debugging.  Only the entries below SP are live.
        return self.items[:self.sp]
