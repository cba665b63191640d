#!/usr/bin/env python3

"""
Stack Emulator

The call stack holds return addresses only, and is not part of system RAM.
There is no stack pointer register exposed to the running program, so the
stack pointer is simply the number of items currently held.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_DEPTH
from .errors import StackOverflow, StackUnderflow


class Stack:
    def __init__(self, size=STACK_DEPTH):
        self.items = []
        self.size = size

    @property
    def sp(self):
        return len(self.items)

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackOverflow()

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflow() from None

    def get_items(self):
        # For debugging
        return tuple(self.items)
