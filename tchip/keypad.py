#!/usr/bin/env python3

"""
Hexadecimal Keypad

Sixteen keys, 0-F.  The state is owned by whichever input plugin is attached:
it presses and releases keys as host events arrive.  The CPU only ever reads
the state.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class Keypad:
    def __init__(self):
        self.keys = [False] * NUM_KEYS

    def press(self, key):
        self.keys[key] = True

    def release(self, key):
        self.keys[key] = False

    def release_all(self):
        self.keys = [False] * NUM_KEYS

    def is_pressed(self, key):
        return self.keys[key]

    def first_pressed(self):
        # Lowest-numbered key currently held, or None
        for key, down in enumerate(self.keys):
            if down:
                return key

        return None
