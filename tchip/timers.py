#!/usr/bin/env python3

"""
Delay and Sound Timers

Two 8-bit down-counters.  The CPU reads and writes them directly, and an
external clock calls tick() at 60Hz, independently of the CPU clock.  Neither
counter drops below zero.

The buzzer should sound for as long as the sound timer is non-zero.  Nothing
here produces audio; the audio plugin polls sound_on() once per frame.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Timers:
    def __init__(self):
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

    def tick(self):
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def set_delay(self, value):
        self.dt = value & 0xFF

    def set_sound(self, value):
        self.st = value & 0xFF

    def sound_on(self):
        return self.st > 0
