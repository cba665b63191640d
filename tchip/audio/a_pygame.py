#!/usr/bin/env python3

"""
PyGame Audio Plugin

The emulated buzzer is either 'on' or 'off'.  While on, a 440Hz square wave is
looped through PyGame / SDL.  A single wave cycle is generated once, as 8-bit
unsigned samples, and played on repeat until the buzzer is switched off.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
TONE_FREQUENCY = 440.0
DEFAULT_VOLUME = 0.25


class Audio(AudioBase):
    def __init__(self):
        super().__init__()
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, allowedchanges=0)
        pygame.mixer.init()

        # One full cycle: high for the first half, low for the second
        cycle_length = int(PLAYBACK_FREQUENCY / TONE_FREQUENCY)
        high_length = cycle_length // 2
        wave = bytearray(b"\xFF" * high_length + b"\x00" * (cycle_length - high_length))

        self.sound = pygame.mixer.Sound(buffer=wave)
        self.sound.set_volume(DEFAULT_VOLUME)

    def enable_buzzer(self, enabled):
        # Only start or stop playback on a change, so an already playing tone isn't restarted
        if enabled:
            if not self.buzzer_enabled:
                self.sound.play(-1)
                self.buzzer_enabled = True
        else:
            if self.buzzer_enabled:
                self.sound.stop()
                self.buzzer_enabled = False

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
