#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from tchip.audio.a_null import Audio


class TestAudio(unittest.TestCase):
    def setUp(self):
        self.audio = Audio()

    def test_audio_buzzer(self):
        self.assertFalse(self.audio.buzzer_enabled)
        self.audio.enable_buzzer(True)
        self.assertTrue(self.audio.buzzer_enabled)
        self.audio.enable_buzzer(False)
        self.assertFalse(self.audio.buzzer_enabled)

    def test_audio_interface(self):
        # The driver only ever switches the buzzer on and off, then shuts it down
        self.assertEqual(
            ["enable_buzzer", "shutdown"], sorted(name for name in vars(Audio) if not name.startswith("_"))
        )

    def test_audio_shutdown(self):
        self.audio.enable_buzzer(True)
        self.audio.shutdown()
        self.assertFalse(self.audio.buzzer_enabled)
