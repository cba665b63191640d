#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from tchip.audio.a_null import Audio
from tchip.constants import APP_NAME, DEFAULT_KEYMAP
from tchip.driver import Driver
from tchip.errors import StackUnderflow
from tchip.inputs.i_null import Inputs
from tchip.machine import Machine
from tchip.renderers.r_null import Renderer


class FakeClock:
    # Moves forward a fixed amount every time it is read
    def __init__(self, step):
        self.now = 0.0
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


class QuittingInputs(Inputs):
    def __init__(self, keymap, keypad, renderer, polls):
        super().__init__(keymap, keypad, renderer)
        self.polls = polls

    def process_messages(self):
        self.polls -= 1
        return self.polls < 0


class TestDriver(unittest.TestCase):
    def setUp(self):
        self.machine = Machine()
        self.renderer = Renderer()
        self.inputs = Inputs(DEFAULT_KEYMAP, self.machine.keypad, self.renderer)
        self.audio = Audio()

    def _driver(self, step, clock_speed=0, inputs=None):
        return Driver(
            self.machine, self.renderer, inputs or self.inputs, self.audio, clock_speed=clock_speed,
            clock=FakeClock(step)
        )

    def test_driver_first_frame(self):
        # LD V0, 0xFF / LD ST, V0 / JP 0x204
        self.machine.load_rom(b"\x60\xFF\xF0\x18\x12\x04")
        driver = self._driver(0.0001)
        driver.start()
        self.assertTrue(self.renderer.title.startswith(APP_NAME))

        for _ in range(3):
            self.assertTrue(driver.step())

        self.assertIsNotNone(self.renderer.frame)
        self.assertEqual(32, len(self.renderer.frame))
        self.assertFalse(self.audio.buzzer_enabled)  # Buzzer is only updated once per frame

        for _ in range(300):
            driver.step()

        self.assertTrue(self.audio.buzzer_enabled)

    def test_driver_timers_follow_clock(self):
        # LD V0, 0x3C / LD DT, V0 / JP 0x204
        self.machine.load_rom(b"\x60\x3C\xF0\x15\x12\x04")
        driver = self._driver(0.001)
        driver.start()
        driver.step()
        driver.step()
        self.assertEqual(0x3C, self.machine.timers.dt)

        # A quarter of a second should use up around 15 of the 60 ticks
        for _ in range(250):
            driver.step()

        self.assertLess(self.machine.timers.dt, 0x3C)
        self.assertGreater(self.machine.timers.dt, 0)

        for _ in range(1000):
            driver.step()

        self.assertEqual(0, self.machine.timers.dt)

    def test_driver_paced(self):
        # JP 0x200
        self.machine.load_rom(b"\x12\x00")
        driver = self._driver(0.0005, clock_speed=500)
        driver.start()
        start_time = driver.clock.now
        driver.step()
        # The CPU waits for its 2ms slot before handing back control
        self.assertGreaterEqual(driver.clock.now - start_time, 0.002)

    def test_driver_run_until_quit(self):
        self.machine.load_rom(b"\x12\x00")
        inputs = QuittingInputs(DEFAULT_KEYMAP, self.machine.keypad, self.renderer, 2)
        driver = self._driver(0.01, inputs=inputs)
        driver.run()
        self.assertLess(inputs.polls, 0)
        self.assertGreater(driver.perf_counter_ops, 0)

    def test_driver_passes_errors_up(self):
        self.machine.load_rom(b"\x00\xEE")  # RET with nothing to return to
        driver = self._driver(0.01)
        self.assertRaises(StackUnderflow, driver.run)
