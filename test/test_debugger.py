#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import unittest
from contextlib import redirect_stdout
from tchip.debugger import Debugger
from tchip.machine import Machine


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.debugger = Debugger()
        self.machine = Machine(self.debugger)

    def test_debugger_debug(self):
        cpu = self.machine.cpu
        cpu.v[0xF] = 0xAB
        cpu.v[0x0] = 0x01
        cpu.i = 0x123
        debug_str = self.debugger.debug(cpu, "CLS")
        self.assertTrue(debug_str.startswith("V: 0xab"))
        self.assertIn("01 I: 0x0123", debug_str)
        self.assertIn("IN: CLS", debug_str)
        self.assertNotIn("Stack", debug_str)

    def test_debugger_verbose(self):
        self.machine.stack.push(0x202)
        debug_str = self.debugger.debug(self.machine.cpu, "???", verbose=True)
        self.assertIn("Stack: 0x202", debug_str)
        self.assertIn("State: RUNNING", debug_str)
        self.assertNotIn("(V", debug_str)

    def test_debugger_verbose_awaiting_key(self):
        self.machine.load_rom(b"\xF3\x0A")  # LD V3, K
        self.machine.cycle()
        debug_str = self.debugger.debug(self.machine.cpu, "???", verbose=True)
        self.assertIn("State: AWAITING_KEY (V3)", debug_str)

    def test_debugger_live(self):
        self.assertFalse(self.debugger.is_live())
        self.debugger.set_live(True)
        machine = Machine(self.debugger)
        machine.load_rom(b"\x6A\x0F")
        output = io.StringIO()

        with redirect_stdout(output):
            machine.cycle()

        self.assertIn("IN: LD Va, 0x0f", output.getvalue())
