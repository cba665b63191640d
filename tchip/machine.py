#!/usr/bin/env python3

"""
Virtual Machine

Wires the RAM, stack, framebuffer, timers and keypad into a CPU, and exposes
the handful of calls a driver needs:

    * load_rom(data)  - copy a program in at 0x200 (once, before running)
    * cycle()         - run one CPU step
    * tick_timers()   - count the delay and sound timers down once
    * sound_on()      - should the buzzer be playing right now?
    * get_frame()     - immutable 64x32 snapshot of the display
    * keypad          - the key state, for the input plugin to update

The machine owns all of its state.  It never spawns threads or waits on I/O,
so a driver can stop calling cycle() between any two instructions.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import PROGRAM_START
from .cpu import CPU
from .debugger import Debugger
from .framebuffer import Framebuffer
from .keypad import Keypad
from .ram import RAM
from .stack import Stack
from .timers import Timers


class Machine:
    def __init__(self, debugger=None, rng=None):
        self.ram = RAM()
        self.ram.load_font()
        self.stack = Stack()
        self.framebuffer = Framebuffer()
        self.timers = Timers()
        self.keypad = Keypad()
        self.debugger = Debugger() if debugger is None else debugger
        self.cpu = CPU(self.ram, self.stack, self.framebuffer, self.timers, self.keypad, self.debugger, rng=rng)
        self.cpu.reset(PROGRAM_START)

    def load_rom(self, rom):
        self.ram.load_rom(rom)

    def cycle(self):
        self.cpu.cycle()

    def tick_timers(self):
        self.timers.tick()

    def sound_on(self):
        return self.timers.sound_on()

    def get_frame(self):
        return self.framebuffer.get_frame()

    def frame_changed(self):
        return self.framebuffer.consume_changed()
