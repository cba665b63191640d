#!/usr/bin/env python3

"""
Clock Driver

The machine itself has no sense of time, so this is where it gets one.  Three
independent clocks are run off the host's real-time counter:

    * CPU cycles at the configured clock speed (0 = as fast as possible)
    * Timer ticks at 60Hz
    * Display refresh, input polling and buzzer updates at 60Hz

Timer ticks always happen before the next CPU cycle, so a value written with
Fx15 is counted down from the very next tick.  If the host lags, the timers
jump rather than drift, keeping them linked to real time.

Any VMError raised by the machine is passed straight up to the caller.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, TIMER_FREQ, DISPLAY_FREQ

TIMER_INTERVAL = 1.0 / TIMER_FREQ
DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ
MAX_TIMER_CATCHUP = 0x100  # Both timers are guaranteed to be empty after this many ticks


class Driver:
    def __init__(self, machine, renderer, inputs, audio, clock_speed=DEFAULT_CLOCK_SPEED, clock=perf_counter):
        self.machine = machine
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.clock = clock

        if clock_speed is None:
            clock_speed = DEFAULT_CLOCK_SPEED

        # User can specify 0 for an uncapped CPU
        self.core_interval = None if clock_speed <= 0 else 1.0 / clock_speed

        self.next_timer_time = 0
        self.next_display_update_time = 0
        self.next_perf_report_time = 0
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0

    def start(self):
        this_time = self.clock()
        self.next_timer_time = this_time + TIMER_INTERVAL
        self.next_display_update_time = this_time
        self.next_perf_report_time = this_time
        self.report_perf()

    def run(self):
        self.start()

        while self.step():
            pass

    def step(self):
        # Returns False once the inputs ask to quit
        this_time = self.clock()  # Do this first for maximum precision

        # Performance counters
        if this_time >= self.next_perf_report_time:
            self.next_perf_report_time = int(this_time) + 1.0
            self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
            self.perf_counter_ops = 0
            self.perf_counter_fps = 0

        if this_time >= self.next_display_update_time:
            if self.inputs.process_messages():  # Process inputs at 60Hz too, to avoid slowdown
                return False

            self.next_display_update_time = this_time + DISPLAY_INTERVAL
            self.refresh()
            self.perf_counter_fps += 1

        if this_time >= self.next_timer_time:
            due = int((this_time - self.next_timer_time) * TIMER_FREQ) + 1

            for _ in range(min(due, MAX_TIMER_CATCHUP)):
                self.machine.tick_timers()

            self.next_timer_time += due * TIMER_INTERVAL

        self.machine.cycle()
        self.perf_counter_ops += 1

        if self.core_interval is not None:
            # Wait for next CPU instruction.  Do this last for maximum precision (takes into account time spent on
            # this instruction)
            next_time = this_time + self.core_interval

            while self.clock() < next_time:  # Unfortunately we have to do this to get the timing right
                pass

        return True

    def refresh(self):
        # Only hand over a new frame if something has been drawn since the last one
        if self.machine.frame_changed():
            self.renderer.draw_frame(self.machine.get_frame())

        self.audio.enable_buzzer(self.machine.sound_on())

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
