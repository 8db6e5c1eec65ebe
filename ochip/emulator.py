#!/usr/bin/env python3

"""
Emulator Driving Loop

Runs the Interpreter against real time.  The loop works in fixed 60Hz logical
frames: each frame executes (clock speed / 60) instructions and then
decrements the timers once.  Between frames, inputs are polled and the
framebuffer is handed to the renderer.

Wall time is accumulated and paid out in whole frames, so a slow host catches
up by running extra frames rather than drifting.  Any single gap longer than
MAX_FRAME_DELTA is capped, so a long stall (such as dragging the window) does
not replay minutes of backlog at once.

Instruction Fx0A (wait for key) never blocks inside the Interpreter.  It
rewinds the program counter instead, so this loop just keeps ticking.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, MAX_FRAME_DELTA, TIMER_FREQ

FRAME_INTERVAL = 1.0 / TIMER_FREQ


class Emulator:
    def __init__(self, interpreter, renderer, inputs, clock_speed=None):
        self.interpreter = interpreter
        self.renderer = renderer
        self.inputs = inputs
        self.set_clock_speed(DEFAULT_CLOCK_SPEED if clock_speed is None else clock_speed)

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0
        self.report_perf()

    def set_clock_speed(self, clock_speed):
        # At least one instruction per frame, or nothing would ever run
        self.ops_per_frame = max(1, int(clock_speed) // TIMER_FREQ)

    def run_frame(self):
        interpreter = self.interpreter

        for _ in range(self.ops_per_frame):
            interpreter.tick()

        interpreter.update_timers()
        self.perf_counter_ops += self.ops_per_frame

    def present(self):
        self.renderer.draw_frame(self.interpreter.get_frame())
        self.perf_counter_fps += 1

    def process_inputs(self):
        # Returns True if the user asked to quit
        return self.inputs.process_messages(self.interpreter.set_key)

    def run(self):
        last_time = perf_counter()
        accumulator = 0.0

        while True:
            this_time = perf_counter()
            accumulator += min(this_time - last_time, MAX_FRAME_DELTA)
            last_time = this_time

            # Performance counters
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            while accumulator >= FRAME_INTERVAL:
                accumulator -= FRAME_INTERVAL
                self.run_frame()

            if self.process_inputs():
                return

            self.present()

            # Wait for the next frame.  Do this last for maximum precision (takes into account time spent rendering)
            next_time = this_time + FRAME_INTERVAL - accumulator

            while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                pass

    def report_perf(self, fps=0, ops=0):
        title = "{} - {} FPS, {} OPS".format(APP_NAME, fps, ops)
        self.renderer.set_title(title)
