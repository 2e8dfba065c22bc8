# frame_clock.py

import math
import time
import logging

import constants

logger = logging.getLogger("starfield")


def _now_ms() -> float:
    return time.perf_counter() * 1000.0


class FrameClock:
    """
    Drives a frame function as fast as the host allows, measuring delta time
    and a smoothed FPS estimate.

    The loop is uncapped: no sleep and no vsync. Frames run strictly one
    after another.

    Data Contract:
    - Inputs:
        - time_fn (callable, optional): Returns the current time in
          milliseconds. Defaults to a monotonic high-resolution clock.
    - Outputs: Each tick calls frame_fn(delta_time_ms, fps).
    - Side Effects: None beyond calling the frame function.
    - Invariants: weighted_delta_time starts at 1000 / INIT_FPS and is
      updated as w = w * (1 - WEIGHT_RATIO) + delta * WEIGHT_RATIO.
      fps is floor(1000 / w) in floating point, so before any frame it
      reads INIT_FPS - 1 (1000 / (1000 / 30) is just under 30).
    """
    def __init__(self, time_fn=None):
        self._time_fn = time_fn or _now_ms
        self.weighted_delta_time = 1000.0 / constants.INIT_FPS
        self.frame_count = 0
        self._prev_time = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def fps(self) -> int:
        if self.weighted_delta_time <= 0:
            return 0
        return math.floor(1000.0 / self.weighted_delta_time)

    def start(self):
        """Records the starting timestamp and marks the clock as running."""
        self._prev_time = self._time_fn()
        self._running = True

    def stop(self):
        """Stops the loop. The frame in progress still runs to completion."""
        self._running = False

    def tick(self, frame_fn):
        """
        Runs a single frame: measure, smooth, compute FPS, call frame_fn.

        Returns the (delta_time, fps) pair that was passed to frame_fn.
        """
        if self._prev_time is None:
            self._prev_time = self._time_fn()

        current_time = self._time_fn()
        delta_time = current_time - self._prev_time

        self.weighted_delta_time = (
            self.weighted_delta_time * (1 - constants.WEIGHT_RATIO)
            + delta_time * constants.WEIGHT_RATIO
        )
        fps = self.fps

        frame_fn(delta_time, fps)

        self._prev_time = current_time
        self.frame_count += 1
        return delta_time, fps

    def run(self, frame_fn, max_frames: int = None):
        """
        The main loop. Ticks until stop() is called or max_frames frames have
        run. The stop flag is checked before every frame, so stop() may be
        called from inside frame_fn.
        """
        self.start()
        logger.info("Frame clock started.")
        frames = 0
        while self._running:
            if max_frames is not None and frames >= max_frames:
                self._running = False
                break
            self.tick(frame_fn)
            frames += 1
        logger.info(f"Frame clock stopped after {frames} frames.")
        return frames
