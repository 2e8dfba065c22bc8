# star_field.py

import logging

import numpy as np

import constants
from camera import CameraBounds
from settings import Settings, Stats
from star import Star

logger = logging.getLogger("starfield")


def _sanitize_delta_time(delta_time: float) -> float:
    """Non-finite or negative frame times are treated as zero elapsed time."""
    return max(0.0, float(np.nan_to_num(delta_time, nan=0.0, posinf=0.0, neginf=0.0)))


def _sanitize_fps(fps) -> int:
    """Floors a measured FPS to a non-negative integer; non-finite values read as 0."""
    return max(0, int(np.floor(np.nan_to_num(fps, nan=0.0, posinf=0.0, neginf=0.0))))


class StarField:
    """
    Owns the stars, the camera bounds and the adaptive star count, and runs
    the per-frame simulation and drawing.

    Data Contract:
    - Inputs:
        - settings (Settings): Caller-owned settings, read at the start of
          every frame. May be mutated between frames.
        - rng (np.random.Generator): The master seeded random number
          generator, shared by every star.
    - Outputs: A Stats snapshot per frame, returned by on_frame() and
      delivered to every subscriber.
    - Side Effects: Draws onto the surface passed to on_frame().
    - Invariants:
        - star_draw_count >= 1 once any frame has run.
        - The star buffer never shrinks; stars beyond star_draw_count are
          kept for reuse.
        - There is no upper bound on star_draw_count. While the measured
          FPS stays above the goal, the count keeps growing.
    """
    def __init__(self, settings: Settings, rng: np.random.Generator, width: int = 0, height: int = 0):
        self.settings = settings
        self.rng = rng
        self.camera = CameraBounds()
        self.spawn_radius = 1
        self.stars = []
        self.star_draw_count = 0
        self.stats = Stats()
        self._subscribers = []

        self.on_viewport_resize(width, height)

        logger.info(f"StarField created with {self.camera}, spawn radius {self.spawn_radius}.")

    # --- Stats observers ---

    def subscribe(self, callback):
        """Registers callback(stats) to be called with every new stats snapshot."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback):
        self._subscribers.remove(callback)

    def _publish_stats(self, stats: Stats):
        self.stats = stats
        for callback in list(self._subscribers):
            callback(stats)

    # --- Viewport ---

    def on_viewport_resize(self, width: int, height: int):
        """Recomputes the centered camera bounds and the spawn radius."""
        self.camera.resize(width, height)
        self.spawn_radius = min(self.camera.bottom_right.x, self.camera.bottom_right.y)
        logger.debug(f"Viewport resized to {width}x{height}. Spawn radius: {self.spawn_radius}.")

    # --- Adaptive star count ---

    def update_star_count(self, fps: int, goal_fps: int = None):
        """
        Grows the star count by the FPS surplus over the goal, or shrinks it
        by the deficit (never below 1), then buffers any missing stars.
        The goal defaults to the current (clamped) goal_fps setting.
        """
        if goal_fps is None:
            goal_fps = self.settings.clamped().goal_fps
        goal_fps = _sanitize_fps(goal_fps)
        fps = _sanitize_fps(fps)

        if fps > goal_fps:
            self.star_draw_count += fps - goal_fps
        elif fps < goal_fps:
            self.star_draw_count -= goal_fps - fps
            self.star_draw_count = max(1, self.star_draw_count)

        missing = self.star_draw_count - len(self.stars)
        if missing > 0:
            self.stars.extend(Star(self.spawn_radius, self.rng) for _ in range(missing))
            logger.debug(f"Buffered {missing} new stars ({len(self.stars)} total).")

    # --- Frame ---

    def on_frame(self, surface, delta_time: float, fps: int) -> Stats:
        """
        Runs one frame: adjust the star count, then reset, update and draw
        every active star in camera space.

        Data Contract:
        - Inputs:
            - surface: Anything with clear(), fill_rect(), translate(),
              save() and restore() (see render_surface.RenderSurface).
            - delta_time (float): Milliseconds since the previous frame.
            - fps (int): Smoothed frames per second.
        - Outputs: The Stats snapshot for this frame.
        """
        settings = self.settings.clamped()
        delta_time = _sanitize_delta_time(delta_time)
        fps = _sanitize_fps(fps)

        raw_acceleration = settings.acceleration
        raw_proximity = settings.proximity

        acceleration = raw_acceleration * constants.ACCELERATION_MULTIPLIER * delta_time

        prox_accel_modifier = (
            raw_proximity / constants.PROXIMITY_RANGE[1]
            * raw_acceleration / constants.ACCELERATION_RANGE[1]
        )
        proximity = 1 + raw_proximity * prox_accel_modifier * constants.PROXIMITY_MULTIPLIER * delta_time

        self.update_star_count(fps, settings.goal_fps)

        surface.save()
        try:
            # Draw black space
            surface.clear(constants.BLACK)

            # Camera-space (0, 0) maps to the center of the surface.
            surface.translate(-self.camera.top_left.x, -self.camera.top_left.y)

            camera = self.camera
            spawn_radius = self.spawn_radius
            colorful = settings.colorful
            for star in self.stars[:self.star_draw_count]:
                if not camera.contains(star.position):
                    star.reset(spawn_radius)

                star.update(acceleration, proximity)
                star.draw(surface, colorful)
        finally:
            surface.restore()

        stats = Stats(
            drawn_stars=self.star_draw_count,
            buffered_stars=len(self.stars),
            actual_fps=fps,
        )
        self._publish_stats(stats)
        return stats
