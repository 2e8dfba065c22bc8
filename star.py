# star.py

import math
from enum import Enum

import numpy as np

import constants
from vector import Vector


class StarColor(Enum):
    """The trail colors a star can spawn with."""
    GREEN = constants.GREEN_80S
    BLUE = constants.BLUE_80S
    PINK = constants.PINK_80S


_COLORS = list(StarColor)


class Star:
    """
    A single star flying away from the camera center.

    Data Contract:
    - Inputs:
        - spawn_radius (float): Maximum distance from the origin at which the
          star is placed on construction.
        - rng (np.random.Generator): Source of randomness. Anything with a
          numpy-style `random()` method returning floats in [0, 1) works.
    - Outputs: None. The star mutates its own state every frame.
    - Side Effects: Draws onto the surface passed to draw().
    - Invariants: The Vector objects are allocated once and reused across
      resets. `size` only grows between resets.
    """
    __slots__ = ("rng", "normal", "position", "velocity", "previous_position", "size", "color")

    def __init__(self, spawn_radius: float, rng: np.random.Generator):
        self.rng = rng
        self.normal = Vector()
        self.position = Vector()
        self.velocity = Vector()
        self.previous_position = Vector()
        self.size = 1.0
        self.color = StarColor.GREEN

        self.reset(spawn_radius)

    def reset(self, spawn_radius: float):
        """
        Respawns the star at a random point within a disc around the origin.

        The distance is drawn uniformly from [0, spawn_radius], so stars are
        denser near the center than an area-uniform sample would be.
        """
        angle = self.rng.random() * (2 * math.pi)
        length = self.rng.random() * spawn_radius

        self.normal.set(math.cos(angle), math.sin(angle))
        self.position.set(self.normal.x * length, self.normal.y * length)

        # Stars further out start faster.
        self.velocity.set_from(self.position).scale(constants.VEL_INIT_MULTIPLIER)

        self.color = _COLORS[min(int(self.rng.random() * len(_COLORS)), len(_COLORS) - 1)]
        self.size = 1.0

    def update(self, acceleration: float, proximity: float):
        """
        Advances the star by one frame.
        v_new = v_old + normal * acceleration
        p_new = p_old + v_new
        """
        self.previous_position.set_from(self.position)

        self.velocity.add(self.normal.x * acceleration, self.normal.y * acceleration)
        self.position.add_from(self.velocity)

        # Faster stars look closer, so they grow faster.
        self.size *= proximity + self.velocity.length() * constants.SPEED_GROWTH_MULTIPLIER

    def draw(self, surface, colorful: bool):
        """
        Draws the star as squares: a colored tail at the previous position
        (only when colorful) and a white head at the current position.
        """
        size = self.size
        half = size * 0.5

        if colorful:
            surface.fill_rect(self.color.value, self.previous_position.x - half, self.previous_position.y - half, size, size)

        surface.fill_rect(constants.WHITE, self.position.x - half, self.position.y - half, size, size)
