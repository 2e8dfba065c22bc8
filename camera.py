# camera.py

import math

from vector import Vector


def _sanitize_dimension(value) -> int:
    """Clamps a viewport dimension to a non-negative integer."""
    if value is None or not math.isfinite(value):
        return 0
    return max(0, int(value))


class CameraBounds:
    """
    The viewport expressed in world-space coordinates, centered at the origin.

    Data Contract:
    - Inputs: width, height (int) via resize(). Negative or non-finite values
      are clamped to 0.
    - Outputs: contains() reports whether a point is inside (edges inclusive).
    - Invariants: top_left <= bottom_right component-wise, and
      top_left == -(floor(width / 2), floor(height / 2)).
    """
    __slots__ = ("top_left", "bottom_right")

    def __init__(self, width: int = 0, height: int = 0):
        self.top_left = Vector()
        self.bottom_right = Vector()
        self.resize(width, height)

    def resize(self, width, height):
        width = _sanitize_dimension(width)
        height = _sanitize_dimension(height)

        half_w = width // 2
        half_h = height // 2
        self.top_left.set(-half_w, -half_h)
        self.bottom_right.set(width - half_w, height - half_h)

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def contains(self, vec: Vector) -> bool:
        top_left = self.top_left
        bottom_right = self.bottom_right
        return top_left.x <= vec.x <= bottom_right.x and top_left.y <= vec.y <= bottom_right.y

    def __repr__(self):
        return f"CameraBounds(top_left={self.top_left}, bottom_right={self.bottom_right})"
