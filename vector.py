# vector.py

import math


class Vector:
    """
    A very lean mutable 2D vector.

    Every operation mutates the vector in place and returns it, so calls can
    be chained: `v.set_from(a).scale(2)`. Non-finite values propagate silently.
    """
    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y

    def set(self, x: float, y: float) -> "Vector":
        self.x = x
        self.y = y
        return self

    def set_from(self, other: "Vector") -> "Vector":
        return self.set(other.x, other.y)

    def add(self, x: float, y: float) -> "Vector":
        return self.set(self.x + x, self.y + y)

    def add_from(self, other: "Vector") -> "Vector":
        return self.set(self.x + other.x, self.y + other.y)

    def scale(self, sx: float, sy: float = None) -> "Vector":
        """Scales each component. A single argument scales both uniformly."""
        if sy is None:
            sy = sx
        return self.set(self.x * sx, self.y * sy)

    def scale_from(self, other: "Vector") -> "Vector":
        return self.set(self.x * other.x, self.y * other.y)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def as_tuple(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"Vector({self.x}, {self.y})"
