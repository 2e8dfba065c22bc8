# render_surface.py

import math

import pygame

import constants


class RenderSurface:
    """
    A thin drawing adapter over a pygame.Surface that adds a translatable
    origin with save/restore, the way a 2D canvas context works.

    Data Contract:
    - Inputs: surface (pygame.Surface) - The surface to draw on.
    - Outputs: None.
    - Side Effects: Fills pixels on the wrapped surface.
    - Invariants: Every save() must be matched by a restore(). restore()
      without a matching save() raises IndexError.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.offset_x = 0.0
        self.offset_y = 0.0
        self._saved = []

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def save(self):
        self._saved.append((self.offset_x, self.offset_y))

    def restore(self):
        self.offset_x, self.offset_y = self._saved.pop()

    def translate(self, dx: float, dy: float):
        self.offset_x += dx
        self.offset_y += dy

    def clear(self, color=constants.BLACK):
        """Fills the whole surface, ignoring the current translation."""
        self.surface.fill(color)

    def fill_rect(self, color, x: float, y: float, width: float, height: float):
        """
        Fills an axis-aligned rectangle given in translated coordinates.
        Rectangles smaller than a pixel are drawn as one pixel; rectangles
        with non-finite coordinates are skipped.
        """
        left = x + self.offset_x
        top = y + self.offset_y
        if not (math.isfinite(left) and math.isfinite(top) and math.isfinite(width) and math.isfinite(height)):
            return
        # Keep the rect within pygame's integer range; fill() clips the rest.
        limit = self.width + self.height
        left = min(max(math.floor(left), -limit), limit)
        top = min(max(math.floor(top), -limit), limit)
        width = min(max(1, int(width)), 2 * limit)
        height = min(max(1, int(height)), 2 * limit)
        rect = pygame.Rect(left, top, width, height)
        self.surface.fill(color, rect)
