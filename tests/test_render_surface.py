"""Tests for the pygame drawing adapter, on off-screen surfaces."""

import pygame
import pytest

import constants
from render_surface import RenderSurface


def rgb_at(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def render():
    return RenderSurface(pygame.Surface((20, 10)))


class TestRenderSurface:

    def test_size(self, render):
        assert (render.width, render.height) == (20, 10)

    def test_clear_ignores_translation(self, render):
        render.surface.fill(constants.WHITE)
        render.translate(50, 50)
        render.clear(constants.BLACK)
        assert rgb_at(render.surface, 0, 0) == constants.BLACK
        assert rgb_at(render.surface, 19, 9) == constants.BLACK

    def test_fill_rect_uses_translation(self, render):
        render.clear()
        render.translate(10, 5)

        render.fill_rect(constants.WHITE, -0.5, -0.5, 1, 1)

        assert rgb_at(render.surface, 9, 4) == constants.WHITE
        assert rgb_at(render.surface, 10, 5) == constants.BLACK

    def test_sub_pixel_rect_draws_one_pixel(self, render):
        render.clear()
        render.fill_rect(constants.PINK_80S, 3.2, 2.7, 0.3, 0.3)
        assert rgb_at(render.surface, 3, 2) == constants.PINK_80S

    def test_save_restore_nests(self, render):
        render.save()
        render.translate(3, 4)
        render.save()
        render.translate(1, 1)
        assert (render.offset_x, render.offset_y) == (4, 5)

        render.restore()
        assert (render.offset_x, render.offset_y) == (3, 4)
        render.restore()
        assert (render.offset_x, render.offset_y) == (0, 0)

    def test_unbalanced_restore(self, render):
        with pytest.raises(IndexError):
            render.restore()

    def test_non_finite_rect_is_skipped(self, render):
        render.clear()
        render.fill_rect(constants.WHITE, float('nan'), 0, 1, 1)
        render.fill_rect(constants.WHITE, 0, 0, float('inf'), 1)
        assert rgb_at(render.surface, 0, 0) == constants.BLACK

    def test_huge_rect_is_clipped(self, render):
        render.clear()
        render.fill_rect(constants.WHITE, -1e12, -1e12, 1e13, 1e13)
        assert rgb_at(render.surface, 19, 9) == constants.WHITE

    def test_star_field_frame_on_real_surface(self, rng):
        from settings import Settings
        from star_field import StarField

        render = RenderSurface(pygame.Surface((64, 48)))
        field = StarField(Settings(), rng, render.width, render.height)

        for fps in (90, 90, 90):
            field.on_frame(render, 16.0, fps)

        assert (render.offset_x, render.offset_y) == (0, 0)
        pixels = {rgb_at(render.surface, x, y) for x in range(64) for y in range(48)}
        assert constants.WHITE in pixels
