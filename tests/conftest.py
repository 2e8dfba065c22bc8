"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from settings import Settings


class ScriptedRandom:
    """Stands in for a numpy Generator, returning scripted random() values in order."""

    def __init__(self, values, default=0.5):
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.default


class RecordingSurface:
    """Records every drawing call made on it."""

    def __init__(self):
        self.calls = []

    def save(self):
        self.calls.append(('save',))

    def restore(self):
        self.calls.append(('restore',))

    def translate(self, dx, dy):
        self.calls.append(('translate', dx, dy))

    def clear(self, color):
        self.calls.append(('clear', color))

    def fill_rect(self, color, x, y, width, height):
        self.calls.append(('fill_rect', color, x, y, width, height))

    def rects(self):
        return [call for call in self.calls if call[0] == 'fill_rect']


class FakeTime:
    """A millisecond clock that only moves when told to."""

    def __init__(self, start=0.0):
        self.now = start

    def advance(self, ms):
        self.now += ms

    def __call__(self):
        return self.now


@pytest.fixture
def rng():
    """Seeded generator, as the application uses."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def settings():
    return Settings()
