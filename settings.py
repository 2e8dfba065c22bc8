# settings.py

"""
User-tunable settings and the per-frame stats snapshot.

Settings are owned by the caller (the entry point, or a test) and handed to
the StarField explicitly. Stats are produced once per frame and delivered to
subscribers as immutable snapshots.
"""

import math
import logging
from collections import namedtuple
from dataclasses import dataclass, replace

import numpy as np

import constants

logger = logging.getLogger("starfield")

SettingRange = namedtuple('SettingRange', ['min', 'max', 'step'])

RANGES = {
    'goal_fps': SettingRange(*constants.GOAL_FPS_RANGE),
    'acceleration': SettingRange(*constants.ACCELERATION_RANGE),
    'proximity': SettingRange(*constants.PROXIMITY_RANGE),
}


def _clamp_to_range(value, setting_range: SettingRange) -> int:
    """Clamps a raw setting into its range. Non-finite values fall back to the minimum."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return setting_range.min
    if not math.isfinite(value):
        return setting_range.min
    return int(np.clip(value, setting_range.min, setting_range.max))


@dataclass
class Settings:
    """
    Settings meant to be changed by the user.

    - colorful: draw colored tails behind each star.
    - goal_fps: target framerate for the adaptive star count, in [2, 200].
    - acceleration: raw 0-100 speed setting.
    - proximity: raw 0-100 size-growth setting.
    """
    colorful: bool = constants.DEFAULT_COLORFUL
    goal_fps: int = constants.DEFAULT_GOAL_FPS
    acceleration: int = constants.DEFAULT_ACCELERATION
    proximity: int = constants.DEFAULT_PROXIMITY

    @classmethod
    def from_config(cls, config: dict) -> "Settings":
        """
        Builds settings from the 'settings' section of config.json, clamped to range.

        Raises TypeError if 'colorful' is not a JSON boolean; a string such as
        "false" would otherwise read as true.
        """
        colorful = config.get('colorful', constants.DEFAULT_COLORFUL)
        if not isinstance(colorful, bool):
            raise TypeError(f"Setting 'colorful' must be true or false, got {colorful!r}.")

        settings = cls(
            colorful=colorful,
            goal_fps=config.get('goal_fps', constants.DEFAULT_GOAL_FPS),
            acceleration=config.get('acceleration', constants.DEFAULT_ACCELERATION),
            proximity=config.get('proximity', constants.DEFAULT_PROXIMITY),
        ).clamped()
        logger.info(f"Settings loaded: {settings}")
        return settings

    def clamped(self) -> "Settings":
        """Returns a copy with every numeric setting clamped into its range."""
        return replace(
            self,
            colorful=bool(self.colorful),
            goal_fps=_clamp_to_range(self.goal_fps, RANGES['goal_fps']),
            acceleration=_clamp_to_range(self.acceleration, RANGES['acceleration']),
            proximity=_clamp_to_range(self.proximity, RANGES['proximity']),
        )

    def step(self, name: str, direction: int) -> int:
        """
        Moves a numeric setting up (direction > 0) or down (direction < 0) by
        its step, clamped to its range. Returns the new value.

        Raises KeyError for names that are not numeric settings.
        """
        setting_range = RANGES[name]
        current = _clamp_to_range(getattr(self, name), setting_range)
        if direction > 0:
            current += setting_range.step
        elif direction < 0:
            current -= setting_range.step
        value = _clamp_to_range(current, setting_range)
        setattr(self, name, value)
        logger.info(f"Setting '{name}' changed to {value}.")
        return value

    def toggle_colorful(self) -> bool:
        self.colorful = not self.colorful
        logger.info(f"Setting 'colorful' changed to {self.colorful}.")
        return self.colorful


@dataclass(frozen=True)
class Stats:
    """Stats meant to be shown to the user. One snapshot per frame."""
    drawn_stars: int = 0
    buffered_stars: int = 0
    actual_fps: int = 0
