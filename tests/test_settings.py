"""Tests for settings clamping and stepping."""

import dataclasses
import json

import pytest

from settings import Settings, Stats, RANGES


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.colorful is True
        assert settings.goal_fps == 60
        assert settings.acceleration == 10
        assert settings.proximity == 50

    def test_from_config_clamps_and_fills_defaults(self):
        settings = Settings.from_config({'goal_fps': 500, 'acceleration': -3, 'colorful': False})
        assert settings.goal_fps == 200
        assert settings.acceleration == 0
        assert settings.proximity == 50
        assert settings.colorful is False

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_from_config_rejects_non_boolean_colorful(self, value):
        with pytest.raises(TypeError):
            Settings.from_config({'colorful': value})

    def test_from_config_accepts_json_false(self):
        settings = Settings.from_config(json.loads('{"colorful": false}'))
        assert settings.colorful is False

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), None, "fast"])
    def test_unusable_values_fall_back_to_minimum(self, value):
        clamped = Settings(goal_fps=value).clamped()
        assert clamped.goal_fps == RANGES['goal_fps'].min

    def test_clamped_returns_copy(self):
        settings = Settings(acceleration=150)
        clamped = settings.clamped()
        assert clamped.acceleration == 100
        assert settings.acceleration == 150

    def test_step_moves_by_step_and_clamps(self):
        settings = Settings(goal_fps=198)
        assert settings.step('goal_fps', 1) == 200
        assert settings.step('goal_fps', 1) == 200
        assert settings.step('goal_fps', -1) == 198

    def test_step_down_stops_at_minimum(self):
        settings = Settings(proximity=1)
        assert settings.step('proximity', -1) == 0
        assert settings.step('proximity', -1) == 0

    def test_step_unknown_setting(self):
        with pytest.raises(KeyError):
            Settings().step('colorful', 1)

    def test_toggle_colorful(self):
        settings = Settings()
        assert settings.toggle_colorful() is False
        assert settings.colorful is False


class TestStats:

    def test_snapshot_is_immutable(self):
        stats = Stats(drawn_stars=3, buffered_stars=5, actual_fps=60)
        with pytest.raises(dataclasses.FrozenInstanceError):
            stats.drawn_stars = 4
