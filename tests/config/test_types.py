"""Tests for maze_chase.config.types validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from maze_chase.config.types import EpisodeConfig, GameConfig


class TestGameConfig:
    def test_defaults_match_reference_rules(self) -> None:
        config = GameConfig()
        assert config.initial_lives == 3
        assert config.pellet_points == 10
        assert config.power_pellet_points == 50
        assert config.frightened_agent_points == 200
        assert config.frighten_duration_ms == 8_000
        assert config.tick_interval_ms == 150

    def test_rejects_zero_lives(self) -> None:
        with pytest.raises(ValueError, match="initial_lives"):
            GameConfig(initial_lives=0)

    def test_rejects_negative_points(self) -> None:
        with pytest.raises(ValueError, match="point values"):
            GameConfig(pellet_points=-1)

    def test_rejects_negative_frighten_duration(self) -> None:
        with pytest.raises(ValueError, match="frighten_duration_ms"):
            GameConfig(frighten_duration_ms=-5)

    def test_rejects_zero_tick_interval(self) -> None:
        with pytest.raises(ValueError, match="tick_interval_ms"):
            GameConfig(tick_interval_ms=0)

    def test_is_frozen(self) -> None:
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.initial_lives = 5  # type: ignore[misc]


class TestEpisodeConfig:
    def test_defaults(self) -> None:
        config = EpisodeConfig()
        assert config.out_dir == Path("data")
        assert config.game == GameConfig()

    def test_rejects_zero_episodes(self) -> None:
        with pytest.raises(ValueError, match="n_episodes"):
            EpisodeConfig(n_episodes=0)

    def test_rejects_zero_max_ticks(self) -> None:
        with pytest.raises(ValueError, match="max_ticks"):
            EpisodeConfig(max_ticks=0)

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_rejects_turn_probability_outside_unit_interval(self, probability: float) -> None:
        with pytest.raises(ValueError, match="turn_probability"):
            EpisodeConfig(turn_probability=probability)
