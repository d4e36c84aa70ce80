"""Configuration dataclasses for interactive games and headless episode runs.

All frozen dataclasses that parameterise a game or a batch of episodes live
here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from maze_chase.config.constants import (
    FRIGHTEN_DURATION_MS,
    FRIGHTENED_AGENT_POINTS,
    INITIAL_LIVES,
    PELLET_POINTS,
    POWER_PELLET_POINTS,
    TICK_INTERVAL_MS,
)

__all__ = [
    "EpisodeConfig",
    "EpisodeResult",
    "GameConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EpisodeResult:
    """Top-level outcome for one headless episode."""

    episode_id: str
    phase: str
    ticks: int
    score: int
    lives: int
    pellets_remaining: int


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GameConfig:
    """Rule knobs for one game; the maze itself is fixed."""

    initial_lives: int = INITIAL_LIVES
    pellet_points: int = PELLET_POINTS
    power_pellet_points: int = POWER_PELLET_POINTS
    frightened_agent_points: int = FRIGHTENED_AGENT_POINTS
    frighten_duration_ms: int = FRIGHTEN_DURATION_MS
    tick_interval_ms: int = TICK_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.initial_lives < 1:
            raise ValueError("initial_lives must be >= 1")
        if min(self.pellet_points, self.power_pellet_points, self.frightened_agent_points) < 0:
            raise ValueError("point values must be >= 0")
        if self.frighten_duration_ms < 0:
            raise ValueError("frighten_duration_ms must be >= 0")
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be >= 1")


@dataclass(frozen=True)
class EpisodeConfig:
    """Batch settings for seeded headless episodes."""

    n_episodes: int = 10
    max_ticks: int = 2_000
    sim_seed_start: int = 0
    input_seed_start: int = 0
    turn_probability: float = 0.25
    """Per-tick probability that the input policy requests a new direction."""
    out_dir: Path = Path("data")
    write_tick_log: bool = True
    game: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self) -> None:
        if self.n_episodes < 1:
            raise ValueError("n_episodes must be >= 1")
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        if not 0.0 <= self.turn_probability <= 1.0:
            raise ValueError("turn_probability must be in [0.0, 1.0]")
