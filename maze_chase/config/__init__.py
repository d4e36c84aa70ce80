"""Configuration layer: constants and typed config dataclasses."""

from maze_chase.config.constants import (
    ACTOR_SPAWN,
    AGENT_MOVE_ORDER,
    AGENT_SPAWNS,
    DIRECTIONS,
    DOWN,
    FLUSH_THRESHOLD,
    FRIGHTEN_DURATION_MS,
    FRIGHTENED_AGENT_POINTS,
    GRID_HEIGHT,
    GRID_WIDTH,
    INITIAL_LIVES,
    LEFT,
    MAZE_TEMPLATE,
    NUM_AGENTS,
    PELLET_POINTS,
    POWER_PELLET_POINTS,
    RIGHT,
    STOP,
    TICK_INTERVAL_MS,
    UP,
)
from maze_chase.config.types import EpisodeConfig, EpisodeResult, GameConfig

__all__ = [
    "ACTOR_SPAWN",
    "AGENT_MOVE_ORDER",
    "AGENT_SPAWNS",
    "DIRECTIONS",
    "DOWN",
    "EpisodeConfig",
    "EpisodeResult",
    "FLUSH_THRESHOLD",
    "FRIGHTEN_DURATION_MS",
    "FRIGHTENED_AGENT_POINTS",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GameConfig",
    "INITIAL_LIVES",
    "LEFT",
    "MAZE_TEMPLATE",
    "NUM_AGENTS",
    "PELLET_POINTS",
    "POWER_PELLET_POINTS",
    "RIGHT",
    "STOP",
    "TICK_INTERVAL_MS",
    "UP",
]
