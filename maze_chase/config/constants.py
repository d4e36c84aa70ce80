"""Centralized game constants for the maze chase core.

All magic numbers shared across modules are defined here. Consuming modules
should import from this module rather than defining their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 21
"""Maze width in cells."""

GRID_HEIGHT = 21
"""Maze height in cells."""

# Cell codes: 1 wall, 0 empty, 2 pellet, 3 power pellet.
# Rows 9-10, columns 9-11 form the agent house.
MAZE_TEMPLATE: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 3, 1),
    (1, 2, 1, 1, 1, 1, 1, 2, 1, 1, 1, 2, 1, 1, 1, 1, 1, 2, 1, 1, 1),
    (1, 3, 1, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 1),
    (1, 2, 2, 2, 1, 2, 1, 1, 2, 1, 1, 1, 1, 1, 1, 2, 1, 2, 1, 2, 1),
    (1, 2, 1, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 1, 2, 1, 2, 1),
    (1, 2, 1, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 2, 1, 2, 1, 2, 1, 2, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 1, 2, 2, 2, 1),
    (1, 1, 1, 1, 2, 1, 1, 2, 1, 1, 1, 1, 1, 2, 1, 2, 1, 1, 2, 1, 1),
    (1, 2, 2, 2, 2, 2, 1, 2, 2, 0, 0, 0, 1, 2, 2, 2, 1, 2, 2, 2, 1),
    (1, 1, 1, 1, 1, 2, 1, 1, 1, 0, 0, 0, 1, 1, 1, 2, 1, 1, 2, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 1, 1, 2, 1, 1, 2, 1),
    (1, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 1),
    (1, 2, 1, 2, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 2, 1),
    (1, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 1),
    (1, 2, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 1, 2, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 2, 1, 1, 1, 1, 1, 2, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 3, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)
"""Fixed maze layout indexed ``[y][x]``."""

ACTOR_SPAWN: tuple[int, int] = (GRID_WIDTH // 2 - 1, GRID_HEIGHT // 2 + 3)
"""Actor spawn cell ``(x, y)``; a pellet cell three rows below the agent house."""

AGENT_SPAWNS: tuple[tuple[int, int], ...] = ((9, 9), (11, 9))
"""Agent spawn cells ``(x, y)`` inside the agent house, one per agent.

Every agent reset (eaten while frightened, or after the actor loses a life)
uses ``AGENT_SPAWNS[0]``.
"""

NUM_AGENTS = len(AGENT_SPAWNS)
"""Number of autonomous agents."""

INITIAL_LIVES = 3
"""Actor lives at game start."""

PELLET_POINTS = 10
"""Score for eating a pellet."""

POWER_PELLET_POINTS = 50
"""Score for eating a power pellet."""

FRIGHTENED_AGENT_POINTS = 200
"""Score for colliding with a frightened agent."""

FRIGHTEN_DURATION_MS = 8_000
"""Frightened duration after a power pellet, in milliseconds."""

TICK_INTERVAL_MS = 150
"""Reference driver cadence in milliseconds."""

MOUTH_ANGLE_MAX = 45.0
"""Upper bound of the cosmetic mouth-angle triangle wave, in degrees."""

MOUTH_ANGLE_STEP = 5.0
"""Mouth-angle change per actor move, in degrees."""

UP: tuple[int, int] = (0, -1)
DOWN: tuple[int, int] = (0, 1)
LEFT: tuple[int, int] = (-1, 0)
RIGHT: tuple[int, int] = (1, 0)
STOP: tuple[int, int] = (0, 0)

AGENT_MOVE_ORDER: tuple[tuple[int, int], ...] = (UP, DOWN, LEFT, RIGHT)
"""Candidate order for agent moves; fixed so seeded runs are reproducible."""

DIRECTIONS: frozenset[tuple[int, int]] = frozenset({UP, DOWN, LEFT, RIGHT, STOP})
"""Every legal direction vector, including the stopped vector."""

FLUSH_THRESHOLD = 8_192
"""Flush tick-log rows to Parquet once this in-memory row count is reached."""
