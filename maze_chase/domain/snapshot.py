"""Typed read-only views of the game for renderers.

``FrameSnapshot`` is the whole render query surface: a renderer needs nothing
else from the simulation to draw one frame.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from maze_chase.domain.state import Phase


@dataclass(frozen=True)
class ActorView:
    """Immutable actor state at one point in time."""

    x: int
    y: int
    dx: int
    dy: int
    lives: int
    mouth_angle: float


@dataclass(frozen=True)
class AgentView:
    """Immutable agent state at one point in time."""

    agent_id: int
    x: int
    y: int
    dx: int
    dy: int
    frightened: bool


@dataclass(frozen=True, eq=False)
class FrameSnapshot:
    """Everything a renderer reads after a tick."""

    tick: int
    cells: np.ndarray
    """Read-only copy of the grid codes, indexed ``[y, x]``."""
    actor: ActorView
    agents: tuple[AgentView, ...]
    score: int
    pellets_remaining: int
    phase: Phase

    @property
    def lives(self) -> int:
        return self.actor.lives

    def same_state(self, other: FrameSnapshot) -> bool:
        """True when both snapshots describe identical game state, ignoring the tick counter."""
        return (
            np.array_equal(self.cells, other.cells)
            and self.actor == other.actor
            and self.agents == other.agents
            and self.score == other.score
            and self.pellets_remaining == other.pellets_remaining
            and self.phase == other.phase
        )
