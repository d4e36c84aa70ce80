"""Game outcome state: phase, score, and pellet counter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Phase(Enum):
    """Top-level game outcome. WON and LOST are terminal until restart."""

    RUNNING = "running"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not Phase.RUNNING


@dataclass
class GameState:
    """Score and pellet counters for one game."""

    pellets_remaining: int
    score: int = 0
    phase: Phase = field(default=Phase.RUNNING)

    def add_points(self, points: int) -> None:
        if points < 0:
            raise ValueError("score never decreases")
        self.score += points

    def pellet_eaten(self) -> None:
        if self.pellets_remaining < 1:
            raise ValueError("no pellets remaining")
        self.pellets_remaining -= 1


@dataclass(frozen=True)
class TickReport:
    """Events produced by one ``Simulation.tick`` call."""

    tick: int
    advanced: bool
    """False when the tick was ignored because the game had already ended."""
    consumed: str = "none"
    agents_eaten: tuple[int, ...] = ()
    life_lost: bool = False
    phase: Phase = Phase.RUNNING
