"""Actor and agent entities.

Entities never consult the grid: every move is validated by the simulation
before ``advance`` is called.
"""

from __future__ import annotations

from dataclasses import dataclass

from maze_chase.config.constants import (
    INITIAL_LIVES,
    MOUTH_ANGLE_MAX,
    MOUTH_ANGLE_STEP,
    RIGHT,
    STOP,
)


@dataclass
class Actor:
    """The player-controlled entity."""

    x: int
    y: int
    dx: int = RIGHT[0]
    dy: int = RIGHT[1]
    lives: int = INITIAL_LIVES
    mouth_angle: float = 0.0
    """Cosmetic only; no gameplay rule reads it."""
    mouth_speed: float = MOUTH_ANGLE_STEP

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def direction(self) -> tuple[int, int]:
        return (self.dx, self.dy)

    def advance(self) -> None:
        """Move one step along the current direction and animate the mouth."""
        self.x += self.dx
        self.y += self.dy
        self.mouth_angle += self.mouth_speed
        if self.mouth_angle >= MOUTH_ANGLE_MAX:
            self.mouth_angle = MOUTH_ANGLE_MAX
            self.mouth_speed = -self.mouth_speed
        elif self.mouth_angle <= 0.0:
            self.mouth_angle = 0.0
            self.mouth_speed = -self.mouth_speed

    def set_direction(self, dx: int, dy: int) -> None:
        self.dx = dx
        self.dy = dy

    def reset(self, spawn_x: int, spawn_y: int) -> None:
        """Return to spawn facing right with the mouth closed; lives are untouched."""
        self.x = spawn_x
        self.y = spawn_y
        self.dx, self.dy = RIGHT
        self.mouth_angle = 0.0
        self.mouth_speed = MOUTH_ANGLE_STEP


@dataclass
class Agent:
    """An autonomous pursuer."""

    agent_id: int
    x: int
    y: int
    dx: int = STOP[0]
    dy: int = STOP[1]
    frightened: bool = False
    frightened_until: int = 0
    """Absolute expiry in clock milliseconds; meaningful only while frightened."""

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def direction(self) -> tuple[int, int]:
        return (self.dx, self.dy)

    def advance(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def reset(self, spawn_x: int, spawn_y: int) -> None:
        """Return to spawn, stopped and no longer frightened."""
        self.x = spawn_x
        self.y = spawn_y
        self.dx, self.dy = STOP
        self.frightened = False
        self.frightened_until = 0

    def frighten(self, until: int) -> None:
        self.frightened = True
        self.frightened_until = until

    def tick_frighten_state(self, now: int) -> None:
        """Clear the frightened flag once ``now`` is past the expiry."""
        if self.frightened and now > self.frightened_until:
            self.frightened = False
