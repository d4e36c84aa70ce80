"""Domain layer: grid, maze topology, entities, game state, and snapshots."""

from maze_chase.domain.entities import Actor, Agent
from maze_chase.domain.grid import CellKind, ConsumeResult, Grid, OutOfBoundsError
from maze_chase.domain.maze import (
    border_openings,
    dead_ends,
    unreachable_pellets,
    validate_maze,
    walkable_graph,
)
from maze_chase.domain.snapshot import ActorView, AgentView, FrameSnapshot
from maze_chase.domain.state import GameState, Phase, TickReport

__all__ = [
    "Actor",
    "ActorView",
    "Agent",
    "AgentView",
    "CellKind",
    "ConsumeResult",
    "FrameSnapshot",
    "GameState",
    "Grid",
    "OutOfBoundsError",
    "Phase",
    "TickReport",
    "border_openings",
    "dead_ends",
    "unreachable_pellets",
    "validate_maze",
    "walkable_graph",
]
