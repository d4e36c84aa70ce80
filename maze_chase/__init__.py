"""Deterministic fixed-tick core for a tile-grid maze chase game."""

from maze_chase.config.types import GameConfig
from maze_chase.domain.state import Phase
from maze_chase.simulation.engine import Simulation

__all__ = ["GameConfig", "Phase", "Simulation"]
