"""Simulation layer: tick engine, clocks, driver, and headless episodes."""

from maze_chase.simulation.clock import Clock, ManualClock, monotonic_ms
from maze_chase.simulation.driver import FixedIntervalDriver
from maze_chase.simulation.engine import Simulation
from maze_chase.simulation.episodes import (
    EpisodeStats,
    episode_id_for,
    play_episode,
    random_input,
    run_episodes,
)
from maze_chase.simulation.persistence import TickLogWriter, flush_tick_columns

__all__ = [
    "Clock",
    "EpisodeStats",
    "FixedIntervalDriver",
    "ManualClock",
    "Simulation",
    "TickLogWriter",
    "episode_id_for",
    "flush_tick_columns",
    "monotonic_ms",
    "play_episode",
    "random_input",
    "run_episodes",
]
