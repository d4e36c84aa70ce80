"""I/O layer: Parquet schemas and output path conventions."""

from maze_chase.io.paths import (
    episode_payload_path,
    episode_summary_path,
    episodes_dir,
    logs_dir,
    tick_log_path,
)
from maze_chase.io.schemas import (
    ENTITY_KINDS,
    EPISODE_PAYLOAD_SCHEMA_VERSION,
    EPISODE_SUMMARY_SCHEMA,
    TICK_LOG_SCHEMA,
)

__all__ = [
    "ENTITY_KINDS",
    "EPISODE_PAYLOAD_SCHEMA_VERSION",
    "EPISODE_SUMMARY_SCHEMA",
    "TICK_LOG_SCHEMA",
    "episode_payload_path",
    "episode_summary_path",
    "episodes_dir",
    "logs_dir",
    "tick_log_path",
]
