"""Path construction helpers for episode output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def episodes_dir(out_dir: Path) -> Path:
    """Return path to the per-episode JSON payload directory."""
    return out_dir / "episodes"


def tick_log_path(out_dir: Path) -> Path:
    """Return path to the tick log Parquet file."""
    return logs_dir(out_dir) / "tick_log.parquet"


def episode_summary_path(out_dir: Path) -> Path:
    """Return path to the episode summary Parquet file."""
    return logs_dir(out_dir) / "episode_summary.parquet"


def episode_payload_path(out_dir: Path, episode_id: str) -> Path:
    """Return path to one episode's JSON payload."""
    return episodes_dir(out_dir) / f"{episode_id}.json"
