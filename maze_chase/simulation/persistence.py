"""Parquet persistence for the tick log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from maze_chase.config.constants import FLUSH_THRESHOLD
from maze_chase.domain.snapshot import FrameSnapshot
from maze_chase.io.schemas import ENTITY_KINDS, TICK_LOG_SCHEMA


def empty_tick_columns() -> dict[str, list[int | str | bool]]:
    """Return one empty in-memory buffer per tick-log column."""
    return {name: [] for name in TICK_LOG_SCHEMA.names}


def append_snapshot_rows(
    columns: dict[str, list[int | str | bool]],
    episode_id: str,
    snapshot: FrameSnapshot,
) -> None:
    """Append one actor row and one row per agent for ``snapshot``."""
    actor = snapshot.actor
    actor_kind, agent_kind = ENTITY_KINDS
    entity_rows: list[tuple[str, int, int, int, int, int, bool]] = [
        (actor_kind, 0, actor.x, actor.y, actor.dx, actor.dy, False)
    ]
    entity_rows.extend(
        (agent_kind, agent.agent_id, agent.x, agent.y, agent.dx, agent.dy, agent.frightened)
        for agent in snapshot.agents
    )
    for entity, entity_id, x, y, dx, dy, frightened in entity_rows:
        columns["episode_id"].append(episode_id)
        columns["tick"].append(snapshot.tick)
        columns["entity"].append(entity)
        columns["entity_id"].append(entity_id)
        columns["x"].append(x)
        columns["y"].append(y)
        columns["dx"].append(dx)
        columns["dy"].append(dy)
        columns["frightened"].append(frightened)
        columns["score"].append(snapshot.score)
        columns["lives"].append(snapshot.lives)
        columns["pellets_remaining"].append(snapshot.pellets_remaining)
        columns["phase"].append(snapshot.phase.value)


def flush_tick_columns(
    tick_columns: dict[str, list[int | str | bool]],
    tick_log_path: Path,
    tick_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated tick rows to Parquet and clear in-memory buffers."""
    if not tick_columns["episode_id"]:
        return tick_writer
    table = pa.Table.from_pydict(tick_columns, schema=TICK_LOG_SCHEMA)
    if tick_writer is None:
        tick_writer = pq.ParquetWriter(tick_log_path, TICK_LOG_SCHEMA)
    tick_writer.write_table(table)
    for values in tick_columns.values():
        values.clear()
    return tick_writer


class TickLogWriter:
    """Buffered tick-log stream into one Parquet file.

    Frames are appended while an episode is still running. The in-memory buffer
    is flushed before it would grow past ``flush_threshold`` rows, so it never
    holds more than ``max(flush_threshold, rows in one frame)`` rows however
    long an episode runs. The file is only created once a row is flushed.
    """

    def __init__(self, path: Path, flush_threshold: int | None = None) -> None:
        if flush_threshold is None:
            flush_threshold = FLUSH_THRESHOLD
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.path = path
        self.flush_threshold = flush_threshold
        self.rows_written = 0
        self._columns = empty_tick_columns()
        self._writer: pq.ParquetWriter | None = None

    @property
    def buffered_rows(self) -> int:
        return len(self._columns["episode_id"])

    def append(self, episode_id: str, snapshot: FrameSnapshot) -> None:
        incoming = 1 + len(snapshot.agents)
        if self.buffered_rows and self.buffered_rows + incoming > self.flush_threshold:
            self.flush()
        append_snapshot_rows(self._columns, episode_id, snapshot)

    def flush(self) -> None:
        pending = self.buffered_rows
        self._writer = flush_tick_columns(self._columns, self.path, self._writer)
        self.rows_written += pending

    def close(self) -> None:
        try:
            self.flush()
        finally:
            if self._writer is not None:
                self._writer.close()
                self._writer = None

    def __enter__(self) -> TickLogWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
