"""Parquet schema definitions for headless episode artifacts.

Every Arrow schema used for persisting tick logs and episode summaries is
centralised here so that the runner and any reader work against the same
column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

EPISODE_PAYLOAD_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Episode schemas
# ---------------------------------------------------------------------------

ENTITY_KINDS = ("actor", "agent")

TICK_LOG_SCHEMA = pa.schema(
    [
        ("episode_id", pa.string()),
        ("tick", pa.int64()),
        ("entity", pa.string()),
        ("entity_id", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("dx", pa.int64()),
        ("dy", pa.int64()),
        ("frightened", pa.bool_()),
        ("score", pa.int64()),
        ("lives", pa.int64()),
        ("pellets_remaining", pa.int64()),
        ("phase", pa.string()),
    ]
)

EPISODE_SUMMARY_SCHEMA = pa.schema(
    [
        ("episode_id", pa.string()),
        ("sim_seed", pa.int64()),
        ("input_seed", pa.int64()),
        ("phase", pa.string()),
        ("ticks", pa.int64()),
        ("score", pa.int64()),
        ("lives", pa.int64()),
        ("pellets_remaining", pa.int64()),
        ("pellets_eaten", pa.int64()),
        ("power_pellets_eaten", pa.int64()),
        ("agents_eaten", pa.int64()),
        ("lives_lost", pa.int64()),
    ]
)
