"""Millisecond clocks injected into the simulation.

A clock is any zero-argument callable returning the current time in integer
milliseconds. Only differences and ordering matter, so a monotonic source is
used for live play and a manual one for seeded headless runs and tests.
"""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Wall-independent time in milliseconds."""
    return time.monotonic_ns() // 1_000_000


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms

    def __call__(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("clock cannot move backwards")
        self._now += ms
        return self._now

    def set(self, now_ms: int) -> None:
        if now_ms < self._now:
            raise ValueError("clock cannot move backwards")
        self._now = now_ms
