"""Fixed-interval tick driver for interactive front ends.

The driver thread calls ``Simulation.tick`` once per interval and hands a
``FrameSnapshot`` to the frame callback. Ticks never overlap: ``pump`` holds a
non-blocking in-flight lock and skips a call that arrives while the previous
tick is still running. The driver stops itself once the game ends.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from maze_chase.domain.snapshot import FrameSnapshot
from maze_chase.domain.state import TickReport
from maze_chase.simulation.engine import Simulation

logger = logging.getLogger(__name__)

FrameCallback = Callable[[FrameSnapshot], None]


class FixedIntervalDriver:
    """Drive a simulation from one background thread at a fixed cadence."""

    def __init__(
        self,
        simulation: Simulation,
        interval_ms: int | None = None,
        on_frame: FrameCallback | None = None,
    ) -> None:
        self.simulation = simulation
        self.interval_ms = interval_ms or simulation.config.tick_interval_ms
        if self.interval_ms < 1:
            raise ValueError("interval_ms must be >= 1")
        self._on_frame = on_frame
        self._in_flight = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self.skipped_ticks = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop.is_set()

    def pump(self) -> TickReport | None:
        """Run one guarded tick; return None if another tick is still in flight."""
        if not self._in_flight.acquire(blocking=False):
            self.skipped_ticks += 1
            logger.warning("tick skipped: previous tick still in flight")
            return None
        try:
            report = self.simulation.tick()
            if self._on_frame is not None:
                self._on_frame(self.simulation.snapshot())
        finally:
            self._in_flight.release()
        if report.phase.is_terminal:
            self._stop.set()
        return report

    def start(self) -> None:
        if self.running:
            raise RuntimeError("driver is already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="maze-chase-driver", daemon=True)
        self._thread.start()
        logger.debug("driver started at %d ms", self.interval_ms)

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def restart(self) -> None:
        """Stop ticking, reset the game, and resume (the retry action)."""
        if self._thread is threading.current_thread():
            raise RuntimeError("restart must be called from outside the driver thread")
        self.stop()
        self.simulation.restart()
        self.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the driver thread exits; return True if it did."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _run(self) -> None:
        interval = self.interval_ms / 1000.0
        while not self._stop.wait(interval):
            self.pump()
        logger.debug("driver stopped with simulation %s", self.simulation.phase.value)
