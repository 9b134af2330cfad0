"""
Tick schedule: due times for a fixed-rate stream on a monotonic clock.

Due times are derived from a fixed start instant and the tick index, never
from the previous emission. A late tick therefore shortens (or skips) the
following waits instead of shifting every later tick.
"""

from __future__ import annotations

import time
from collections.abc import Callable


class TickSchedule:
    """Start instant plus rate. Call start() once, then query per tick index."""

    def __init__(self, sample_rate_hz: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._interval_s = 1.0 / sample_rate_hz
        self._clock = clock
        self._start: float | None = None

    @property
    def interval_s(self) -> float:
        return self._interval_s

    @property
    def started(self) -> bool:
        return self._start is not None

    def start(self) -> None:
        self._start = self._clock()

    def elapsed(self) -> float:
        """Seconds since start()."""
        if self._start is None:
            raise RuntimeError("TickSchedule.start() has not been called")
        return self._clock() - self._start

    def due(self, index: int) -> float:
        """Ideal offset from start at which tick index is emitted."""
        return index * self._interval_s

    def remaining(self, index: int) -> float:
        """Seconds to wait after tick index before tick index + 1. Not positive when late."""
        return self.due(index + 1) - self.elapsed()
