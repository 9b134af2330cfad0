"""
MeasurementSource: the narrow interface consumers of a sample stream rely on.

Transports (SSE, websockets, recorders) depend on this, not on a concrete
generator.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from measurement_core.sample import Sample


class MeasurementSource(ABC):
    """
    Base class for sample producers. Each stream() call is an independent,
    infinite, single-consumer sequence that ends only when stop_event is set
    (or the consuming task is cancelled).
    """

    @abstractmethod
    def stream(self, stop_event: asyncio.Event | None = None) -> AsyncIterator[Sample]:
        """Return a fresh async iterator of samples."""
        ...
