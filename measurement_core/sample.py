"""
Sample: one timestamped reading emitted by a measurement stream.

Immutable value record. A tick whose signal could not be evaluated still
produces a sample, with has_value=False and value 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Sample:
    """A reading at a UTC instant. value is meaningful only when has_value is True."""

    timestamp: datetime
    has_value: bool
    value: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, datetime):
            object.__setattr__(self, "timestamp", datetime.fromisoformat(str(self.timestamp)))
        if self.timestamp.tzinfo is None:
            object.__setattr__(self, "timestamp", self.timestamp.replace(tzinfo=timezone.utc))
        if not self.has_value:
            object.__setattr__(self, "value", 0.0)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict, one per outward event (e.g. an SSE 'measurement' event)."""
        return {
            "timestamp": self.timestamp.astimezone(timezone.utc).isoformat(),
            "hasValue": self.has_value,
            "value": float(self.value),
        }
