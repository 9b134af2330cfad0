"""
GeneratorConfig: immutable configuration captured when a generator is built.

Out-of-range values are rejected, never clamped. Ranges are closed intervals.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from measurement_core.errors import MissingArgumentError, OutOfRangeError

SAMPLE_RATE_RANGE_HZ = (1.0, 100.0)
VARIATION_RANGE_PERCENT = (0.0, 100.0)
SIGNAL_FREQUENCY_RANGE_HZ = (0.1, 10.0)

SignalFunction = Callable[[float], float]


def check_range(name: str, value: float, bounds: tuple[float, float]) -> float:
    """Return value as float if low <= value <= high, else raise OutOfRangeError (NaN included)."""
    low, high = bounds
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise OutOfRangeError(name, value, low, high) from e
    if not (low <= v <= high):
        raise OutOfRangeError(name, value, low, high)
    return v


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Sample rate, signal function and variation for one generator.
    Frozen; validated in __post_init__ so an invalid config never exists.
    """

    sample_rate_hz: float
    signal_fn: SignalFunction
    variation_percent: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "sample_rate_hz", check_range("sample_rate_hz", self.sample_rate_hz, SAMPLE_RATE_RANGE_HZ)
        )
        object.__setattr__(
            self,
            "variation_percent",
            check_range("variation_percent", self.variation_percent, VARIATION_RANGE_PERCENT),
        )
        if self.signal_fn is None:
            raise MissingArgumentError("signal_fn")
        if not callable(self.signal_fn):
            raise TypeError(f"signal_fn must be callable, got {type(self.signal_fn).__name__}")

    @property
    def interval_s(self) -> float:
        """Logical tick period in seconds."""
        return 1.0 / self.sample_rate_hz
