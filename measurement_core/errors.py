"""
Exceptions raised while constructing a measurement generator.

Per-tick evaluation failures are never raised; they surface as samples
without a value. Only construction can fail.
"""

from __future__ import annotations

from typing import Any


class MeasurementError(Exception):
    """Base type for all errors raised by measurement_core."""


class GeneratorConfigError(MeasurementError, ValueError):
    """Invalid generator configuration. The generator is never created."""


class OutOfRangeError(GeneratorConfigError):
    """A numeric parameter lies outside its closed interval."""

    def __init__(self, name: str, value: Any, low: float, high: float) -> None:
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{name} must be in range {low}..{high}, got {value!r}")


class MissingArgumentError(GeneratorConfigError):
    """A required argument was not supplied (None)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is required")
