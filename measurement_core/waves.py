"""
Closed-form waveforms used by the convenience constructors.
"""

from __future__ import annotations

import math
from enum import Enum

from measurement_core.config import SIGNAL_FREQUENCY_RANGE_HZ, SignalFunction, check_range
from measurement_core.errors import GeneratorConfigError


class WaveKind(Enum):
    SINE = "sine"
    COSINE = "cosine"

    @classmethod
    def parse(cls, name: str | WaveKind) -> WaveKind:
        """Case-insensitive lookup by name. Unknown names raise GeneratorConfigError."""
        if isinstance(name, WaveKind):
            return name
        key = str(name).strip().lower()
        for kind in cls:
            if kind.value == key:
                return kind
        raise GeneratorConfigError(f"signal must be either 'sine' or 'cosine', got {name!r}")


def validate_signal_frequency(signal_frequency_hz: float) -> float:
    """Raise OutOfRangeError unless 0.1 <= signal_frequency_hz <= 10.0."""
    return check_range("signal_frequency_hz", signal_frequency_hz, SIGNAL_FREQUENCY_RANGE_HZ)


def sine_wave(signal_frequency_hz: float) -> SignalFunction:
    omega = 2.0 * math.pi * signal_frequency_hz
    return lambda t: math.sin(omega * t)


def cosine_wave(signal_frequency_hz: float) -> SignalFunction:
    omega = 2.0 * math.pi * signal_frequency_hz
    return lambda t: math.cos(omega * t)


def wave_function(kind: str | WaveKind, signal_frequency_hz: float) -> SignalFunction:
    """Validated waveform t -> value for the given kind and frequency."""
    kind = WaveKind.parse(kind)
    f = validate_signal_frequency(signal_frequency_hz)
    if kind is WaveKind.SINE:
        return sine_wave(f)
    return cosine_wave(f)
