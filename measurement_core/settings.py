"""
StreamSettings: defaults and environment overrides for building a generator.

Environment variables (all optional):
    MEASUREMENT_SIM_SAMPLE_RATE_HZ       default 20.0
    MEASUREMENT_SIM_SIGNAL               'sine' (default) or 'cosine'
    MEASUREMENT_SIM_SIGNAL_FREQUENCY_HZ  default 1.0
    MEASUREMENT_SIM_VARIATION_PERCENT    default 0.0
    MEASUREMENT_SIM_SEED                 integer seed for the noise draws
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from measurement_core.errors import GeneratorConfigError
from measurement_core.generator import SimulatedMeasurementGenerator
from measurement_core.waves import WaveKind

logger = logging.getLogger(__name__)

ENV_PREFIX = "MEASUREMENT_SIM_"

DEFAULT_SAMPLE_RATE_HZ = 20.0
DEFAULT_SIGNAL = "sine"
DEFAULT_SIGNAL_FREQUENCY_HZ = 1.0
DEFAULT_VARIATION_PERCENT = 0.0


def _env_float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise GeneratorConfigError(f"{ENV_PREFIX}{key} must be a number, got {raw!r}") from e


def _env_int(environ: Mapping[str, str], key: str) -> int | None:
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise GeneratorConfigError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class StreamSettings:
    """Parameters for one simulated stream. Range checks happen in build_generator()."""

    sample_rate_hz: float = DEFAULT_SAMPLE_RATE_HZ
    signal: str = DEFAULT_SIGNAL
    signal_frequency_hz: float = DEFAULT_SIGNAL_FREQUENCY_HZ
    variation_percent: float = DEFAULT_VARIATION_PERCENT
    seed: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StreamSettings":
        """Read overrides from environ (os.environ by default); unset keys keep defaults."""
        env = os.environ if environ is None else environ
        signal = env.get(ENV_PREFIX + "SIGNAL") or DEFAULT_SIGNAL
        settings = cls(
            sample_rate_hz=_env_float(env, "SAMPLE_RATE_HZ", DEFAULT_SAMPLE_RATE_HZ),
            signal=WaveKind.parse(signal).value,
            signal_frequency_hz=_env_float(env, "SIGNAL_FREQUENCY_HZ", DEFAULT_SIGNAL_FREQUENCY_HZ),
            variation_percent=_env_float(env, "VARIATION_PERCENT", DEFAULT_VARIATION_PERCENT),
            seed=_env_int(env, "SEED"),
        )
        logger.debug("StreamSettings loaded: %s", settings)
        return settings

    def build_generator(self) -> SimulatedMeasurementGenerator:
        """Generator for these settings; raises OutOfRangeError on invalid values."""
        return SimulatedMeasurementGenerator.create_wave(
            self.signal,
            self.sample_rate_hz,
            self.signal_frequency_hz,
            self.variation_percent,
            seed=self.seed,
        )
