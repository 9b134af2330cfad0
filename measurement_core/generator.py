"""
Simulated measurement generator: a periodic, cancellable stream of samples.

Each stream() call runs its own drift-corrected schedule, evaluates the signal
once per tick and yields a Sample. Evaluation failures become samples without
a value; the stream only ends when the stop event is set.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Callable
from datetime import datetime, timezone

import numpy as np

from measurement_core.config import GeneratorConfig, SignalFunction
from measurement_core.evaluator import SignalEvaluator
from measurement_core.sample import Sample
from measurement_core.schedule import TickSchedule
from measurement_core.source import MeasurementSource
from measurement_core.waves import WaveKind, cosine_wave, sine_wave, validate_signal_frequency, wave_function

logger = logging.getLogger(__name__)


async def _wait_for_stop(stop_event: asyncio.Event, timeout: float) -> bool:
    """Sleep up to timeout seconds. True if stop_event was set before it ran out."""
    try:
        await asyncio.wait_for(stop_event.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        return False
    return True


class SimulatedMeasurementGenerator(MeasurementSource):
    """
    Periodic sample producer at sample_rate_hz (1..100) following signal_fn,
    with +/- variation_percent (0..100) multiplicative noise.

    rng / seed control the noise draws; clock is the monotonic time source used
    for both the signal time offset and the tick schedule.
    """

    def __init__(
        self,
        sample_rate_hz: float,
        signal_fn: SignalFunction,
        variation_percent: float = 0.0,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = GeneratorConfig(
            sample_rate_hz=sample_rate_hz,
            signal_fn=signal_fn,
            variation_percent=variation_percent,
        )
        self._evaluator = SignalEvaluator(
            self._config.signal_fn,
            self._config.variation_percent,
            rng=rng,
            seed=seed,
        )
        self._clock = clock

    @classmethod
    def create_sine(
        cls,
        sample_rate_hz: float,
        signal_frequency_hz: float,
        variation_percent: float = 0.0,
        **kwargs,
    ) -> "SimulatedMeasurementGenerator":
        """Generator for sin(2*pi*f*t). signal_frequency_hz must be in 0.1..10."""
        f = validate_signal_frequency(signal_frequency_hz)
        return cls(sample_rate_hz, sine_wave(f), variation_percent, **kwargs)

    @classmethod
    def create_cosine(
        cls,
        sample_rate_hz: float,
        signal_frequency_hz: float,
        variation_percent: float = 0.0,
        **kwargs,
    ) -> "SimulatedMeasurementGenerator":
        """Generator for cos(2*pi*f*t). signal_frequency_hz must be in 0.1..10."""
        f = validate_signal_frequency(signal_frequency_hz)
        return cls(sample_rate_hz, cosine_wave(f), variation_percent, **kwargs)

    @classmethod
    def create_wave(
        cls,
        kind: str | WaveKind,
        sample_rate_hz: float,
        signal_frequency_hz: float,
        variation_percent: float = 0.0,
        **kwargs,
    ) -> "SimulatedMeasurementGenerator":
        """Sine or cosine generator by WaveKind or case-insensitive name ('sine', 'cosine')."""
        return cls(sample_rate_hz, wave_function(kind, signal_frequency_hz), variation_percent, **kwargs)

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def sample_rate_hz(self) -> float:
        return self._config.sample_rate_hz

    @property
    def variation_percent(self) -> float:
        return self._config.variation_percent

    def evaluate(self, t: float, draw: float | None = None) -> tuple[bool, float]:
        """Single reading at time offset t. See SignalEvaluator.evaluate."""
        return self._evaluator.evaluate(t, draw)

    async def stream(self, stop_event: asyncio.Event | None = None) -> AsyncIterator[Sample]:
        """
        Yield samples at the configured rate until stop_event is set.

        The stop event is checked before every tick and during every wait; a
        wait interrupted by it ends the stream without a trailing sample. When
        a tick runs late the next one follows immediately, so the average rate
        holds even with a slow consumer.
        """
        stop = stop_event if stop_event is not None else asyncio.Event()
        schedule = TickSchedule(self._config.sample_rate_hz, clock=self._clock)
        schedule.start()
        index = 0
        emitted = 0
        logger.debug("stream started: sample_rate_hz=%s", self._config.sample_rate_hz)
        try:
            while not stop.is_set():
                ok, value = self._evaluator.evaluate(schedule.elapsed())
                emitted += 1
                yield Sample(
                    timestamp=datetime.now(timezone.utc),
                    has_value=ok,
                    value=value if ok else 0.0,
                )

                remaining = schedule.remaining(index)
                index += 1
                if remaining > 0 and await _wait_for_stop(stop, remaining):
                    break
        finally:
            logger.debug("stream stopped after %d samples", emitted)
