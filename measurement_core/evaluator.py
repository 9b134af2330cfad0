"""
Signal evaluator: one signal reading per tick, with optional bounded variation.

Pure apart from the randomness draw. A signal function that raises or returns
a non-finite number, or a variation that overflows, collapses to (False, 0.0);
nothing is propagated to the caller.
"""

from __future__ import annotations

import math

import numpy as np

from measurement_core.config import VARIATION_RANGE_PERCENT, SignalFunction, check_range
from measurement_core.errors import MissingArgumentError


class SignalEvaluator:
    """
    Evaluates signal_fn(t) and applies symmetric multiplicative noise of
    +/- variation_percent. Owns its random generator; pass rng or seed for
    reproducible draws.
    """

    def __init__(
        self,
        signal_fn: SignalFunction,
        variation_percent: float = 0.0,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if signal_fn is None:
            raise MissingArgumentError("signal_fn")
        self._signal_fn = signal_fn
        self._variation_percent = check_range("variation_percent", variation_percent, VARIATION_RANGE_PERCENT)
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @property
    def signal_fn(self) -> SignalFunction:
        return self._signal_fn

    @property
    def variation_percent(self) -> float:
        return self._variation_percent

    def evaluate(self, t: float, draw: float | None = None) -> tuple[bool, float]:
        """
        Return (ok, value) for time offset t in seconds.

        draw replaces the uniform [0, 1) random draw (deterministic tests).
        With zero variation no draw is taken and the raw value is returned as is.
        """
        try:
            raw = float(self._signal_fn(t))
        except Exception:  # noqa: BLE001
            return False, 0.0

        if not math.isfinite(raw):
            return False, 0.0

        if self._variation_percent == 0.0:
            return True, raw

        u = draw if draw is not None else float(self._rng.random())
        r = (u * 2.0 - 1.0) * (self._variation_percent / 100.0)
        varied = raw * (1.0 + r)

        if not math.isfinite(varied):
            return False, 0.0
        return True, varied
