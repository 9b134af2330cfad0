"""
Stream timing metrics: inter-sample spacing, jitter and accumulated drift.

Drift is total elapsed time between the first and last sample minus the ideal
(n - 1) / sample_rate_hz. A drift-corrected stream keeps it bounded however
long it runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from measurement_core.sample import Sample


@dataclass
class TimingMetrics:
    """Timing and value summary of a recorded stream."""

    count: int
    valid_count: int
    valid_fraction: float
    expected_interval_s: float
    mean_interval_s: float
    interval_std_s: float
    min_interval_s: float
    max_interval_s: float
    total_elapsed_s: float
    expected_elapsed_s: float
    drift_s: float
    value_mean: float
    value_min: float
    value_max: float


def compute_timing_metrics(samples: Sequence[Sample], sample_rate_hz: float) -> TimingMetrics:
    """
    Compute timing metrics from samples in stream order.

    Parameters
    ----------
    samples : sequence of Sample
        Samples from one stream, in the order they were yielded.
    sample_rate_hz : float
        Configured rate of the stream.

    Returns
    -------
    TimingMetrics
        Interval fields are 0.0 with fewer than two samples; value fields are
        0.0 when no sample has a value.
    """
    if sample_rate_hz <= 0:
        raise ValueError(f"sample_rate_hz must be > 0, got {sample_rate_hz}")
    expected_interval = 1.0 / sample_rate_hz
    n = len(samples)

    valid = np.array([s.value for s in samples if s.has_value], dtype=float)
    valid_count = int(valid.size)
    if valid_count:
        value_mean = float(np.mean(valid))
        value_min = float(np.min(valid))
        value_max = float(np.max(valid))
    else:
        value_mean = value_min = value_max = 0.0

    if n < 2:
        return TimingMetrics(
            count=n,
            valid_count=valid_count,
            valid_fraction=(valid_count / n) if n else 0.0,
            expected_interval_s=expected_interval,
            mean_interval_s=0.0,
            interval_std_s=0.0,
            min_interval_s=0.0,
            max_interval_s=0.0,
            total_elapsed_s=0.0,
            expected_elapsed_s=0.0,
            drift_s=0.0,
            value_mean=value_mean,
            value_min=value_min,
            value_max=value_max,
        )

    t0 = samples[0].timestamp
    offsets = np.array([(s.timestamp - t0).total_seconds() for s in samples], dtype=float)
    intervals = np.diff(offsets)
    total = float(offsets[-1])
    expected_total = (n - 1) * expected_interval

    return TimingMetrics(
        count=n,
        valid_count=valid_count,
        valid_fraction=valid_count / n,
        expected_interval_s=expected_interval,
        mean_interval_s=float(np.mean(intervals)),
        interval_std_s=float(np.std(intervals)),
        min_interval_s=float(np.min(intervals)),
        max_interval_s=float(np.max(intervals)),
        total_elapsed_s=total,
        expected_elapsed_s=expected_total,
        drift_s=total - expected_total,
        value_mean=value_mean,
        value_min=value_min,
        value_max=value_max,
    )
