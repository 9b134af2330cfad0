"""
Stream report: print a timing and value summary for recorded samples.
"""

from __future__ import annotations

from typing import Sequence

from measurement_core.sample import Sample
from stream_analysis.metrics import TimingMetrics, compute_timing_metrics


def print_report(samples: Sequence[Sample], sample_rate_hz: float) -> TimingMetrics:
    """
    Compute timing metrics and print a summary.

    Parameters
    ----------
    samples : sequence of Sample
        Output of recorder.take() or recorder.record_for().
    sample_rate_hz : float
        Configured rate of the stream.

    Returns
    -------
    TimingMetrics
        The computed metrics (e.g. for programmatic use).
    """
    m = compute_timing_metrics(samples, sample_rate_hz)
    print("--- Stream Report ---")
    print(f"Samples:         {m.count} ({m.valid_count} with value, {m.valid_fraction * 100.0:.1f}%)")
    print(f"Interval:        {m.mean_interval_s * 1000.0:.2f} ms (expected {m.expected_interval_s * 1000.0:.2f} ms)")
    print(f"Jitter (std):    {m.interval_std_s * 1000.0:.2f} ms")
    print(f"Min/max gap:     {m.min_interval_s * 1000.0:.2f} / {m.max_interval_s * 1000.0:.2f} ms")
    print(f"Elapsed:         {m.total_elapsed_s:.3f} s (expected {m.expected_elapsed_s:.3f} s)")
    print(f"Drift:           {m.drift_s * 1000.0:+.2f} ms")
    print(f"Value mean:      {m.value_mean:.4f} (min {m.value_min:.4f}, max {m.value_max:.4f})")
    print("---------------------")
    return m
