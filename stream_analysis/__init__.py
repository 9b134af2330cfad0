"""
Consumer-side tooling for measurement streams.

Collects samples from any MeasurementSource, converts them to pandas and
summarizes timing (interval, jitter, drift).
"""

from stream_analysis.recorder import record_for, samples_to_dataframe, take
from stream_analysis.metrics import TimingMetrics, compute_timing_metrics
from stream_analysis.report import print_report

__all__ = [
    "take",
    "record_for",
    "samples_to_dataframe",
    "TimingMetrics",
    "compute_timing_metrics",
    "print_report",
]
