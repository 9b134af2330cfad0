"""
Collect samples from a MeasurementSource and convert them to pandas.

The resulting DataFrame has a UTC DatetimeIndex named 'timestamp' and
columns has_value, value.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

import pandas as pd

from measurement_core.sample import Sample
from measurement_core.source import MeasurementSource

logger = logging.getLogger(__name__)

COLUMNS = ("has_value", "value")


async def take(
    source: MeasurementSource,
    count: int,
    *,
    stop_event: asyncio.Event | None = None,
) -> list[Sample]:
    """
    Pull up to count samples from a fresh stream, then close it.

    Fewer samples are returned if stop_event ends the stream first.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    samples: list[Sample] = []
    if count == 0:
        return samples
    it = source.stream(stop_event)
    try:
        async for sample in it:
            samples.append(sample)
            if len(samples) >= count:
                break
    finally:
        aclose = getattr(it, "aclose", None)
        if aclose is not None:
            await aclose()
    logger.debug("take: collected %d of %d samples", len(samples), count)
    return samples


async def record_for(source: MeasurementSource, duration_s: float) -> list[Sample]:
    """Collect samples until duration_s seconds have passed (stop event fired by the loop)."""
    if duration_s < 0:
        raise ValueError(f"duration_s must be >= 0, got {duration_s}")
    stop = asyncio.Event()
    handle = asyncio.get_running_loop().call_later(duration_s, stop.set)
    samples: list[Sample] = []
    try:
        async for sample in source.stream(stop):
            samples.append(sample)
    finally:
        handle.cancel()
    logger.info("record_for: %d samples in %.3fs", len(samples), duration_s)
    return samples


def samples_to_dataframe(
    samples: Sequence[Sample],
    *,
    sample_rate_hz: float | None = None,
) -> pd.DataFrame:
    """
    Build a DataFrame from samples, one row per sample in stream order.

    Parameters
    ----------
    samples : sequence of Sample
        Samples as yielded by a stream.
    sample_rate_hz : float, optional
        Stored in df.attrs['sample_rate_hz'] if provided.

    Returns
    -------
    pd.DataFrame
        UTC DatetimeIndex named 'timestamp'; columns has_value (bool), value (float).
    """
    index = pd.DatetimeIndex([s.timestamp for s in samples], name="timestamp")
    index = index.tz_convert("UTC") if index.tz is not None else index.tz_localize("UTC")
    df = pd.DataFrame(
        {
            "has_value": pd.Series([s.has_value for s in samples], index=index, dtype=bool),
            "value": pd.Series([float(s.value) for s in samples], index=index, dtype=float),
        },
        index=index,
    )
    if sample_rate_hz is not None:
        df.attrs["sample_rate_hz"] = float(sample_rate_hz)
    return df
