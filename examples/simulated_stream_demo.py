"""
Simulated stream demo: build a generator from settings, record, report.

Demonstrates: StreamSettings (env overrides) -> generator -> record_for -> DataFrame -> report.
Try: MEASUREMENT_SIM_SIGNAL=cosine MEASUREMENT_SIM_VARIATION_PERCENT=10 python examples/simulated_stream_demo.py
"""

import asyncio
import logging

from measurement_core import StreamSettings
from stream_analysis import print_report, record_for, samples_to_dataframe


async def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    settings = StreamSettings.from_env()
    generator = settings.build_generator()

    # Record two seconds of samples
    samples = await record_for(generator, duration_s=2.0)

    df = samples_to_dataframe(samples, sample_rate_hz=generator.sample_rate_hz)
    print(df.head(10))
    print()

    print_report(samples, generator.sample_rate_hz)


if __name__ == "__main__":
    asyncio.run(main())
