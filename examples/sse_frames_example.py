"""
SSE framing example: what a transport does with a MeasurementSource.

One 'measurement' event per sample, samples without a value included
(value 0.0). Stops after a fixed number of events, as a closed connection would.
"""

import asyncio
import json

from measurement_core import Sample, SimulatedMeasurementGenerator


def to_sse_frame(sample: Sample, event_type: str = "measurement") -> str:
    """Format one sample as a Server-Sent Events frame."""
    return f"event: {event_type}\ndata: {json.dumps(sample.to_payload())}\n\n"


async def main() -> None:
    generator = SimulatedMeasurementGenerator.create_sine(
        sample_rate_hz=10.0,
        signal_frequency_hz=0.5,
        variation_percent=5.0,
    )
    stop = asyncio.Event()  # set by the transport when the client disconnects

    sent = 0
    async for sample in generator.stream(stop):
        print(to_sse_frame(sample), end="")
        sent += 1
        if sent >= 20:
            stop.set()


if __name__ == "__main__":
    asyncio.run(main())
