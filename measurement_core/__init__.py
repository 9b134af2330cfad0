"""
measurement-sim: periodic measurement simulator core.

Signal evaluation with bounded noise and a drift-corrected, cancellable
async sample stream. No transport; consumers pull samples via MeasurementSource.
"""

__version__ = "0.1.0"

from measurement_core.errors import (
    GeneratorConfigError,
    MeasurementError,
    MissingArgumentError,
    OutOfRangeError,
)
from measurement_core.sample import Sample
from measurement_core.config import GeneratorConfig
from measurement_core.evaluator import SignalEvaluator
from measurement_core.schedule import TickSchedule
from measurement_core.source import MeasurementSource
from measurement_core.waves import WaveKind
from measurement_core.generator import SimulatedMeasurementGenerator
from measurement_core.settings import StreamSettings

__all__ = [
    "GeneratorConfigError",
    "MeasurementError",
    "MissingArgumentError",
    "OutOfRangeError",
    "Sample",
    "GeneratorConfig",
    "SignalEvaluator",
    "TickSchedule",
    "MeasurementSource",
    "WaveKind",
    "SimulatedMeasurementGenerator",
    "StreamSettings",
]
