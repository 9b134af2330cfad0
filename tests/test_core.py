"""
Tests for measurement_core data types and settings: Sample, StreamSettings.
"""

from datetime import datetime, timezone

import pytest

from measurement_core import (
    GeneratorConfigError,
    MeasurementSource,
    OutOfRangeError,
    Sample,
    SimulatedMeasurementGenerator,
    StreamSettings,
)


# --- Sample ---


def test_sample_creation():
    ts = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
    s = Sample(timestamp=ts, has_value=True, value=1.5)
    assert s.timestamp == ts
    assert s.has_value
    assert s.value == 1.5


def test_sample_immutable():
    s = Sample(timestamp=datetime.now(timezone.utc), has_value=True, value=1.0)
    with pytest.raises(AttributeError):
        s.value = 2.0


def test_sample_without_value_is_zero():
    s = Sample(timestamp=datetime.now(timezone.utc), has_value=False, value=float("nan"))
    assert s.value == 0.0


def test_sample_naive_timestamp_treated_as_utc():
    s = Sample(timestamp=datetime(2024, 1, 1, 12, 0, 0), has_value=True, value=1.0)
    assert s.timestamp.tzinfo == timezone.utc


def test_sample_payload():
    ts = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
    assert Sample(timestamp=ts, has_value=True, value=0.25).to_payload() == {
        "timestamp": "2024-01-15T10:00:00+00:00",
        "hasValue": True,
        "value": 0.25,
    }
    assert Sample(timestamp=ts, has_value=False).to_payload()["value"] == 0.0


def test_generator_is_measurement_source():
    gen = SimulatedMeasurementGenerator(10.0, lambda _: 0.0)
    assert isinstance(gen, MeasurementSource)


# --- StreamSettings ---


def test_settings_defaults_from_empty_env():
    s = StreamSettings.from_env({})
    assert s == StreamSettings()
    assert s.sample_rate_hz == 20.0
    assert s.signal == "sine"
    assert s.signal_frequency_hz == 1.0
    assert s.variation_percent == 0.0
    assert s.seed is None


def test_settings_from_env_overrides():
    env = {
        "MEASUREMENT_SIM_SAMPLE_RATE_HZ": "50",
        "MEASUREMENT_SIM_SIGNAL": "Cosine",
        "MEASUREMENT_SIM_SIGNAL_FREQUENCY_HZ": "2.5",
        "MEASUREMENT_SIM_VARIATION_PERCENT": "10",
        "MEASUREMENT_SIM_SEED": "7",
    }
    s = StreamSettings.from_env(env)
    assert s == StreamSettings(
        sample_rate_hz=50.0,
        signal="cosine",
        signal_frequency_hz=2.5,
        variation_percent=10.0,
        seed=7,
    )


@pytest.mark.parametrize(
    "key, raw",
    [
        ("MEASUREMENT_SIM_SAMPLE_RATE_HZ", "fast"),
        ("MEASUREMENT_SIM_SEED", "1.5"),
        ("MEASUREMENT_SIM_SIGNAL", "square"),
    ],
)
def test_settings_from_env_rejects_bad_values(key, raw):
    with pytest.raises(GeneratorConfigError):
        StreamSettings.from_env({key: raw})


def test_settings_build_generator():
    gen = StreamSettings(signal="cosine", signal_frequency_hz=1.0).build_generator()
    assert gen.sample_rate_hz == 20.0
    assert gen.evaluate(0.0) == (True, pytest.approx(1.0))


def test_settings_build_generator_validates_ranges():
    with pytest.raises(OutOfRangeError):
        StreamSettings(sample_rate_hz=500.0).build_generator()


def test_settings_seed_makes_noise_reproducible():
    a = StreamSettings(signal="cosine", variation_percent=50.0, seed=3).build_generator()
    b = StreamSettings(signal="cosine", variation_percent=50.0, seed=3).build_generator()
    assert [a.evaluate(0.0) for _ in range(4)] == [b.evaluate(0.0) for _ in range(4)]
