"""Shared fixtures for parameter tests."""

import pytest

from kontrol.parameters import create
from kontrol.wire import decode_args


@pytest.fixture
def cutoff():
    """Continuous filter cutoff, 20..20000 starting at 1000."""
    return create(decode_args(["float", "cutoff", "Cutoff", 20.0, 20000.0, 1000.0]))


@pytest.fixture
def steps():
    """Whole-number parameter, 0..10 starting at 5."""
    return create(decode_args(["int", "steps", "Steps", 0.0, 10.0, 5.0]))


@pytest.fixture
def mute():
    """Switch parameter starting off."""
    return create(decode_args(["bool", "mute", "Mute", 0.0]))


@pytest.fixture
def definitions():
    """One valid definition per concrete kind."""
    return [
        decode_args(["float", "cutoff", "Cutoff", 20.0, 20000.0, 1000.0]),
        decode_args(["int", "steps", "Steps", 0.0, 10.0, 5.0]),
        decode_args(["bool", "mute", "Mute", 1.0]),
        decode_args(["pct", "mix", "Mix", 0.0, 100.0, 50.0]),
        decode_args(["freq", "rate", "Rate", 0.1, 20.0, 2.0]),
        decode_args(["time", "decay", "Decay", 1.0, 5000.0, 250.0]),
        decode_args(["pitch", "transpose", "Transpose", -24.0, 24.0, 0.0]),
    ]
