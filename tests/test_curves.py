"""Tests for MIDI response curves."""

import numpy as np
import polars as pl
import pytest

from kontrol.curves import midi_curve, midi_positions, response_table
from kontrol.parameters import create
from kontrol.values import ParamValue
from kontrol.wire import decode_args


class TestMidiPositions:
    """Tests for midi_positions."""

    def test_full_resolution(self):
        """Test every controller position."""
        positions = midi_positions()
        assert len(positions) == 128
        assert positions[0] == 0
        assert positions[-1] == 127

    def test_step_includes_top(self):
        """Test that the top position is appended."""
        positions = midi_positions(8)
        assert positions.tolist() == list(range(0, 128, 8)) + [127]

    def test_step_hits_top(self):
        """Test no duplicate when the step lands on 127."""
        assert midi_positions(127).tolist() == [0, 127]

    def test_invalid_step(self):
        """Test that step must be positive."""
        with pytest.raises(ValueError, match="step must be >= 1"):
            midi_positions(0)


class TestMidiCurve:
    """Tests for midi_curve."""

    def test_float_curve(self, cutoff):
        """Test the curve spans the range monotonically."""
        curve = midi_curve(cutoff)
        assert curve[0] == 20.0
        assert curve[-1] == 20000.0
        assert np.all(np.diff(curve) >= 0)

    def test_curve_is_pure(self, cutoff):
        """Test the parameter is not modified."""
        midi_curve(cutoff)
        assert cutoff.current == ParamValue(1000.0)

    def test_boolean_curve(self, mute):
        """Test the boolean split."""
        curve = midi_curve(mute)
        assert curve[:64].sum() == 0.0
        assert np.all(curve[64:] == 1.0)

    def test_invalid_parameter(self):
        """Test that INVALID parameters have no curve."""
        p = create(decode_args(["bogus", "x", "X"]))
        with pytest.raises(ValueError, match="invalid"):
            midi_curve(p)


class TestResponseTable:
    """Tests for response_table."""

    def test_schema(self, cutoff):
        """Test columns and dtypes."""
        table = response_table(cutoff, step=8)
        assert table.columns == ["midi", "value", "display"]
        assert table.schema["midi"] == pl.Int64
        assert table.schema["value"] == pl.Float64
        assert table.height == 17

    def test_display_with_unit(self):
        """Test display text includes the unit."""
        p = create(decode_args(["freq", "cutoff", "Cutoff", 20.0, 20000.0, 1000.0]))
        table = response_table(p, step=127)
        assert table["display"].to_list() == ["20.0 Hz", "20000.0 Hz"]

    def test_int_display(self, steps):
        """Test whole-number display without a unit."""
        table = response_table(steps, step=127)
        assert table["display"].to_list() == ["0", "10"]
        assert table["value"].to_list() == [0.0, 10.0]

    def test_boolean_display(self, mute):
        """Test on/off text."""
        table = response_table(mute, step=64)
        assert table["midi"].to_list() == [0, 64, 127]
        assert table["display"].to_list() == ["off", "on", "on"]
