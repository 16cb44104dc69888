"""Tests for the JSON wire format of parameter definitions."""

import json

import pytest

from kontrol.parameters import ParameterType
from kontrol.values import ParamValue
from kontrol.wire import (
    args_from_json,
    args_to_json,
    decode_args,
    encode_args,
    parameter_from_json,
)

class TestEncodeDecode:
    """Tests for primitive conversion."""

    def test_encode(self):
        """Test unwrapping to primitives."""
        assert encode_args(decode_args(["int", "n", "N", 0, 10, 5])) == ["int", "n", "N", 0.0, 10.0, 5.0]

    def test_decode(self):
        """Test wrapping primitives, widening ints."""
        values = decode_args(["pct", "mix", "Mix", 0, 100.0, 50])
        assert values == [
            ParamValue("pct"), ParamValue("mix"), ParamValue("Mix"),
            ParamValue(0.0), ParamValue(100.0), ParamValue(50.0),
        ]
        assert isinstance(values[3].value, float)

    @pytest.mark.parametrize("item", [True, None, [1.0], {"a": 1}])
    def test_decode_rejects(self, item):
        """Test that only numbers and strings are accepted."""
        with pytest.raises(ValueError, match="Item 1 must be a number or string"):
            decode_args(["float", item])


class TestJson:
    """Tests for JSON text."""

    def test_to_json(self, cutoff):
        """Test serializing a live parameter."""
        text = args_to_json(cutoff.create_args())
        assert json.loads(text) == ["float", "cutoff", "Cutoff", 20.0, 20000.0, 1000.0]

    def test_from_json(self):
        """Test parsing a definition."""
        values = args_from_json('["bool", "mute", "Mute", 1]')
        assert values == decode_args(["bool", "mute", "Mute", 1.0])
        assert all(isinstance(v, ParamValue) for v in values)

    def test_from_json_not_array(self):
        """Test that objects are rejected."""
        with pytest.raises(ValueError, match="must be a JSON array"):
            args_from_json('{"type": "float"}')

    def test_from_json_malformed(self):
        """Test that broken JSON is reported as ValueError."""
        with pytest.raises(ValueError, match="Invalid JSON definition"):
            args_from_json('["float", ')

    def test_parameter_from_json(self, definitions):
        """Test building every kind through JSON."""
        for args in definitions:
            p = parameter_from_json(args_to_json(args))
            assert p.is_valid
            assert p.create_args() == args

    def test_parameter_from_json_invalid(self):
        """Test that a bad definition still yields a parameter."""
        p = parameter_from_json('["freq", "cutoff"]')
        assert p.kind is ParameterType.INVALID

    @pytest.mark.parametrize("text", [
        '["int", "a", "A", -Infinity, 10, 5]',
        '["int", "a", "A", 0, Infinity, 5]',
        '["float", "a", "A", 0, 10, NaN]',
    ])
    def test_parameter_from_json_non_finite(self, text):
        """Test that JSON Infinity and NaN bounds yield an INVALID parameter."""
        p = parameter_from_json(text)
        assert p.kind is ParameterType.INVALID
