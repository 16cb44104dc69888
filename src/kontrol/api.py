"""Public API for kontrol.

This module provides the complete public API for the kontrol parameter
core, including values, parameter variants, the factory, wire helpers
and response curves.
"""

# Values
from .values import ParamValue, ValueType

# Parameters
from .parameters import (
    ParameterType,
    Parameter,
    BoundedParameter,
    FloatParameter,
    IntParameter,
    PercentParameter,
    FrequencyParameter,
    TimeParameter,
    PitchParameter,
    BooleanParameter,
    # Factory
    create,
    create_parameter,
    parameter_class,
    registered_tags,
)

# Errors
from .errors import KontrolError, MissingField, UnknownType

# Wire
from .wire import (
    encode_args,
    decode_args,
    args_to_json,
    args_from_json,
    parameter_from_json,
)

# Response curves
from .curves import midi_positions, midi_curve, response_table

# Constants
from .constants import MIDI_MAX

# Version
try:
    from importlib.metadata import version
    __version__ = version("kontrol-parameters")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Values
    "ParamValue",
    "ValueType",

    # Parameters
    "ParameterType",
    "Parameter",
    "BoundedParameter",
    "FloatParameter",
    "IntParameter",
    "PercentParameter",
    "FrequencyParameter",
    "TimeParameter",
    "PitchParameter",
    "BooleanParameter",

    # Factory
    "create",
    "create_parameter",
    "parameter_class",
    "registered_tags",

    # Errors
    "KontrolError",
    "MissingField",
    "UnknownType",

    # Wire
    "encode_args",
    "decode_args",
    "args_to_json",
    "args_from_json",
    "parameter_from_json",

    # Response curves
    "midi_positions",
    "midi_curve",
    "response_table",

    # Constants
    "MIDI_MAX",

    # Version
    "__version__",
]
