"""JSON rendering of flat parameter definitions.

A definition travels as a JSON array of numbers and strings, e.g.

    ["freq", "cutoff", "Cutoff", 20.0, 20000.0, 1000.0]

which decodes to a list of ParamValue ready for the factory.
"""

import json
from typing import Any, List, Sequence

from .parameters import Parameter, create
from .values import ParamValue, Primitive


def encode_args(args: Sequence[ParamValue]) -> List[Primitive]:
    """Unwrap a definition into JSON-serializable primitives."""
    return [value.to_primitive() for value in args]


def decode_args(raw: Sequence[Any]) -> List[ParamValue]:
    """Wrap primitives into ParamValues.

    Raises:
        ValueError: If an item is not a number or a string
    """
    values = []
    for i, item in enumerate(raw):
        if isinstance(item, bool) or not isinstance(item, (int, float, str)):
            raise ValueError(f"Item {i} must be a number or string, got {type(item).__name__}: {item!r}")
        values.append(ParamValue(item))
    return values


def args_to_json(args: Sequence[ParamValue]) -> str:
    """Serialize a definition to a JSON array string."""
    return json.dumps(encode_args(args))


def args_from_json(text: str) -> List[ParamValue]:
    """Parse a JSON array string into a definition.

    Raises:
        ValueError: If the text is not valid JSON, not an array, or holds
            items other than numbers and strings
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON definition: {e}") from e
    if not isinstance(raw, list):
        raise ValueError(f"Definition must be a JSON array, got {type(raw).__name__}")
    return decode_args(raw)


def parameter_from_json(text: str) -> Parameter:
    """Decode a JSON definition and build the parameter from it."""
    return create(args_from_json(text))
