"""Tagged values carried by parameters and their flat definitions.

A ParamValue holds exactly one of a float or a text string. Parameters
store their current value as a ParamValue, and parameter definitions are
serialized as ordered lists of ParamValues.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

Primitive = Union[float, str]


class ValueType(str, Enum):
    """Discriminant of a ParamValue."""
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True)
class ParamValue:
    """Immutable float-or-text value.

    Integers are widened to float on construction. Booleans are rejected
    even though Python treats them as ints, so a stray True never turns
    into 1.0 silently.

    Attributes:
        value: The wrapped float or str
    """
    value: Primitive

    def __post_init__(self):
        """Normalize numbers to float and reject unsupported types."""
        if isinstance(self.value, bool):
            raise TypeError("ParamValue does not accept bool, use 1.0 or 0.0")
        if isinstance(self.value, (int, float)):
            object.__setattr__(self, 'value', float(self.value))
        elif not isinstance(self.value, str):
            raise TypeError(f"ParamValue requires float or str, got {type(self.value).__name__}")

    def type(self) -> ValueType:
        """Return which variant is active."""
        return ValueType.STRING if isinstance(self.value, str) else ValueType.FLOAT

    def is_numeric(self) -> bool:
        return self.type() is ValueType.FLOAT

    def float_value(self) -> float:
        """Return the numeric value.

        Raises:
            TypeError: If the value holds text
        """
        if not self.is_numeric():
            raise TypeError(f"ParamValue {self.value!r} is not numeric")
        return self.value

    def string_value(self) -> str:
        """Return the text value.

        Raises:
            TypeError: If the value holds a number
        """
        if self.is_numeric():
            raise TypeError(f"ParamValue {self.value!r} is not a string")
        return self.value

    def to_primitive(self) -> Primitive:
        """Unwrap to a plain float or str (for JSON and logging)."""
        return self.value

    def __repr__(self) -> str:
        return f"ParamValue({self.value!r})"
