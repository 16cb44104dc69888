"""Exceptions raised while building parameters from flat value lists.

Both concrete errors are handled by the parameter factory: a malformed
definition produces an Invalid-kind parameter instead of an exception.
"""

from typing import Optional


class KontrolError(Exception):
    """Base class for kontrol errors."""


class MissingField(KontrolError):
    """A required positional field was absent or had the wrong value type.

    Attributes:
        field: Name of the field that could not be read ("id", "displayName",
            "min", "max" or "def")
        parameter_id: Id of the parameter being initialized, if already known
    """

    def __init__(self, field: str, parameter_id: Optional[str] = None):
        self.field = field
        self.parameter_id = parameter_id
        super().__init__(f"{parameter_id or 'null'}: missing {field}")


class UnknownType(KontrolError):
    """The type tag of a definition matched no parameter kind."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"parameter type not found: {tag}")
