"""Parameter kinds.

The set of kinds is closed: each concrete kind has exactly one parameter
class registered in the factory, and the enum value doubles as the type
tag written at the head of a serialized definition.
"""

from enum import Enum


class ParameterType(str, Enum):
    """Kind of a parameter, valued by its serialized type tag."""
    INVALID = "invalid"
    FLOAT = "float"
    INT = "int"
    BOOLEAN = "bool"
    PERCENT = "pct"
    FREQUENCY = "freq"
    TIME = "time"
    PITCH = "pitch"

    def describe(self) -> str:
        """Human-readable description of this kind."""
        descriptions = {
            self.INVALID: "Invalid (failed to build)",
            self.FLOAT: "Continuous value",
            self.INT: "Whole number",
            self.BOOLEAN: "On/off switch",
            self.PERCENT: "Percentage",
            self.FREQUENCY: "Frequency",
            self.TIME: "Time",
            self.PITCH: "Pitch offset",
        }
        return descriptions.get(self, "Unknown kind")
