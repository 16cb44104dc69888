"""Parameter system for kontrol.

This module provides the parameter kinds, the variant classes sharing the
update/format/serialize contract, and the factory that builds them from
flat value lists.
"""

from .types import ParameterType
from .base import Parameter
from .numeric import (
    BoundedParameter,
    FloatParameter,
    IntParameter,
    PercentParameter,
    FrequencyParameter,
    TimeParameter,
    PitchParameter,
)
from .boolean import BooleanParameter
from .factory import (
    create,
    create_parameter,
    parameter_class,
    registered_tags,
)

__all__ = [
    # Kinds
    "ParameterType",
    # Variants
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
]
