"""Parameter factory.

Turns a flat definition into a live parameter:

    [type-tag, id, displayName, <variant fields...>]

Construction is fail-soft. An unknown tag or a missing field is logged and
yields a parameter of kind INVALID; nothing is raised to the caller.
"""

import logging
from typing import Dict, Sequence, Tuple, Type

from ..errors import MissingField, UnknownType
from ..values import ParamValue
from .base import Parameter
from .boolean import BooleanParameter
from .numeric import (
    FloatParameter,
    FrequencyParameter,
    IntParameter,
    PercentParameter,
    PitchParameter,
    TimeParameter,
)
from .types import ParameterType

logger = logging.getLogger(__name__)

_PARAMETER_CLASSES: Dict[str, Type[Parameter]] = {
    cls.KIND.value: cls
    for cls in (
        FloatParameter,
        IntParameter,
        BooleanParameter,
        PercentParameter,
        FrequencyParameter,
        TimeParameter,
        PitchParameter,
    )
}


def registered_tags() -> Tuple[str, ...]:
    """Type tags accepted by `create`, in declaration order."""
    return tuple(_PARAMETER_CLASSES)


def parameter_class(tag: str) -> Type[Parameter]:
    """Look up the parameter class for an exact type tag.

    Raises:
        UnknownType: If no concrete kind uses this tag
    """
    try:
        return _PARAMETER_CLASSES[tag]
    except KeyError:
        raise UnknownType(tag) from None


def create_parameter(tag: str) -> Parameter:
    """Instantiate an uninitialized parameter for `tag`.

    Unknown tags are logged and produce an INVALID parameter.
    """
    try:
        return parameter_class(tag)()
    except UnknownType as e:
        logger.warning(str(e))
        return Parameter(ParameterType.INVALID)


def create(args: Sequence[ParamValue]) -> Parameter:
    """Build and initialize a parameter from a flat definition.

    Args:
        args: Definition starting with the type tag

    Returns:
        The parameter. Its kind is INVALID when the tag is missing or
        unknown, or when a required field could not be read.
    """
    if not args or args[0].is_numeric():
        logger.warning("parameter definition has no type tag")
        return Parameter(ParameterType.INVALID)

    parameter = create_parameter(args[0].string_value())
    if not parameter.is_valid:
        return parameter

    try:
        parameter.init(args, 1)
    except MissingField as e:
        logger.error(f"error: {e}")
        parameter.invalidate()
    return parameter
