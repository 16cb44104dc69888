"""Base parameter contract.

A parameter has an identity, a display name, a kind and a current value.
Definitions are read from and written to flat lists of ParamValue:

    [type-tag, id, displayName, <variant fields...>]

Variants extend `init` and `create_args` symmetrically: each consumes its
own fields after the base ones, in the same order it writes them back.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..constants import MIDI_MAX
from ..errors import MissingField
from ..values import ParamValue
from .types import ParameterType

logger = logging.getLogger(__name__)


def read_string(args: Sequence[ParamValue], pos: int, field: str,
                parameter_id: Optional[str] = None) -> Tuple[str, int]:
    """Read a text field at `pos` and return it with the advanced position.

    Raises:
        MissingField: If the list is exhausted or the value is numeric
    """
    if pos < len(args) and not args[pos].is_numeric():
        return args[pos].string_value(), pos + 1
    raise MissingField(field, parameter_id)


def read_float(args: Sequence[ParamValue], pos: int, field: str,
               parameter_id: Optional[str] = None) -> Tuple[float, int]:
    """Read a numeric field at `pos` and return it with the advanced position.

    Raises:
        MissingField: If the list is exhausted or the value is text
    """
    if pos < len(args) and args[pos].is_numeric():
        return args[pos].float_value(), pos + 1
    raise MissingField(field, parameter_id)


class Parameter:
    """A named control value owned by an instrument controller.

    The calc_* methods are pure: they compute a candidate value from a
    normalized float, a MIDI controller value or a relative nudge, and
    leave `current` untouched. `change` is the only mutating operation.

    Parameters do no locking. An owner sharing one between threads must
    serialize calls to `change`; unsynchronized concurrent changes leave
    it undefined which update wins.

    Instances are normally built with `Parameter.create`, which never
    raises for malformed input; check `is_valid` on the result.
    """

    KIND: ParameterType = ParameterType.INVALID
    unit: str = ""

    def __init__(self, kind: Optional[ParameterType] = None):
        self._kind = ParameterType(kind if kind is not None else self.KIND)
        self._id = ""
        self._display_name = ""
        self._current = ParamValue(0.0)

    @property
    def id(self) -> str:
        return self._id

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def kind(self) -> ParameterType:
        return self._kind

    @property
    def current(self) -> ParamValue:
        return self._current

    @property
    def is_valid(self) -> bool:
        return self._kind is not ParameterType.INVALID

    def invalidate(self) -> None:
        """Downgrade to the Invalid kind after a failed initialization."""
        self._kind = ParameterType.INVALID

    @staticmethod
    def create(args: Sequence[ParamValue]) -> "Parameter":
        """Build a parameter from a flat definition (see factory.create)."""
        from .factory import create
        return create(args)

    def init(self, args: Sequence[ParamValue], pos: int = 0) -> int:
        """Consume id and display name starting at `pos`.

        Args:
            args: Flat definition
            pos: Index of the id field

        Returns:
            Position just past the consumed fields

        Raises:
            MissingField: If id or display name is absent or not text
        """
        self._id, pos = read_string(args, pos, "id")
        self._display_name, pos = read_string(args, pos, "displayName", self._id)
        return pos

    def create_args(self, args: Optional[List[ParamValue]] = None) -> List[ParamValue]:
        """Append the serialized definition to `args` and return it.

        Args:
            args: List to extend; a new list is used when omitted

        Returns:
            The extended list
        """
        if args is None:
            args = []
        args.append(ParamValue(self._kind.value))
        args.append(ParamValue(self._id))
        args.append(ParamValue(self._display_name))
        return args

    def calc_float(self, f: float) -> ParamValue:
        """Candidate value for normalized input `f`."""
        if self._current.is_numeric():
            return ParamValue(f)
        return self._current

    def calc_midi(self, midi: int) -> ParamValue:
        """Candidate value for a MIDI controller value in [0, 127]."""
        return self.calc_float(midi / MIDI_MAX)

    def calc_relative(self, delta: float) -> ParamValue:
        """Candidate value after nudging the current value by `delta`."""
        if self._current.is_numeric():
            return self.calc_float(self._current.float_value() + delta)
        return self._current

    def change(self, candidate: ParamValue) -> bool:
        """Store `candidate` if it differs from the current value.

        Returns:
            True if the current value changed
        """
        if self._current != candidate:
            self._current = candidate
            return True
        return False

    def format_value(self, value: ParamValue) -> str:
        """Format `value` the way this parameter displays it."""
        return ""

    def display_value(self) -> str:
        return self.format_value(self._current)

    def display_unit(self) -> str:
        return self.unit

    def dump(self) -> str:
        """Log the id and current value, returning the logged line."""
        if self._current.is_numeric():
            line = f"{self._id} :   {self._current.float_value():f} [F],"
        else:
            line = f"{self._id} : {self._current.string_value()} [S],"
        logger.info(line)
        return line

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(kind={self._kind.value!r}, id={self._id!r}, "
                f"current={self._current.to_primitive()!r})")
