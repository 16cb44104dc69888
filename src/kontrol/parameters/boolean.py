"""On/off parameter.

Definition field after the base ones: default (numeric, > 0.5 means on).
The current value is always exactly 0.0 or 1.0.
"""

from typing import List, Optional, Sequence

from ..constants import BOOL_THRESHOLD, MIDI_BOOL_SPLIT, RELATIVE_EPSILON
from ..values import ParamValue
from .base import Parameter, read_float
from .types import ParameterType

ON = ParamValue(1.0)
OFF = ParamValue(0.0)


def _to_switch(on: bool) -> ParamValue:
    return ON if on else OFF


class BooleanParameter(Parameter):
    """Switch parameter.

    Relative nudges toggle rather than accumulate: any negative nudge turns
    the switch off and any positive nudge turns it on, so an endless encoder
    behaves like a two-position switch.
    """
    KIND = ParameterType.BOOLEAN

    def __init__(self, kind: Optional[ParameterType] = None):
        super().__init__(kind)
        self._default = False

    @property
    def default(self) -> bool:
        return self._default

    @property
    def is_on(self) -> bool:
        return self.current.float_value() > BOOL_THRESHOLD

    def init(self, args: Sequence[ParamValue], pos: int = 0) -> int:
        pos = super().init(args, pos)
        default, pos = read_float(args, pos, "def", self.id)
        self._default = default > BOOL_THRESHOLD
        self.change(_to_switch(self._default))
        return pos

    def create_args(self, args: Optional[List[ParamValue]] = None) -> List[ParamValue]:
        args = super().create_args(args)
        args.append(_to_switch(self._default))
        return args

    def calc_float(self, f: float) -> ParamValue:
        return _to_switch(f > BOOL_THRESHOLD)

    def calc_midi(self, midi: int) -> ParamValue:
        return _to_switch(midi > MIDI_BOOL_SPLIT)

    def calc_relative(self, delta: float) -> ParamValue:
        if self.is_on and delta < -RELATIVE_EPSILON:
            return OFF
        if not self.is_on and delta > RELATIVE_EPSILON:
            return ON
        return self.current

    def change(self, candidate: ParamValue) -> bool:
        if not candidate.is_numeric():
            return False
        return super().change(_to_switch(candidate.float_value() > BOOL_THRESHOLD))

    def format_value(self, value: ParamValue) -> str:
        return "on" if value.float_value() > BOOL_THRESHOLD else "off"
