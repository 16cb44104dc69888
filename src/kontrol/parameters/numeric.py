"""Bounded numeric parameters.

Definition fields after the base ones: min, max, default.

- FloatParameter: continuous value, displayed with one decimal
- IntParameter: whole-number value, truncated toward zero
- PercentParameter, FrequencyParameter, TimeParameter, PitchParameter:
  FloatParameter with a unit label

Every successful update leaves `current` inside [min, max]. The ordering
min <= default <= max is not checked; an out-of-range default is clamped
when it seeds the current value.
"""

import math
from typing import List, Optional, Sequence, Tuple

from ..constants import FLOAT_DISPLAY_PRECISION
from ..errors import MissingField
from ..values import ParamValue
from .base import Parameter, read_float
from .types import ParameterType


class BoundedParameter(Parameter):
    """Numeric parameter confined to [min, max].

    Normalized input f in [0, 1] maps linearly onto the range, and relative
    nudges are scaled by the range width.
    """

    def __init__(self, kind: Optional[ParameterType] = None):
        super().__init__(kind)
        self._min = 0.0
        self._max = 0.0
        self._default = 0.0

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    @property
    def default(self) -> float:
        return self._default

    def init(self, args: Sequence[ParamValue], pos: int = 0) -> int:
        pos = super().init(args, pos)
        self._min, pos = self._read_bound(args, pos, "min")
        self._max, pos = self._read_bound(args, pos, "max")
        self._default, pos = self._read_bound(args, pos, "def")
        self.change(ParamValue(self._default))
        return pos

    def _read_bound(self, args: Sequence[ParamValue], pos: int, field: str) -> Tuple[float, int]:
        # infinite or NaN bounds cannot be clamped against or truncated
        v, pos = read_float(args, pos, field, self.id)
        if not math.isfinite(v):
            raise MissingField(field, self.id)
        return self._quantize(v), pos

    def create_args(self, args: Optional[List[ParamValue]] = None) -> List[ParamValue]:
        args = super().create_args(args)
        args.append(ParamValue(self._min))
        args.append(ParamValue(self._max))
        args.append(ParamValue(self._default))
        return args

    def _quantize(self, v: float) -> float:
        return v

    def _clamp(self, v: float) -> float:
        # lower bound first: with min > max the result is max
        v = max(v, self._min)
        return min(v, self._max)

    def _constrain(self, v: float) -> ParamValue:
        if math.isnan(v):
            return self.current
        return ParamValue(self._quantize(self._clamp(v)))

    def calc_float(self, f: float) -> ParamValue:
        return self._constrain(f * (self._max - self._min) + self._min)

    def calc_relative(self, delta: float) -> ParamValue:
        v = self.current.float_value() + delta * (self._max - self._min)
        return self._constrain(v)

    def change(self, candidate: ParamValue) -> bool:
        """Clamp a numeric candidate into range and store it if different.

        Text and NaN candidates are rejected without changing anything.
        """
        if not candidate.is_numeric() or math.isnan(candidate.float_value()):
            return False
        return super().change(self._constrain(candidate.float_value()))


class FloatParameter(BoundedParameter):
    """Continuous parameter."""
    KIND = ParameterType.FLOAT

    def format_value(self, value: ParamValue) -> str:
        return f"{value.float_value():.{FLOAT_DISPLAY_PRECISION}f}"


class IntParameter(BoundedParameter):
    """Whole-number parameter.

    Bounds and default are truncated toward zero when read, so clamping
    before or after truncation gives the same result.
    """
    KIND = ParameterType.INT

    def _quantize(self, v: float) -> float:
        return float(int(v))

    def format_value(self, value: ParamValue) -> str:
        return f"{int(value.float_value())}"


class PercentParameter(FloatParameter):
    KIND = ParameterType.PERCENT
    unit = "%"


class FrequencyParameter(FloatParameter):
    KIND = ParameterType.FREQUENCY
    unit = "Hz"


class TimeParameter(FloatParameter):
    KIND = ParameterType.TIME
    unit = "mSec"


class PitchParameter(FloatParameter):
    KIND = ParameterType.PITCH
    unit = "st"
