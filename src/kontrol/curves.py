"""MIDI response curves for parameters.

Shows what each position of a hardware controller does to a parameter,
using only the pure calc functions, so the parameter is never modified.
"""

import numpy as np
import polars as pl

from .constants import MIDI_MAX
from .parameters import Parameter


def midi_positions(step: int = 1) -> np.ndarray:
    """Controller positions from 0 to 127 spaced by `step`.

    The top position is always included so the curve reaches the end of
    the parameter's range.

    Raises:
        ValueError: If step < 1
    """
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")
    positions = np.arange(0, MIDI_MAX + 1, step, dtype=np.int64)
    if positions[-1] != MIDI_MAX:
        positions = np.append(positions, MIDI_MAX)
    return positions


def _require_valid(parameter: Parameter) -> None:
    if not parameter.is_valid:
        raise ValueError(f"Parameter '{parameter.id}' is invalid and has no response curve")


def midi_curve(parameter: Parameter, step: int = 1) -> np.ndarray:
    """Candidate values for each controller position.

    Args:
        parameter: A valid parameter
        step: Spacing between positions

    Returns:
        Float array aligned with `midi_positions(step)`
    """
    _require_valid(parameter)
    positions = midi_positions(step)
    return np.array(
        [parameter.calc_midi(int(m)).float_value() for m in positions],
        dtype=float,
    )


def response_table(parameter: Parameter, step: int = 1) -> pl.DataFrame:
    """Tabulate controller position, resulting value and its display text.

    Returns:
        DataFrame with columns midi (Int64), value (Float64), display (Utf8)
    """
    _require_valid(parameter)
    positions = midi_positions(step)
    candidates = [parameter.calc_midi(int(m)) for m in positions]
    unit = parameter.display_unit()
    display = [
        f"{parameter.format_value(c)} {unit}".rstrip() for c in candidates
    ]
    return pl.DataFrame(
        {
            "midi": positions,
            "value": [c.float_value() for c in candidates],
            "display": display,
        },
        schema={"midi": pl.Int64, "value": pl.Float64, "display": pl.Utf8},
    )
