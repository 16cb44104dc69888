"""Global constants for kontrol.

This module centralizes the numeric thresholds shared by the parameter
variants so that MIDI, boolean and formatting behavior stay consistent.
"""

# Highest 7-bit MIDI controller value
MIDI_MAX: int = 127

# MIDI values strictly above this switch a boolean parameter on
MIDI_BOOL_SPLIT: int = 63

# Normalized values strictly above this count as "on"
BOOL_THRESHOLD: float = 0.5

# Relative nudges smaller than this leave a boolean parameter unchanged
RELATIVE_EPSILON: float = 1e-4

# Fractional digits shown for continuous parameters
FLOAT_DISPLAY_PRECISION: int = 1
