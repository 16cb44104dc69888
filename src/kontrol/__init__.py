"""kontrol: typed, bounded, serializable control parameters.

This package provides the parameter layer of an expressive instrument
controller: value kinds with shared update semantics (absolute, MIDI,
relative), display formatting, and a flat-list serialization contract.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
