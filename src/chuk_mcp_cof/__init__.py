"""
CHUK Circle-of-Fifths - diatonic music theory with a reactive selection store.

Pick a tonic and a mode; the store derives the 7-note scale and broadcasts
it to every registered observer.
"""

from chuk_mcp_cof.config import SelectionConfig, load_config
from chuk_mcp_cof.core import (
    MODES,
    MODES_BY_BRIGHTNESS,
    PITCH_CLASSES,
    Interval,
    Key,
    Mode,
    PitchClass,
    circle_of_fifths,
    degree_name,
    mode_steps,
    scale,
)
from chuk_mcp_cof.models import StateChange
from chuk_mcp_cof.selection import SelectionStore

__all__ = [
    "PitchClass",
    "PITCH_CLASSES",
    "Interval",
    "Mode",
    "MODES",
    "MODES_BY_BRIGHTNESS",
    "circle_of_fifths",
    "scale",
    "degree_name",
    "mode_steps",
    "Key",
    "StateChange",
    "SelectionStore",
    "SelectionConfig",
    "load_config",
]
