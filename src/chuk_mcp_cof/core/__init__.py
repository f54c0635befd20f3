"""
Core music primitives.

These are the fixed tables and pure functions everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- Mode: The 7 diatonic modes (rotation offsets 0-6)
- circle_of_fifths: Pitch classes ordered by ascending fifths
- scale: The 7 pitch classes of a tonic + mode
- degree_name: Roman numeral for a scale degree position
- Key: Tonic + mode pair
"""

from chuk_mcp_cof.core.mode import MODES, MODES_BY_BRIGHTNESS, Mode
from chuk_mcp_cof.core.pitch import PITCH_CLASSES, Interval, PitchClass
from chuk_mcp_cof.core.scale import (
    ROMAN_NUMERALS,
    SCALE_STEPS,
    Key,
    circle_of_fifths,
    degree_name,
    mode_steps,
    scale,
)

__all__ = [
    # Pitch
    "PitchClass",
    "PITCH_CLASSES",
    "Interval",
    # Mode
    "Mode",
    "MODES",
    "MODES_BY_BRIGHTNESS",
    # Scale
    "SCALE_STEPS",
    "ROMAN_NUMERALS",
    "circle_of_fifths",
    "mode_steps",
    "scale",
    "degree_name",
    "Key",
]
