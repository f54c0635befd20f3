"""
Constants for the selection system.

No magic strings - standard messages and defaults live here.
"""

from chuk_mcp_cof.core.mode import Mode
from chuk_mcp_cof.core.pitch import PitchClass

# Selection used when no config overrides it
DEFAULT_TONIC: PitchClass = PitchClass.C
DEFAULT_MODE: Mode = Mode.IONIAN


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_TONIC = "Unknown tonic: '{tonic}'. Expected a note name like 'C', 'F#' or 'Bb'."
    UNKNOWN_MODE = "Unknown mode: '{mode}'. Expected a mode name like 'dorian' or 'minor'."
    INVALID_CONFIG = "Invalid config file: {path}. Expected a YAML mapping."


class SuccessMessages:
    """Standardized success messages."""

    TONIC_CHANGED = "Changed tonic to {tonic}."
    MODE_CHANGED = "Changed mode to {mode}."
