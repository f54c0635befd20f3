"""
Mode primitives - the 7 diatonic modes.

A mode is a rotation of the major-scale step pattern. The member value is
the rotation offset, so Mode.IONIAN (0) reads the pattern from its start and
Mode.AEOLIAN (5) starts reading at the sixth step.
"""

from __future__ import annotations

from enum import IntEnum

_MODE_LABELS: list[str] = [
    "Major / Ionian",
    "Dorian",
    "Phrygian",
    "Lydian",
    "Mixolydian",
    "N Minor / Aeolian",
    "Locrian",
]

# Common names accepted by Mode.parse
_MODE_ALIASES: dict[str, int] = {
    "major": 0,
    "minor": 5,
    "natural_minor": 5,
    "n_minor": 5,
}


class Mode(IntEnum):
    """The 7 diatonic modes, valued by rotation offset (0-6)."""

    IONIAN = 0
    DORIAN = 1
    PHRYGIAN = 2
    LYDIAN = 3
    MIXOLYDIAN = 4
    AEOLIAN = 5
    LOCRIAN = 6

    @property
    def index(self) -> int:
        """Rotation offset into the major step pattern (0-6)."""
        return int(self.value)

    @property
    def label(self) -> str:
        """Display name, e.g. 'Major / Ionian'."""
        return _MODE_LABELS[self.value]

    @classmethod
    def parse(cls, name: str) -> Mode:
        """
        Parse a mode from a string.

        Accepts enum names ('dorian'), display names ('N Minor / Aeolian')
        and the aliases 'major' and 'minor'.
        """
        key = name.strip().lower().replace(" ", "_").replace("-", "_")

        if key in _MODE_ALIASES:
            return cls(_MODE_ALIASES[key])

        for member in cls:
            if member.name.lower() == key:
                return member

        for i, label in enumerate(_MODE_LABELS):
            if label.lower() == name.strip().lower():
                return cls(i)

        raise ValueError(f"Unknown mode: {name}")


# The fixed mode table, indexable by rotation offset
MODES: tuple[Mode, ...] = tuple(Mode)

# Display order for mode selection, brightest (most raised degrees) first
MODES_BY_BRIGHTNESS: tuple[Mode, ...] = (
    Mode.LYDIAN,
    Mode.IONIAN,
    Mode.MIXOLYDIAN,
    Mode.DORIAN,
    Mode.AEOLIAN,
    Mode.PHRYGIAN,
    Mode.LOCRIAN,
)
