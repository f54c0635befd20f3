"""
Pitch primitives - PitchClass and Interval.

PitchClass is the table of the 12 chromatic pitches (octave-independent).
The member value doubles as the pitch class index (0-11).
Interval is a distance between pitches in semitones.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Enharmonic equivalents share the same value (C# == Db == 1).
    Enum names use 's' for sharp (Cs, Ds, ...); the display name
    is always the sharp spelling, see `label`.
    """

    C = 0
    Cs = 1  # C#
    D = 2
    Ds = 3  # D#
    E = 4
    F = 5
    Fs = 6  # F#
    G = 7
    Gs = 8  # G#
    A = 9
    As = 10  # A#
    B = 11

    @property
    def index(self) -> int:
        """Position in the chromatic table (0-11)."""
        return int(self.value)

    @property
    def label(self) -> str:
        """Display name, sharp spelling."""
        return _SHARP_NAMES[self.value]

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'Db' or 'Cs'.

        The letter is case-insensitive ('f#' and 'bb' parse).
        """
        name = name.strip()
        name = name[:1].upper() + name[1:]

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


# The fixed chromatic table, indexable by position
PITCH_CLASSES: tuple[PitchClass, ...] = tuple(PitchClass)


class Interval:
    """
    Distance between pitches in semitones.

    Mode step patterns are sequences of these. Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    HALF_STEP: ClassVar[Interval]
    WHOLE_STEP: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        for name in ("HALF_STEP", "WHOLE_STEP", "PERFECT_FIFTH"):
            named = getattr(Interval, name, None)
            if isinstance(named, Interval) and named._semitones == self._semitones:
                return f"Interval.{name}"
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Step shorthand: H for a half step, W for a whole step."""
        if self._semitones == 1:
            return "H"
        if self._semitones == 2:
            return "W"
        return f"{self._semitones}st"


Interval.HALF_STEP = Interval(1)
Interval.WHOLE_STEP = Interval(2)
Interval.PERFECT_FIFTH = Interval(7)
