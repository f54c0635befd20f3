"""
Scale primitives - circle of fifths, scale derivation, degree names.

A scale is never stored: it is derived from a (tonic, mode) pair by walking
the major step pattern W W H W W W H, starting the walk at the mode's
rotation offset.
"""

from __future__ import annotations

from dataclasses import dataclass

from .mode import Mode
from .pitch import PITCH_CLASSES, Interval, PitchClass

_W = Interval.WHOLE_STEP
_H = Interval.HALF_STEP

# Major scale steps; every mode reads this pattern from its own offset
SCALE_STEPS: tuple[Interval, ...] = (_W, _W, _H, _W, _W, _W, _H)

ROMAN_NUMERALS: tuple[str, ...] = ("i", "ii", "iii", "iv", "v", "vi", "vii")


def circle_of_fifths() -> tuple[PitchClass, ...]:
    """
    Order the 12 pitch classes by ascending perfect fifths from C.

    Returns:
        C, G, D, A, E, B, F#, C#, G#, D#, A#, F
    """
    items: list[PitchClass] = []
    current = PITCH_CLASSES[0]
    for _ in range(len(PITCH_CLASSES)):
        items.append(current)
        current = current.transpose(Interval.PERFECT_FIFTH.semitones)
    return tuple(items)


def mode_steps(mode: Mode) -> tuple[Interval, ...]:
    """Get the step pattern of a mode (the major pattern rotated by its offset)."""
    offset = Mode(mode).index
    return SCALE_STEPS[offset:] + SCALE_STEPS[:offset]


def scale(tonic: PitchClass, mode: Mode) -> tuple[PitchClass, ...]:
    """
    Derive the 7 pitch classes of a mode built on a tonic.

    Args:
        tonic: The first degree of the scale
        mode: The mode to apply

    Returns:
        Pitch classes for degrees 1-7, the tonic first

    Raises:
        ValueError: If tonic or mode is outside its table
    """
    tonic = PitchClass(tonic)
    mode = Mode(mode)

    pitches: list[PitchClass] = []
    note_index = tonic.index
    for i in range(len(SCALE_STEPS)):
        pitches.append(PITCH_CLASSES[note_index])
        step = SCALE_STEPS[(i + mode.index) % len(SCALE_STEPS)]
        note_index = (note_index + step.semitones) % 12
    return tuple(pitches)


def degree_name(position: int) -> str:
    """
    Get the lower-case roman numeral for a 0-based scale degree position.

    degree_name(0) == "i", degree_name(6) == "vii"
    """
    if isinstance(position, bool) or not isinstance(position, int):
        raise ValueError(f"Degree position must be an int, got {position!r}")
    if not 0 <= position < len(ROMAN_NUMERALS):
        raise ValueError(f"Degree position must be 0-6, got {position}")
    return ROMAN_NUMERALS[position]


@dataclass(frozen=True)
class Key:
    """
    A tonic plus a mode.

    Examples:
        Key(PitchClass.C, Mode.IONIAN) = C Major / Ionian
        Key(PitchClass.A, Mode.AEOLIAN) = A N Minor / Aeolian
    """

    tonic: PitchClass
    mode: Mode

    def __post_init__(self) -> None:
        # Coerce plain ints, failing on anything outside the tables
        object.__setattr__(self, "tonic", PitchClass(self.tonic))
        object.__setattr__(self, "mode", Mode(self.mode))

    def pitches(self) -> tuple[PitchClass, ...]:
        """Get all pitch classes in this key."""
        return scale(self.tonic, self.mode)

    def degree_of(self, pitch: PitchClass) -> int | None:
        """
        Get the 0-based degree position of a pitch class.

        Returns None if the pitch is not in the scale.
        """
        for i, p in enumerate(self.pitches()):
            if p == pitch:
                return i
        return None

    def __str__(self) -> str:
        return f"{self.tonic.label} {self.mode.label}"

    def __repr__(self) -> str:
        return f"Key(PitchClass.{self.tonic.name}, Mode.{self.mode.name})"
