"""
Tests for core music primitives.

Tests cover:
- PitchClass and Interval (pitch.py)
- Mode (mode.py)
- circle_of_fifths, scale, degree_name, Key (scale.py)
"""

import pytest

from chuk_mcp_cof.core import (
    MODES,
    MODES_BY_BRIGHTNESS,
    PITCH_CLASSES,
    SCALE_STEPS,
    Interval,
    Key,
    Mode,
    PitchClass,
    circle_of_fifths,
    degree_name,
    mode_steps,
    scale,
)


def _steps(pitches: tuple[PitchClass, ...]) -> list[int]:
    """Semitone steps between consecutive pitches, wrapping to the first."""
    return [
        (pitches[(i + 1) % len(pitches)].index - pitches[i].index) % 12
        for i in range(len(pitches))
    ]


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_table_has_twelve_entries(self) -> None:
        """The table holds 12 pitch classes indexed by position."""
        assert len(PITCH_CLASSES) == 12
        assert [p.index for p in PITCH_CLASSES] == list(range(12))

    def test_labels_are_sharp_spellings(self) -> None:
        """Display names use sharps."""
        assert [p.label for p in PITCH_CLASSES] == [
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

    def test_spell_flats(self) -> None:
        """Flat spelling on request."""
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.As.spell(prefer_flats=True) == "Bb"

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.G.transpose(7) == PitchClass.D
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_parse(self) -> None:
        """Parse sharp, flat and enum spellings."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("F#") == PitchClass.Fs
        assert PitchClass.parse("Gb") == PitchClass.Fs
        assert PitchClass.parse("as") == PitchClass.As

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("c", PitchClass.C),
            ("f#", PitchClass.Fs),
            ("bb", PitchClass.As),
            ("gb", PitchClass.Fs),
            (" eb ", PitchClass.Ds),
        ],
    )
    def test_parse_lower_case_letter(self, name: str, expected: PitchClass) -> None:
        """Lower-case note letters parse with sharps and flats alike."""
        assert PitchClass.parse(name) == expected

    def test_parse_unknown(self) -> None:
        """Unknown names raise."""
        with pytest.raises(ValueError):
            PitchClass.parse("H")

    def test_out_of_range_index_fails(self) -> None:
        """Indices outside 0-11 are rejected, not wrapped."""
        with pytest.raises(ValueError):
            PitchClass(12)
        with pytest.raises(ValueError):
            PitchClass(-1)


class TestInterval:
    """Tests for Interval class."""

    def test_named_steps(self) -> None:
        """Named intervals have correct values."""
        assert Interval.HALF_STEP.semitones == 1
        assert Interval.WHOLE_STEP.semitones == 2
        assert Interval.PERFECT_FIFTH.semitones == 7

    def test_equality_and_hash(self) -> None:
        """Intervals compare and hash by semitones."""
        assert Interval(2) == Interval.WHOLE_STEP
        assert Interval.HALF_STEP != Interval.WHOLE_STEP
        assert len({Interval(2), Interval.WHOLE_STEP}) == 1

    def test_str(self) -> None:
        """Step shorthand."""
        assert str(Interval.WHOLE_STEP) == "W"
        assert str(Interval.HALF_STEP) == "H"
        assert str(Interval.PERFECT_FIFTH) == "7st"
        assert repr(Interval(2)) == "Interval.WHOLE_STEP"


class TestMode:
    """Tests for Mode enum."""

    def test_table_has_seven_entries(self) -> None:
        """The table holds 7 modes indexed by rotation offset."""
        assert len(MODES) == 7
        assert [m.index for m in MODES] == list(range(7))

    def test_labels(self) -> None:
        """Display names."""
        assert Mode.IONIAN.label == "Major / Ionian"
        assert Mode.AEOLIAN.label == "N Minor / Aeolian"
        assert Mode.LOCRIAN.label == "Locrian"

    def test_brightness_order(self) -> None:
        """Display order runs from Lydian to Locrian and covers every mode."""
        assert MODES_BY_BRIGHTNESS[0] == Mode.LYDIAN
        assert MODES_BY_BRIGHTNESS[1] == Mode.IONIAN
        assert MODES_BY_BRIGHTNESS[-1] == Mode.LOCRIAN
        assert sorted(MODES_BY_BRIGHTNESS) == list(MODES)

    def test_parse(self) -> None:
        """Parse enum names, display names and aliases."""
        assert Mode.parse("dorian") == Mode.DORIAN
        assert Mode.parse("Mixolydian") == Mode.MIXOLYDIAN
        assert Mode.parse("major") == Mode.IONIAN
        assert Mode.parse("minor") == Mode.AEOLIAN
        assert Mode.parse("N Minor / Aeolian") == Mode.AEOLIAN
        assert Mode.parse("Major / Ionian") == Mode.IONIAN

    def test_parse_unknown(self) -> None:
        """Unknown names raise."""
        with pytest.raises(ValueError):
            Mode.parse("blues")

    def test_out_of_range_index_fails(self) -> None:
        """Offsets outside 0-6 are rejected."""
        with pytest.raises(ValueError):
            Mode(7)


class TestCircleOfFifths:
    """Tests for circle_of_fifths."""

    def test_order(self) -> None:
        """Standard circle-of-fifths order from C."""
        assert [p.label for p in circle_of_fifths()] == [
            "C",
            "G",
            "D",
            "A",
            "E",
            "B",
            "F#",
            "C#",
            "G#",
            "D#",
            "A#",
            "F",
        ]

    def test_each_pitch_once(self) -> None:
        """Every pitch class appears exactly once."""
        fifths = circle_of_fifths()
        assert len(fifths) == 12
        assert set(fifths) == set(PITCH_CLASSES)

    def test_successive_fifths(self) -> None:
        """Each element is a fifth above the previous one."""
        fifths = circle_of_fifths()
        assert fifths[0].index == 0
        for prev, curr in zip(fifths, fifths[1:]):
            assert curr.index == (prev.index + 7) % 12


class TestScale:
    """Tests for scale derivation."""

    def test_c_major(self) -> None:
        """C major is the white keys."""
        result = scale(PitchClass.C, Mode.IONIAN)
        assert [p.index for p in result] == [0, 2, 4, 5, 7, 9, 11]
        assert [p.label for p in result] == ["C", "D", "E", "F", "G", "A", "B"]

    def test_a_natural_minor(self) -> None:
        """A aeolian is the relative minor of C."""
        result = scale(PitchClass.A, Mode.AEOLIAN)
        assert [p.index for p in result] == [9, 11, 0, 2, 4, 5, 7]
        assert _steps(result) == [2, 1, 2, 2, 1, 2, 2]

    def test_d_dorian(self) -> None:
        """D dorian shares C major's pitches."""
        result = scale(PitchClass.D, Mode.DORIAN)
        assert [p.label for p in result] == ["D", "E", "F", "G", "A", "B", "C"]

    def test_f_lydian_raises_fourth(self) -> None:
        """Lydian has a raised fourth degree."""
        result = scale(PitchClass.F, Mode.LYDIAN)
        assert result[3] == PitchClass.B

    @pytest.mark.parametrize("tonic", list(PitchClass))
    def test_major_pattern_for_every_tonic(self, tonic: PitchClass) -> None:
        """Ionian reproduces W W H W W W H from any tonic."""
        assert _steps(scale(tonic, Mode.IONIAN)) == [2, 2, 1, 2, 2, 2, 1]

    @pytest.mark.parametrize("mode", list(Mode))
    def test_all_tonics_for_mode(self, mode: Mode) -> None:
        """Every tonic/mode pair gives 7 distinct pitches following the rotated steps."""
        expected_steps = [step.semitones for step in mode_steps(mode)]
        for tonic in PITCH_CLASSES:
            result = scale(tonic, mode)
            assert len(result) == 7
            assert result[0] == tonic
            assert len(set(result)) == 7
            steps = _steps(result)
            assert steps == expected_steps
            assert all(step in (1, 2) for step in steps)
            assert (tonic.index + sum(steps)) % 12 == tonic.index

    def test_pure(self) -> None:
        """Same inputs give equal results."""
        assert scale(PitchClass.E, Mode.PHRYGIAN) == scale(PitchClass.E, Mode.PHRYGIAN)

    def test_accepts_plain_ints(self) -> None:
        """Plain indices are coerced to table members."""
        assert scale(9, 5) == scale(PitchClass.A, Mode.AEOLIAN)

    def test_rejects_out_of_range(self) -> None:
        """Out-of-table inputs fail fast."""
        with pytest.raises(ValueError):
            scale(12, Mode.IONIAN)
        with pytest.raises(ValueError):
            scale(PitchClass.C, 7)


class TestModeSteps:
    """Tests for mode_steps."""

    def test_ionian_is_major_pattern(self) -> None:
        """Offset 0 is the unrotated pattern."""
        assert mode_steps(Mode.IONIAN) == SCALE_STEPS

    def test_aeolian(self) -> None:
        """Aeolian reads the pattern from the sixth step."""
        assert [s.semitones for s in mode_steps(Mode.AEOLIAN)] == [2, 1, 2, 2, 1, 2, 2]

    def test_locrian(self) -> None:
        """Locrian starts with a half step."""
        assert [s.semitones for s in mode_steps(Mode.LOCRIAN)] == [1, 2, 2, 1, 2, 2, 2]


class TestDegreeName:
    """Tests for degree_name."""

    def test_all_degrees(self) -> None:
        """Roman numerals for positions 0-6."""
        assert [degree_name(i) for i in range(7)] == ["i", "ii", "iii", "iv", "v", "vi", "vii"]

    def test_endpoints(self) -> None:
        """First and last degree."""
        assert degree_name(0) == "i"
        assert degree_name(6) == "vii"

    @pytest.mark.parametrize("position", [-1, 7, 100])
    def test_out_of_range(self, position: int) -> None:
        """Positions outside 0-6 raise."""
        with pytest.raises(ValueError):
            degree_name(position)

    def test_rejects_non_int(self) -> None:
        """Bools and strings are not positions."""
        with pytest.raises(ValueError):
            degree_name(True)
        with pytest.raises(ValueError):
            degree_name("1")  # type: ignore[arg-type]


class TestKey:
    """Tests for Key class."""

    def test_pitches(self) -> None:
        """Key pitches match scale()."""
        key = Key(PitchClass.G, Mode.MIXOLYDIAN)
        assert key.pitches() == scale(PitchClass.G, Mode.MIXOLYDIAN)

    def test_degree_of(self) -> None:
        """Find 0-based degree positions."""
        key = Key(PitchClass.C, Mode.IONIAN)
        assert key.degree_of(PitchClass.C) == 0
        assert key.degree_of(PitchClass.G) == 4
        assert key.degree_of(PitchClass.Fs) is None

    def test_str(self) -> None:
        """Display name."""
        assert str(Key(PitchClass.A, Mode.AEOLIAN)) == "A N Minor / Aeolian"

    def test_coerces_ints(self) -> None:
        """Plain ints become table members."""
        key = Key(2, 1)
        assert key.tonic is PitchClass.D
        assert key.mode is Mode.DORIAN

    def test_invalid(self) -> None:
        """Out-of-range values raise."""
        with pytest.raises(ValueError):
            Key(PitchClass.C, 9)

    def test_frozen(self) -> None:
        """Keys are immutable and hashable."""
        key = Key(PitchClass.C, Mode.IONIAN)
        with pytest.raises(AttributeError):
            key.tonic = PitchClass.D  # type: ignore[misc]
        assert key == Key(PitchClass.C, Mode.IONIAN)
        assert len({key, Key(PitchClass.C, Mode.IONIAN)}) == 1
