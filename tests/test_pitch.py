"""
Tests for pitch classes.
"""

import pytest

from chuk_mcp_harmony.core import PitchClass


class TestPitchClass:
    """Tests for PitchClass."""

    def test_values(self) -> None:
        assert PitchClass.C == 0
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.D.transpose(14) == PitchClass.E

    def test_interval_to(self) -> None:
        """Ascending interval, as a catalog record."""
        assert PitchClass.C.interval_to(PitchClass.G).short_name == "P5"
        assert PitchClass.G.interval_to(PitchClass.C).short_name == "P4"
        assert PitchClass.E.interval_to(PitchClass.E).name == "Perfect Unison"

    def test_midi(self) -> None:
        assert PitchClass.C.to_midi() == 60
        assert PitchClass.A.to_midi(4) == 69
        assert PitchClass.from_midi(61) == PitchClass.Cs

    def test_spell(self) -> None:
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.As.spell(prefer_flats=True) == "Bb"
        assert PitchClass.E.spell(prefer_flats=True) == "E"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("C", PitchClass.C),
            ("c", PitchClass.C),
            ("C#", PitchClass.Cs),
            ("Db", PitchClass.Cs),
            ("Cs", PitchClass.Cs),
            ("B♭", PitchClass.As),
            ("F♯", PitchClass.Fs),
            ("F##", PitchClass.G),
            ("Cb", PitchClass.B),
            ("E#", PitchClass.F),
            (" G ", PitchClass.G),
        ],
    )
    def test_parse(self, name: str, expected: PitchClass) -> None:
        assert PitchClass.parse(name) == expected

    @pytest.mark.parametrize("name", ["", "H", "C x", "Cz", "#C"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            PitchClass.parse(name)
