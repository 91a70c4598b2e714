"""
Tests for the pydantic chord models.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_harmony.core import Chord, ChordExtension, ChordType, PitchClass, by_length
from chuk_mcp_harmony.models import ChordAnalysis, ChordPreset, ChordSpec, IntervalInfo


class TestChordSpec:
    """Tests for ChordSpec."""

    def test_defaults(self) -> None:
        spec = ChordSpec()
        assert spec.root == "C"
        assert spec.chord_type == ChordType.MAJ
        assert spec.extension == ChordExtension.FIFTH
        assert spec.to_chord() == Chord()

    def test_alias(self) -> None:
        """type is accepted by alias and by field name."""
        assert ChordSpec(type="min").chord_type == ChordType.MIN
        assert ChordSpec(chord_type="dim").chord_type == ChordType.DIM

    def test_from_dict(self) -> None:
        spec = ChordSpec.model_validate(
            {"root": "Bb", "type": "dom", "extension": 7, "alterations": ["b9"], "slash": "D"}
        )
        chord = spec.to_chord()
        assert chord.root == PitchClass.As
        assert chord.slash == PitchClass.D
        assert chord.symbol(prefer_flats=True) == "Bb7b9/D"

    @pytest.mark.parametrize(
        "fields",
        [
            {"root": "H"},
            {"slash": "X#"},
            {"type": "minor"},
            {"extension": 6},
            {"additions": ["add8"]},
            {"alterations": ["#13"]},
        ],
    )
    def test_invalid(self, fields: dict) -> None:
        with pytest.raises(ValidationError):
            ChordSpec(**fields)

    def test_from_chord_drops_root_slash(self) -> None:
        spec = ChordSpec.from_chord(Chord(root="D", type="min"))
        assert spec.slash is None
        assert spec.root == "D"

    def test_from_chord_flats(self) -> None:
        spec = ChordSpec.from_chord(Chord(root="Eb", slash="Bb"), prefer_flats=True)
        assert spec.root == "Eb"
        assert spec.slash == "Bb"

    def test_round_trip_through_chord(self) -> None:
        chord = Chord.parse("F#m7b5/C")
        assert ChordSpec.from_chord(chord).to_chord() == chord

    def test_frozen(self) -> None:
        spec = ChordSpec()
        with pytest.raises(ValidationError):
            spec.root = "D"  # type: ignore[misc]


class TestChordAnalysis:
    """Tests for ChordAnalysis."""

    def test_analyze(self) -> None:
        analysis = ChordAnalysis.analyze(Chord.parse("Cmaj7"))
        assert analysis.symbol == "Cmaj7"
        assert [i.short_name for i in analysis.intervals] == ["P1", "M3", "P5", "M7"]
        assert analysis.notes == ["C", "E", "G", "B"]
        assert analysis.midi_notes == [60, 64, 67, 71]
        assert analysis.tension == 5

    def test_analyze_flats_and_octave(self) -> None:
        analysis = ChordAnalysis.analyze(Chord.parse("Ebm"), prefer_flats=True, octave=3)
        assert analysis.symbol == "Ebm"
        assert analysis.notes == ["Eb", "Gb", "Bb"]
        assert analysis.midi_notes == [51, 54, 58]

    def test_json_dump(self) -> None:
        data = ChordAnalysis.analyze(Chord(type="min")).model_dump(mode="json")
        assert data["chord"]["chord_type"] == "min"
        assert data["chord"]["extension"] == 5


class TestIntervalInfo:
    """Tests for IntervalInfo."""

    def test_from_data(self) -> None:
        info = IntervalInfo.from_data(by_length(6))
        assert info.name == "Tritone"
        assert info.alternate_names == ["Augmented Fourth", "Diminished Fifth"]
        assert info.tension == 5


class TestChordPreset:
    """Tests for ChordPreset."""

    def test_schema_alias(self) -> None:
        preset = ChordPreset.model_validate(
            {"schema": "chord-preset/v1", "name": "x", "chord": {"type": "min"}}
        )
        assert preset.schema_version == "chord-preset/v1"
        assert preset.chord.chord_type == ChordType.MIN

    def test_unknown_schema(self) -> None:
        with pytest.raises(ValidationError):
            ChordPreset.model_validate({"schema": "chord-preset/v2", "name": "x", "chord": {}})

    @pytest.mark.parametrize("name", ["", "  ", "a/b", "a\\b", ".", "..", ".hidden"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValidationError):
            ChordPreset(name=name, chord=ChordSpec())

    def test_yaml_dict(self) -> None:
        preset = ChordPreset(
            name="sad",
            tags=["minor"],
            chord=ChordSpec(root="A", chord_type="min", extension=7),
        )
        data = preset.to_yaml_dict()
        assert data["schema"] == "chord-preset/v1"
        assert data["name"] == "sad"
        assert data["chord"]["type"] == "min"
        assert data["chord"]["extension"] == 7
        assert "slash" not in data["chord"]
