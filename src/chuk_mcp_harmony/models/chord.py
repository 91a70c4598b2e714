"""
Chord models - pydantic views of chords and intervals.

These are the shapes that cross the tool boundary: a ChordSpec comes in
(from MCP arguments or a preset file), a ChordAnalysis goes out.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_harmony.constants import DEFAULT_OCTAVE, PRESET_SCHEMA, SchemaVersion
from chuk_mcp_harmony.core.chord import (
    Chord,
    ChordAddition,
    ChordAlteration,
    ChordExtension,
    ChordType,
)
from chuk_mcp_harmony.core.interval import IntervalData
from chuk_mcp_harmony.core.pitch import PitchClass


def is_valid_preset_name(name: str) -> bool:
    """A preset name must be a plain file stem: no separators, no leading dot."""
    return bool(name) and not name.startswith(".") and "/" not in name and "\\" not in name


class ChordSpec(BaseModel):
    """
    A chord description as plain data.

    Notes are kept as spelled strings so a spec round-trips through JSON and
    YAML unchanged; they are validated against the note system on input.
    """

    root: str = Field("C", description="Root note (e.g., 'C', 'F#', 'Bb')")
    chord_type: ChordType = Field(ChordType.MAJ, alias="type", description="Chord type")
    extension: ChordExtension = Field(
        ChordExtension.FIFTH, description="Highest stacked degree (5, 7, 9, 11, 13)"
    )
    additions: list[ChordAddition] = Field(default_factory=list, description="Added degrees")
    alterations: list[ChordAlteration] = Field(
        default_factory=list, description="Raised or lowered degrees"
    )
    slash: str | None = Field(None, description="Bass note, defaults to the root")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("root", "slash")
    @classmethod
    def validate_note(cls, v: str | None) -> str | None:
        """Check the note parses as a pitch class."""
        if v is None:
            return v
        PitchClass.parse(v)
        return v.strip()

    def to_chord(self) -> Chord:
        """Resolve to a core Chord."""
        return Chord(
            root=self.root,
            type=self.chord_type,
            extension=self.extension,
            additions=tuple(self.additions),
            alterations=tuple(self.alterations),
            slash=self.slash,
        )

    @classmethod
    def from_chord(cls, chord: Chord, prefer_flats: bool = False) -> ChordSpec:
        """Describe a core Chord as data."""
        return cls(
            root=chord.root.spell(prefer_flats),
            chord_type=chord.type,
            extension=chord.extension,
            additions=list(chord.additions),
            alterations=list(chord.alterations),
            slash=chord.slash.spell(prefer_flats) if chord.slash != chord.root else None,
        )


class IntervalInfo(BaseModel):
    """Serializable view of a catalog interval."""

    length: int = Field(..., ge=0, le=12, description="Distance in semitones")
    name: str = Field(..., description="Canonical name")
    short_name: str = Field(..., description="Short code (P1, m3, TT, ...)")
    alternate_names: list[str] = Field(default_factory=list, description="Other names")
    tension: int = Field(..., ge=0, description="Dissonance score")

    model_config = {"frozen": True}

    @classmethod
    def from_data(cls, data: IntervalData) -> IntervalInfo:
        return cls(
            length=data.length,
            name=data.name,
            short_name=data.short_name,
            alternate_names=list(data.alternate_names),
            tension=data.tension,
        )


class ChordAnalysis(BaseModel):
    """Everything derived from one chord: symbol, intervals, notes."""

    symbol: str
    chord: ChordSpec
    intervals: list[IntervalInfo]
    notes: list[str]
    midi_notes: list[int]
    tension: int = Field(..., description="Sum of interval tensions")

    @classmethod
    def analyze(
        cls, chord: Chord, prefer_flats: bool = False, octave: int = DEFAULT_OCTAVE
    ) -> ChordAnalysis:
        """Run the chord engine and collect its results."""
        chord_intervals = chord.intervals()
        return cls(
            symbol=chord.symbol(prefer_flats),
            chord=ChordSpec.from_chord(chord, prefer_flats),
            intervals=[IntervalInfo.from_data(i) for i in chord_intervals],
            notes=[note.spell(prefer_flats) for note in chord.notes()],
            midi_notes=chord.midi_notes(octave),
            tension=sum(i.tension for i in chord_intervals),
        )


class ChordPreset(BaseModel):
    """
    A named chord stored as YAML.

    Presets are copyable, ownable chord descriptions: the library ships some,
    a project can add or override them.
    """

    schema_version: SchemaVersion = Field(PRESET_SCHEMA, alias="schema")
    name: str = Field(..., description="Preset name (file stem)")
    description: str = Field("", description="Human-readable description")
    tags: list[str] = Field(default_factory=list, description="Search tags (genre, mood)")
    chord: ChordSpec = Field(..., description="The chord")

    model_config = {"populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names become file names, keep them simple."""
        v = v.strip()
        if not is_valid_preset_name(v):
            raise ValueError(f"Invalid preset name: {v!r}")
        return v

    def to_yaml_dict(self) -> dict:
        """Plain dict for yaml.safe_dump."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
