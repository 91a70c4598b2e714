"""
Core harmony primitives.

These are the invariants everything else composes on:
- IntervalData: Named intervals from a unison to an octave (the catalog)
- PitchClass: The 12 chromatic pitch classes (0-11)
- ChordType, ChordExtension, ChordAddition, ChordAlteration: Chord tags
- Chord: A chord description, resolved to intervals and notes
- ScaleType, Key: Step patterns and keys, for diatonic chords
"""

from chuk_mcp_harmony.core.chord import (
    CHORD_ADDITION_INTERVALS,
    CHORD_ALTERATION_INTERVALS,
    CHORD_TYPE_INTERVALS,
    DIATONIC_CHORD_TYPES,
    Chord,
    ChordAddition,
    ChordAlteration,
    ChordExtension,
    ChordType,
    intervals,
    midi_notes,
    notes,
    parse_symbol,
    set_defaults,
)
from chuk_mcp_harmony.core.interval import (
    INTERVAL_CATALOG,
    IntervalData,
    alternate_names,
    by_length,
    by_name,
    by_short_name,
    get_interval_data,
    tension,
    to_length,
    to_name,
    to_short_name,
)
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.core.scale import Key, ScaleType, diatonic_chords

__all__ = [
    # Interval catalog
    "INTERVAL_CATALOG",
    "IntervalData",
    "alternate_names",
    "by_length",
    "by_name",
    "by_short_name",
    "get_interval_data",
    "tension",
    "to_length",
    "to_name",
    "to_short_name",
    # Pitch
    "PitchClass",
    # Chord
    "CHORD_ADDITION_INTERVALS",
    "CHORD_ALTERATION_INTERVALS",
    "CHORD_TYPE_INTERVALS",
    "DIATONIC_CHORD_TYPES",
    "Chord",
    "ChordAddition",
    "ChordAlteration",
    "ChordExtension",
    "ChordType",
    "intervals",
    "midi_notes",
    "notes",
    "parse_symbol",
    "set_defaults",
    # Scale
    "Key",
    "ScaleType",
    "diatonic_chords",
]
