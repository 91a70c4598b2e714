"""
Pitch primitives - PitchClass.

PitchClass represents the 12 chromatic pitches (octave-independent). It is the
note system chords are rooted on: chord roots and slash basses are pitch
classes, and chord notes are resolved by transposing the root.
"""

from __future__ import annotations

from enum import IntEnum

from .interval import IntervalData, by_length

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
_FLAT_NAMES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")
_NATURALS: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTALS: dict[str, int] = {"#": 1, "♯": 1, "b": -1, "♭": -1}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> IntervalData:
        """Get the interval from this pitch class to another (ascending)."""
        return by_length((other.value - self.value) % 12)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'Db', 'F##' or 'B♭'.

        Any number of accidentals may follow the letter; the result wraps
        around the octave (Cb == B, E# == F).
        """
        text = name.strip()
        if not text or text[0].upper() not in _NATURALS:
            raise ValueError(f"Unknown pitch class: {name}")

        value = _NATURALS[text[0].upper()]
        rest = text[1:]

        # Enum member spelling (Cs, Ds, ...)
        if rest == "s":
            return cls((value + 1) % 12)

        for char in rest:
            if char not in _ACCIDENTALS:
                raise ValueError(f"Unknown pitch class: {name}")
            value += _ACCIDENTALS[char]
        return cls(value % 12)
