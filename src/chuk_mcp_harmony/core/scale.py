"""
Scale primitives - ScaleType, Key, diatonic chords.

Scales are step patterns from a root. Keys are scale types applied to a root pitch.
Diatonic chords stack thirds on each scale step and name the result with the
chord types of the chord engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.errors import InvalidChordError

from .chord import Chord, ChordExtension, ChordType
from .pitch import PitchClass

_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")

# Offsets of the major scale, the reference for flat/sharp numeral prefixes
_MAJOR_OFFSETS = (0, 2, 4, 5, 7, 9, 11)


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its step pattern.

    The steps are semitones from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    steps: tuple[int, ...]
    name: str = ""

    # Common scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    PHRYGIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    LOCRIAN: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        if len(self.steps) != 7:
            raise ValueError(f"Scale must have 7 steps, got {len(self.steps)}")
        total = sum(self.steps)
        if total != 12:
            raise ValueError(f"Scale steps must sum to 12 semitones, got {total}")

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitones from the root to each of the 7 degrees."""
        result = [0]
        for step in self.steps[:-1]:
            result.append(result[-1] + step)
        return tuple(result)

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes in this scale starting from root.

        Returns 7 pitches (the octave is not included).
        """
        return [root.transpose(offset) for offset in self.offsets]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.steps})"

    def __repr__(self) -> str:
        if self.name:
            return f"ScaleType.{self.name.upper().replace(' ', '_')}"
        return f"ScaleType({self.steps!r})"


ScaleType.MAJOR = ScaleType((2, 2, 1, 2, 2, 2, 1), "major")
ScaleType.NATURAL_MINOR = ScaleType((2, 1, 2, 2, 1, 2, 2), "natural minor")
ScaleType.HARMONIC_MINOR = ScaleType((2, 1, 2, 2, 1, 3, 1), "harmonic minor")
ScaleType.MELODIC_MINOR = ScaleType((2, 1, 2, 2, 2, 2, 1), "melodic minor")
ScaleType.DORIAN = ScaleType((2, 1, 2, 2, 2, 1, 2), "dorian")
ScaleType.PHRYGIAN = ScaleType((1, 2, 2, 2, 1, 2, 2), "phrygian")
ScaleType.LYDIAN = ScaleType((2, 2, 2, 1, 2, 2, 1), "lydian")
ScaleType.MIXOLYDIAN = ScaleType((2, 2, 1, 2, 2, 1, 2), "mixolydian")
ScaleType.LOCRIAN = ScaleType((1, 2, 2, 1, 2, 2, 2), "locrian")

_SCALE_NAMES: dict[str, ScaleType] = {
    "major": ScaleType.MAJOR,
    "minor": ScaleType.NATURAL_MINOR,
    "natural_minor": ScaleType.NATURAL_MINOR,
    "harmonic_minor": ScaleType.HARMONIC_MINOR,
    "melodic_minor": ScaleType.MELODIC_MINOR,
    "dorian": ScaleType.DORIAN,
    "phrygian": ScaleType.PHRYGIAN,
    "lydian": ScaleType.LYDIAN,
    "mixolydian": ScaleType.MIXOLYDIAN,
    "locrian": ScaleType.LOCRIAN,
}


@dataclass(frozen=True)
class Key:
    """
    A key is a root pitch class plus a scale type.

    Examples:
        Key(PitchClass.C, ScaleType.MAJOR) = C major
        Key(PitchClass.D, ScaleType.NATURAL_MINOR) = D minor
    """

    root: PitchClass
    scale: ScaleType

    def degree_to_pitch(self, degree: int) -> PitchClass:
        """Resolve a scale degree (1-7) to a pitch class."""
        if not 1 <= degree <= 7:
            raise ValueError(f"Degree must be 1-7, got {degree}")
        return self.root.transpose(self.scale.offsets[degree - 1])

    def get_pitches(self) -> list[PitchClass]:
        """Get all pitch classes in this key."""
        return self.scale.get_pitches(self.root)

    def __str__(self) -> str:
        scale_suffix = "minor" if self.scale == ScaleType.NATURAL_MINOR else str(self.scale)
        return f"{self.root.spell()} {scale_suffix}"

    def __repr__(self) -> str:
        return f"Key({self.root!r}, {self.scale!r})"

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'D_minor', 'F#_dorian'.

        Raises:
            ValueError: On a malformed name, unknown root or unknown scale
        """
        parts = name.strip().split("_")
        if len(parts) < 2:
            raise ValueError(ErrorMessages.INVALID_KEY.format(key=name))

        root = PitchClass.parse(parts[0])
        scale_str = "_".join(parts[1:]).lower()
        if scale_str not in _SCALE_NAMES:
            raise ValueError(f"Unknown scale type: {scale_str}")

        return cls(root, _SCALE_NAMES[scale_str])


@dataclass(frozen=True)
class _StackedChord:
    """How a stacked-third shape is spelled with the chord engine's types."""

    type: ChordType
    extension: ChordExtension = ChordExtension.FIFTH
    additions: tuple[str, ...] = ()
    alterations: tuple[str, ...] = ()
    suffix: str = ""


# (third, fifth) -> triad
_TRIADS: dict[tuple[int, int], _StackedChord] = {
    (4, 7): _StackedChord(ChordType.MAJ),
    (3, 7): _StackedChord(ChordType.MIN),
    (3, 6): _StackedChord(ChordType.DIM, suffix="°"),
    (4, 8): _StackedChord(ChordType.AUG, suffix="+"),
}

# (third, fifth, seventh) -> seventh chord
_SEVENTHS: dict[tuple[int, int, int], _StackedChord] = {
    (4, 7, 11): _StackedChord(ChordType.MAJ, ChordExtension.SEVENTH, suffix="Δ7"),
    (4, 7, 10): _StackedChord(ChordType.DOM, ChordExtension.SEVENTH, suffix="7"),
    (3, 7, 10): _StackedChord(ChordType.MIN, ChordExtension.SEVENTH, suffix="7"),
    (3, 7, 11): _StackedChord(
        ChordType.MAJ, ChordExtension.SEVENTH, alterations=("b3",), suffix="Δ7"
    ),
    (3, 6, 10): _StackedChord(
        ChordType.MIN, ChordExtension.SEVENTH, alterations=("b5",), suffix="ø7"
    ),
    (3, 6, 9): _StackedChord(ChordType.DIM, additions=("add6",), suffix="°7"),
    (4, 8, 11): _StackedChord(ChordType.AUG, ChordExtension.SEVENTH, suffix="+Δ7"),
    (4, 8, 10): _StackedChord(
        ChordType.AUG, ChordExtension.SEVENTH, alterations=("b7",), suffix="+7"
    ),
}


def _numeral(index: int, offset: int, minor: bool, suffix: str) -> str:
    numeral = _NUMERALS[index]
    if minor:
        numeral = numeral.lower()
    shift = offset - _MAJOR_OFFSETS[index]
    if shift < 0:
        numeral = "b" * -shift + numeral
    elif shift > 0:
        numeral = "#" * shift + numeral
    return numeral + suffix


def diatonic_chords(key: Key, extension: int = ChordExtension.FIFTH) -> list[tuple[str, Chord]]:
    """
    Get the chords built on each degree of a key.

    Thirds are stacked from the key's own pitches, so the chord type follows
    the scale (ii is minor in major, vii is diminished).

    Args:
        key: The key
        extension: 5 for triads, 7 for seventh chords

    Returns:
        List of (roman numeral string, chord) tuples, degrees 1-7

    Raises:
        InvalidChordError: If the extension is not 5 or 7, or a degree
            stacks to a shape with no chord type
    """
    if extension not in (ChordExtension.FIFTH, ChordExtension.SEVENTH):
        raise InvalidChordError(
            "extension", extension, ErrorMessages.INVALID_EXTENSION.format(extension=extension)
        )

    offsets = key.scale.offsets
    result: list[tuple[str, Chord]] = []
    for index, offset in enumerate(offsets):
        third, fifth, seventh = (
            (offsets[(index + steps) % 7] - offset) % 12 for steps in (2, 4, 6)
        )
        if extension == ChordExtension.SEVENTH:
            shape = _SEVENTHS.get((third, fifth, seventh))
        else:
            shape = _TRIADS.get((third, fifth))
        if shape is None:
            raise InvalidChordError("type", (third, fifth, seventh))

        chord = Chord(
            root=key.root.transpose(offset),
            type=shape.type,
            extension=shape.extension,
            additions=shape.additions,
            alterations=shape.alterations,
        )
        result.append((_numeral(index, offset, third == 3, shape.suffix), chord))
    return result
