"""
Chord primitives - ChordType, ChordAddition, ChordAlteration, Chord.

A chord type is a 7-entry skeleton of semitone distances, one per step of the
chord's own scale. Stacking every other step (1, 3, 5, 7, 9, 11, 13) up to the
extension gives the base chord; additions and alterations then edit that set.

All tables are immutable and built at import.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any

from chuk_mcp_harmony.constants import DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_harmony.errors import InvalidChordError

from .interval import IntervalData, by_length
from .pitch import PitchClass

logger = logging.getLogger(__name__)

SKELETON_SIZE = 7


class ChordType(str, Enum):
    """Chord qualities, each identifying a degree skeleton."""

    MAJ = "maj"
    MIN = "min"
    DIM = "dim"
    DOM = "dom"
    SUS2 = "sus2"
    SUS4 = "sus4"
    AUG = "aug"
    DIMSUS2 = "dimsus2"
    DIMSUS4 = "dimsus4"
    AUGSUS2 = "augsus2"
    AUGSUS4 = "augsus4"


DIATONIC_CHORD_TYPES: tuple[ChordType, ...] = (ChordType.MAJ, ChordType.MIN, ChordType.DIM)


class ChordExtension(IntEnum):
    """Highest stacked-third degree included in the base chord."""

    FIFTH = 5
    SEVENTH = 7
    NINTH = 9
    ELEVENTH = 11
    THIRTEENTH = 13


class ChordAddition(str, Enum):
    """A degree added outside the stacked thirds."""

    ADD2 = "add2"
    ADD4 = "add4"
    ADD6 = "add6"
    ADD9 = "add9"
    ADD11 = "add11"
    ADD13 = "add13"


class ChordAlteration(str, Enum):
    """A degree raised or lowered by a semitone."""

    FLAT_2 = "b2"
    SHARP_2 = "#2"
    FLAT_3 = "b3"
    SHARP_3 = "#3"
    FLAT_4 = "b4"
    SHARP_4 = "#4"
    FLAT_5 = "b5"
    SHARP_5 = "#5"
    FLAT_6 = "b6"
    SHARP_6 = "#6"
    FLAT_7 = "b7"
    SHARP_7 = "#7"
    FLAT_9 = "b9"
    SHARP_9 = "#9"
    FLAT_11 = "b11"
    SHARP_11 = "#11"
    FLAT_13 = "b13"

    @property
    def accidental(self) -> int:
        """+1 for a sharp, -1 for a flat."""
        return 1 if self.value.startswith("#") else -1


@dataclass(frozen=True)
class AdditionInterval:
    """Target degree of an addition and its generic interval."""

    degree: int
    interval: int


@dataclass(frozen=True)
class AlterationInterval:
    """Target degree of an alteration with its unaltered and altered intervals."""

    degree: int
    base_interval: int
    altered_interval: int


# Tone intervals in chord bases, positions are steps 1-7 of the chord's scale
CHORD_TYPE_INTERVALS: Mapping[ChordType, tuple[int, ...]] = MappingProxyType(
    {
        ChordType.MAJ: (0, 2, 4, 5, 7, 9, 11),
        ChordType.MIN: (0, 2, 3, 5, 7, 9, 10),  # b3, b7
        ChordType.DIM: (0, 2, 3, 5, 6, 9, 11),  # b3, b5
        ChordType.DOM: (0, 2, 4, 5, 7, 9, 10),  # b7
        ChordType.AUG: (0, 2, 4, 5, 8, 9, 11),  # #5
        ChordType.SUS2: (0, 2, 2, 5, 7, 9, 11),  # 3 -> 2
        ChordType.SUS4: (0, 2, 5, 5, 7, 9, 11),  # 3 -> 4
        ChordType.DIMSUS2: (0, 2, 2, 5, 6, 9, 11),
        ChordType.DIMSUS4: (0, 2, 6, 5, 6, 9, 11),
        ChordType.AUGSUS2: (0, 2, 2, 5, 8, 9, 11),
        ChordType.AUGSUS4: (0, 2, 5, 5, 8, 9, 11),
    }
)

CHORD_ADDITION_INTERVALS: Mapping[ChordAddition, AdditionInterval] = MappingProxyType(
    {
        ChordAddition.ADD2: AdditionInterval(2, 2),
        ChordAddition.ADD4: AdditionInterval(4, 5),
        ChordAddition.ADD6: AdditionInterval(6, 9),
        ChordAddition.ADD9: AdditionInterval(9, 14),
        ChordAddition.ADD11: AdditionInterval(11, 17),
        ChordAddition.ADD13: AdditionInterval(13, 21),
    }
)

CHORD_ALTERATION_INTERVALS: Mapping[ChordAlteration, AlterationInterval] = MappingProxyType(
    {
        ChordAlteration.FLAT_2: AlterationInterval(2, 2, 1),
        ChordAlteration.SHARP_2: AlterationInterval(2, 2, 3),
        ChordAlteration.FLAT_3: AlterationInterval(3, 4, 3),
        ChordAlteration.SHARP_3: AlterationInterval(3, 4, 5),
        ChordAlteration.FLAT_4: AlterationInterval(4, 5, 4),
        ChordAlteration.SHARP_4: AlterationInterval(4, 5, 6),
        ChordAlteration.FLAT_5: AlterationInterval(5, 7, 6),
        ChordAlteration.SHARP_5: AlterationInterval(5, 7, 8),
        ChordAlteration.FLAT_6: AlterationInterval(6, 9, 8),
        ChordAlteration.SHARP_6: AlterationInterval(6, 9, 10),
        ChordAlteration.FLAT_7: AlterationInterval(7, 11, 10),
        ChordAlteration.SHARP_7: AlterationInterval(7, 11, 12),
        ChordAlteration.FLAT_9: AlterationInterval(9, 14, 13),
        ChordAlteration.SHARP_9: AlterationInterval(9, 14, 15),
        ChordAlteration.FLAT_11: AlterationInterval(11, 17, 16),
        ChordAlteration.SHARP_11: AlterationInterval(11, 17, 18),
        ChordAlteration.FLAT_13: AlterationInterval(13, 21, 20),
    }
)


def _coerce_tag(
    enum_cls: type[Enum], value: Any, field: str, message: str | None = None
) -> Any:
    """Convert a raw tag to its enum member, failing fast on unknown tags."""
    if isinstance(value, bool):
        raise InvalidChordError(field, value, message)
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidChordError(field, value, message) from None


def _coerce_tags(enum_cls: type[Enum], values: Any, field: str) -> tuple[Any, ...]:
    if isinstance(values, str):
        values = (values,)
    if not isinstance(values, Iterable):
        raise InvalidChordError(field, values)
    return tuple(_coerce_tag(enum_cls, value, field) for value in values)


def _coerce_pitch(value: Any, field: str) -> PitchClass:
    if isinstance(value, PitchClass):
        return value
    if isinstance(value, str):
        try:
            return PitchClass.parse(value)
        except ValueError:
            raise InvalidChordError(field, value) from None
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < 12:
        return PitchClass(value)
    raise InvalidChordError(field, value)


@dataclass(frozen=True)
class Chord:
    """
    A chord description: root, type, extension, additions, alterations, slash.

    Every field has a default, and construction fills them in, so a Chord is
    always complete. The slash bass defaults to the root. Unknown tags raise
    InvalidChordError here rather than at lookup time.

    Immutable and hashable.
    """

    root: PitchClass = PitchClass.C
    type: ChordType = ChordType.MAJ
    extension: ChordExtension = ChordExtension.FIFTH
    additions: tuple[ChordAddition, ...] = ()
    alterations: tuple[ChordAlteration, ...] = ()
    slash: PitchClass | None = None

    def __post_init__(self) -> None:
        root = _coerce_pitch(self.root, "root")
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "type", _coerce_tag(ChordType, self.type, "type"))
        extension = _coerce_tag(
            ChordExtension,
            self.extension,
            "extension",
            ErrorMessages.INVALID_EXTENSION.format(extension=self.extension),
        )
        object.__setattr__(self, "extension", extension)
        object.__setattr__(
            self, "additions", _coerce_tags(ChordAddition, self.additions, "additions")
        )
        object.__setattr__(
            self, "alterations", _coerce_tags(ChordAlteration, self.alterations, "alterations")
        )
        slash = root if self.slash is None else _coerce_pitch(self.slash, "slash")
        object.__setattr__(self, "slash", slash)

    def intervals(self) -> list[IntervalData]:
        """Intervals sounding in this chord, ascending."""
        return intervals(self)

    def notes(self) -> list[PitchClass]:
        """Pitch classes sounding in this chord, bass first."""
        return notes(self)

    def midi_notes(self, octave: int = DEFAULT_OCTAVE) -> list[int]:
        """MIDI note numbers with the root in the given octave."""
        return midi_notes(self, octave)

    def symbol(self, prefer_flats: bool = False) -> str:
        """Chord symbol text, e.g. 'Cm7b5/Gb'."""
        return format_symbol(self, prefer_flats)

    @classmethod
    def parse(cls, symbol: str) -> Chord:
        """Parse a chord symbol like 'C', 'Am7', 'G7sus4', 'Dsus4', 'Cmaj7/E'."""
        return parse_symbol(symbol)

    def __str__(self) -> str:
        return self.symbol()


_CHORD_FIELDS = frozenset(f.name for f in fields(Chord))


def set_defaults(partial: Chord | Mapping[str, Any] | None = None, **overrides: Any) -> Chord:
    """
    Build a complete chord from a partial description.

    Fields come from ``partial`` (a mapping or an existing Chord) and then from
    keyword overrides. Omitted fields take their defaults; an omitted slash
    takes the resolved root, not the default root.

    Raises:
        InvalidChordError: On unknown fields or tags
    """
    if isinstance(partial, Chord) and not overrides:
        return partial

    values: dict[str, Any] = {}
    if isinstance(partial, Chord):
        values = {name: getattr(partial, name) for name in _CHORD_FIELDS}
        if "root" in overrides and "slash" not in overrides and partial.slash == partial.root:
            # slash followed the old root, let it follow the new one
            values.pop("slash")
    elif partial is not None:
        values = dict(partial)
    values.update(overrides)

    unknown = set(values) - _CHORD_FIELDS
    if unknown:
        name = sorted(unknown)[0]
        raise InvalidChordError(name, values[name], f"Unknown chord field: {name!r}")

    # None means "use the default" for every field
    return Chord(**{name: value for name, value in values.items() if value is not None})


def get_addition_interval(chord_type: ChordType, addition: ChordAddition) -> int:
    """
    Distance an addition contributes to a chord of the given type.

    The addition's degree selects a skeleton position (degree 9 wraps to
    position 1), so the added tone takes the chord type's own colour:
    add4 on a dim chord is the diminished chord's fourth.
    """
    degree = CHORD_ADDITION_INTERVALS[addition].degree
    return CHORD_TYPE_INTERVALS[chord_type][(degree - 1) % SKELETON_SIZE]


def get_alteration_interval(chord_type: ChordType, alteration: ChordAlteration) -> int:
    """
    Distance an alteration produces in a chord of the given type.

    The altered degree's skeleton value moved one semitone by the accidental.
    Degrees above 7 wrap onto positions 0-6, so the result is always 0-12.
    """
    degree = CHORD_ALTERATION_INTERVALS[alteration].degree
    position = (degree - 1) % SKELETON_SIZE
    return CHORD_TYPE_INTERVALS[chord_type][position] + alteration.accidental


def _apply_alterations(
    chord_type: ChordType, distance: int, alterations: tuple[ChordAlteration, ...]
) -> int:
    result = distance
    for alteration in alterations:
        # compound bases (b9 -> 14) never occur in the working set
        if distance == CHORD_ALTERATION_INTERVALS[alteration].base_interval:
            # later alterations overwrite earlier ones
            result = get_alteration_interval(chord_type, alteration)
    return result


def intervals(
    chord: Chord | Mapping[str, Any] | None = None, **overrides: Any
) -> list[IntervalData]:
    """
    Derive the intervals sounding in a chord.

    Steps:
        1. Fill defaults
        2. Stack every other skeleton position up to the extension
        3. Append each addition's skeleton value
        4. Replace intervals exactly equal to an alteration's base interval
        5. Drop repeated distances, keeping the first
        6. Sort ascending
        7. Look each distance up in the interval catalog

    An alteration whose base interval is absent is skipped. The compound
    bases of b9, #9, b11, #11 and b13 are never stacked, so those tags
    leave the chord unchanged.

    Returns:
        IntervalData records, ascending by length, without repeats

    Raises:
        InvalidChordError: On unknown tags
        NotFoundError: If a distance falls outside the catalog
    """
    full = set_defaults(chord, **overrides)
    skeleton = CHORD_TYPE_INTERVALS[full.type]

    distances = [skeleton[i % SKELETON_SIZE] for i in range(full.extension) if i % 2 == 0]
    distances.extend(get_addition_interval(full.type, addition) for addition in full.additions)

    altered = [_apply_alterations(full.type, d, full.alterations) for d in distances]
    unique = sorted(dict.fromkeys(altered))

    logger.debug("Chord %s: %s -> %s", full, distances, unique)
    return [by_length(distance) for distance in unique]


def notes(chord: Chord | Mapping[str, Any] | None = None, **overrides: Any) -> list[PitchClass]:
    """
    Pitch classes sounding in a chord.

    The root is transposed by every interval. For a slash chord the bass
    comes first and is not repeated among the upper tones.
    """
    full = set_defaults(chord, **overrides)
    tones = list(dict.fromkeys(full.root.transpose(i.length) for i in intervals(full)))
    if full.slash != full.root:
        tones = [full.slash] + [tone for tone in tones if tone != full.slash]
    return tones


def midi_notes(
    chord: Chord | Mapping[str, Any] | None = None,
    octave: int = DEFAULT_OCTAVE,
    **overrides: Any,
) -> list[int]:
    """
    MIDI note numbers for a chord in close position.

    Args:
        chord: Chord or partial description
        octave: Octave for the root (default 4, C4 = 60)

    Returns:
        MIDI note numbers ascending; a slash bass sits below the root
    """
    full = set_defaults(chord, **overrides)
    root_midi = full.root.to_midi(octave)
    result = [root_midi + interval.length for interval in intervals(full)]
    if full.slash != full.root:
        bass = full.slash.to_midi(octave)
        if bass >= root_midi:
            bass -= 12
        result.insert(0, bass)
    return result


# Symbol spelling

_TRIAD_SYMBOLS: dict[ChordType, tuple[str, str]] = {
    # type -> (quality text, sus text)
    ChordType.MAJ: ("maj", ""),
    ChordType.MIN: ("m", ""),
    ChordType.DIM: ("dim", ""),
    ChordType.DOM: ("", ""),
    ChordType.AUG: ("aug", ""),
    ChordType.SUS2: ("maj", "sus2"),
    ChordType.SUS4: ("maj", "sus4"),
    ChordType.DIMSUS2: ("dim", "sus2"),
    ChordType.DIMSUS4: ("dim", "sus4"),
    ChordType.AUGSUS2: ("aug", "sus2"),
    ChordType.AUGSUS4: ("aug", "sus4"),
}


def format_symbol(chord: Chord, prefer_flats: bool = False) -> str:
    """
    Spell a chord as symbol text.

    Triads omit the extension ('C', 'Cm', 'Csus4'), a plain major or dominant
    triad prints without quality. Larger extensions append the number
    ('Cmaj7', 'Cm9', 'C13', 'Cmaj7sus4', 'C7sus4' when the first alteration
    flattens the seventh).
    Additions and alterations follow in order, then the slash bass.
    Alterations directly after the root are parenthesised ('C(b5)').
    """
    quality, sus = _TRIAD_SYMBOLS[chord.type]
    alterations = list(chord.alterations)

    if chord.type in (ChordType.SUS2, ChordType.SUS4) and chord.extension > 5:
        if alterations and alterations[0] == ChordAlteration.FLAT_7:
            quality = ""
            alterations.pop(0)

    if chord.extension == ChordExtension.FIFTH:
        if chord.type in (ChordType.MAJ, ChordType.DOM, ChordType.SUS2, ChordType.SUS4):
            quality = ""
        body = quality + sus
    else:
        body = f"{quality}{int(chord.extension)}{sus}"

    additions = [addition.value for addition in chord.additions]

    text = chord.root.spell(prefer_flats) + body + "".join(additions)
    altered = [alteration.value for alteration in alterations]
    if altered and not body and not additions:
        # "Cb5" would read as C flat, keep alterations off the root
        text += "(" + ",".join(altered) + ")"
    else:
        text += "".join(altered)
    if chord.slash != chord.root:
        text += "/" + chord.slash.spell(prefer_flats)
    return text


_SYMBOL_PATTERN = re.compile(
    r"^(?P<root>[A-G][#b♯♭]?)"
    r"(?P<quality>maj|M|min|m|-|dim|°|aug|\+)?"
    r"(?P<number>13|11|9|7|6|5)?"
    r"(?P<sus>sus[24])?"
    r"(?P<mods>(?:add(?:13|11|2|4|6|9)|[#b♯♭](?:13|11|2|3|4|5|6|7|9))*)"
    r"(?:\((?P<paren>[^)]*)\))?"
    r"(?:/(?P<slash>[A-G][#b♯♭]?))?$"
)
_MOD_PATTERN = re.compile(r"add(?:13|11|2|4|6|9)|[#b♯♭](?:13|11|2|3|4|5|6|7|9)")

_QUALITY_ALIASES: dict[str, str] = {
    "maj": "maj",
    "M": "maj",
    "min": "min",
    "m": "min",
    "-": "min",
    "dim": "dim",
    "°": "dim",
    "aug": "aug",
    "+": "aug",
}

_SUS_TYPES: dict[tuple[str, str], ChordType] = {
    ("maj", "sus2"): ChordType.SUS2,
    ("maj", "sus4"): ChordType.SUS4,
    ("dom", "sus2"): ChordType.SUS2,
    ("dom", "sus4"): ChordType.SUS4,
    ("dim", "sus2"): ChordType.DIMSUS2,
    ("dim", "sus4"): ChordType.DIMSUS4,
    ("aug", "sus2"): ChordType.AUGSUS2,
    ("aug", "sus4"): ChordType.AUGSUS4,
}


def _invalid_symbol(symbol: str) -> InvalidChordError:
    return InvalidChordError("symbol", symbol, ErrorMessages.INVALID_SYMBOL.format(symbol=symbol))


def parse_symbol(symbol: str) -> Chord:
    """
    Parse chord symbol text into a Chord.

    A bare number after the root is a dominant chord ('G7', 'C13'), except
    5 (a major triad) and 6 (a major triad with add6). A dominant sus chord
    ('C7sus4') becomes a sus chord with a flattened seventh, as sus skeletons
    carry a major seventh. Additions and alterations are kept as written:
    'C7#9' is a dominant seventh tagged #9, and the tag has nothing to alter.

    Raises:
        InvalidChordError: If the text is not a chord symbol
    """
    match = _SYMBOL_PATTERN.match(symbol.strip())
    if not match:
        raise _invalid_symbol(symbol)

    quality = _QUALITY_ALIASES.get(match.group("quality") or "", "")
    number = match.group("number")
    sus = match.group("sus")

    additions: list[str] = []
    alterations: list[str] = []
    extension = 5

    if number == "6":
        additions.append("add6")
    elif number:
        extension = int(number)

    if not quality:
        quality = "dom" if extension > 5 else "maj"

    if sus:
        if (quality, sus) not in _SUS_TYPES:
            raise _invalid_symbol(symbol)
        chord_type = _SUS_TYPES[(quality, sus)]
        if quality == "dom":
            alterations.append("b7")
    else:
        chord_type = ChordType(quality)

    mods = _MOD_PATTERN.findall(match.group("mods"))
    if match.group("paren") is not None:
        for part in match.group("paren").split(","):
            if not _MOD_PATTERN.fullmatch(part.strip()):
                raise _invalid_symbol(symbol)
            mods.append(part.strip())

    for mod in mods:
        mod = mod.replace("♯", "#").replace("♭", "b")
        if mod.startswith("add"):
            additions.append(mod)
        else:
            alterations.append(mod)

    return Chord(
        root=match.group("root"),
        type=chord_type,
        extension=extension,
        additions=tuple(additions),
        alterations=tuple(alterations),
        slash=match.group("slash"),
    )
