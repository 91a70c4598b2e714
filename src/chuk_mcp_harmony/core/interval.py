"""
Interval catalog - named intervals from a unison to an octave.

The catalog holds exactly one record per semitone distance 0-12. Every record
can be reached by its canonical name ("Perfect Fifth"), its short name ("P5")
or its distance (7), and all three resolve to the same record.

The catalog is built once at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.errors import NotFoundError

IntervalName = Literal[
    "Perfect Unison",
    "Minor Second",
    "Major Second",
    "Minor Third",
    "Major Third",
    "Perfect Fourth",
    "Tritone",
    "Perfect Fifth",
    "Minor Sixth",
    "Major Sixth",
    "Minor Seventh",
    "Major Seventh",
    "Perfect Octave",
]

ShortIntervalName = Literal[
    "P1", "m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7", "P8"
]

IntervalKey = str | int


@dataclass(frozen=True)
class IntervalData:
    """
    Metadata for one interval of the catalog.

    Attributes:
        length: Distance in semitones (0-12)
        name: Canonical name
        short_name: Two-letter code (P1, m3, TT, ...)
        alternate_names: Other names for the same distance, most common first
        tension: Dissonance score, 0 for the perfect consonances
    """

    length: int
    name: str
    short_name: str
    alternate_names: tuple[str, ...] = ()
    tension: int = 0

    def __str__(self) -> str:
        return self.short_name


INTERVAL_CATALOG: tuple[IntervalData, ...] = (
    IntervalData(0, "Perfect Unison", "P1", ("Diminished Second",), 0),
    IntervalData(
        1, "Minor Second", "m2", ("Augmented Unison", "Semitone", "Half Tone", "Half Step"), 4
    ),
    IntervalData(2, "Major Second", "M2", ("Diminished Third", "Tone", "Whole Step"), 3),
    IntervalData(3, "Minor Third", "m3", ("Augmented Second",), 2),
    IntervalData(4, "Major Third", "M3", ("Diminished Fourth",), 1),
    IntervalData(5, "Perfect Fourth", "P4", ("Augmented Third",), 1),
    IntervalData(6, "Tritone", "TT", ("Augmented Fourth", "Diminished Fifth"), 5),
    IntervalData(7, "Perfect Fifth", "P5", ("Diminished Sixth",), 0),
    IntervalData(8, "Minor Sixth", "m6", ("Augmented Fifth",), 2),
    IntervalData(9, "Major Sixth", "M6", ("Diminished Seventh",), 1),
    IntervalData(10, "Minor Seventh", "m7", ("Augmented Sixth",), 3),
    IntervalData(11, "Major Seventh", "M7", ("Diminished Octave",), 4),
    IntervalData(12, "Perfect Octave", "P8", ("Augmented Seventh",), 0),
)

_BY_NAME = MappingProxyType({data.name: data for data in INTERVAL_CATALOG})
_BY_SHORT_NAME = MappingProxyType({data.short_name: data for data in INTERVAL_CATALOG})
_BY_LENGTH = MappingProxyType({data.length: data for data in INTERVAL_CATALOG})


def _not_found(value: object) -> NotFoundError:
    return NotFoundError(value, ErrorMessages.INTERVAL_NOT_FOUND.format(value=value))


def by_name(name: str) -> IntervalData:
    """Look up an interval by canonical name ("Major Third")."""
    try:
        return _BY_NAME[name]
    except (KeyError, TypeError):
        raise _not_found(name) from None


def by_short_name(short_name: str) -> IntervalData:
    """Look up an interval by short name ("M3")."""
    try:
        return _BY_SHORT_NAME[short_name]
    except (KeyError, TypeError):
        raise _not_found(short_name) from None


def by_length(length: int) -> IntervalData:
    """Look up an interval by distance in semitones (0-12)."""
    # bool is an int subclass, but True is not a distance
    if isinstance(length, bool) or not isinstance(length, int):
        raise _not_found(length)
    try:
        return _BY_LENGTH[length]
    except KeyError:
        raise _not_found(length) from None


def get_interval_data(key: IntervalKey) -> IntervalData:
    """
    Look up an interval by name, short name or distance.

    A string is tried as a canonical name first, then as a short name. It is
    never converted to a number, so "7" is not the perfect fifth.

    Args:
        key: Canonical name, short name, or semitone distance

    Returns:
        The matching IntervalData

    Raises:
        NotFoundError: If no record matches
    """
    if isinstance(key, str):
        if key in _BY_NAME:
            return _BY_NAME[key]
        if key in _BY_SHORT_NAME:
            return _BY_SHORT_NAME[key]
        raise _not_found(key)
    return by_length(key)


def to_name(short_name_or_length: str | int) -> str:
    """Canonical name for a short name or distance."""
    return get_interval_data(short_name_or_length).name


def to_short_name(name_or_length: str | int) -> str:
    """Short name for a canonical name or distance."""
    return get_interval_data(name_or_length).short_name


def to_length(name_or_short_name: str) -> int:
    """Distance in semitones for a canonical name or short name."""
    return get_interval_data(name_or_short_name).length


def alternate_names(key: IntervalKey) -> tuple[str, ...]:
    """Alternate names of an interval (may be empty)."""
    return get_interval_data(key).alternate_names


def tension(key: IntervalKey) -> int:
    """Dissonance score of an interval."""
    return get_interval_data(key).tension
