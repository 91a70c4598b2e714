#!/usr/bin/env python3
"""
Example: Analyzing chords.

This demonstrates the chord engine: chord descriptions and chord symbols are
resolved to intervals from the catalog, then to notes and MIDI numbers.

Usage:
    python examples/analyze_chords.py
"""

from chuk_mcp_harmony.core import Chord, Key, diatonic_chords, intervals
from chuk_mcp_harmony.models import ChordAnalysis
from chuk_mcp_harmony.presets import PresetLoader


def main() -> None:
    """Demonstrate chord analysis."""
    print("CHUK Harmony Chord Demo")
    print("=" * 40)
    print()

    # Partial descriptions fill in their defaults
    print("Chord descriptions:")
    for fields in (
        {},
        {"type": "min", "extension": 7},
        {"type": "dom", "additions": ["add6"]},
        {"alterations": ["b5"]},
    ):
        names = ", ".join(i.short_name for i in intervals(fields))
        print(f"  {fields!s:45} -> {names}")
    print()

    # Symbols
    print("Chord symbols:")
    for symbol in ("Cmaj7", "Dm7b5", "G7b5", "Fmaj11#4", "Bbsus4", "Am7/G"):
        analysis = ChordAnalysis.analyze(Chord.parse(symbol), prefer_flats=True)
        notes = " ".join(analysis.notes)
        print(f"  {symbol:10} {notes:16} MIDI {analysis.midi_notes} tension {analysis.tension}")
    print()

    # Diatonic chords
    key = Key.parse("A_harmonic_minor")
    print(f"Seventh chords in {key}:")
    for numeral, chord in diatonic_chords(key, 7):
        print(f"  {numeral:8} {chord.symbol()}")
    print()

    # Preset library
    print("Preset library:")
    for preset in PresetLoader().list_presets():
        print(f"  {preset.name:16} {preset.chord.to_chord().symbol():12} {preset.description}")


if __name__ == "__main__":
    main()
