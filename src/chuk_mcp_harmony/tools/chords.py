"""
Chord tools - MCP tools for chord analysis.

Tools for resolving chord descriptions and symbols to intervals and notes,
and for listing the chords of a key.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_harmony.constants import DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_harmony.core.chord import Chord
from chuk_mcp_harmony.core.scale import Key, diatonic_chords
from chuk_mcp_harmony.errors import HarmonyError
from chuk_mcp_harmony.models.chord import ChordAnalysis, ChordSpec

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_chord_intervals(
        root: str = "C",
        type: str = "maj",
        extension: int = 5,
        additions: list[str] | None = None,
        alterations: list[str] | None = None,
        slash: str | None = None,
        prefer_flats: bool = False,
    ) -> str:
        """
        Derive the intervals and notes of a chord description.

        Args:
            root: Root note (e.g., "C", "F#", "Bb")
            type: Chord type (maj, min, dim, dom, aug, sus2, sus4, dimsus2,
                dimsus4, augsus2, augsus4)
            extension: Highest stacked degree (5, 7, 9, 11, 13)
            additions: Added degrees (add2, add4, add6, add9, add11, add13)
            alterations: Altered degrees (b5, #9, ...)
            slash: Bass note, defaults to the root
            prefer_flats: Spell notes with flats

        Returns:
            JSON string with symbol, intervals, notes and MIDI notes

        Example:
            harmony_chord_intervals(root="D", type="min", extension=7)
        """
        try:
            spec = ChordSpec(
                root=root,
                chord_type=type,
                extension=extension,
                additions=additions or [],
                alterations=alterations or [],
                slash=slash,
            )
            analysis = ChordAnalysis.analyze(spec.to_chord(), prefer_flats=prefer_flats)
            return json.dumps({"status": "success", "analysis": analysis.model_dump(mode="json")})
        except (ValidationError, HarmonyError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to analyze chord")
            return _error(str(e))

    tools["harmony_chord_intervals"] = harmony_chord_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_parse_chord(symbol: str, prefer_flats: bool = False) -> str:
        """
        Parse a chord symbol and analyze it.

        Understands qualities (m, maj, dim, aug, sus2, sus4), extensions
        (7, 9, 11, 13), 6 chords, additions (add9), alterations (b5, #9),
        and slash basses.

        Args:
            symbol: Chord symbol (e.g., "Cmaj7", "Am7/G", "G7sus4", "F(b5)")
            prefer_flats: Spell notes with flats

        Returns:
            JSON string with the parsed chord and its analysis

        Example:
            harmony_parse_chord(symbol="Dm7b5")
        """
        try:
            chord = Chord.parse(symbol)
            analysis = ChordAnalysis.analyze(chord, prefer_flats=prefer_flats)
            return json.dumps({"status": "success", "analysis": analysis.model_dump(mode="json")})
        except HarmonyError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to parse chord")
            return _error(str(e))

    tools["harmony_parse_chord"] = harmony_parse_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_chord_notes(
        symbol: str,
        octave: int = DEFAULT_OCTAVE,
        prefer_flats: bool = False,
    ) -> str:
        """
        Get the notes of a chord symbol, as names and MIDI numbers.

        Args:
            symbol: Chord symbol (e.g., "Bbmaj7")
            octave: Octave of the root (4 puts C at MIDI 60)
            prefer_flats: Spell notes with flats

        Returns:
            JSON string with note names (bass first) and MIDI notes

        Example:
            harmony_chord_notes(symbol="Am7/G", octave=3)
        """
        try:
            chord = Chord.parse(symbol)
            return json.dumps(
                {
                    "status": "success",
                    "symbol": chord.symbol(prefer_flats),
                    "notes": [note.spell(prefer_flats) for note in chord.notes()],
                    "midi_notes": chord.midi_notes(octave),
                }
            )
        except HarmonyError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to get chord notes")
            return _error(str(e))

    tools["harmony_chord_notes"] = harmony_chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_diatonic_chords(
        key: str,
        extension: int = 5,
        prefer_flats: bool = False,
    ) -> str:
        """
        List the chords built on each degree of a key.

        Args:
            key: Key name (e.g., "C_major", "A_minor", "D_dorian")
            extension: 5 for triads, 7 for seventh chords
            prefer_flats: Spell notes with flats

        Returns:
            JSON string with Roman numeral, symbol and notes per degree

        Example:
            harmony_diatonic_chords(key="A_harmonic_minor", extension=7)
        """
        try:
            parsed_key = Key.parse(key)
        except ValueError:
            return _error(ErrorMessages.INVALID_KEY.format(key=key))

        try:
            chords = diatonic_chords(parsed_key, extension)
            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed_key),
                    "chords": [
                        {
                            "numeral": numeral,
                            "symbol": chord.symbol(prefer_flats),
                            "notes": [note.spell(prefer_flats) for note in chord.notes()],
                        }
                        for numeral, chord in chords
                    ],
                }
            )
        except HarmonyError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to list diatonic chords")
            return _error(str(e))

    tools["harmony_diatonic_chords"] = harmony_diatonic_chords

    return tools
