"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Interval catalog lookups
- chords - Chord analysis, symbols, diatonic chords
- presets - Chord preset library
"""

from chuk_mcp_harmony.tools.chords import register_chord_tools
from chuk_mcp_harmony.tools.intervals import register_interval_tools
from chuk_mcp_harmony.tools.presets import register_preset_tools

__all__ = [
    "register_chord_tools",
    "register_interval_tools",
    "register_preset_tools",
]
