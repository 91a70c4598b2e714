"""
Pydantic models for the harmony system.

This module provides:
- ChordSpec: Chord description as plain data
- IntervalInfo: Serializable interval record
- ChordAnalysis: Intervals, notes and symbol of a chord
- ChordPreset: Named chord stored as YAML
"""

from chuk_mcp_harmony.models.chord import ChordAnalysis, ChordPreset, ChordSpec, IntervalInfo

__all__ = [
    "ChordAnalysis",
    "ChordPreset",
    "ChordSpec",
    "IntervalInfo",
]
