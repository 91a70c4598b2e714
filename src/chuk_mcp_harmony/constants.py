"""
Constants for the harmony system.

No magic strings - use enums and Literal types for constrained values.
"""

from typing import Literal

# Default octave for MIDI output (C4 = 60)
DEFAULT_OCTAVE = 4

# Schema versions - frozen for v1
SchemaVersion = Literal["chord-preset/v1"]

PRESET_SCHEMA: SchemaVersion = "chord-preset/v1"

# Environment variable naming the project presets directory
PRESETS_DIR_ENV = "CHUK_HARMONY_PRESETS_DIR"

# MCP transports understood by the server entry point
Transport = Literal["stdio", "http"]


class ErrorMessages:
    """Standardized error messages."""

    INTERVAL_NOT_FOUND = "Interval '{value}' not found."
    PRESET_NOT_FOUND = "Preset '{name}' not found."
    INVALID_KEY = "Invalid key: '{key}'. Expected format like 'C_major' or 'D_minor'."
    INVALID_SYMBOL = "Invalid chord symbol: '{symbol}'."
    INVALID_EXTENSION = "Invalid extension: {extension}. Must be one of 5, 7, 9, 11, 13."
