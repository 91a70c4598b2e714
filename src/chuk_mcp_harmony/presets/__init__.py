"""
Chord presets - named chords stored as YAML.

The built-in library lives next to this module; a project directory can add
presets or override library ones by name.
"""

from chuk_mcp_harmony.presets.loader import PresetLoader

__all__ = ["PresetLoader"]
