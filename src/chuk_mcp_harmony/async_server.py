#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server provides MCP tools for chord and interval analysis. Chords are
described by root, type, extension, additions and alterations (or by a chord
symbol) and resolved to their intervals and notes.

The server provides tools for:
- Looking up intervals by name, short name or distance
- Analyzing chord descriptions and chord symbols
- Listing the diatonic chords of a key
- Browsing and saving chord presets
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.constants import PRESETS_DIR_ENV
from chuk_mcp_harmony.presets import PresetLoader
from chuk_mcp_harmony.tools import (
    register_chord_tools,
    register_interval_tools,
    register_preset_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Project presets live in ./presets unless the entry point says otherwise
PRESETS_DIR = Path(os.environ.get(PRESETS_DIR_ENV) or Path.cwd() / "presets")
PRESET_LIBRARY_PATH = Path(__file__).parent / "presets" / "library"

preset_loader = PresetLoader(
    library_path=PRESET_LIBRARY_PATH,
    project_path=PRESETS_DIR,
)

# Register all tools
interval_tools = register_interval_tools(mcp)
chord_tools = register_chord_tools(mcp)
preset_tools = register_preset_tools(mcp, preset_loader)

# Export tool functions for direct access
harmony_list_intervals = interval_tools["harmony_list_intervals"]
harmony_interval_info = interval_tools["harmony_interval_info"]

harmony_chord_intervals = chord_tools["harmony_chord_intervals"]
harmony_parse_chord = chord_tools["harmony_parse_chord"]
harmony_chord_notes = chord_tools["harmony_chord_notes"]
harmony_diatonic_chords = chord_tools["harmony_diatonic_chords"]

harmony_list_presets = preset_tools["harmony_list_presets"]
harmony_describe_preset = preset_tools["harmony_describe_preset"]
harmony_save_preset = preset_tools["harmony_save_preset"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info("  Preset library: %s", PRESET_LIBRARY_PATH)
logger.info("  Project presets: %s", PRESETS_DIR)
