"""
Preset tools - MCP tools for the chord preset library.

Tools for listing presets, analyzing a preset, and saving chords as
project presets.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.chord import Chord
from chuk_mcp_harmony.errors import HarmonyError
from chuk_mcp_harmony.models.chord import ChordAnalysis, ChordPreset, ChordSpec
from chuk_mcp_harmony.presets import PresetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_preset_tools(mcp: ChukMCPServer, loader: PresetLoader) -> dict[str, Any]:
    """
    Register preset tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_presets(tag: str | None = None) -> str:
        """
        List available chord presets.

        Args:
            tag: Only list presets with this tag (e.g., "jazz")

        Returns:
            JSON string with preset names, descriptions, tags and symbols

        Example:
            harmony_list_presets(tag="jazz")
        """
        try:
            presets = loader.list_presets(tag=tag)
            return json.dumps(
                {
                    "status": "success",
                    "presets": [
                        {
                            "name": p.name,
                            "description": p.description,
                            "tags": p.tags,
                            "symbol": p.chord.to_chord().symbol(),
                        }
                        for p in presets
                    ],
                    "count": len(presets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list presets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_list_presets"] = harmony_list_presets

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_preset(name: str, prefer_flats: bool = False) -> str:
        """
        Get a preset with its full chord analysis.

        Args:
            name: Preset name
            prefer_flats: Spell notes with flats

        Returns:
            JSON string with preset metadata and analysis

        Example:
            harmony_describe_preset(name="half-diminished")
        """
        try:
            preset = loader.get_preset(name)
            if preset is None:
                message = ErrorMessages.PRESET_NOT_FOUND.format(name=name)
                return json.dumps({"status": "error", "message": message})

            analysis = ChordAnalysis.analyze(preset.chord.to_chord(), prefer_flats=prefer_flats)
            return json.dumps(
                {
                    "status": "success",
                    "preset": {
                        "name": preset.name,
                        "description": preset.description,
                        "tags": preset.tags,
                    },
                    "analysis": analysis.model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_preset"] = harmony_describe_preset

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_save_preset(
        name: str,
        symbol: str,
        description: str = "",
        tags: list[str] | None = None,
        overwrite: bool = False,
    ) -> str:
        """
        Save a chord symbol as a project preset.

        Args:
            name: Preset name (becomes the file name)
            symbol: Chord symbol (e.g., "Ebmaj7b5")
            description: Human-readable description
            tags: Search tags
            overwrite: Replace an existing project preset

        Returns:
            JSON string with the saved file path

        Example:
            harmony_save_preset(name="so-what", symbol="Em11", tags=["jazz"])
        """
        try:
            chord = Chord.parse(symbol)
            # keep the root spelled as written
            prefer_flats = symbol.strip()[1:2] in ("b", "♭")
            preset = ChordPreset(
                name=name,
                description=description,
                tags=tags or [],
                chord=ChordSpec.from_chord(chord, prefer_flats=prefer_flats),
            )
            path = loader.save_preset(preset, overwrite=overwrite)
            return json.dumps(
                {
                    "status": "success",
                    "name": preset.name,
                    "symbol": chord.symbol(prefer_flats),
                    "path": str(path),
                }
            )
        except (HarmonyError, ValidationError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to save preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_save_preset"] = harmony_save_preset

    return tools
