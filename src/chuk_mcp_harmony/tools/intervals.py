"""
Interval tools - MCP tools for the interval catalog.

Tools for listing the catalog and looking up single intervals by name,
short name or distance.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.core.interval import (
    INTERVAL_CATALOG,
    IntervalData,
    by_length,
    get_interval_data,
)
from chuk_mcp_harmony.errors import HarmonyError
from chuk_mcp_harmony.models.chord import IntervalInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval catalog tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_intervals() -> str:
        """
        List every interval from a unison to an octave.

        Returns:
            JSON string with the 13 catalog intervals, by distance

        Example:
            harmony_list_intervals()
        """
        return json.dumps(
            {
                "status": "success",
                "intervals": [
                    IntervalInfo.from_data(data).model_dump() for data in INTERVAL_CATALOG
                ],
                "count": len(INTERVAL_CATALOG),
            }
        )

    tools["harmony_list_intervals"] = harmony_list_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_interval_info(
        name: str | None = None,
        length: int | None = None,
    ) -> str:
        """
        Look up one interval.

        Give either a name (canonical like "Perfect Fifth" or short like "P5")
        or a length in semitones (0-12).

        Args:
            name: Canonical or short interval name
            length: Distance in semitones

        Returns:
            JSON string with the interval's names and tension

        Example:
            harmony_interval_info(name="TT")
            harmony_interval_info(length=7)
        """
        if (name is None) == (length is None):
            return json.dumps(
                {"status": "error", "message": "Give exactly one of name or length."}
            )
        try:
            data: IntervalData = get_interval_data(name) if name is not None else by_length(length)
            return json.dumps(
                {"status": "success", "interval": IntervalInfo.from_data(data).model_dump()}
            )
        except HarmonyError as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_interval_info"] = harmony_interval_info

    return tools
