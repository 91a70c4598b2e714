#!/usr/bin/env python3
"""
Command line entry point for chuk-mcp-harmony.

Parses the transport options, points the preset loader at a project
directory, then starts the async server over stdio or HTTP.
"""

import argparse
import asyncio
import logging
import os
from typing import get_args

from chuk_mcp_harmony.constants import PRESETS_DIR_ENV, Transport

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-harmony", description="Chord and interval analysis over MCP"
    )
    parser.add_argument(
        "--transport",
        choices=list(get_args(Transport)),
        default="stdio",
        help="How clients connect (default: stdio)",
    )
    parser.add_argument("--port", type=int, default=8000, help="Port for the http transport")
    parser.add_argument(
        "--presets-dir",
        default=None,
        help="Directory for project presets (default: ./presets)",
    )
    parser.add_argument("--debug", action="store_true", help="Log chord derivations")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.presets_dir:
        os.environ[PRESETS_DIR_ENV] = args.presets_dir

    # The server module builds its preset loader at import
    from chuk_mcp_harmony.async_server import mcp

    if args.transport == "http":
        logger.info("Serving harmony tools on http port %d", args.port)
        asyncio.run(mcp.run_http(port=args.port))
    else:
        logger.info("Serving harmony tools on stdio")
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
