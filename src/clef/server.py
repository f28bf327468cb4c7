#!/usr/bin/env python3
"""
Entry point for the clef MCP Server.

Runs the server over stdio or http. Project tuning presets are read from
--tunings, $CLEF_TUNINGS_DIR or ./tunings; --list-tunings prints the
presets that directory and the built-in library provide, then exits.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from clef.constants import TUNINGS_DIR_ENV
from clef.tuning import TuningLoader, project_tunings_dir

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for clef-server."""
    parser = argparse.ArgumentParser(description="clef MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--tunings",
        type=Path,
        metavar="PATH",
        help=f"Project tuning presets directory (default: ${TUNINGS_DIR_ENV} or ./tunings)",
    )
    parser.add_argument(
        "--list-tunings",
        action="store_true",
        help="Print the available tuning presets and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def list_tunings(tunings_dir: Path) -> None:
    """Print one line per preset: name, kind and reference."""
    loader = TuningLoader(project_path=tunings_dir)
    for meta in loader.list_tunings():
        print(f"{meta.name:<16} {meta.kind.value:<6} {meta.reference}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    tunings_dir = project_tunings_dir(args.tunings)

    if args.list_tunings:
        list_tunings(tunings_dir)
        return

    # The server module builds its loader at import time from the environment
    os.environ[TUNINGS_DIR_ENV] = str(tunings_dir)
    from clef.async_server import mcp

    if args.transport == "stdio":
        logger.info(f"Starting clef MCP Server (stdio, tunings: {tunings_dir})")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting clef MCP Server (http:{args.port}, tunings: {tunings_dir})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
