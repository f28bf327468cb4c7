#!/usr/bin/env python3
"""
Async clef MCP Server using chuk-mcp-server

This server exposes the clef music-theory primitives as MCP tools:
- Listing and describing tuning presets
- Converting pitches to frequencies and back
- Converting between dotted durations and exact fractions
- Exact fraction arithmetic
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from clef.tools import register_rhythm_tools, register_tuning_tools
from clef.tuning import TuningLoader, project_tunings_dir

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("clef")

# Paths - built-in presets ship with the package, project presets come from
# $CLEF_TUNINGS_DIR (set by clef-server --tunings) or ./tunings
TUNINGS_DIR = project_tunings_dir()
TUNINGS_LIBRARY_PATH = Path(__file__).parent / "tuning" / "library"

tuning_loader = TuningLoader(
    library_path=TUNINGS_LIBRARY_PATH,
    project_path=TUNINGS_DIR,
)

# Register all tools
tuning_tools = register_tuning_tools(mcp, tuning_loader)
rhythm_tools = register_rhythm_tools(mcp)

# Export tool functions for direct access
clef_list_tunings = tuning_tools["clef_list_tunings"]
clef_describe_tuning = tuning_tools["clef_describe_tuning"]
clef_pitch_to_hertz = tuning_tools["clef_pitch_to_hertz"]
clef_hertz_to_pitch = tuning_tools["clef_hertz_to_pitch"]

clef_duration_to_fraction = rhythm_tools["clef_duration_to_fraction"]
clef_fraction_to_duration = rhythm_tools["clef_fraction_to_duration"]
clef_fraction_arithmetic = rhythm_tools["clef_fraction_arithmetic"]

logger.info("clef MCP Server initialized")
logger.info(f"  Tunings library: {TUNINGS_LIBRARY_PATH}")
logger.info(f"  Project tunings: {TUNINGS_DIR}")
