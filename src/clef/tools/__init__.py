"""
MCP tool implementations.

Tools are organized by domain:
- tuning - Presets and pitch/frequency conversion
- rhythm - Durations and fraction arithmetic
"""

from clef.tools.rhythm import register_rhythm_tools
from clef.tools.tuning import register_tuning_tools

__all__ = [
    "register_rhythm_tools",
    "register_tuning_tools",
]
