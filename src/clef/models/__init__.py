"""
Pydantic models for the clef library.

This module provides:
- TuningConfig: Named, validated tuning preset
- TuningMetadata: Lightweight listing entry for a preset
"""

from clef.models.tuning import TuningConfig, TuningMetadata

__all__ = [
    "TuningConfig",
    "TuningMetadata",
]
