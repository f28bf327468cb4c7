"""
Tuning tools - MCP tools for pitch/frequency conversion.

Tools for listing tuning presets and converting between pitches and
frequencies under a preset.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from clef.constants import ErrorMessages
from clef.core.pitch import Pitch
from clef.tuning import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_tuning_tools(mcp: ChukMCPServer, loader: TuningLoader) -> dict[str, Any]:
    """
    Register tuning tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The tuning preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def clef_list_tunings() -> str:
        """
        List available tuning presets.

        Returns:
            JSON string with list of preset summaries

        Example:
            clef_list_tunings()
        """
        try:
            tunings = loader.list_tunings()
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [
                        {
                            "name": t.name,
                            "description": t.description,
                            "kind": t.kind.value,
                            "reference": t.reference,
                        }
                        for t in tunings
                    ],
                    "count": len(tunings),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["clef_list_tunings"] = clef_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def clef_describe_tuning(name: str) -> str:
        """
        Get a tuning preset with its frequencies for one octave.

        Args:
            name: Preset name

        Returns:
            JSON string with preset details

        Example:
            clef_describe_tuning(name="just-c4")
        """
        try:
            config = loader.get_config(name)
            if config is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TUNING_NOT_FOUND.format(name=name)}
                )

            tuning = config.build()
            reference = tuning.reference_pitch
            octave = [reference.transpose(step) for step in range(13)]
            return json.dumps(
                {
                    "status": "success",
                    "tuning": config.to_yaml_dict(),
                    "octave": [
                        {"pitch": str(pitch), "hertz": round(tuning.to_hertz(pitch), 4)}
                        for pitch in octave
                    ],
                }
            )
        except Exception as e:
            logger.exception(f"Failed to describe tuning {name}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["clef_describe_tuning"] = clef_describe_tuning

    @mcp.tool  # type: ignore[arg-type]
    async def clef_pitch_to_hertz(pitches: list[str], tuning: str = "concert-a440") -> str:
        """
        Convert pitches to frequencies.

        Args:
            pitches: Pitch names like "A4", "C#5", "Bb3"
            tuning: Tuning preset name (default: concert-a440)

        Returns:
            JSON string with the frequency of each pitch

        Example:
            clef_pitch_to_hertz(pitches=["C4", "E4", "G4"], tuning="just-c4")
        """
        try:
            system = loader.get_tuning(tuning)
            if system is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.TUNING_NOT_FOUND.format(name=tuning),
                    }
                )

            results = []
            for text in pitches:
                pitch = Pitch.parse(text)
                results.append({"pitch": str(pitch), "hertz": system.to_hertz(pitch)})

            return json.dumps({"status": "success", "tuning": tuning, "results": results})
        except Exception as e:
            logger.exception("Failed to convert pitches to hertz")
            return json.dumps({"status": "error", "message": str(e)})

    tools["clef_pitch_to_hertz"] = clef_pitch_to_hertz

    @mcp.tool  # type: ignore[arg-type]
    async def clef_hertz_to_pitch(frequencies: list[float], tuning: str = "concert-a440") -> str:
        """
        Find the nearest pitch for each frequency.

        Frequencies just above a black key are spelled as flats, those
        below or exactly on it as sharps.

        Args:
            frequencies: Frequencies in hertz
            tuning: Tuning preset name (default: concert-a440)

        Returns:
            JSON string with the pitch nearest to each frequency

        Example:
            clef_hertz_to_pitch(frequencies=[440.0, 830.7])
        """
        try:
            system = loader.get_tuning(tuning)
            if system is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.TUNING_NOT_FOUND.format(name=tuning),
                    }
                )

            results = []
            for hertz in frequencies:
                pitch = system.to_pitch(hertz)
                results.append(
                    {
                        "hertz": hertz,
                        "pitch": str(pitch),
                        "exact_hertz": system.to_hertz(pitch),
                    }
                )

            return json.dumps({"status": "success", "tuning": tuning, "results": results})
        except Exception as e:
            logger.exception("Failed to convert hertz to pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["clef_hertz_to_pitch"] = clef_hertz_to_pitch

    return tools
