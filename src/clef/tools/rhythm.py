"""
Rhythm tools - MCP tools for durations and exact fractions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from clef.core.duration import Duration, DurationConversionError
from clef.core.fraction import Fraction

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

_OPERATIONS = {
    "add": lambda a, b: a + b,
    "subtract": lambda a, b: a - b,
    "multiply": lambda a, b: a * b,
    "divide": lambda a, b: a / b,
}


def _describe(duration: Duration) -> dict[str, Any]:
    return {
        "name": str(duration),
        "denominator": duration.denominator,
        "dots": duration.dots,
        "fraction": str(duration.to_fraction()),
    }


def register_rhythm_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register rhythm tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def clef_duration_to_fraction(denominator: int, dots: int = 0) -> str:
        """
        Get the length of a dotted note value in whole notes.

        Args:
            denominator: Power of two note value (4 = quarter)
            dots: Number of dots (0-4)

        Returns:
            JSON string with the exact fraction

        Example:
            clef_duration_to_fraction(denominator=4, dots=2)  # 7/16
        """
        try:
            duration = Duration(denominator, dots)
            return json.dumps({"status": "success", "duration": _describe(duration)})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to convert duration")
            return json.dumps({"status": "error", "message": str(e)})

    tools["clef_duration_to_fraction"] = clef_duration_to_fraction

    @mcp.tool  # type: ignore[arg-type]
    async def clef_fraction_to_duration(fraction: str) -> str:
        """
        Express a fraction of a whole note as a dotted duration.

        Args:
            fraction: Fraction like "3/8" or "7/16"

        Returns:
            JSON string with the duration, or an error with a reason of
            not_positive, denominator_too_large or not_durational

        Example:
            clef_fraction_to_duration(fraction="3/8")  # dotted quarter
        """
        try:
            duration = Duration.from_fraction(Fraction.parse(fraction))
            return json.dumps({"status": "success", "duration": _describe(duration)})
        except DurationConversionError as e:
            return json.dumps({"status": "error", "reason": e.reason.value, "message": str(e)})
        except Exception as e:
            logger.exception(f"Failed to convert fraction {fraction}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["clef_fraction_to_duration"] = clef_fraction_to_duration

    @mcp.tool  # type: ignore[arg-type]
    async def clef_fraction_arithmetic(left: str, operation: str, right: str) -> str:
        """
        Exact arithmetic on two fractions.

        Args:
            left: Left operand like "1/2"
            operation: One of add, subtract, multiply, divide
            right: Right operand like "3/4" or "2"

        Returns:
            JSON string with the irreducible result

        Example:
            clef_fraction_arithmetic(left="1/2", operation="add", right="1/4")  # 3/4
        """
        try:
            if operation not in _OPERATIONS:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Unknown operation: {operation}. "
                        f"Expected one of {', '.join(_OPERATIONS)}",
                    }
                )
            result = _OPERATIONS[operation](Fraction.parse(left), Fraction.parse(right))
            return json.dumps(
                {"status": "success", "result": str(result), "float": result.to_float()}
            )
        except Exception as e:
            logger.exception("Failed to evaluate fraction arithmetic")
            return json.dumps({"status": "error", "message": str(e)})

    tools["clef_fraction_arithmetic"] = clef_fraction_arithmetic

    return tools
