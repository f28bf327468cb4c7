"""
Tests for MCP tools.

Tests the tuning and rhythm tool implementations through a mock server.
"""

import json
from pathlib import Path

import pytest

from clef.tools.rhythm import register_rhythm_tools
from clef.tools.tuning import register_tuning_tools
from clef.tuning import TuningLoader


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def tuning_tools(library_path: Path, temp_dir: Path) -> dict:
    mcp = MockMCPServer("test")
    loader = TuningLoader(library_path=library_path, project_path=temp_dir)
    return register_tuning_tools(mcp, loader)


@pytest.fixture
def rhythm_tools() -> dict:
    return register_rhythm_tools(MockMCPServer("test"))


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self, library_path: Path) -> None:
        mcp = MockMCPServer("test")
        register_tuning_tools(mcp, TuningLoader(library_path=library_path))
        register_rhythm_tools(mcp)
        assert set(mcp.tools) == {
            "clef_list_tunings",
            "clef_describe_tuning",
            "clef_pitch_to_hertz",
            "clef_hertz_to_pitch",
            "clef_duration_to_fraction",
            "clef_fraction_to_duration",
            "clef_fraction_arithmetic",
        }


class TestTuningTools:
    """Tests for tuning tools."""

    @pytest.mark.asyncio
    async def test_list_tunings(self, tuning_tools: dict) -> None:
        data = json.loads(await tuning_tools["clef_list_tunings"]())
        assert data["status"] == "success"
        assert data["count"] == 5
        names = [t["name"] for t in data["tunings"]]
        assert "concert-a440" in names
        assert "just-c4" in names

    @pytest.mark.asyncio
    async def test_describe_tuning(self, tuning_tools: dict) -> None:
        data = json.loads(await tuning_tools["clef_describe_tuning"](name="just-c4"))
        assert data["status"] == "success"
        assert data["tuning"]["kind"] == "just"
        octave = data["octave"]
        assert len(octave) == 13
        assert octave[0] == {"pitch": "C4", "hertz": 261.63}
        assert octave[12] == {"pitch": "C5", "hertz": 523.26}

    @pytest.mark.asyncio
    async def test_describe_tuning_not_found(self, tuning_tools: dict) -> None:
        data = json.loads(await tuning_tools["clef_describe_tuning"](name="nonexistent"))
        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_pitch_to_hertz(self, tuning_tools: dict) -> None:
        result = await tuning_tools["clef_pitch_to_hertz"](pitches=["A4", "C5", "G#5"])
        data = json.loads(result)
        assert data["status"] == "success"
        hertz = [r["hertz"] for r in data["results"]]
        assert hertz[0] == 440.0
        assert hertz[1] == pytest.approx(523.2511, abs=1e-3)
        assert hertz[2] == pytest.approx(830.6094, abs=1e-3)

    @pytest.mark.asyncio
    async def test_pitch_to_hertz_just(self, tuning_tools: dict) -> None:
        result = await tuning_tools["clef_pitch_to_hertz"](pitches=["C5"], tuning="just-c4")
        data = json.loads(result)
        assert data["results"][0]["hertz"] == pytest.approx(523.26)

    @pytest.mark.asyncio
    async def test_pitch_to_hertz_invalid_pitch(self, tuning_tools: dict) -> None:
        data = json.loads(await tuning_tools["clef_pitch_to_hertz"](pitches=["H4"]))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_pitch_to_hertz_unknown_tuning(self, tuning_tools: dict) -> None:
        result = await tuning_tools["clef_pitch_to_hertz"](pitches=["A4"], tuning="nope")
        data = json.loads(result)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_hertz_to_pitch(self, tuning_tools: dict) -> None:
        result = await tuning_tools["clef_hertz_to_pitch"](frequencies=[440.0, 830.6, 830.7])
        data = json.loads(result)
        assert data["status"] == "success"
        assert [r["pitch"] for r in data["results"]] == ["A4", "G#5", "Ab5"]
        assert data["results"][0]["exact_hertz"] == 440.0

    @pytest.mark.asyncio
    async def test_hertz_to_pitch_invalid(self, tuning_tools: dict) -> None:
        data = json.loads(await tuning_tools["clef_hertz_to_pitch"](frequencies=[-1.0]))
        assert data["status"] == "error"
        assert "frequency" in data["message"]


class TestRhythmTools:
    """Tests for rhythm tools."""

    @pytest.mark.asyncio
    async def test_duration_to_fraction(self, rhythm_tools: dict) -> None:
        result = await rhythm_tools["clef_duration_to_fraction"](denominator=4, dots=2)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["duration"] == {
            "name": "double dotted quarter",
            "denominator": 4,
            "dots": 2,
            "fraction": "7/16",
        }

    @pytest.mark.asyncio
    async def test_duration_to_fraction_invalid(self, rhythm_tools: dict) -> None:
        data = json.loads(await rhythm_tools["clef_duration_to_fraction"](denominator=3))
        assert data["status"] == "error"
        assert "power of 2" in data["message"]

    @pytest.mark.asyncio
    async def test_fraction_to_duration(self, rhythm_tools: dict) -> None:
        data = json.loads(await rhythm_tools["clef_fraction_to_duration"](fraction="3/8"))
        assert data["status"] == "success"
        assert data["duration"]["name"] == "dotted quarter"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("fraction", "reason"),
        [
            ("9/16", "not_durational"),
            ("1/256", "denominator_too_large"),
            ("-1/4", "not_positive"),
        ],
    )
    async def test_fraction_to_duration_failures(
        self, rhythm_tools: dict, fraction: str, reason: str
    ) -> None:
        data = json.loads(await rhythm_tools["clef_fraction_to_duration"](fraction=fraction))
        assert data["status"] == "error"
        assert data["reason"] == reason

    @pytest.mark.asyncio
    async def test_fraction_to_duration_unparseable(self, rhythm_tools: dict) -> None:
        data = json.loads(await rhythm_tools["clef_fraction_to_duration"](fraction="half"))
        assert data["status"] == "error"
        assert "reason" not in data

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("operation", "expected"),
        [
            ("add", "3/4"),
            ("subtract", "1/4"),
            ("multiply", "1/8"),
            ("divide", "2/1"),
        ],
    )
    async def test_fraction_arithmetic(
        self, rhythm_tools: dict, operation: str, expected: str
    ) -> None:
        result = await rhythm_tools["clef_fraction_arithmetic"](
            left="2/4", operation=operation, right="1/4"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["result"] == expected

    @pytest.mark.asyncio
    async def test_fraction_arithmetic_unknown_operation(self, rhythm_tools: dict) -> None:
        result = await rhythm_tools["clef_fraction_arithmetic"](
            left="1/2", operation="power", right="2"
        )
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_fraction_arithmetic_divide_by_zero(self, rhythm_tools: dict) -> None:
        result = await rhythm_tools["clef_fraction_arithmetic"](
            left="1/2", operation="divide", right="0"
        )
        assert json.loads(result)["status"] == "error"
