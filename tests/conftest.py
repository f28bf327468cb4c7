"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from clef.core.pitch import PITCHES
from clef.tuning import EqualTemperament, JustIntonation


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project presets."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in tuning preset library."""
    return Path(__file__).parent.parent / "src" / "clef" / "tuning" / "library"


@pytest.fixture
def concert() -> EqualTemperament:
    """Equal temperament at A4 = 440 Hz."""
    return EqualTemperament(440.0)


@pytest.fixture
def just_c4() -> JustIntonation:
    """5-limit just intonation on C4 = 261.63 Hz."""
    return JustIntonation(PITCHES["C4"], 261.63)
