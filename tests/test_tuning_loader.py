"""
Tests for tuning presets.

Tests cover:
- TuningConfig validation and building
- TuningLoader discovery, precedence and caching
- The built-in preset library
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from clef.constants import TuningKind
from clef.core.pitch import PITCHES
from clef.models import TuningConfig, TuningMetadata
from clef.tuning import EqualTemperament, JustIntonation, TuningLoader


class TestTuningConfig:
    """Tests for the TuningConfig model."""

    def test_defaults(self) -> None:
        config = TuningConfig(name="concert")
        assert config.kind == TuningKind.EQUAL
        assert config.reference_pitch == "A4"
        assert config.reference_frequency == 440.0
        assert config.ratios is None

    def test_build_equal(self) -> None:
        tuning = TuningConfig(name="baroque", reference_frequency=415.0).build()
        assert isinstance(tuning, EqualTemperament)
        assert tuning.to_hertz(PITCHES["A4"]) == 415.0

    def test_build_just_default_ratios(self) -> None:
        config = TuningConfig(
            name="ji", kind="just", reference_pitch="C4", reference_frequency=261.63
        )
        tuning = config.build()
        assert isinstance(tuning, JustIntonation)
        assert tuning.to_hertz(PITCHES["G4"]) == pytest.approx(261.63 * 1.5)

    def test_fraction_strings(self) -> None:
        ratios: list[str | float] = ["1", "16/15", "9/8", "6/5", "5/4", "4/3", "45/32"]
        ratios += ["3/2", "8/5", "5/3", "16/9", 1.875]
        config = TuningConfig(name="ji", kind="just", reference_pitch="C4", ratios=ratios)
        assert config.ratios[1] == pytest.approx(16 / 15)
        assert config.ratios[11] == 1.875

    def test_normalizes_pitch_and_name(self) -> None:
        config = TuningConfig(name="Just-Bb", kind="just", reference_pitch="Bs3")
        assert config.name == "just-bb"
        assert config.reference_pitch == "B#3"

    def test_schema_alias(self) -> None:
        config = TuningConfig.model_validate({"schema": "tuning/v1", "name": "x"})
        assert config.schema_version == "tuning/v1"

    @pytest.mark.parametrize(
        "data",
        [
            {"name": ""},
            {"name": "bad name!"},
            {"name": "x", "reference_frequency": 0},
            {"name": "x", "reference_frequency": -440},
            {"name": "x", "kind": "meantone"},
            {"name": "x", "kind": "just", "reference_pitch": "H4"},
            {"name": "x", "kind": "just", "ratios": [1.0, 1.5]},
            {"name": "x", "kind": "just", "ratios": ["1/1"] * 12},
            {"name": "x", "kind": "equal", "reference_pitch": "C4"},
            {"name": "x", "kind": "equal", "ratios": [1 + i / 12 for i in range(12)]},
        ],
    )
    def test_invalid(self, data: dict) -> None:
        with pytest.raises(ValidationError):
            TuningConfig.model_validate(data)

    def test_frozen(self) -> None:
        config = TuningConfig(name="x")
        with pytest.raises(ValidationError):
            config.reference_frequency = 415.0  # type: ignore[misc]

    def test_yaml_round_trip(self) -> None:
        config = TuningConfig(name="ji", kind="just", reference_pitch="A4")
        text = yaml.safe_dump(config.to_yaml_dict())
        assert TuningConfig.model_validate(yaml.safe_load(text)) == config

    def test_metadata(self) -> None:
        config = TuningConfig(name="baroque", description="Low", reference_frequency=415.0)
        meta = TuningMetadata.from_config(config)
        assert meta.name == "baroque"
        assert meta.kind == TuningKind.EQUAL
        assert meta.reference == "A4 = 415.0 Hz"


class TestTuningLoader:
    """Tests for TuningLoader."""

    def test_library_presets(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        names = [t.name for t in loader.list_tunings()]
        assert names == ["baroque-a415", "concert-a440", "just-a4", "just-c4", "verdi-a432"]

    def test_default_library_path(self) -> None:
        loader = TuningLoader()
        assert loader.get_config("concert-a440") is not None

    def test_get_tuning(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        tuning = loader.get_tuning("just-c4")
        assert isinstance(tuning, JustIntonation)
        assert tuning.to_hertz(PITCHES["C5"]) == pytest.approx(523.26)
        assert tuning.to_hertz(PITCHES["E4"]) == pytest.approx(261.63 * 5 / 4)

    def test_missing(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        assert loader.get_config("nonexistent") is None
        assert loader.get_tuning("nonexistent") is None

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "concert-a440.yaml").write_text(
            yaml.safe_dump({"name": "concert-a440", "reference_frequency": 442.0})
        )
        loader = TuningLoader(library_path=library_path, project_path=temp_dir)
        assert loader.get_tuning("concert-a440").to_hertz(PITCHES["A4"]) == 442.0
        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["concert-a440"].reference == "A4 = 442.0 Hz"

    def test_invalid_file_skipped(self, temp_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        (temp_dir / "broken.yaml").write_text("name: broken\nreference_frequency: -1\n")
        (temp_dir / "garbage.yaml").write_text("{unclosed: [")
        (temp_dir / "good.yaml").write_text("name: good\n")
        loader = TuningLoader(library_path=temp_dir)
        assert [t.name for t in loader.list_tunings()] == ["good"]
        assert loader.get_config("broken") is None
        assert "Skipping tuning preset" in caplog.text

    def test_listed_presets_are_fetchable(
        self, library_path: Path, temp_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (temp_dir / "Studio-A442.yaml").write_text("name: Studio-A442\nreference_frequency: 442\n")
        (temp_dir / "foo.yaml").write_text("name: bar\n")
        (temp_dir / "studio-a443.yaml").write_text("name: studio-a443\nreference_frequency: 443\n")
        loader = TuningLoader(library_path=library_path, project_path=temp_dir)

        names = [t.name for t in loader.list_tunings()]
        assert "studio-a443" in names
        assert "bar" not in names
        assert "studio-a442" not in names
        for name in names:
            assert loader.get_tuning(name) is not None
        assert "does not match its file name" in caplog.text

    def test_misnamed_project_file_does_not_override(
        self, library_path: Path, temp_dir: Path
    ) -> None:
        (temp_dir / "my-concert.yaml").write_text(
            "name: concert-a440\nreference_frequency: 442\n"
        )
        loader = TuningLoader(library_path=library_path, project_path=temp_dir)
        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["concert-a440"].reference == "A4 = 440.0 Hz"
        assert loader.get_tuning("concert-a440").to_hertz(PITCHES["A4"]) == 440.0
        assert loader.get_config("my-concert") is None

    def test_cache(self, temp_dir: Path) -> None:
        path = temp_dir / "cached.yaml"
        path.write_text("name: cached\nreference_frequency: 440\n")
        loader = TuningLoader(library_path=temp_dir)
        assert loader.get_config("cached").reference_frequency == 440.0

        path.write_text("name: cached\nreference_frequency: 415\n")
        assert loader.get_config("cached").reference_frequency == 440.0

        loader.clear_cache()
        assert loader.get_config("cached").reference_frequency == 415.0

    def test_missing_library(self, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=temp_dir / "nope")
        assert loader.list_tunings() == []
