"""
Tuning preset models - named, validated tuning definitions.

A preset is plain data (usually loaded from YAML) that builds a
TuningSystem on demand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator, model_validator

from clef.constants import SEMITONES_PER_OCTAVE, ErrorMessages, TuningKind
from clef.core.fraction import Fraction
from clef.core.numeric import is_octave_table
from clef.core.pitch import Pitch

if TYPE_CHECKING:
    from clef.tuning.base import TuningSystem


def parse_ratio(value: Any) -> float:
    """Read a ratio written as '25/24' or as a number."""
    if isinstance(value, str) and "/" in value:
        return Fraction.parse(value).to_float()
    return float(value)


class TuningConfig(BaseModel):
    """
    A named tuning preset.

    Equal temperament presets only need a reference frequency (for A4).
    Just intonation presets name their reference pitch and may carry a
    custom ratio table.
    """

    schema_version: str = Field("tuning/v1", alias="schema")
    name: str = Field(..., description="Preset name")
    description: str = Field("", description="Preset description")
    kind: TuningKind = Field(default=TuningKind.EQUAL, description="Tuning system")
    reference_pitch: str = Field(default="A4", description="Pitch sounding at the reference")
    reference_frequency: float = Field(
        default=440.0,
        gt=0,
        description="Reference frequency in hertz",
    )
    ratios: tuple[float, ...] | None = Field(
        default=None,
        description="Twelve ratios above the reference (just intonation only)",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure preset name is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid tuning name: {v}")
        return v.lower()

    @field_validator("reference_pitch")
    @classmethod
    def validate_reference_pitch(cls, v: str) -> str:
        """Normalize the reference pitch spelling."""
        return str(Pitch.parse(v))

    @field_validator("ratios", mode="before")
    @classmethod
    def validate_ratios(cls, v: Any) -> tuple[float, ...] | None:
        """Accept fraction strings and check the table shape."""
        if v is None:
            return None
        ratios = tuple(parse_ratio(r) for r in v)
        if not is_octave_table(ratios, SEMITONES_PER_OCTAVE):
            raise ValueError(ErrorMessages.INVALID_RATIOS.format(count=SEMITONES_PER_OCTAVE))
        return ratios

    @model_validator(mode="after")
    def validate_kind(self) -> TuningConfig:
        """Equal temperament is always anchored at A4 and has no ratio table."""
        if self.kind == TuningKind.EQUAL:
            if self.reference_pitch != "A4":
                raise ValueError("Equal temperament presets must use A4 as reference")
            if self.ratios is not None:
                raise ValueError("Equal temperament presets cannot define ratios")
        return self

    @property
    def pitch(self) -> Pitch:
        """The reference pitch as a Pitch."""
        return Pitch.parse(self.reference_pitch)

    def build(self) -> TuningSystem:
        """Create the tuning system described by this preset."""
        from clef.tuning.equal import EqualTemperament
        from clef.tuning.just import JustIntonation

        if self.kind == TuningKind.EQUAL:
            return EqualTemperament(self.reference_frequency)
        return JustIntonation(self.pitch, self.reference_frequency, self.ratios)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        data: dict[str, Any] = {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "kind": self.kind.value,
            "reference_pitch": self.reference_pitch,
            "reference_frequency": self.reference_frequency,
        }
        if self.ratios is not None:
            data["ratios"] = list(self.ratios)
        return data


class TuningMetadata(BaseModel):
    """Lightweight metadata for listing presets."""

    name: str
    description: str
    kind: TuningKind
    reference: str

    model_config = {"frozen": True}

    @classmethod
    def from_config(cls, config: TuningConfig) -> TuningMetadata:
        """Create metadata from a preset."""
        return cls(
            name=config.name,
            description=config.description,
            kind=config.kind,
            reference=f"{config.reference_pitch} = {config.reference_frequency} Hz",
        )
