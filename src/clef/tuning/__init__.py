"""
Tuning systems - pitch to frequency and back.

- TuningSystem: The conversion interface
- EqualTemperament: 12-TET anchored at A4
- JustIntonation: Ratio table relative to a reference pitch
- TuningLoader: Named presets from YAML
- project_tunings_dir: Where project presets are looked up
"""

from clef.tuning.base import TuningSystem
from clef.tuning.equal import EqualTemperament
from clef.tuning.just import FIVE_LIMIT_RATIOS, JustIntonation
from clef.tuning.loader import TuningLoader, project_tunings_dir

__all__ = [
    "EqualTemperament",
    "FIVE_LIMIT_RATIOS",
    "JustIntonation",
    "TuningLoader",
    "TuningSystem",
    "project_tunings_dir",
]
