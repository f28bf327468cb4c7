"""
clef - music-theory primitives.

Exact fractions, dotted note durations, spelled pitches and tuning
systems that convert between pitch and frequency.
"""

from clef.core import (
    PITCHES,
    Accidental,
    Chord,
    ChordQuality,
    ConversionFailure,
    Duration,
    DurationConversionError,
    Fraction,
    Interval,
    NoteName,
    Pitch,
)
from clef.tuning import EqualTemperament, JustIntonation, TuningLoader, TuningSystem

__version__ = "0.1.0"

__all__ = [
    "PITCHES",
    "Accidental",
    "Chord",
    "ChordQuality",
    "ConversionFailure",
    "Duration",
    "DurationConversionError",
    "EqualTemperament",
    "Fraction",
    "Interval",
    "JustIntonation",
    "NoteName",
    "Pitch",
    "TuningLoader",
    "TuningSystem",
]
