"""
Core music primitives.

These are the exact values everything else composes on:
- Fraction: Exact rational arithmetic
- Duration: Dotted power-of-two note values, convertible to/from Fraction
- NoteName, Accidental: Letter and chromatic alteration
- Pitch: Absolute spelled pitch (letter + accidental + octave)
- Interval: Distance between pitches in semitones
- ChordQuality, Chord: Interval stacks on a root pitch
"""

from clef.core.chord import Chord, ChordQuality
from clef.core.duration import ConversionFailure, Duration, DurationConversionError
from clef.core.fraction import Fraction
from clef.core.pitch import PITCHES, Accidental, Interval, NoteName, Pitch

__all__ = [
    # Rational
    "Fraction",
    # Rhythm
    "Duration",
    "DurationConversionError",
    "ConversionFailure",
    # Pitch
    "NoteName",
    "Accidental",
    "Pitch",
    "PITCHES",
    "Interval",
    # Chord
    "ChordQuality",
    "Chord",
]
