"""
Chord primitives - ChordQuality and Chord.

A chord quality is a set of intervals measured from the root. A Chord
places a quality on an absolute root pitch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from clef.core.pitch import Interval, Pitch

if TYPE_CHECKING:
    from clef.tuning.base import TuningSystem


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    Immutable and hashable.
    """

    intervals: frozenset[Interval]
    name: str = ""

    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    SUS2: ClassVar[ChordQuality]
    SUS4: ClassVar[ChordQuality]

    @property
    def sorted_intervals(self) -> list[Interval]:
        return sorted(self.intervals)

    def __str__(self) -> str:
        return self.name or "custom"


def _quality(name: str, *semitones: int) -> ChordQuality:
    return ChordQuality(frozenset(Interval(s) for s in semitones), name)


ChordQuality.MAJOR = _quality("major", 0, 4, 7)
ChordQuality.MINOR = _quality("minor", 0, 3, 7)
ChordQuality.DIMINISHED = _quality("diminished", 0, 3, 6)
ChordQuality.AUGMENTED = _quality("augmented", 0, 4, 8)
ChordQuality.MAJOR_7 = _quality("major 7", 0, 4, 7, 11)
ChordQuality.MINOR_7 = _quality("minor 7", 0, 3, 7, 10)
ChordQuality.DOMINANT_7 = _quality("dominant 7", 0, 4, 7, 10)
ChordQuality.SUS2 = _quality("sus2", 0, 2, 7)
ChordQuality.SUS4 = _quality("sus4", 0, 5, 7)


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: root pitch plus quality.

    Examples:
        Chord(C4) = C major triad on middle C
        Chord(A3, ChordQuality.MINOR_7) = Am7
    """

    root: Pitch
    quality: ChordQuality = ChordQuality.MAJOR

    def pitches(self, prefer_flats: bool = False) -> list[Pitch]:
        """
        Chord tones from the root upwards.

        The root keeps its own spelling; upper tones are respelled.
        """
        tones = []
        for interval in self.quality.sorted_intervals:
            if interval == Interval.UNISON:
                tones.append(self.root)
            else:
                tones.append(self.root.transpose(interval.semitones, prefer_flats))
        return tones

    def frequencies(self, tuning: TuningSystem) -> list[float]:
        """Frequencies of the chord tones in hertz under a tuning system."""
        return [tuning.to_hertz(pitch) for pitch in self.pitches()]

    def __str__(self) -> str:
        return f"{self.root} {self.quality}"
