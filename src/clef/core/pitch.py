"""
Pitch primitives - NoteName, Accidental, Pitch and Interval.

A Pitch is an absolute, spelled pitch: note letter, accidental and octave.
Enharmonic pitches (C#4 and Db4) are distinct values that share the same
chromatic position, so their semitone distance is zero.

Named pitch constants (C4, Cs4, Db4, ..., B9) are generated at import time
for every octave from -1 to 9. Octave -1 uses an underscore (C_1).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

from clef.constants import (
    JUST_RATIOS,
    MAX_OCTAVE,
    MIN_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from clef.core.fraction import Fraction


class NoteName(IntEnum):
    """The seven natural note letters, valued by semitones above C."""

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    @property
    def semitone(self) -> int:
        """Semitones above C within the octave."""
        return int(self.value)


class Accidental(IntEnum):
    """Chromatic alteration of a note letter, valued by semitone offset."""

    FLAT = -1
    NATURAL = 0
    SHARP = 1

    @property
    def offset(self) -> int:
        return int(self.value)

    @property
    def symbol(self) -> str:
        return _ACCIDENTAL_SYMBOLS[self]


_ACCIDENTAL_SYMBOLS: dict[Accidental, str] = {
    Accidental.FLAT: "b",
    Accidental.NATURAL: "",
    Accidental.SHARP: "#",
}

# Spelling of each chromatic position within the octave
_SHARP_SPELLINGS: list[tuple[NoteName, Accidental]] = [
    (NoteName.C, Accidental.NATURAL),
    (NoteName.C, Accidental.SHARP),
    (NoteName.D, Accidental.NATURAL),
    (NoteName.D, Accidental.SHARP),
    (NoteName.E, Accidental.NATURAL),
    (NoteName.F, Accidental.NATURAL),
    (NoteName.F, Accidental.SHARP),
    (NoteName.G, Accidental.NATURAL),
    (NoteName.G, Accidental.SHARP),
    (NoteName.A, Accidental.NATURAL),
    (NoteName.A, Accidental.SHARP),
    (NoteName.B, Accidental.NATURAL),
]
_FLAT_SPELLINGS: list[tuple[NoteName, Accidental]] = [
    (NoteName.C, Accidental.NATURAL),
    (NoteName.D, Accidental.FLAT),
    (NoteName.D, Accidental.NATURAL),
    (NoteName.E, Accidental.FLAT),
    (NoteName.E, Accidental.NATURAL),
    (NoteName.F, Accidental.NATURAL),
    (NoteName.G, Accidental.FLAT),
    (NoteName.G, Accidental.NATURAL),
    (NoteName.A, Accidental.FLAT),
    (NoteName.A, Accidental.NATURAL),
    (NoteName.B, Accidental.FLAT),
    (NoteName.B, Accidental.NATURAL),
]

_PITCH_PATTERN = re.compile(r"^([A-Ga-g])(#|b|s)?(-?\d)$")


@dataclass(frozen=True)
class Pitch:
    """
    An absolute pitch: note letter, octave and accidental.

    Octave numbering follows scientific pitch notation (C4 is middle C,
    A4 is concert A). The octave belongs to the letter, so B#4 sounds
    like C5 and Cb4 like B3.

    Immutable and hashable.
    """

    name: NoteName
    octave: int
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        for field, enum in (("name", NoteName), ("accidental", Accidental)):
            value = getattr(self, field)
            if isinstance(value, enum):
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    ErrorMessages.INVALID_NOTE_FIELD.format(
                        field=field, type=enum.__name__, value=value
                    )
                )
            # Plain ints are looked up by value: Accidental(1) is SHARP
            object.__setattr__(self, field, enum(value))
        if not MIN_OCTAVE <= self.octave <= MAX_OCTAVE:
            raise ValueError(
                ErrorMessages.OCTAVE_OUT_OF_RANGE.format(
                    min=MIN_OCTAVE, max=MAX_OCTAVE, octave=self.octave
                )
            )

    @property
    def position(self) -> int:
        """Absolute chromatic position (C0 = 0, C-1 = -12)."""
        return self.name.semitone + self.octave * SEMITONES_PER_OCTAVE + self.accidental.offset

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.position + SEMITONES_PER_OCTAVE

    def transpose(self, semitones: int, prefer_flats: bool = False) -> Pitch:
        """Move by a number of semitones, respelling the result."""
        return Pitch.from_position(self.position + semitones, prefer_flats)

    def interval_to(self, other: Pitch) -> Interval:
        """Signed interval from this pitch to another."""
        return Interval(other - self)

    @classmethod
    def from_position(cls, position: int, prefer_flats: bool = False) -> Pitch:
        """
        Spell an absolute chromatic position.

        White keys are always natural. Black keys take the sharp of the
        lower letter unless prefer_flats selects the flat of the upper one.

        Raises:
            ValueError: If the octave falls outside -1..9
        """
        octave, tone = divmod(position, SEMITONES_PER_OCTAVE)
        spellings = _FLAT_SPELLINGS if prefer_flats else _SHARP_SPELLINGS
        name, accidental = spellings[tone]
        return cls(name, octave, accidental)

    @classmethod
    def from_midi(cls, midi_note: int, prefer_flats: bool = False) -> Pitch:
        """Spell a MIDI note number."""
        return cls.from_position(midi_note - SEMITONES_PER_OCTAVE, prefer_flats)

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch from a string like 'C4', 'F#3', 'Bb-1' or 'Gs5'.
        """
        match = _PITCH_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(ErrorMessages.INVALID_PITCH.format(text=text))
        letter, modifier, octave = match.groups()
        accidental = {
            None: Accidental.NATURAL,
            "#": Accidental.SHARP,
            "s": Accidental.SHARP,
            "b": Accidental.FLAT,
        }[modifier]
        return cls(NoteName[letter.upper()], int(octave), accidental)

    @property
    def constant_name(self) -> str:
        """Identifier of the matching module constant, e.g. 'Gs5' or 'C_1'."""
        suffix = {Accidental.NATURAL: "", Accidental.SHARP: "s", Accidental.FLAT: "b"}
        octave = f"_{-self.octave}" if self.octave < 0 else str(self.octave)
        return f"{self.name.name}{suffix[self.accidental]}{octave}"

    def __sub__(self, other: Pitch) -> int:
        """Semitone distance from other to self."""
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.position - other.position

    def __str__(self) -> str:
        return f"{self.name.name}{self.accidental.symbol}{self.octave}"


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Chord qualities are interval stacks; an interval also knows the
    5-limit just ratio of its within-octave class.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def octaves(self) -> int:
        """Whole octaves spanned (floored)."""
        return self._semitones // SEMITONES_PER_OCTAVE

    @property
    def simple(self) -> Interval:
        """The interval reduced into a single octave (0-11)."""
        return Interval(self._semitones % SEMITONES_PER_OCTAVE)

    @property
    def just_ratio(self) -> Fraction:
        """
        5-limit just frequency ratio, e.g. 3/2 for a perfect fifth.

        Compound intervals multiply by 2 per octave; descending ones divide.
        """
        numerator, denominator = JUST_RATIOS[self._semitones % SEMITONES_PER_OCTAVE]
        ratio = Fraction(numerator, denominator)
        if self.octaves >= 0:
            return ratio * (2**self.octaves)
        return ratio / (2 ** -self.octaves)

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __neg__(self) -> Interval:
        return Interval(-self._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"


Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)


def _generate_pitches() -> dict[str, Pitch]:
    """Every natural, plus the sharps and flats of the black keys, per octave."""
    pitches: dict[str, Pitch] = {}
    for octave in range(MIN_OCTAVE, MAX_OCTAVE + 1):
        for position in range(SEMITONES_PER_OCTAVE):
            absolute = octave * SEMITONES_PER_OCTAVE + position
            spellings = {Pitch.from_position(absolute), Pitch.from_position(absolute, True)}
            for pitch in sorted(spellings, key=lambda p: p.accidental, reverse=True):
                pitches[pitch.constant_name] = pitch
    return pitches


PITCHES: dict[str, Pitch] = _generate_pitches()
globals().update(PITCHES)

__all__ = ["Accidental", "Interval", "NoteName", "PITCHES", "Pitch", *PITCHES]
