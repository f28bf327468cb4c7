"""
Rhythm primitives - Duration and its conversion to and from Fraction.

A Duration is a power-of-two note value (whole to 128th) with up to four
dots. Its length, measured in whole notes, is 1/denominator * (2 - 2**-dots):
each dot adds half of the previous increment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import ClassVar

from clef.constants import MAX_DENOMINATOR, MAX_DOTS, ErrorMessages
from clef.core.fraction import Fraction
from clef.core.numeric import is_power_of_two

_BASE_NAMES: dict[int, str] = {
    1: "whole",
    2: "half",
    4: "quarter",
    8: "eighth",
    16: "sixteenth",
    32: "32nd",
    64: "64th",
    128: "128th",
}
_DOT_PREFIXES: list[str] = ["", "dotted ", "double dotted ", "triple dotted ", "quadruple dotted "]


class ConversionFailure(str, Enum):
    """Why a fraction could not be expressed as a Duration."""

    NOT_POSITIVE = "not_positive"
    DENOMINATOR_TOO_LARGE = "denominator_too_large"
    NOT_DURATIONAL = "not_durational"


class DurationConversionError(ValueError):
    """Raised by Duration.from_fraction when no dotted duration matches."""

    def __init__(self, reason: ConversionFailure, fraction: Fraction, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.fraction = fraction


@total_ordering
@dataclass(frozen=True)
class Duration:
    """
    A dotted power-of-two note value.

    Duration(4) is a quarter note, Duration(4, dots=1) a dotted quarter.
    Denominators run from 1 (whole) to 128, the shortest value that
    from_fraction can produce.

    Immutable and hashable.
    """

    denominator: int
    dots: int = 0

    WHOLE: ClassVar[Duration]
    HALF: ClassVar[Duration]
    QUARTER: ClassVar[Duration]
    EIGHTH: ClassVar[Duration]
    SIXTEENTH: ClassVar[Duration]
    THIRTY_SECOND: ClassVar[Duration]
    SIXTY_FOURTH: ClassVar[Duration]
    HUNDRED_TWENTY_EIGHTH: ClassVar[Duration]

    DOTTED_HALF: ClassVar[Duration]
    DOTTED_QUARTER: ClassVar[Duration]
    DOTTED_EIGHTH: ClassVar[Duration]

    def __post_init__(self) -> None:
        if not (is_power_of_two(self.denominator) and self.denominator <= MAX_DENOMINATOR):
            raise ValueError(
                ErrorMessages.NOT_POWER_OF_TWO.format(
                    max=MAX_DENOMINATOR, denominator=self.denominator
                )
            )
        if not 0 <= self.dots <= MAX_DOTS:
            raise ValueError(ErrorMessages.TOO_MANY_DOTS.format(max_dots=MAX_DOTS, dots=self.dots))

    def to_fraction(self) -> Fraction:
        """
        Length of this duration in whole notes.

        Returns:
            Irreducible Fraction, e.g. 7/16 for a double dotted quarter
        """
        fraction = Fraction(1, self.denominator)
        divisor = self.denominator
        for _ in range(self.dots):
            divisor *= 2
            fraction += Fraction(1, divisor)
        return fraction.to_irreducible()

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> Duration:
        """
        Decompose a fraction of a whole note into a dotted duration.

        Picks the largest power-of-two note value that fits, then consumes
        up to four successively halved dots. Anything left over means the
        value has no dotted representation.

        Args:
            fraction: Length in whole notes

        Returns:
            The matching Duration

        Raises:
            DurationConversionError: With reason NOT_POSITIVE,
                DENOMINATOR_TOO_LARGE or NOT_DURATIONAL
        """
        if fraction.signum() <= 0:
            raise DurationConversionError(
                ConversionFailure.NOT_POSITIVE,
                fraction,
                ErrorMessages.NOT_POSITIVE.format(fraction=fraction),
            )

        remainder = fraction
        denominator = 0
        d = 1
        while d <= MAX_DENOMINATOR:
            base = Fraction(1, d)
            if remainder >= base:
                remainder -= base
                denominator = d
                break
            d *= 2

        if denominator == 0:
            raise DurationConversionError(
                ConversionFailure.DENOMINATOR_TOO_LARGE,
                fraction,
                ErrorMessages.DENOMINATOR_TOO_LARGE.format(fraction=fraction, max=MAX_DENOMINATOR),
            )

        dots = 0
        half = Fraction(1, denominator * 2)
        while dots < MAX_DOTS and remainder >= half:
            remainder -= half
            dots += 1
            half *= Fraction.HALF

        if remainder != Fraction.ZERO:
            raise DurationConversionError(
                ConversionFailure.NOT_DURATIONAL,
                fraction,
                ErrorMessages.NOT_DURATIONAL.format(fraction=fraction),
            )

        return cls(denominator, dots)

    @classmethod
    def parse(cls, name: str) -> Duration:
        """
        Parse a duration from its English name.

        Accepts the forms produced by str(), e.g. 'quarter',
        'dotted eighth', 'double dotted half', '32nd'.
        """
        text = " ".join(name.strip().lower().split())
        for dots in range(MAX_DOTS, 0, -1):
            prefix = _DOT_PREFIXES[dots]
            if text.startswith(prefix):
                base = text[len(prefix) :]
                break
        else:
            dots, base = 0, text

        for denominator, base_name in _BASE_NAMES.items():
            if base_name == base:
                return cls(denominator, dots)
        raise ValueError(ErrorMessages.UNKNOWN_DURATION.format(text=name))

    def dotted(self) -> Duration:
        """Return this duration with one more dot."""
        return Duration(self.denominator, self.dots + 1)

    def to_ticks(self, ticks_per_quarter: int) -> int:
        """
        Convert to MIDI-style ticks.

        Args:
            ticks_per_quarter: Resolution (typically 480)

        Returns:
            Number of ticks

        Raises:
            ValueError: If the resolution cannot represent this duration exactly
        """
        ticks = self.to_fraction() * (4 * ticks_per_quarter)
        if ticks.denominator != 1:
            raise ValueError(
                f"{self} cannot be expressed exactly at {ticks_per_quarter} ticks per quarter"
            )
        return ticks.numerator

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_fraction() < other.to_fraction()

    def __str__(self) -> str:
        base = _BASE_NAMES[self.denominator]
        return f"{_DOT_PREFIXES[self.dots]}{base}"

    def __repr__(self) -> str:
        if self.dots:
            return f"Duration({self.denominator}, dots={self.dots})"
        return f"Duration({self.denominator})"


# Define common durations
Duration.WHOLE = Duration(1)
Duration.HALF = Duration(2)
Duration.QUARTER = Duration(4)
Duration.EIGHTH = Duration(8)
Duration.SIXTEENTH = Duration(16)
Duration.THIRTY_SECOND = Duration(32)
Duration.SIXTY_FOURTH = Duration(64)
Duration.HUNDRED_TWENTY_EIGHTH = Duration(128)

# Dotted versions
Duration.DOTTED_HALF = Duration(2, dots=1)
Duration.DOTTED_QUARTER = Duration(4, dots=1)
Duration.DOTTED_EIGHTH = Duration(8, dots=1)
