"""
TuningSystem - the pitch/frequency conversion interface.

Implementations provide _hertz() and _pitch(); the public methods
enforce the contract around them:
- to_hertz(pitch) always returns a positive frequency
- to_pitch(hertz) requires a positive, finite frequency
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from clef.constants import SPELLING_TOLERANCE, ErrorMessages
from clef.core.pitch import Pitch


class TuningSystem(ABC):
    """Converts between spelled pitches and frequencies in hertz."""

    def to_hertz(self, pitch: Pitch) -> float:
        """
        Frequency of a pitch.

        Args:
            pitch: Pitch to tune

        Returns:
            Frequency in hertz (> 0)

        Raises:
            ArithmeticError: If the implementation produced a non-positive value
        """
        hertz = self._hertz(pitch)
        if not hertz > 0:
            raise ArithmeticError(
                ErrorMessages.RESULT_NOT_POSITIVE.format(hertz=hertz, pitch=pitch)
            )
        return hertz

    def to_pitch(self, hertz: float) -> Pitch:
        """
        Nearest pitch to a frequency.

        Black keys are spelled from the rounding direction: a frequency
        above the exact pitch reads as the flat of the upper letter, one
        below (or exactly on it) as the sharp of the lower letter.

        Args:
            hertz: Frequency in hertz (> 0)

        Returns:
            The nearest Pitch

        Raises:
            ValueError: If hertz is not positive and finite, or the pitch
                falls outside the supported octave range
        """
        if not (hertz > 0 and math.isfinite(hertz)):
            raise ValueError(ErrorMessages.FREQUENCY_NOT_POSITIVE.format(hertz=hertz))
        return self._pitch(hertz)

    @property
    @abstractmethod
    def reference_pitch(self) -> Pitch:
        """Pitch tuned to the reference frequency."""

    @property
    @abstractmethod
    def reference_frequency(self) -> float:
        """Frequency of the reference pitch in hertz."""

    @abstractmethod
    def _hertz(self, pitch: Pitch) -> float:
        """Compute the frequency of a pitch."""

    @abstractmethod
    def _pitch(self, hertz: float) -> Pitch:
        """Resolve a validated frequency to a pitch."""


def prefer_flats(deviation: float) -> bool:
    """
    Spelling rule shared by all tuning systems.

    deviation is how far the frequency sits above (positive) or below
    (negative) the resolved pitch, in any logarithmic unit. Ties read sharp.
    """
    return deviation > SPELLING_TOLERANCE


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
