"""
Twelve-tone equal temperament.

Every semitone is the same frequency ratio, the twelfth root of two,
counted from A4 at the reference frequency.
"""

from __future__ import annotations

import logging
import math

from clef.constants import (
    DEFAULT_A4_HERTZ,
    LN_TWELFTH_ROOT_OF_TWO,
    TWELFTH_ROOT_OF_TWO,
    ErrorMessages,
)
from clef.core.pitch import NoteName, Pitch
from clef.tuning.base import TuningSystem, prefer_flats, round_half_away

logger = logging.getLogger(__name__)

A4 = Pitch(NoteName.A, 4)


class EqualTemperament(TuningSystem):
    """
    12-TET anchored at A4.

    Examples:
        EqualTemperament() = concert pitch, A4 = 440 Hz
        EqualTemperament(415.0) = baroque pitch
    """

    def __init__(self, reference_frequency: float = DEFAULT_A4_HERTZ) -> None:
        """
        Args:
            reference_frequency: Frequency of A4 in hertz (> 0)
        """
        if not (reference_frequency > 0 and math.isfinite(reference_frequency)):
            raise ValueError(ErrorMessages.FREQUENCY_NOT_POSITIVE.format(hertz=reference_frequency))
        self._reference_frequency = float(reference_frequency)

    @property
    def reference_frequency(self) -> float:
        """Frequency of A4 in hertz."""
        return self._reference_frequency

    @property
    def reference_pitch(self) -> Pitch:
        return A4

    def _hertz(self, pitch: Pitch) -> float:
        intervals = pitch - A4
        return self._reference_frequency * TWELFTH_ROOT_OF_TWO**intervals

    def _pitch(self, hertz: float) -> Pitch:
        intervals = math.log(hertz / self._reference_frequency) / LN_TWELFTH_ROOT_OF_TWO
        rounded = round_half_away(intervals)
        deviation = intervals - rounded

        pitch = Pitch.from_position(A4.position + rounded, prefer_flats(deviation))
        logger.debug(f"{hertz} Hz -> {pitch} ({deviation:+.4f} semitones)")
        return pitch

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EqualTemperament):
            return NotImplemented
        return self._reference_frequency == other._reference_frequency

    def __hash__(self) -> int:
        return hash(("equal", self._reference_frequency))

    def __repr__(self) -> str:
        return f"EqualTemperament({self._reference_frequency})"
