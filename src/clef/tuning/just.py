"""
Just intonation.

Each of the twelve semitones above the reference pitch has its own
small-integer frequency ratio; octaves are exact doublings.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from clef.constants import (
    DEFAULT_JUST_REFERENCE_HERTZ,
    JUST_RATIOS,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from clef.core.fraction import Fraction
from clef.core.numeric import is_octave_table
from clef.core.pitch import NoteName, Pitch
from clef.tuning.base import TuningSystem, prefer_flats

logger = logging.getLogger(__name__)

C4 = Pitch(NoteName.C, 4)

# 5-limit table as exact fractions
FIVE_LIMIT_RATIOS: tuple[Fraction, ...] = tuple(Fraction(n, d) for n, d in JUST_RATIOS)


class JustIntonation(TuningSystem):
    """
    Ratio-table tuning relative to a reference pitch.

    Examples:
        JustIntonation() = 5-limit table on C4 = 261.63 Hz
        JustIntonation(A4, 440.0) = the same table built on A
    """

    def __init__(
        self,
        reference_pitch: Pitch = C4,
        reference_frequency: float = DEFAULT_JUST_REFERENCE_HERTZ,
        ratios: Sequence[Fraction | float] | None = None,
    ) -> None:
        """
        Args:
            reference_pitch: Pitch sounding at reference_frequency
            reference_frequency: Frequency in hertz (> 0)
            ratios: Twelve ratios for the semitones above the reference,
                starting at 1, ascending, below 2 (default: 5-limit)
        """
        if not (reference_frequency > 0 and math.isfinite(reference_frequency)):
            raise ValueError(ErrorMessages.FREQUENCY_NOT_POSITIVE.format(hertz=reference_frequency))

        table = tuple(float(r) for r in (FIVE_LIMIT_RATIOS if ratios is None else ratios))
        if not is_octave_table(table, SEMITONES_PER_OCTAVE):
            raise ValueError(ErrorMessages.INVALID_RATIOS.format(count=SEMITONES_PER_OCTAVE))

        self._reference_pitch = reference_pitch
        self._reference_frequency = float(reference_frequency)
        self._ratios = table

    @property
    def reference_pitch(self) -> Pitch:
        return self._reference_pitch

    @property
    def reference_frequency(self) -> float:
        return self._reference_frequency

    @property
    def ratios(self) -> tuple[float, ...]:
        """Ratio per semitone above the reference, within one octave."""
        return self._ratios

    def _hertz(self, pitch: Pitch) -> float:
        octave, tone = divmod(pitch - self._reference_pitch, SEMITONES_PER_OCTAVE)
        return self._reference_frequency * self._ratios[tone] * 2.0**octave

    def _pitch(self, hertz: float) -> Pitch:
        ratio = hertz / self._reference_frequency
        octave = math.floor(math.log2(ratio))
        residual = ratio / 2.0**octave

        # The next octave's unison competes with the top of the table
        candidates = list(enumerate(self._ratios)) + [(SEMITONES_PER_OCTAVE, 2.0)]
        tone, nearest = min(candidates, key=lambda c: abs(math.log2(residual / c[1])))
        deviation = math.log2(residual / nearest)

        position = self._reference_pitch.position + octave * SEMITONES_PER_OCTAVE + tone
        pitch = Pitch.from_position(position, prefer_flats(deviation))
        logger.debug(f"{hertz} Hz -> {pitch} ({deviation * 1200:+.2f} cents)")
        return pitch

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JustIntonation):
            return NotImplemented
        return (
            self._reference_pitch == other._reference_pitch
            and self._reference_frequency == other._reference_frequency
            and self._ratios == other._ratios
        )

    def __hash__(self) -> int:
        return hash(("just", self._reference_pitch, self._reference_frequency, self._ratios))

    def __repr__(self) -> str:
        return f"JustIntonation({self._reference_pitch}, {self._reference_frequency})"

