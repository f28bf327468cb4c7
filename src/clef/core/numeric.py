"""
Numeric helpers shared by the rational, rhythm and tuning primitives.
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of the absolute values (gcd(0, 0) is 1)."""
    return math.gcd(a, b) or 1


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ..."""
    return n > 0 and n & (n - 1) == 0


def sign(n: int) -> int:
    """Return -1, 0 or 1."""
    return (n > 0) - (n < 0)


def is_octave_table(ratios: Sequence[float], size: int) -> bool:
    """True if ratios has size entries, starts at 1, ascends and stays below 2."""
    if len(ratios) != size or ratios[0] != 1:
        return False
    ascending = all(a < b for a, b in zip(ratios, ratios[1:]))
    return ascending and ratios[-1] < 2
