"""
Fraction - exact rational numbers for rhythmic values and tuning ratios.

Fractions keep the fields they were built with; reduction happens on demand
via to_irreducible(). Equality, ordering and hashing always look at the
reduced value, so Fraction(5, 10) == Fraction(1, 2). Arithmetic results are
always irreducible.
"""

from __future__ import annotations

from functools import total_ordering
from typing import ClassVar

from clef.constants import ErrorMessages
from clef.core.numeric import gcd, sign


@total_ordering
class Fraction:
    """
    An exact rational number numerator/denominator.

    Immutable and hashable.
    """

    __slots__ = ("_numerator", "_denominator")
    _numerator: int
    _denominator: int

    ZERO: ClassVar[Fraction]
    ONE: ClassVar[Fraction]
    HALF: ClassVar[Fraction]

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """
        Create a fraction.

        Args:
            numerator: Signed integer numerator
            denominator: Signed, non-zero integer denominator

        Raises:
            TypeError: If either field is not an integer
            ValueError: If the denominator is zero
        """
        for value in (numerator, denominator):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(ErrorMessages.NOT_INTEGER.format(value=value))
        if denominator == 0:
            raise ValueError(ErrorMessages.ZERO_DENOMINATOR)
        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Fraction is immutable")

    @property
    def numerator(self) -> int:
        """Numerator as constructed (not reduced)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator as constructed (not reduced)."""
        return self._denominator

    def signum(self) -> int:
        """Sign of the value: -1, 0 or 1."""
        return sign(self._numerator) * sign(self._denominator)

    def to_irreducible(self) -> Fraction:
        """
        Reduce by the GCD and move the sign onto the numerator.

        The denominator of the result is always positive.
        """
        divisor = gcd(self._numerator, self._denominator)
        return Fraction(
            abs(self._numerator // divisor) * self.signum(),
            abs(self._denominator // divisor),
        )

    def to_float(self) -> float:
        """Floating point approximation."""
        return self._numerator / self._denominator

    def reciprocal(self) -> Fraction:
        """Swap numerator and denominator."""
        if self._numerator == 0:
            raise ZeroDivisionError("zero has no reciprocal")
        return Fraction(self._denominator, self._numerator).to_irreducible()

    @classmethod
    def parse(cls, text: str) -> Fraction:
        """
        Parse a fraction from a string like '3/4', '-1/2' or '2'.

        The result keeps the fields as written.
        """
        parts = text.strip().split("/")
        if len(parts) not in (1, 2):
            raise ValueError(ErrorMessages.INVALID_FRACTION.format(text=text))
        try:
            fields = [int(part) for part in parts]
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_FRACTION.format(text=text)) from e
        return cls(*fields)

    @staticmethod
    def _coerce(other: object) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other)
        return None

    def __add__(self, other: Fraction | int) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self._denominator == rhs._denominator:
            return Fraction(self._numerator + rhs._numerator, self._denominator).to_irreducible()
        numerator = self._numerator * rhs._denominator + rhs._numerator * self._denominator
        denominator = self._denominator * rhs._denominator
        return Fraction(numerator, denominator).to_irreducible()

    def __radd__(self, other: int) -> Fraction:
        return self.__add__(other)

    def __neg__(self) -> Fraction:
        return Fraction(-self._numerator, self._denominator).to_irreducible()

    def __pos__(self) -> Fraction:
        return self.to_irreducible()

    def __abs__(self) -> Fraction:
        return -self if self.signum() < 0 else self.to_irreducible()

    def __sub__(self, other: Fraction | int) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + -rhs

    def __rsub__(self, other: int) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Fraction | int) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(
            self._numerator * rhs._numerator,
            self._denominator * rhs._denominator,
        ).to_irreducible()

    def __rmul__(self, other: int) -> Fraction:
        return self.__mul__(other)

    def __truediv__(self, other: Fraction | int) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._numerator == 0:
            raise ZeroDivisionError("division by a zero fraction")
        return self * rhs.reciprocal()

    def __rtruediv__(self, other: int) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        left = self.to_irreducible()
        right = rhs.to_irreducible()
        return left._numerator == right._numerator and left._denominator == right._denominator

    def __lt__(self, other: Fraction | int) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        left = self.to_irreducible()
        right = rhs.to_irreducible()
        # Both denominators are positive after reduction
        return left._numerator * right._denominator < right._numerator * left._denominator

    def __hash__(self) -> int:
        reduced = self.to_irreducible()
        if reduced._denominator == 1:
            return hash(reduced._numerator)
        return hash((reduced._numerator, reduced._denominator))

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"


Fraction.ZERO = Fraction(0, 1)
Fraction.ONE = Fraction(1, 1)
Fraction.HALF = Fraction(1, 2)
