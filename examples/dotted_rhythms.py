#!/usr/bin/env python3
"""
Example: Dotted Rhythms and Exact Fractions.

Shows how dotted durations map to fractions of a whole note, how fractions
are matched back to a single note value, and how a bar adds up exactly.

Usage:
    python examples/dotted_rhythms.py
"""

from clef import Duration, DurationConversionError, Fraction


def main() -> None:
    """Demonstrate duration conversions."""
    print("Clef Rhythm Demo")
    print("=" * 40)
    print()

    print("Dotted quarters:")
    for dots in range(5):
        duration = Duration(4, dots)
        print(f"  {str(duration):<26} {duration.to_fraction()!s:>6}")
    print()

    print("Fractions to durations:")
    for text in ("3/8", "7/16", "6/16", "9/16", "1/256", "0"):
        fraction = Fraction.parse(text)
        try:
            print(f"  {text:>6} -> {Duration.from_fraction(fraction)}")
        except DurationConversionError as e:
            print(f"  {text:>6} -> {e.reason.value}")
    print()

    # A 3/4 bar: dotted quarter, eighth, quarter
    bar = [Duration.DOTTED_QUARTER, Duration.EIGHTH, Duration.QUARTER]
    total = sum((d.to_fraction() for d in bar), Fraction.ZERO)
    print(f"Bar {', '.join(str(d) for d in bar)}")
    print(f"  total {total} (== 3/4: {total == Fraction(3, 4)})")
    print(f"  ticks at 480 ppq: {[d.to_ticks(480) for d in bar]}")


if __name__ == "__main__":
    main()
