#!/usr/bin/env python3
"""
Example: Comparing Tuning Systems.

Prints one octave of frequencies under equal temperament and 5-limit just
intonation, the cents difference between them, and how a few measured
frequencies are spelled back into pitches.

Usage:
    python examples/tuning_tables.py
"""

import math

from clef import PITCHES, Chord, ChordQuality, EqualTemperament, JustIntonation, TuningLoader


def cents(ratio: float) -> float:
    """Size of a frequency ratio in cents."""
    return 1200 * math.log2(ratio)


def main() -> None:
    """Demonstrate tuning conversions."""
    print("Clef Tuning Demo")
    print("=" * 40)
    print()

    equal = EqualTemperament(440.0)
    just = JustIntonation(PITCHES["C4"], equal.to_hertz(PITCHES["C4"]))

    print("One octave from C4:")
    print(f"  {'pitch':<6} {'equal':>10} {'just':>10} {'cents':>7}")
    c4 = PITCHES["C4"]
    for step in range(13):
        pitch = c4.transpose(step)
        et = equal.to_hertz(pitch)
        ji = just.to_hertz(pitch)
        print(f"  {str(pitch):<6} {et:>10.3f} {ji:>10.3f} {cents(ji / et):>+7.2f}")
    print()

    # Spelling follows the rounding direction around black keys
    print("Frequencies to pitches (equal temperament):")
    for hertz in (369.9, 830.6, 830.7, 27.5):
        print(f"  {hertz:>7.1f} Hz -> {equal.to_pitch(hertz)}")
    print()

    # Chords sound purer in just intonation
    chord = Chord(c4, ChordQuality.MAJOR)
    print(f"{chord}:")
    for name, system in (("equal", equal), ("just", just)):
        freqs = chord.frequencies(system)
        print(f"  {name:<6} " + ", ".join(f"{f:.2f}" for f in freqs))
    print()

    # Built-in presets
    loader = TuningLoader()
    print("Presets:")
    for meta in loader.list_tunings():
        tuning = loader.get_tuning(meta.name)
        if tuning is None:
            continue
        print(f"  {meta.name:<14} {meta.reference:<18} A4 = {tuning.to_hertz(PITCHES['A4']):.2f}")


if __name__ == "__main__":
    main()
