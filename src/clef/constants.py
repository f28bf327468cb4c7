"""
Constants and enums for the clef library.

No magic numbers - tuning defaults, ranges and messages live here.
"""

from enum import Enum

# Pitch range
MIN_OCTAVE = -1
MAX_OCTAVE = 9
SEMITONES_PER_OCTAVE = 12

# Duration limits
MAX_DOTS = 4
MAX_DENOMINATOR = 128  # Smallest convertible value is 1/128

# Equal temperament
DEFAULT_A4_HERTZ = 440.0
TWELFTH_ROOT_OF_TWO = 1.05946309435929526456182
LN_TWELFTH_ROOT_OF_TWO = 0.05776226504666210911809767902434

# Just intonation
DEFAULT_JUST_REFERENCE_HERTZ = 261.63  # C4

# Project tuning presets
TUNINGS_DIR_ENV = "CLEF_TUNINGS_DIR"
DEFAULT_TUNINGS_DIR = "tunings"  # Relative to the working directory

# 5-limit ratios within one octave, indexed by semitone above the reference
JUST_RATIOS: tuple[tuple[int, int], ...] = (
    (1, 1),  # unison
    (25, 24),  # minor second
    (9, 8),  # major second
    (6, 5),  # minor third
    (5, 4),  # major third
    (4, 3),  # perfect fourth
    (45, 32),  # tritone
    (3, 2),  # perfect fifth
    (8, 5),  # minor sixth
    (5, 3),  # major sixth
    (9, 5),  # minor seventh
    (15, 8),  # major seventh
)

# Remainders closer to zero than this count as ties (sharp spelling)
SPELLING_TOLERANCE = 1e-9


class TuningKind(str, Enum):
    """Available tuning system implementations."""

    EQUAL = "equal"
    JUST = "just"


class ErrorMessages:
    """Standardized error messages."""

    ZERO_DENOMINATOR = "denominator must not be zero"
    NOT_INTEGER = "Fraction fields must be integers, got {value!r}"
    INVALID_FRACTION = "Invalid fraction: '{text}'. Expected format like '3/4' or '2'."
    NOT_POWER_OF_TWO = "denominator must be a power of 2 between 1 and {max}, got {denominator}"
    TOO_MANY_DOTS = "dots must be between 0 and {max_dots}, got {dots}"
    OCTAVE_OUT_OF_RANGE = "octave must be in the range {min} to {max}, got {octave}"
    INVALID_PITCH = "Invalid pitch: '{text}'. Expected format like 'C4', 'F#3' or 'Bb-1'."
    NOT_POSITIVE = "fraction must be positive, got {fraction}"
    DENOMINATOR_TOO_LARGE = "denominator too large: {fraction} is smaller than 1/{max}"
    NOT_DURATIONAL = "not a durational fraction: {fraction}"
    FREQUENCY_NOT_POSITIVE = "frequency must be a positive finite number, got {hertz}"
    RESULT_NOT_POSITIVE = "tuning produced a non-positive frequency {hertz} for {pitch}"
    INVALID_RATIOS = "ratio table must hold {count} ascending ratios in [1, 2) starting at 1"
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    PRESET_NAME_MISMATCH = "preset name '{name}' does not match its file name '{stem}'"
    INVALID_NOTE_FIELD = "{field} must be a {type}, got {value!r}"
    UNKNOWN_DURATION = "Unknown duration name: '{text}'"
