"""
Core math modules для uscu

Целочисленная арифметика шестнадцатых дюйма.
"""

from uscu.core.math.sixteenths import (
    # Constants
    FRACTION_STRINGS,
    INCHES_PER_FOOT,
    SIXTEENTHS_PER_INCH,
    # Quantization and carry
    carry_sixteenths,
    normalize_to_sixteenths,
    # Rendering helpers
    fraction_string,
    split_feet_inches,
    # Validation
    validate_non_negative_int,
)

__all__ = [
    "FRACTION_STRINGS",
    "INCHES_PER_FOOT",
    "SIXTEENTHS_PER_INCH",
    "carry_sixteenths",
    "normalize_to_sixteenths",
    "fraction_string",
    "split_feet_inches",
    "validate_non_negative_int",
]
