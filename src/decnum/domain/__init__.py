"""
Domain models and value objects.

Contains the Value type and single-digit conversions (Digit Store).
"""

from src.decnum.domain.digits import (
    DIGIT_CHARS,
    RADIX,
    MalformedDigitSequence,
    digit_char,
    digit_value,
    is_digit_text,
)
from src.decnum.domain.value import ONE, ZERO, Value, ValueLike, as_value

__all__ = [
    # Digits module
    "DIGIT_CHARS",
    "RADIX",
    "MalformedDigitSequence",
    "digit_char",
    "digit_value",
    "is_digit_text",
    # Value model
    "Value",
    "ValueLike",
    "ZERO",
    "ONE",
    "as_value",
]
