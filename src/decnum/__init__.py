"""
decnum — arbitrary-precision unsigned integers over decimal digits.

Public surface: the Value type and the schoolbook operations built on it.
"""

from src.decnum.domain import (
    MalformedDigitSequence,
    ONE,
    ZERO,
    Value,
    ValueLike,
    as_value,
    digit_char,
    digit_value,
)
from src.decnum.math import (
    DEFAULT_LIMITS,
    DEFAULT_SIGNIFICANT_DIGITS,
    ArithmeticLimits,
    CapacityExceeded,
    add,
    compare,
    decrement,
    factorial,
    multiply,
    power,
    scientific,
)

__all__ = [
    # Domain
    "Value",
    "ValueLike",
    "ZERO",
    "ONE",
    "as_value",
    "digit_char",
    "digit_value",
    "MalformedDigitSequence",
    # Math
    "compare",
    "add",
    "multiply",
    "decrement",
    "power",
    "factorial",
    "ArithmeticLimits",
    "DEFAULT_LIMITS",
    "CapacityExceeded",
    "scientific",
    "DEFAULT_SIGNIFICANT_DIGITS",
]
