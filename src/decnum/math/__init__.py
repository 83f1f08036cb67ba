"""
Math modules для decnum

Школьная арифметика над десятичными цифрами: сравнение, сложение, умножение,
декремент, степень, факториал и научная запись.
"""

# Relational
from src.decnum.math.relational import compare

# Arithmetic
from src.decnum.math.arithmetic import add, decrement, multiply

# Derived (power, factorial)
from src.decnum.math.derived import (
    DEFAULT_LIMITS,
    MAX_ITERATIONS_DEFAULT,
    MAX_RESULT_DIGITS_DEFAULT,
    ArithmeticLimits,
    CapacityExceeded,
    factorial,
    power,
)

# Notation
from src.decnum.math.notation import DEFAULT_SIGNIFICANT_DIGITS, scientific

__all__ = [
    # Relational
    "compare",
    # Arithmetic
    "add",
    "decrement",
    "multiply",
    # Derived — Constants
    "DEFAULT_LIMITS",
    "MAX_ITERATIONS_DEFAULT",
    "MAX_RESULT_DIGITS_DEFAULT",
    # Derived — Config
    "ArithmeticLimits",
    # Derived — Exceptions
    "CapacityExceeded",
    # Derived — Functions
    "factorial",
    "power",
    # Notation
    "DEFAULT_SIGNIFICANT_DIGITS",
    "scientific",
]
