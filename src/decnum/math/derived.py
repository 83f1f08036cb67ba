"""
Derived — Возведение в степень и факториал

Обе операции сводятся к повторному multiply + decrement:
    power(b, e)   = b × b × ... × b  (e раз), power(b, 0) = 1
    factorial(n)  = n × (n-1) × ... × 2,      factorial(0) = factorial(1) = 1

Это O(e) / O(n) умножений (НЕ возведение в квадрат), поэтому практично
только для небольших показателей. Обе операции итеративные и ограничены
ArithmeticLimits: превышение → CapacityExceeded вместо исчерпания памяти.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.decnum.domain.value import ONE, Value, ValueLike, as_value
from src.decnum.math.arithmetic import decrement, multiply
from src.decnum.math.relational import compare

logger = logging.getLogger(__name__)


# =============================================================================
# LIMITS
# =============================================================================

# Максимальный показатель степени / аргумент факториала по умолчанию
MAX_ITERATIONS_DEFAULT: Final[int] = 100_000

# Максимальная длина результата (в десятичных цифрах) по умолчанию
MAX_RESULT_DIGITS_DEFAULT: Final[int] = 1_000_000


@dataclass(frozen=True)
class ArithmeticLimits:
    """Ограничения ресурсов для power/factorial.

    None отключает соответствующую проверку.
    """

    # Показатель степени или аргумент факториала не больше этого значения
    max_iterations: int | None = MAX_ITERATIONS_DEFAULT
    # Проверяется после каждого умножения
    max_result_digits: int | None = MAX_RESULT_DIGITS_DEFAULT

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )
        if self.max_result_digits is not None and self.max_result_digits <= 0:
            raise ValueError(
                f"max_result_digits must be positive, got {self.max_result_digits}"
            )


DEFAULT_LIMITS: Final[ArithmeticLimits] = ArithmeticLimits()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CapacityExceeded(ValueError):
    """
    Операция превысила ArithmeticLimits.

    Attributes:
        operation: "power" или "factorial"
        limit: Имя нарушенного ограничения
        actual: Фактическое значение (строка цифр или длина результата)
    """

    def __init__(self, operation: str, limit: str, actual: str):
        self.operation = operation
        self.limit = limit
        self.actual = actual
        super().__init__(f"{operation}: {limit} exceeded (actual: {actual})")


def _check_iterations(operation: str, count: Value, limits: ArithmeticLimits) -> None:
    if limits.max_iterations is None:
        return

    if compare(count, limits.max_iterations) > 0:
        logger.warning(
            "%s rejected: argument %s exceeds max_iterations=%d",
            operation,
            count,
            limits.max_iterations,
        )
        raise CapacityExceeded(operation, "max_iterations", str(count))


def _check_result_digits(operation: str, result: Value, limits: ArithmeticLimits) -> None:
    if limits.max_result_digits is None:
        return

    if result.digit_count > limits.max_result_digits:
        logger.warning(
            "%s aborted: result reached %d digits, max_result_digits=%d",
            operation,
            result.digit_count,
            limits.max_result_digits,
        )
        raise CapacityExceeded(operation, "max_result_digits", str(result.digit_count))


# =============================================================================
# POWER
# =============================================================================


def power(
    base: ValueLike,
    exponent: ValueLike,
    limits: ArithmeticLimits | None = None,
) -> Value:
    """
    Возведение в степень повторным умножением.

    result = 1; пока exponent != 0: result *= base, exponent -= 1.
    power(n, 0) == 1 для любого n, включая 0 (цикл не выполняется).

    Args:
        base: Основание
        exponent: Показатель (неотрицательное целое произвольной длины)
        limits: Ограничения ресурсов (default: DEFAULT_LIMITS)

    Returns:
        base ** exponent

    Raises:
        CapacityExceeded: exponent > max_iterations или результат длиннее
            max_result_digits

    Examples:
        >>> str(power("2", "10"))
        '1024'
        >>> str(power("0", "0"))
        '1'
    """
    limits = limits or DEFAULT_LIMITS
    base_value = as_value(base)
    remaining = as_value(exponent)

    _check_iterations("power", remaining, limits)
    logger.debug(
        "power: base has %d digits, exponent=%s", base_value.digit_count, remaining
    )

    result = ONE
    while not remaining.is_zero:
        result = multiply(result, base_value)
        _check_result_digits("power", result, limits)
        remaining = decrement(remaining)

    logger.debug("power: result has %d digits", result.digit_count)
    return result


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: ValueLike, limits: ArithmeticLimits | None = None) -> Value:
    """
    Факториал итеративно: n × (n-1) × ... × 2.

    factorial(0) == factorial(1) == 1.

    Args:
        n: Аргумент
        limits: Ограничения ресурсов (default: DEFAULT_LIMITS)

    Returns:
        n!

    Raises:
        CapacityExceeded: n > max_iterations или результат длиннее
            max_result_digits

    Examples:
        >>> str(factorial("5"))
        '120'
    """
    limits = limits or DEFAULT_LIMITS
    counter = as_value(n)

    _check_iterations("factorial", counter, limits)
    logger.debug("factorial: n=%s", counter)

    result = ONE
    while compare(counter, ONE) > 0:
        result = multiply(result, counter)
        _check_result_digits("factorial", result, limits)
        counter = decrement(counter)

    logger.debug("factorial: result has %d digits", result.digit_count)
    return result
