"""
Notation — Научная запись

Форматирование Value как D.DDDDE<exponent>:
- первая цифра канонической записи — ведущая значащая
- далее significant_digits - 1 цифр после точки (усечение, без округления),
  при нехватке цифр дополняются '0'
- exponent = количество цифр - 1
"""

from typing import Final

from src.decnum.domain.value import ValueLike, as_value

# Количество значащих цифр по умолчанию
DEFAULT_SIGNIFICANT_DIGITS: Final[int] = 5


def scientific(
    value: ValueLike,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """
    Научная запись с заданным числом значащих цифр.

    Args:
        value: Форматируемое значение
        significant_digits: Количество значащих цифр (>= 1)

    Returns:
        Строка вида "1.2345E8"; при significant_digits == 1 без точки ("1E8")

    Raises:
        TypeError: Если significant_digits не int
        ValueError: Если significant_digits < 1

    Examples:
        >>> scientific("12345", 3)
        '1.23E4'
        >>> scientific("7")
        '7.0000E0'
        >>> scientific("98765", 1)
        '9E4'
    """
    if isinstance(significant_digits, bool) or not isinstance(significant_digits, int):
        raise TypeError(
            f"significant_digits must be int, got {type(significant_digits).__name__}"
        )

    if significant_digits < 1:
        raise ValueError(
            f"significant_digits must be >= 1, got {significant_digits}"
        )

    text = str(as_value(value))
    mantissa = text[0]

    if significant_digits > 1:
        fraction = text[1:significant_digits].ljust(significant_digits - 1, "0")
        mantissa = f"{mantissa}.{fraction}"

    return f"{mantissa}E{len(text) - 1}"
