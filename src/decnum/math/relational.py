"""
Relational — Сравнение величин

Сравнение двух неотрицательных целых по их десятичным цифрам:
1. Больше цифр → больше значение (корректно, т.к. Value всегда канонический)
2. Равная длина → поразрядно от старшей цифры до первого различия
"""

from src.decnum.domain.value import ValueLike, as_value


def compare(x: ValueLike, y: ValueLike) -> int:
    """
    Сравнение двух значений.

    Args:
        x: Первое значение
        y: Второе значение

    Returns:
        -1 если x < y
         0 если x == y
        +1 если x > y

    Examples:
        >>> compare("100", "99")
        1
        >>> compare("123", "124")
        -1
        >>> compare("0", "000")
        0
    """
    x_digits = as_value(x).digits
    y_digits = as_value(y).digits

    if len(x_digits) > len(y_digits):
        return 1

    if len(x_digits) < len(y_digits):
        return -1

    for x_digit, y_digit in zip(x_digits, y_digits):
        if x_digit > y_digit:
            return 1
        if x_digit < y_digit:
            return -1

    return 0
