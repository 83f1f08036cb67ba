"""
Digits — Конверсии одной десятичной цифры

Базовый уровень Digit Store: отображение символа '0'..'9' в целое 0..9 и
обратно, плюс исключение для невалидных последовательностей цифр.

ВАЖНО: digit_value/digit_char НЕ валидируют аргумент. Проверка входного
текста выполняется один раз при конструировании Value (Value.parse).
"""

from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Основание системы счисления (только десятичная)
RADIX: Final[int] = 10

# Допустимые символы цифр (только ASCII, без unicode-цифр вроде '²')
DIGIT_CHARS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedDigitSequence(ValueError):
    """
    Входные данные не являются десятичной записью неотрицательного целого.

    Возникает при пустой строке, нецифровых символах, отрицательном int.
    """

    pass


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def digit_value(char: str) -> int:
    """
    Конверсия: символ цифры → целое значение.

    Args:
        char: Один символ '0'..'9' (не проверяется)

    Returns:
        Целое 0..9

    Examples:
        >>> digit_value("7")
        7
    """
    return ord(char) - ord("0")


def digit_char(value: int) -> str:
    """
    Конверсия: целое значение → символ цифры.

    Args:
        value: Целое 0..9 (не проверяется)

    Returns:
        Символ '0'..'9'

    Examples:
        >>> digit_char(7)
        '7'
    """
    return chr(value + ord("0"))


def is_digit_text(text: str) -> bool:
    """Непустая строка только из ASCII цифр."""
    return len(text) > 0 and all(char in DIGIT_CHARS for char in text)
