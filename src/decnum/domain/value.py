"""
Value — Неотрицательное целое произвольной точности

Immutable Pydantic модель: кортеж десятичных цифр 0..9, старшая цифра первой.
Текст используется только на границах (Value.parse, str(value)).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits непустой, каждый элемент в [0, 9]
2. Каноническая форма: ноль = (0,), иначе старшая цифра != 0
   (ведущие нули снимаются при конструировании)
3. Все операции создают новый экземпляр, операнды не изменяются
"""

from typing import Final

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.decnum.domain.digits import (
    RADIX,
    MalformedDigitSequence,
    digit_char,
    digit_value,
    is_digit_text,
)

# Длина блока цифр при конверсии int → Value (без str() для всего числа)
INT_CHUNK_DIGITS: Final[int] = 18


# =============================================================================
# VALUE MODEL
# =============================================================================


class Value(BaseModel):
    """
    Неотрицательное целое как последовательность десятичных цифр.

    Immutable модель (frozen=True), hashable. Два Value равны тогда и только
    тогда, когда равны их кортежи цифр.
    """

    digits: tuple[StrictInt, ...] = Field(
        ..., min_length=1, description="Десятичные цифры, старшая первой"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_canonical_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """
        Проверка диапазона цифр и приведение к канонической форме.

        Ведущие нули снимаются, ноль сохраняется как (0,).
        """
        for position, digit in enumerate(v):
            if not 0 <= digit < RADIX:
                raise ValueError(
                    f"digit {digit} at position {position} is outside [0, {RADIX - 1}]"
                )

        first_nonzero = 0
        while first_nonzero < len(v) - 1 and v[first_nonzero] == 0:
            first_nonzero += 1
        return v[first_nonzero:]

    @classmethod
    def parse(cls, text: str) -> "Value":
        """
        Конструирование из десятичной записи.

        Args:
            text: Строка из ASCII цифр, например "00123" или "42"

        Returns:
            Канонический Value ("00123" → 123)

        Raises:
            MalformedDigitSequence: Если text пустой, не строка или содержит
                нецифровые символы

        Examples:
            >>> str(Value.parse("00123"))
            '123'
        """
        if not isinstance(text, str) or not is_digit_text(text):
            raise MalformedDigitSequence(f"not a decimal digit sequence: {text!r}")

        return cls(digits=tuple(digit_value(char) for char in text))

    @classmethod
    def from_int(cls, number: int) -> "Value":
        """
        Конструирование из неотрицательного Python int.

        Цифры извлекаются через divmod блоками по INT_CHUNK_DIGITS, без
        str(number): str() для int длиннее 4300 цифр запрещён (Python 3.11+).

        Raises:
            TypeError: Если number не int (bool тоже отклоняется)
            MalformedDigitSequence: Если number < 0

        Examples:
            >>> Value.from_int(10**5000).digit_count
            5001
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"expected int, got {type(number).__name__}")

        if number < 0:
            raise MalformedDigitSequence("negative values are not representable")

        chunk_base = RADIX**INT_CHUNK_DIGITS
        # Блоки от младшего к старшему
        chunks: list[int] = []
        while number >= chunk_base:
            number, chunk = divmod(number, chunk_base)
            chunks.append(chunk)

        text = str(number) + "".join(
            f"{chunk:0{INT_CHUNK_DIGITS}d}" for chunk in reversed(chunks)
        )
        return cls.parse(text)

    @property
    def digit_count(self) -> int:
        """Количество десятичных цифр."""
        return len(self.digits)

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    def __str__(self) -> str:
        return "".join(digit_char(digit) for digit in self.digits)


# Единый тип входа для всех операций: Value, строка цифр или int
ValueLike = Value | str | int

ZERO: Final[Value] = Value(digits=(0,))
ONE: Final[Value] = Value(digits=(1,))


# =============================================================================
# ЕДИНАЯ КОНВЕРСИЯ ВХОДА
# =============================================================================


def as_value(operand: ValueLike) -> Value:
    """
    Приведение аргумента операции к Value.

    Args:
        operand: Value (возвращается как есть), строка цифр или int >= 0

    Returns:
        Канонический Value

    Raises:
        MalformedDigitSequence: Невалидная строка или отрицательный int
        TypeError: Неподдерживаемый тип аргумента
    """
    if isinstance(operand, Value):
        return operand

    if isinstance(operand, str):
        return Value.parse(operand)

    if isinstance(operand, int) and not isinstance(operand, bool):
        return Value.from_int(operand)

    raise TypeError(
        f"expected Value, digit string or int, got {type(operand).__name__}"
    )
