"""
Arithmetic — Сложение, умножение, насыщающий декремент

Школьные алгоритмы над кортежами десятичных цифр (старшая цифра первой).
Все вычисления точные, без float; операнды не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(add(a, b)) == max(len(a), len(b)) или на 1 больше (финальный перенос)
2. len(multiply(a, b)) == len(a) + len(b) или len(a) + len(b) - 1 (a, b != 0)
3. decrement(0) == 0, иначе decrement(n) == n - 1 в канонической форме
"""

from src.decnum.domain.digits import RADIX
from src.decnum.domain.value import ZERO, Value, ValueLike, as_value


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(a: ValueLike, b: ValueLike) -> Value:
    """
    Сложение столбиком с переносом.

    Обход обоих операндов с младших разрядов; исчерпанный операнд даёт 0.
    Цикл продолжается, пока остались цифры хотя бы в одном операнде или
    есть перенос.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Сумма a + b

    Examples:
        >>> str(add("999", "1"))
        '1000'
        >>> str(add("12", "0"))
        '12'
    """
    x = as_value(a).digits
    y = as_value(b).digits

    x_index = len(x) - 1
    y_index = len(y) - 1
    carry = 0
    # Цифры суммы в порядке от младшей к старшей
    reversed_sum: list[int] = []

    while x_index >= 0 or y_index >= 0 or carry:
        digit_sum = carry
        if x_index >= 0:
            digit_sum += x[x_index]
        if y_index >= 0:
            digit_sum += y[y_index]

        if digit_sum >= RADIX:
            digit_sum -= RADIX
            carry = 1
        else:
            carry = 0

        reversed_sum.append(digit_sum)
        x_index -= 1
        y_index -= 1

    return Value(digits=tuple(reversed(reversed_sum)))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def _multiply_by_digit(digits: tuple[int, ...], multiplier: int) -> tuple[int, ...]:
    """
    Частичное произведение: вся последовательность × одна цифра.

    Справа налево, перенос = произведение // 10.
    """
    carry = 0
    reversed_product: list[int] = []

    for digit in reversed(digits):
        carry, product_digit = divmod(digit * multiplier + carry, RADIX)
        reversed_product.append(product_digit)

    if carry > 0:
        reversed_product.append(carry)

    return tuple(reversed(reversed_product))


def multiply(a: ValueLike, b: ValueLike) -> Value:
    """
    Умножение столбиком через частичные произведения.

    Для каждой цифры короткого операнда (с младшей, сдвиг 0, 1, 2, ...)
    строится частичное произведение с длинным операндом, дополняется справа
    shift нулями и накапливается через add. Нулевая цифра множителя даёт
    нулевое частичное произведение и пропускается.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Произведение a × b

    Examples:
        >>> str(multiply("12", "34"))
        '408'
        >>> str(multiply("123456789", "0"))
        '0'
    """
    left = as_value(a)
    right = as_value(b)

    if left.is_zero or right.is_zero:
        return ZERO

    # multiplicand всегда не короче multiplier
    if left.digit_count >= right.digit_count:
        multiplicand, multiplier = left.digits, right.digits
    else:
        multiplicand, multiplier = right.digits, left.digits

    product = ZERO
    for shift, digit in enumerate(reversed(multiplier)):
        if digit == 0:
            continue

        partial = _multiply_by_digit(multiplicand, digit) + (0,) * shift
        product = add(product, Value(digits=partial))

    return product


# =============================================================================
# ДЕКРЕМЕНТ
# =============================================================================


def decrement(n: ValueLike) -> Value:
    """
    Насыщающий декремент: n - 1 при n > 0, иначе 0.

    Заём идёт от младшего разряда: '0' → '9', первая ненулевая цифра
    уменьшается на 1. Если старшая '1' превратилась в '0' (граница степени
    десяти), разряд отбрасывается: 1000 → 999.

    Args:
        n: Уменьшаемое значение

    Returns:
        max(n - 1, 0)

    Examples:
        >>> str(decrement("1000"))
        '999'
        >>> str(decrement("0"))
        '0'
    """
    value = as_value(n)

    if value.is_zero:
        return value

    result = list(value.digits)
    index = len(result) - 1

    while result[index] == 0:
        result[index] = RADIX - 1
        index -= 1

    result[index] -= 1

    if result[0] == 0 and len(result) > 1:
        del result[0]

    return Value(digits=tuple(result))
