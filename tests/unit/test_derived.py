"""
Тесты для Derived: power, factorial, ArithmeticLimits

Проверяемые инварианты:
1. power(n, 0) == 1 для любого n, включая 0
2. factorial(0) == factorial(1) == 1
3. Совпадение с Python int для умеренных аргументов
4. CapacityExceeded при превышении max_iterations / max_result_digits
5. None отключает ограничение
6. Предупреждение в лог перед CapacityExceeded
"""

import logging
import math

import pytest

from src.decnum.domain import ONE, Value
from src.decnum.math.arithmetic import multiply
from src.decnum.math.derived import (
    DEFAULT_LIMITS,
    MAX_ITERATIONS_DEFAULT,
    MAX_RESULT_DIGITS_DEFAULT,
    ArithmeticLimits,
    CapacityExceeded,
    factorial,
    power,
)

UNLIMITED = ArithmeticLimits(max_iterations=None, max_result_digits=None)


# =============================================================================
# ТЕСТЫ: ArithmeticLimits
# =============================================================================


class TestArithmeticLimits:
    """Тесты конфигурации ограничений"""

    def test_defaults(self) -> None:
        assert DEFAULT_LIMITS.max_iterations == MAX_ITERATIONS_DEFAULT
        assert DEFAULT_LIMITS.max_result_digits == MAX_RESULT_DIGITS_DEFAULT

    @pytest.mark.parametrize("bad", [0, -1])
    def test_non_positive_iterations_rejected(self, bad: int) -> None:
        with pytest.raises(ValueError, match="max_iterations must be positive"):
            ArithmeticLimits(max_iterations=bad)

    @pytest.mark.parametrize("bad", [0, -5])
    def test_non_positive_result_digits_rejected(self, bad: int) -> None:
        with pytest.raises(ValueError, match="max_result_digits must be positive"):
            ArithmeticLimits(max_result_digits=bad)

    def test_frozen(self) -> None:
        limits = ArithmeticLimits()
        with pytest.raises(AttributeError):
            limits.max_iterations = 5  # type: ignore


# =============================================================================
# ТЕСТЫ: power
# =============================================================================


class TestPower:
    """Тесты power: повторное умножение"""

    @pytest.mark.parametrize("base", ["0", "1", "2", "10", "123456789012345678901234567890"])
    def test_zero_exponent(self, base: str) -> None:
        """n ** 0 == 1, включая 0 ** 0"""
        assert power(base, "0") == ONE

    @pytest.mark.parametrize(
        "base, exponent, expected",
        [
            ("2", "10", "1024"),
            ("0", "5", "0"),
            ("1", "1000", "1"),
            ("10", "3", "1000"),
            ("7", "1", "7"),
            ("2", "100", "1267650600228229401496703205376"),
        ],
    )
    def test_known_powers(self, base: str, exponent: str, expected: str) -> None:
        assert str(power(base, exponent)) == expected

    def test_matches_int(self) -> None:
        for base in (3, 12, 99, 1234):
            for exponent in (2, 7, 25):
                assert str(power(base, exponent)) == str(base**exponent)

    def test_accepts_values(self) -> None:
        assert power(Value.parse("5"), Value.parse("3")) == Value.parse("125")

    def test_exponent_over_limit_rejected(self) -> None:
        limits = ArithmeticLimits(max_iterations=10)
        assert str(power("2", "10", limits)) == "1024"

        with pytest.raises(CapacityExceeded) as exc_info:
            power("2", "11", limits)

        assert exc_info.value.operation == "power"
        assert exc_info.value.limit == "max_iterations"
        assert exc_info.value.actual == "11"

    def test_huge_exponent_rejected_by_default(self) -> None:
        """Показатель больше MAX_ITERATIONS_DEFAULT отклоняется без вычислений"""
        with pytest.raises(CapacityExceeded, match="max_iterations"):
            power("2", "1" + "0" * 40)

    def test_result_digits_limit(self) -> None:
        limits = ArithmeticLimits(max_result_digits=5)
        assert str(power("10", "4", limits)) == "10000"

        with pytest.raises(CapacityExceeded) as exc_info:
            power("10", "5", limits)

        assert exc_info.value.limit == "max_result_digits"
        assert exc_info.value.actual == "6"

    def test_unlimited(self) -> None:
        assert str(power("3", "200", UNLIMITED)) == str(3**200)

    def test_capacity_exceeded_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            power("2", "3", ArithmeticLimits(max_iterations=2))

    def test_warning_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.decnum.math.derived"):
            with pytest.raises(CapacityExceeded):
                power("2", "3", ArithmeticLimits(max_iterations=2))

        assert "max_iterations" in caplog.text

    def test_debug_start_and_finish_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Начало и конец вычисления пишутся в DEBUG"""
        with caplog.at_level(logging.DEBUG, logger="src.decnum.math.derived"):
            power("2", "10")

        messages = [record.getMessage() for record in caplog.records]
        assert "power: base has 1 digits, exponent=10" in messages
        assert "power: result has 4 digits" in messages
        assert all(record.levelno == logging.DEBUG for record in caplog.records)


# =============================================================================
# ТЕСТЫ: factorial
# =============================================================================


class TestFactorial:
    """Тесты factorial: итеративное произведение"""

    @pytest.mark.parametrize(
        "n, expected",
        [
            ("0", "1"),
            ("1", "1"),
            ("2", "2"),
            ("5", "120"),
            ("10", "3628800"),
            ("20", "2432902008176640000"),
            ("25", "15511210043330985984000000"),
        ],
    )
    def test_known_factorials(self, n: str, expected: str) -> None:
        assert str(factorial(n)) == expected

    def test_matches_math_factorial(self) -> None:
        for n in (30, 50, 100):
            assert str(factorial(n)) == str(math.factorial(n))

    def test_recurrence(self) -> None:
        """n! == n × (n-1)!"""
        assert factorial("40") == multiply("40", factorial("39"))

    def test_argument_over_limit_rejected(self) -> None:
        with pytest.raises(CapacityExceeded) as exc_info:
            factorial("11", ArithmeticLimits(max_iterations=10))

        assert exc_info.value.operation == "factorial"
        assert exc_info.value.limit == "max_iterations"

    def test_huge_argument_rejected_by_default(self) -> None:
        with pytest.raises(CapacityExceeded, match="factorial"):
            factorial("9" * 30)

    def test_result_digits_limit(self) -> None:
        """13! = 6227020800 (10 цифр), 14! уже 11 цифр"""
        limits = ArithmeticLimits(max_result_digits=10)
        assert str(factorial("13", limits)) == "6227020800"

        with pytest.raises(CapacityExceeded) as exc_info:
            factorial("14", limits)

        assert exc_info.value.limit == "max_result_digits"

    def test_unlimited(self) -> None:
        assert str(factorial("60", UNLIMITED)) == str(math.factorial(60))

    def test_debug_start_and_finish_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Начало и конец вычисления пишутся в DEBUG"""
        with caplog.at_level(logging.DEBUG, logger="src.decnum.math.derived"):
            factorial("5")

        messages = [record.getMessage() for record in caplog.records]
        assert "factorial: n=5" in messages
        assert "factorial: result has 3 digits" in messages
