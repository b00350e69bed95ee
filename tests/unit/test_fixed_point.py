"""
Тесты для модуля Fixed Point

Проверяет:
1. to_fixed: масштаб 10^18 и округление входа до 6 знаков
2. multiply: (a * b) // SCALE без переполнения
3. from_fixed: 18 дробных знаков, ведущие нули
4. Fail fast на отрицательных значениях, NaN/Inf
"""

from decimal import ROUND_DOWN, Decimal, localcontext

import pytest

from src.core.errors import InvalidAmount
from src.core.math.fixed_point import (
    FIXED_DECIMALS,
    INPUT_PRECISION_DIGITS,
    SCALE,
    add,
    from_fixed,
    multiply,
    to_fixed,
)
from src.core.math.numerical_safeguards import format_plain


class TestConstants:
    def test_scale(self) -> None:
        assert FIXED_DECIMALS == 18
        assert SCALE == 10**18
        assert INPUT_PRECISION_DIGITS == 6


class TestToFixed:
    """Тесты для to_fixed"""

    def test_basic_values(self) -> None:
        assert to_fixed("0.1") == 10**17
        assert to_fixed(Decimal("1.5")) == 15 * 10**17
        assert to_fixed(25) == 25 * SCALE
        assert to_fixed(0) == 0

    def test_float_input_has_no_binary_artifacts(self) -> None:
        """0.1 + 0.2 как float не даёт 0.30000000000000004 после конверсии"""
        assert to_fixed(0.1 + 0.2) == to_fixed("0.3")

    def test_rounds_to_six_digits(self) -> None:
        """Вход округляется до 6 знаков (half up) до масштабирования"""
        assert to_fixed("1.0000004") == SCALE
        assert to_fixed("1.0000005") == SCALE + 10**12
        assert to_fixed("0.123456789") == 123457 * 10**12

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidAmount, match="non-negative"):
            to_fixed("-0.1")

    def test_nan_inf_rejected(self) -> None:
        for value in (float("nan"), float("inf"), Decimal("Infinity")):
            with pytest.raises(InvalidAmount):
                to_fixed(value)

    def test_too_large_rejected(self) -> None:
        """Сумма за пределами точности DECIMAL_CONTEXT (50 цифр)"""
        with pytest.raises(InvalidAmount, match="exceeds decimal precision"):
            to_fixed(Decimal("1E+50"))

    def test_large_value_within_precision(self) -> None:
        assert to_fixed(Decimal("1E+30")) == 10**30 * SCALE

    def test_independent_of_ambient_context(self) -> None:
        """Округление входа не зависит от decimal-контекста вызывающего"""
        with localcontext() as ctx:
            ctx.prec = 4
            ctx.rounding = ROUND_DOWN
            assert to_fixed("1.0000005") == 1000001000000000000
            assert to_fixed("123456.5") == 123456500000000000000000


class TestMultiply:
    """Тесты для multiply"""

    def test_basic_product(self) -> None:
        assert multiply(to_fixed("0.1"), to_fixed("1.5")) == to_fixed("0.15")
        assert multiply(to_fixed("1.15"), to_fixed("1.25")) == to_fixed("1.4375")

    def test_identity(self) -> None:
        value = to_fixed("123.456789")
        assert multiply(value, SCALE) == value

    def test_large_intermediate_does_not_overflow(self) -> None:
        """Промежуточное произведение шире 256 бит остаётся точным"""
        big = 10**40 * SCALE
        assert multiply(big, big) == 10**80 * SCALE

    def test_truncates_below_resolution(self) -> None:
        """Результат ниже 1e-18 усекается"""
        assert multiply(1, 1) == 0


class TestAdd:
    def test_sum(self) -> None:
        assert add(to_fixed("0.2"), to_fixed("0.3"), to_fixed("0.5")) == SCALE

    def test_empty_sum(self) -> None:
        assert add() == 0


class TestFromFixed:
    """Тесты для from_fixed"""

    def test_preserves_eighteen_digits(self) -> None:
        result = from_fixed(1437500000000000000)
        assert result == Decimal("1.4375")
        assert str(result) == "1.437500000000000000"

    def test_left_pads_small_values(self) -> None:
        assert from_fixed(5) == Decimal("5E-18")
        assert format_plain(from_fixed(5)) == "0.000000000000000005"
        assert format_plain(from_fixed(0)) == "0.000000000000000000"

    def test_round_trip_to_six_digits(self) -> None:
        """from_fixed(to_fixed(x)) == x для x с <= 6 знаками"""
        for text in ("0", "0.1", "1.4375", "24.999999", "1000000.000001"):
            assert from_fixed(to_fixed(text)) == Decimal(text)

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidAmount, match="non-negative"):
            from_fixed(-1)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(InvalidAmount, match="must be an integer"):
            from_fixed(1.5)
