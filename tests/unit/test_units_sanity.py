"""
Sanity-тест для модуля TokenUnits

Проверяет:
1. Корректность конверсий QRON ↔ minor units
2. Инвариант обратимости для сумм с <= 18 дробными знаками
3. Усечение дробной части сверх 18 знаков
4. Валидацию отрицательных и некорректных значений
"""

from decimal import Decimal

import pytest

from src.core.domain.units import (
    MINOR_UNITS_PER_TOKEN,
    TOKEN_DECIMALS,
    from_minor_units,
    to_minor_units,
)
from src.core.errors import InvalidAmount
from src.core.math.numerical_safeguards import format_plain


class TestToMinorUnits:
    """Тесты конверсии QRON → minor units"""

    def test_whole_amounts(self) -> None:
        assert to_minor_units(1) == MINOR_UNITS_PER_TOKEN
        assert to_minor_units("25") == 25 * 10**18
        assert to_minor_units(0) == 0

    def test_fractional_amounts(self) -> None:
        assert to_minor_units("1.4375") == 1437500000000000000
        assert to_minor_units(Decimal("0.000000000000000001")) == 1
        assert to_minor_units(0.1) == 10**17

    def test_many_significant_digits_are_exact(self) -> None:
        """Строковая конверсия не теряет значащих цифр"""
        amount = "123456789.123456789123456789"
        assert to_minor_units(amount) == 123456789123456789123456789

    def test_exponent_notation(self) -> None:
        """Экспоненциальная запись Decimal обрабатывается корректно"""
        assert to_minor_units(Decimal("1E-18")) == 1
        assert to_minor_units(Decimal("1E+2")) == 100 * 10**18

    def test_truncates_beyond_eighteen_digits(self) -> None:
        """Знаки сверх 18-го отбрасываются (усечение, не округление)"""
        assert to_minor_units("0.0000000000000000019") == 1

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidAmount):
            to_minor_units("-1")

    def test_malformed_rejected(self) -> None:
        for value in ("abc", "NaN", float("inf"), True, None):
            with pytest.raises(InvalidAmount):
                to_minor_units(value)


class TestFromMinorUnits:
    """Тесты конверсии minor units → QRON"""

    def test_basic(self) -> None:
        assert from_minor_units(1437500000000000000) == Decimal("1.4375")
        assert from_minor_units(MINOR_UNITS_PER_TOKEN) == Decimal("1")

    def test_pads_to_nineteen_digits(self) -> None:
        assert format_plain(from_minor_units(1)) == "0.000000000000000001"
        assert format_plain(from_minor_units(0)) == "0.000000000000000000"

    def test_fraction_has_token_decimals(self) -> None:
        whole, frac = format_plain(from_minor_units(42 * 10**18 + 7)).split(".")
        assert whole == "42"
        assert len(frac) == TOKEN_DECIMALS

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidAmount, match="cannot be negative"):
            from_minor_units(-1)

    def test_non_integer_rejected(self) -> None:
        for value in (1.0, "100", Decimal("1"), False):
            with pytest.raises(InvalidAmount, match="must be an integer"):
                from_minor_units(value)


class TestRoundTrip:
    """Инвариант: from_minor_units(to_minor_units(x)) == x"""

    @pytest.mark.parametrize(
        "amount",
        [
            "0",
            "0.1",
            "1.4375",
            "24.9",
            "25",
            "0.000000000000000001",
            "999999999.999999999999999999",
            "123456789.123456789123456789",
        ],
    )
    def test_round_trip_is_exact(self, amount: str) -> None:
        assert from_minor_units(to_minor_units(amount)) == Decimal(amount)

    def test_minor_units_round_trip(self) -> None:
        for minor in (0, 1, 10**17, 1437500000000000000, 10**30 + 1):
            assert to_minor_units(from_minor_units(minor)) == minor
