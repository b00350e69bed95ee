"""
TokenUnits — Централизованный модуль конверсии единиц QRON

Единственный допустимый способ преобразований между:
- QRON (десятичная сумма, до 18 дробных знаков)
- minor units (целое число, 1 QRON = 10^18 minor units, для on-chain перевода)

Конверсия выполняется через строковое представление (разбиение по точке),
а не через умножение float — это исключает ошибки представления для сумм
с большим количеством значащих цифр.

ИНВАРИАНТ:
    from_minor_units(to_minor_units(x)) == x  для x с <= 18 дробными знаками

Fixed-point вариант (to_fixed, с промежуточным округлением до 6 знаков) для
конверсии НЕ используется: он расходится со строковым в последних знаках.
"""

import re
from decimal import Decimal
from typing import Any, Final

from src.core.errors import InvalidAmount
from src.core.math.numerical_safeguards import to_decimal


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество дробных знаков токена
TOKEN_DECIMALS: Final[int] = 18

# Minor units в одном QRON
MINOR_UNITS_PER_TOKEN: Final[int] = 10**TOKEN_DECIMALS

_PLAIN_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"^(\d+)(?:\.(\d*))?$")


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def to_minor_units(amount: Any) -> int:
    """
    Конверсия: QRON → minor units

    Дробная часть дополняется нулями (или усекается) ровно до 18 знаков.

    Args:
        amount: Неотрицательная сумма QRON (Decimal, int, float или строка)

    Returns:
        Целое количество minor units

    Raises:
        InvalidAmount: Отрицательная, NaN/Inf или некорректная сумма

    Examples:
        >>> to_minor_units("1.4375")
        1437500000000000000
        >>> to_minor_units(Decimal("0.000000000000000001"))
        1
    """
    value = to_decimal(amount, "amount")

    # format "f" исключает экспоненциальную запись (1E-18 → 0.000000000000000001)
    text = format(value, "f")
    match = _PLAIN_DECIMAL_RE.match(text)
    if match is None:
        raise InvalidAmount(f"amount must be a non-negative decimal, got {amount!r}", "amount", amount)

    whole, frac = match.group(1), match.group(2) or ""
    frac = frac[:TOKEN_DECIMALS].ljust(TOKEN_DECIMALS, "0")
    return int(whole + frac)


def from_minor_units(value: int) -> Decimal:
    """
    Конверсия: minor units → QRON

    Args:
        value: Неотрицательное целое количество minor units

    Returns:
        Сумма QRON (Decimal с 18 дробными знаками; для записи без
        экспоненты используется format_plain)

    Raises:
        InvalidAmount: Если value не int или отрицательное

    Examples:
        >>> from_minor_units(1437500000000000000)
        Decimal('1.437500000000000000')
        >>> format_plain(from_minor_units(1))
        '0.000000000000000001'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(
            f"minor units must be an integer, got {type(value).__name__} {value!r}",
            "minor_units",
            value,
        )
    if value < 0:
        raise InvalidAmount(f"minor units cannot be negative: {value}", "minor_units", value)

    digits = str(value).rjust(TOKEN_DECIMALS + 1, "0")
    return Decimal(f"{digits[:-TOKEN_DECIMALS]}.{digits[-TOKEN_DECIMALS:]}")
