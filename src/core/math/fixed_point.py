"""
Fixed Point — Целочисленная арифметика с 18 десятичными знаками

Денежные суммы QRON представлены целым числом, масштабированным на 10^18.
Python int имеет произвольную точность, поэтому промежуточное произведение
a * b никогда не переполняется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вход округляется до 6 десятичных знаков ДО масштабирования
   (to_fixed(x) == round_half_up(x, 6) * 10^18)
2. multiply(a, b) == (a * b) // SCALE (усечение к нулю для неотрицательных)
3. from_fixed(to_fixed(x)) воспроизводит x с точностью 6 знаков
4. Отрицательные значения, NaN и Inf → InvalidAmount (fail fast, без clamp)

ФОРМУЛЫ:
    to_fixed(x)    = round(x * 10^6) * 10^12
    multiply(a, b) = (a * b) / 10^18
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Final

from src.core.errors import InvalidAmount
from src.core.math.numerical_safeguards import DECIMAL_CONTEXT, validate_non_negative

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество дробных десятичных знаков во внутреннем представлении
FIXED_DECIMALS: Final[int] = 18

# Масштаб внутреннего представления
SCALE: Final[int] = 10**FIXED_DECIMALS

# Точность округления входа (защита от артефактов двоичного float)
INPUT_PRECISION_DIGITS: Final[int] = 6

_INPUT_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-INPUT_PRECISION_DIGITS)
_INPUT_TO_SCALE: Final[int] = 10 ** (FIXED_DECIMALS - INPUT_PRECISION_DIGITS)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_fixed(value: Any) -> int:
    """
    Конверсия десятичной суммы во внутреннее fixed-point представление.

    Args:
        value: Неотрицательная сумма (Decimal, int, float или строка)

    Returns:
        Целое число, масштабированное на 10^18

    Raises:
        InvalidAmount: Отрицательное значение, NaN/Inf, не число или сумма
            за пределами точности DECIMAL_CONTEXT

    Examples:
        >>> to_fixed("0.1")
        100000000000000000
        >>> to_fixed(1.0000004)
        1000000000000000000
    """
    amount = validate_non_negative(value, "amount")
    try:
        with localcontext(DECIMAL_CONTEXT):
            micros = amount.quantize(_INPUT_QUANTUM, rounding=ROUND_HALF_UP).scaleb(
                INPUT_PRECISION_DIGITS
            )
    except InvalidOperation:
        raise InvalidAmount(f"amount {value!r} exceeds decimal precision", "amount", value)
    return int(micros) * _INPUT_TO_SCALE


def multiply(a: int, b: int) -> int:
    """
    Произведение двух fixed-point значений.

    Args:
        a: Первый множитель (масштаб 10^18)
        b: Второй множитель (масштаб 10^18)

    Returns:
        (a * b) // SCALE

    Examples:
        >>> multiply(to_fixed("0.1"), to_fixed("1.5"))
        150000000000000000
    """
    return (a * b) // SCALE


def add(*terms: int) -> int:
    """Точная сумма fixed-point значений."""
    return sum(terms, 0)


def from_fixed(value: int) -> Decimal:
    """
    Конверсия fixed-point значения обратно в Decimal.

    Дробная часть всегда содержит ровно 18 знаков (с ведущими нулями).
    str() малых значений даёт научную нотацию, для JSON
    используется format_plain().

    Args:
        value: Неотрицательное целое (масштаб 10^18)

    Returns:
        Decimal с 18 дробными знаками

    Raises:
        InvalidAmount: Если value отрицательное или не int

    Examples:
        >>> from_fixed(1437500000000000000)
        Decimal('1.437500000000000000')
        >>> format_plain(from_fixed(5))
        '0.000000000000000005'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(
            f"fixed-point value must be an integer, got {type(value).__name__}",
            "fixed",
            value,
        )
    if value < 0:
        raise InvalidAmount(f"fixed-point value must be non-negative, got {value}", "fixed", value)

    digits = str(value).rjust(FIXED_DECIMALS + 1, "0")
    whole = digits[:-FIXED_DECIMALS]
    frac = digits[-FIXED_DECIMALS:]
    return Decimal(f"{whole}.{frac}")
