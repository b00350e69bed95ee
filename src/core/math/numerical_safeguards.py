"""
Numerical Safeguards — Безопасное приведение и валидация чисел

Модуль обеспечивает корректность всех числовых входов ядра наград:
- Строгое приведение к Decimal (float → через кратчайший repr, без артефактов)
- Отбраковка NaN/Inf, bool и нечисловых значений
- Ограничение значений диапазоном (clamp)
- Валидация неотрицательности (суммы и счётчики) и диапазона
- Фиксированный decimal-контекст и запись Decimal без экспоненты

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют (InvalidAmount, а не fallback)
2. Двоичный float никогда не попадает в денежную арифметику напрямую
3. Все операции детерминированы и воспроизводимы: арифметика идёт в
   DECIMAL_CONTEXT, а не в контексте вызывающего потока
"""

from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Any, Final

from src.core.errors import InvalidAmount


# =============================================================================
# DECIMAL CONTEXT
# =============================================================================

# Контекст всей денежной арифметики (используется через localcontext)
DECIMAL_CONTEXT: Final[Context] = Context(
    prec=50,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def format_plain(value: Decimal) -> str:
    """
    Запись Decimal без экспоненты, с сохранением всех дробных знаков.

    str(Decimal) переходит на научную нотацию для малых значений
    (Decimal("0.000000000000000005") → '5E-18'), JSON-контракты её не принимают.

    Examples:
        >>> format_plain(Decimal("0E-18"))
        '0.000000000000000000'
        >>> format_plain(Decimal("1.4375"))
        '1.4375'
    """
    return format(value, "f")


# =============================================================================
# ПРИВЕДЕНИЕ К DECIMAL
# =============================================================================


def is_valid_decimal(value: Decimal) -> bool:
    """
    Проверка, является ли Decimal конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return value.is_finite()


def to_decimal(value: Any, name: str = "amount") -> Decimal:
    """
    Строгое приведение значения к конечному Decimal.

    float конвертируется через repr (кратчайшее представление), поэтому
    0.1 превращается в Decimal("0.1"), а не в 0.1000000000000000055511...

    Args:
        value: Decimal, int, float или десятичная строка
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Конечный Decimal

    Raises:
        InvalidAmount: bool, нечисловое значение, NaN или Inf

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("24.9")
        Decimal('24.9')
    """
    # bool — подкласс int, но денежной суммой не является
    if isinstance(value, bool):
        raise InvalidAmount(f"{name} must be a number, got bool {value!r}", name, value)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmount(f"{name} is not a decimal number: {value!r}", name, value)
    else:
        raise InvalidAmount(
            f"{name} must be Decimal, int, float or str, got {type(value).__name__}",
            name,
            value,
        )

    if not is_valid_decimal(result):
        raise InvalidAmount(f"{name} must be finite (not NaN/Inf), got {value!r}", name, value)

    return result


# =============================================================================
# ОГРАНИЧЕНИЕ ДИАПАЗОНОМ
# =============================================================================


def clamp(
    value: Decimal,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> Decimal:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(Decimal("150"), Decimal("0"), Decimal("100"))
        Decimal('100')
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: Any, name: str) -> Decimal:
    """
    Валидация, что значение — конечное неотрицательное число.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение, приведённое к Decimal

    Raises:
        InvalidAmount: Если value < 0, NaN/Inf или не число
    """
    result = to_decimal(value, name)

    if result < 0:
        raise InvalidAmount(f"{name} must be non-negative, got {value}", name, value)

    return result


def validate_non_negative_int(value: Any, name: str) -> int:
    """
    Валидация счётчика: целое неотрицательное число.

    Raises:
        InvalidAmount: Если value не int (bool не допускается) или < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(
            f"{name} must be an integer, got {type(value).__name__} {value!r}", name, value
        )

    if value < 0:
        raise InvalidAmount(f"{name} must be non-negative, got {value}", name, value)

    return value


def validate_in_range(
    value: Any,
    name: str,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> Decimal:
    """
    Валидация, что значение лежит в диапазоне [min_value, max_value].

    В отличие от clamp значение вне диапазона не ограничивается, а отклоняется.

    Raises:
        InvalidAmount: Значение вне диапазона, NaN/Inf или не число
    """
    result = to_decimal(value, name)

    if min_value is not None and result < min_value:
        raise InvalidAmount(f"{name} must be >= {min_value}, got {value}", name, value)

    if max_value is not None and result > max_value:
        raise InvalidAmount(f"{name} must be <= {max_value}, got {value}", name, value)

    return result
