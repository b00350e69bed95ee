"""Display helpers: форматирование сумм и подписи для UI."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from types import MappingProxyType
from typing import Any, Final, Mapping

from src.core.domain.claim import (
    ProductCategory,
    ScanType,
    parse_product_category,
    parse_scan_type,
)
from src.core.domain.units import TOKEN_DECIMALS
from src.core.errors import InvalidAmount
from src.core.math.numerical_safeguards import DECIMAL_CONTEXT, format_plain, to_decimal

CATEGORY_DISPLAY_NAMES: Final[Mapping[ProductCategory, str]] = MappingProxyType({
    ProductCategory.LUXURY_FASHION: "Luxury Fashion",
    ProductCategory.PHARMA: "Pharmaceutical",
    ProductCategory.ELECTRONICS: "Electronics",
    ProductCategory.AUTOMOTIVE: "Automotive",
    ProductCategory.FOOD_BEV: "Food & Beverage",
    ProductCategory.OTHER: "Other",
})

SCAN_TYPE_LABELS: Final[Mapping[ScanType, str]] = MappingProxyType({
    ScanType.AUTHENTIC: "Authentic",
    ScanType.SUSPICIOUS: "Suspicious",
    ScanType.FAKE: "Counterfeit",
})

_TOKEN_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-TOKEN_DECIMALS)


def format_qron(amount: Any) -> str:
    """
    Сумма QRON для отображения: 18 знаков (ROUND_HALF_UP), хвостовые нули отброшены.

    Examples:
        >>> format_qron(Decimal("1.437500000000000000"))
        '1.4375'
        >>> format_qron(25)
        '25'
    """
    value = to_decimal(amount)
    try:
        with localcontext(DECIMAL_CONTEXT):
            value = value.quantize(_TOKEN_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmount(f"amount {amount!r} exceeds decimal precision", "amount", amount)
    text = format_plain(value)
    return text.rstrip("0").rstrip(".")


def get_category_display_name(category: ProductCategory | str) -> str:
    """Человекочитаемое название категории."""
    return CATEGORY_DISPLAY_NAMES[parse_product_category(category)]


def get_scan_type_label(scan_type: ScanType | str) -> str:
    """Человекочитаемая подпись типа скана."""
    return SCAN_TYPE_LABELS[parse_scan_type(scan_type)]
