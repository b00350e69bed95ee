"""
ClaimInput — Модель заявки пользователя о подлинности продукта

Immutable Pydantic модель, представляющая одну заявку ("продукт подлинный /
подозрительный / контрафакт") со всеми атрибутами, влияющими на награду.
Соответствует схеме src/core/contracts/schema/claim_input.json.

Принимает как snake_case имена полей, так и camelCase (формат веб-клиента).
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from src.core.errors import UnknownCategory, UnknownScanType
from src.core.math.numerical_safeguards import (
    clamp,
    format_plain,
    to_decimal,
    validate_non_negative_int,
)


# =============================================================================
# CONSTANTS
# =============================================================================

SCORE_MIN: Final[Decimal] = Decimal("0")
SCORE_MAX: Final[Decimal] = Decimal("100")


# =============================================================================
# ENUMS
# =============================================================================


class ScanType(str, Enum):
    """Результат скана, заявленный пользователем"""

    AUTHENTIC = "authentic"
    SUSPICIOUS = "suspicious"
    FAKE = "fake"


class ProductCategory(str, Enum):
    """Категория продукта (определяет мультипликатор редкости)"""

    LUXURY_FASHION = "luxury_fashion"
    PHARMA = "pharma"
    ELECTRONICS = "electronics"
    AUTOMOTIVE = "automotive"
    FOOD_BEV = "food_bev"
    OTHER = "other"


class ConsensusState(str, Enum):
    """
    Совпадение заявки с консенсусом.

    PENDING — отдельное состояние (консенсус ещё не достигнут), а не False.
    """

    ALIGNED = "aligned"
    MISALIGNED = "misaligned"
    PENDING = "pending"

    @classmethod
    def from_flag(cls, flag: bool | None) -> "ConsensusState":
        """True → ALIGNED, False → MISALIGNED, None → PENDING."""
        if flag is None:
            return cls.PENDING
        return cls.ALIGNED if flag else cls.MISALIGNED


def parse_scan_type(value: Any) -> ScanType:
    """
    Приведение значения к ScanType.

    Raises:
        UnknownScanType: Если значение не входит в ScanType
    """
    if isinstance(value, ScanType):
        return value
    try:
        return ScanType(value)
    except ValueError:
        raise UnknownScanType(f"Unknown scan type: {value!r}")


def parse_product_category(value: Any) -> ProductCategory:
    """
    Приведение значения к ProductCategory.

    Raises:
        UnknownCategory: Если значение не входит в ProductCategory
    """
    if isinstance(value, ProductCategory):
        return value
    try:
        return ProductCategory(value)
    except ValueError:
        raise UnknownCategory(f"Unknown product category: {value!r}")


# =============================================================================
# CLAIM INPUT MODEL
# =============================================================================


class ClaimInput(BaseModel):
    """
    Модель заявки для расчёта награды.

    Immutable модель (frozen=True). Ошибки значений (InvalidAmount,
    UnknownCategory, UnknownScanType) пробрасываются из конструктора как есть.

    Поля user_tenure_days и historical_confidence_score зарезервированы:
    валидируются, но в расчёте награды пока не участвуют.
    """

    # Заявка
    scan_type: ScanType = Field(..., description="Тип скана (authentic/suspicious/fake)")
    product_category: ProductCategory = Field(..., description="Категория продукта")
    is_first_flag_in_region: bool = Field(
        ..., description="Первая отметка контрафакта в регионе"
    )
    consensus_aligned: ConsensusState = Field(
        ConsensusState.PENDING, description="Совпадение с консенсусом (aligned/misaligned/pending)"
    )

    # Пользователь
    user_reputation_score: Decimal = Field(..., description="Репутация пользователя (0-100)")
    user_tenure_days: int = Field(..., description="Стаж пользователя в днях (зарезервировано)")
    scan_velocity_today: int = Field(..., description="Количество сканов пользователя за сегодня")

    # Контекст
    is_high_risk_geo: bool = Field(..., description="Регион с высоким риском контрафакта")
    historical_confidence_score: Decimal = Field(
        ..., description="Историческая уверенность по SKU (0-100, зарезервировано)"
    )

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("scan_type", mode="before")
    @classmethod
    def validate_scan_type(cls, v: Any) -> ScanType:
        return parse_scan_type(v)

    @field_validator("product_category", mode="before")
    @classmethod
    def validate_product_category(cls, v: Any) -> ProductCategory:
        return parse_product_category(v)

    @field_validator("consensus_aligned", mode="before")
    @classmethod
    def validate_consensus(cls, v: Any) -> Any:
        """bool/None из веб-клиента → ConsensusState; строки проверяет pydantic."""
        if v is None or isinstance(v, bool):
            return ConsensusState.from_flag(v)
        return v

    @field_validator("user_reputation_score", "historical_confidence_score", mode="before")
    @classmethod
    def validate_score(cls, v: Any, info: ValidationInfo) -> Decimal:
        """
        Скоры приводятся к диапазону [0, 100].

        NaN/Inf и нечисловые значения → InvalidAmount, конечные значения
        вне диапазона ограничиваются (clamp). "-0" приводится к "0".
        """
        return clamp(to_decimal(v, info.field_name), SCORE_MIN, SCORE_MAX).copy_abs()

    @field_validator("user_tenure_days", "scan_velocity_today", mode="before")
    @classmethod
    def validate_counter(cls, v: Any, info: ValidationInfo) -> int:
        return validate_non_negative_int(v, info.field_name)

    def with_consensus(self, consensus: ConsensusState | str) -> "ClaimInput":
        """Копия заявки с заменённым состоянием консенсуса."""
        return self.model_copy(update={"consensus_aligned": ConsensusState(consensus)})

    def to_payload(self) -> dict[str, Any]:
        """
        JSON-представление заявки (camelCase, схема claim_input.json).

        Скоры сериализуются десятичными строками без экспоненты, консенсус — true/false/null.
        """
        consensus_flags = {
            ConsensusState.ALIGNED: True,
            ConsensusState.MISALIGNED: False,
            ConsensusState.PENDING: None,
        }
        return {
            "scanType": self.scan_type.value,
            "productCategory": self.product_category.value,
            "isFirstFlagInRegion": self.is_first_flag_in_region,
            "consensusAligned": consensus_flags[self.consensus_aligned],
            "userReputationScore": format_plain(self.user_reputation_score),
            "userTenureDays": self.user_tenure_days,
            "scanVelocityToday": self.scan_velocity_today,
            "isHighRiskGeo": self.is_high_risk_geo,
            "historicalConfidenceScore": format_plain(self.historical_confidence_score),
        }
