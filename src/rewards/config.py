"""Конфигурация начисления наград QRON.

Все константы расчёта собраны в одном immutable объекте. Компоненты
принимают config=None и используют DEFAULT_REWARD_CONFIG.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Final, Mapping

from src.core.domain.claim import ProductCategory


def _default_category_multipliers() -> Mapping[ProductCategory, Decimal]:
    return MappingProxyType({
        ProductCategory.LUXURY_FASHION: Decimal("1.5"),
        ProductCategory.PHARMA: Decimal("1.4"),
        ProductCategory.ELECTRONICS: Decimal("1.2"),
        ProductCategory.AUTOMOTIVE: Decimal("1.3"),
        ProductCategory.FOOD_BEV: Decimal("1.1"),
        ProductCategory.OTHER: Decimal("1.0"),
    })


@dataclass(frozen=True)
class RewardConfig:
    """Конфигурация расчёта награды и дневного лимита.

    Суммы в QRON, мультипликаторы безразмерные.
    """

    # Аддитивные компоненты (QRON)
    base_reward: Decimal = Decimal("0.1")
    accuracy_bonus: Decimal = Decimal("0.2")
    geo_bonus: Decimal = Decimal("0.3")
    first_flag_bonus: Decimal = Decimal("0.5")

    # Мультипликатор редкости по категории
    category_multipliers: Mapping[ProductCategory, Decimal] = field(
        default_factory=_default_category_multipliers
    )

    # Репутация: (score / 100) * span + floor → [0.75, 1.25]
    reputation_floor: Decimal = Decimal("0.75")
    reputation_span: Decimal = Decimal("0.5")

    # Anti-farming: штраф за сканы сверх порога
    velocity_penalty_threshold: int = 50
    velocity_penalty_rate: Decimal = Decimal("0.1")
    velocity_penalty_floor: Decimal = Decimal("0.1")

    # Дневной лимит (QRON)
    max_daily_reward: Decimal = Decimal("25.0")

    def __post_init__(self) -> None:
        amounts = {
            "base_reward": self.base_reward,
            "accuracy_bonus": self.accuracy_bonus,
            "geo_bonus": self.geo_bonus,
            "first_flag_bonus": self.first_flag_bonus,
            "reputation_floor": self.reputation_floor,
            "reputation_span": self.reputation_span,
            "velocity_penalty_rate": self.velocity_penalty_rate,
            "max_daily_reward": self.max_daily_reward,
        }
        for name, value in amounts.items():
            if not isinstance(value, Decimal) or not value.is_finite() or value < 0:
                raise ValueError(f"{name} must be a non-negative finite Decimal, got {value!r}")

        if not Decimal("0") < self.velocity_penalty_floor <= Decimal("1"):
            raise ValueError(
                f"velocity_penalty_floor must be in (0, 1], got {self.velocity_penalty_floor}"
            )
        if self.velocity_penalty_threshold < 0:
            raise ValueError(
                f"velocity_penalty_threshold must be >= 0, got {self.velocity_penalty_threshold}"
            )
        for category, multiplier in self.category_multipliers.items():
            if multiplier <= 0:
                raise ValueError(f"multiplier for {category.value} must be positive, got {multiplier}")

        # Изолируем таблицу от изменений исходного dict вызывающего кода
        object.__setattr__(
            self, "category_multipliers", MappingProxyType(dict(self.category_multipliers))
        )


DEFAULT_REWARD_CONFIG: Final[RewardConfig] = RewardConfig()

# Константы для UI и документации
REWARD_CONSTANTS: Final[Mapping[str, Any]] = MappingProxyType({
    "BASE_REWARD": DEFAULT_REWARD_CONFIG.base_reward,
    "MAX_DAILY_REWARD": DEFAULT_REWARD_CONFIG.max_daily_reward,
    "ACCURACY_BONUS": DEFAULT_REWARD_CONFIG.accuracy_bonus,
    "GEO_BONUS": DEFAULT_REWARD_CONFIG.geo_bonus,
    "FIRST_FLAG_BONUS": DEFAULT_REWARD_CONFIG.first_flag_bonus,
    "VELOCITY_PENALTY_THRESHOLD": DEFAULT_REWARD_CONFIG.velocity_penalty_threshold,
    "VELOCITY_PENALTY_RATE": DEFAULT_REWARD_CONFIG.velocity_penalty_rate,
    "CATEGORY_MULTIPLIERS": DEFAULT_REWARD_CONFIG.category_multipliers,
})
