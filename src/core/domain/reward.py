"""
Reward — Результаты расчёта награды

Value-объекты, создаваемые заново при каждом вызове:
- RewardResult: компоненты награды, итог и аудируемая расшифровка
- DailyLimitDecision: решение по дневному лимиту
- RewardRange: прогноз награды до достижения консенсуса
- ValidatedReward: награда вместе с проверкой дневного лимита

Все суммы — Decimal. Итоговая награда содержит ровно 18 дробных знаков.
"""

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any

from src.core.domain.units import to_minor_units
from src.core.math.numerical_safeguards import DECIMAL_CONTEXT, format_plain


# =============================================================================
# REWARD RESULT
# =============================================================================


@dataclass(frozen=True)
class RewardResult:
    """Результат расчёта награды за одну заявку."""

    # Компоненты
    base_reward: Decimal  # QRON
    category_multiplier: Decimal  # x
    accuracy_bonus: Decimal  # QRON, 0 если консенсус не подтверждён
    geo_bonus: Decimal  # QRON
    first_flag_bonus: Decimal  # QRON
    reputation_multiplier: Decimal  # x, [0.75, 1.25]
    velocity_penalty: Decimal  # x, 1.0 если порог не превышен

    # Итог
    final_reward: Decimal  # QRON, 18 дробных знаков

    # Расшифровка в порядке применения
    breakdown: tuple[str, ...]

    @property
    def total_bonus(self) -> Decimal:
        """Сумма аддитивных бонусов (accuracy + geo + first flag)."""
        with localcontext(DECIMAL_CONTEXT):
            return self.accuracy_bonus + self.geo_bonus + self.first_flag_bonus

    @property
    def final_reward_minor_units(self) -> int:
        """Итоговая награда в минимальных единицах (для on-chain перевода)."""
        return to_minor_units(self.final_reward)

    def to_payload(self) -> dict[str, Any]:
        """
        JSON-представление результата (схема reward_result.json).

        Суммы записываются без экспоненты: нулевой бонус → "0.000000000000000000".
        """
        return {
            "baseReward": format_plain(self.base_reward),
            "categoryMultiplier": format_plain(self.category_multiplier),
            "accuracyBonus": format_plain(self.accuracy_bonus),
            "geoBonus": format_plain(self.geo_bonus),
            "firstFlagBonus": format_plain(self.first_flag_bonus),
            "reputationMultiplier": format_plain(self.reputation_multiplier),
            "velocityPenalty": format_plain(self.velocity_penalty),
            "finalReward": format_plain(self.final_reward),
            "finalRewardMinorUnits": str(self.final_reward_minor_units),
            "breakdown": list(self.breakdown),
        }


# =============================================================================
# DAILY LIMIT
# =============================================================================


@dataclass(frozen=True)
class DailyLimitDecision:
    """Решение по дневному лимиту (вычисляется, не хранится)."""

    can_claim: bool
    remaining: Decimal  # QRON, остаток дневного лимита (>= 0)
    would_exceed: bool


# =============================================================================
# RANGE ESTIMATE
# =============================================================================


@dataclass(frozen=True)
class RewardRange:
    """
    Прогноз награды до достижения консенсуса.

    min — консенсус не подтвердил заявку, max — подтвердил,
    pending — консенсус ещё не достигнут.
    """

    min: RewardResult
    max: RewardResult
    pending: RewardResult


@dataclass(frozen=True)
class ValidatedReward:
    """Награда вместе с проверкой дневного лимита."""

    reward: RewardResult
    can_claim: bool
    limit_info: DailyLimitDecision
