"""Daily Limit Guard: дневной лимит выплат пользователю

Правила:
- remaining = max(0, MAX_DAILY_REWARD - current_daily_total)
- would_exceed = current_daily_total + new_reward > MAX_DAILY_REWARD
- can_claim = not would_exceed
- cap(current, reward) = min(reward, remaining)

Guard не хранит и не обновляет дневной итог пользователя. Атомарное чтение
и обновление итога (защита от check-then-act гонки двух параллельных заявок)
остаётся на стороне внешнего ledger.

Сложение и вычитание сумм выполняются в DECIMAL_CONTEXT.
"""

import logging
from decimal import Decimal, localcontext
from typing import Any

from src.core.domain.reward import DailyLimitDecision
from src.core.math.numerical_safeguards import DECIMAL_CONTEXT, to_decimal
from src.rewards.config import DEFAULT_REWARD_CONFIG, RewardConfig

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


class DailyLimitGuard:
    """Проверка награды против дневного лимита пользователя."""

    def __init__(self, config: RewardConfig | None = None):
        self.config = config or DEFAULT_REWARD_CONFIG

    def remaining(self, current_daily_total: Any) -> Decimal:
        """Остаток дневного лимита (никогда не отрицательный)."""
        current = to_decimal(current_daily_total, "current_daily_total")
        with localcontext(DECIMAL_CONTEXT):
            return max(_ZERO, self.config.max_daily_reward - current)

    def check(self, current_daily_total: Any, new_reward: Any) -> DailyLimitDecision:
        """Проверка, помещается ли новая награда в дневной лимит.

        Args:
            current_daily_total: уже начисленная за сегодня сумма (QRON)
            new_reward: новая награда (QRON)

        Returns:
            DailyLimitDecision
        """
        current = to_decimal(current_daily_total, "current_daily_total")
        reward = to_decimal(new_reward, "new_reward")

        with localcontext(DECIMAL_CONTEXT):
            would_exceed = current + reward > self.config.max_daily_reward
        return DailyLimitDecision(
            can_claim=not would_exceed,
            remaining=self.remaining(current),
            would_exceed=would_exceed,
        )

    def cap(self, current_daily_total: Any, reward: Any) -> Decimal:
        """Ограничение награды остатком дневного лимита (частичная выплата)."""
        amount = to_decimal(reward, "reward")
        remaining = self.remaining(current_daily_total)

        if amount > remaining:
            logger.warning(
                "Reward capped by daily limit: requested=%s remaining=%s limit=%s",
                amount,
                remaining,
                self.config.max_daily_reward,
            )
            return remaining
        return amount


def check_daily_limit(
    current_daily_total: Any,
    new_reward: Any,
    config: RewardConfig | None = None,
) -> DailyLimitDecision:
    """Проверка дневного лимита с конфигурацией по умолчанию."""
    return DailyLimitGuard(config).check(current_daily_total, new_reward)


def cap_reward_to_daily_limit(
    current_daily_total: Any,
    reward: Any,
    config: RewardConfig | None = None,
) -> Decimal:
    """Ограничение награды остатком дневного лимита."""
    return DailyLimitGuard(config).cap(current_daily_total, reward)
