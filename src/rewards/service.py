"""Reward Service: высокоуровневые операции для API-обработчиков.

Объединяет расчёт награды и проверку дневного лимита. Сам дневной итог
пользователя передаётся снаружи (ledger), сервис его не хранит.
"""

from typing import Any, Iterable

from src.core.domain.claim import ClaimInput
from src.core.domain.reward import RewardResult, ValidatedReward
from src.rewards.calculator import RewardCalculator
from src.rewards.config import RewardConfig
from src.rewards.daily_limit import DailyLimitGuard


def calculate_and_validate_reward(
    claim: ClaimInput,
    current_daily_total: Any,
    config: RewardConfig | None = None,
) -> ValidatedReward:
    """Расчёт награды с проверкой дневного лимита.

    Args:
        claim: заявка пользователя
        current_daily_total: уже начисленная за сегодня сумма (QRON)
        config: конфигурация наград (опционально)

    Returns:
        ValidatedReward (награда, допуск к выплате, детали лимита)
    """
    reward = RewardCalculator(config).calculate(claim)
    limit_info = DailyLimitGuard(config).check(current_daily_total, reward.final_reward)

    return ValidatedReward(
        reward=reward,
        can_claim=limit_info.can_claim,
        limit_info=limit_info,
    )


def calculate_batch_rewards(
    claims: Iterable[ClaimInput],
    config: RewardConfig | None = None,
) -> list[RewardResult]:
    """Расчёт наград для нескольких заявок."""
    return RewardCalculator(config).calculate_batch(claims)
