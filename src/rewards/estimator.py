"""Range Estimator: прогноз награды до достижения консенсуса

Три независимых расчёта по одной заявке, отличающихся только состоянием
консенсуса:
- max:     ConsensusState.ALIGNED
- min:     ConsensusState.MISALIGNED
- pending: ConsensusState.PENDING

Собственное значение consensus_aligned заявки игнорируется.
"""

import logging

from src.core.domain.claim import ClaimInput, ConsensusState
from src.core.domain.reward import RewardRange
from src.rewards.calculator import RewardCalculator
from src.rewards.config import RewardConfig
from src.rewards.display import format_qron

logger = logging.getLogger(__name__)


def estimate_reward_range(claim: ClaimInput, config: RewardConfig | None = None) -> RewardRange:
    """Оценка диапазона награды.

    Args:
        claim: заявка (consensus_aligned игнорируется)
        config: конфигурация наград (опционально)

    Returns:
        RewardRange с полными RewardResult для каждого сценария
    """
    calculator = RewardCalculator(config)

    estimate = RewardRange(
        min=calculator.calculate(claim.with_consensus(ConsensusState.MISALIGNED)),
        max=calculator.calculate(claim.with_consensus(ConsensusState.ALIGNED)),
        pending=calculator.calculate(claim.with_consensus(ConsensusState.PENDING)),
    )

    logger.debug(
        "Reward range estimated: min=%s max=%s pending=%s",
        estimate.min.final_reward,
        estimate.max.final_reward,
        estimate.pending.final_reward,
    )
    return estimate


def estimate_reward_for_display(
    claim: ClaimInput, config: RewardConfig | None = None
) -> dict[str, str]:
    """Отформатированный прогноз для UI до отправки заявки.

    Returns:
        {"optimistic": ..., "conservative": ..., "pending": ...}
    """
    estimate = estimate_reward_range(claim, config)
    return {
        "optimistic": format_qron(estimate.max.final_reward),
        "conservative": format_qron(estimate.min.final_reward),
        "pending": format_qron(estimate.pending.final_reward),
    }
