"""Rewards — начисление наград QRON за заявки о подлинности продуктов.

- RewardCalculator: многофакторный расчёт награды
- DailyLimitGuard: дневной лимит выплат
- estimate_reward_range: прогноз до достижения консенсуса
"""

from .calculator import RewardCalculator, compute_reward
from .config import DEFAULT_REWARD_CONFIG, REWARD_CONSTANTS, RewardConfig
from .daily_limit import DailyLimitGuard, cap_reward_to_daily_limit, check_daily_limit
from .display import format_qron, get_category_display_name, get_scan_type_label
from .estimator import estimate_reward_for_display, estimate_reward_range
from .service import calculate_and_validate_reward, calculate_batch_rewards

__all__ = [
    "RewardCalculator",
    "compute_reward",
    "RewardConfig",
    "DEFAULT_REWARD_CONFIG",
    "REWARD_CONSTANTS",
    "DailyLimitGuard",
    "check_daily_limit",
    "cap_reward_to_daily_limit",
    "estimate_reward_range",
    "estimate_reward_for_display",
    "calculate_and_validate_reward",
    "calculate_batch_rewards",
    "format_qron",
    "get_category_display_name",
    "get_scan_type_label",
]
