"""Reward Calculator: расчёт награды QRON за заявку о подлинности

Порядок применения (определяет порядок строк расшифровки):
1. Базовая награда (0.1 QRON)
2. × мультипликатор редкости категории
3. + бонус точности (только при ConsensusState.ALIGNED)
4. + бонус региона высокого риска
5. + бонус первой отметки контрафакта в регионе (fake AND first flag)
6. × мультипликатор репутации: (score / 100) * 0.5 + 0.75 → [0.75, 1.25]
7. × штраф за скорость сканирования (только если сканов > 50):
   max(0.1, 1.0 - (velocity - 50) * 0.1)
8. Итог с точностью 18 дробных знаков

Десятичная арифметика и округление расшифровки (ROUND_HALF_UP) выполняются
в DECIMAL_CONTEXT и не зависят от decimal-контекста вызывающего потока.

Формула:
    final = (base * category + accuracy + geo + first_flag) * reputation * velocity

Все сложения и умножения выполняются в fixed-point (масштаб 10^18),
каждый множитель предварительно округляется до 6 знаков (to_fixed).
Расчёт детерминирован: без случайности, I/O и зависимости от времени.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable

from src.core.domain.claim import ClaimInput, ConsensusState, ScanType
from src.core.domain.reward import RewardResult
from src.core.errors import UnknownCategory
from src.core.math.fixed_point import add, from_fixed, multiply, to_fixed
from src.core.math.numerical_safeguards import DECIMAL_CONTEXT
from src.rewards.config import DEFAULT_REWARD_CONFIG, RewardConfig

logger = logging.getLogger(__name__)

_HUNDRED = Decimal("100")
_ONE = Decimal("1")
_ZERO = Decimal("0")

_SCORE_PLACES = Decimal("0.1")
_DISPLAY_PLACES = Decimal("0.0001")


def _plain(value: Decimal) -> str:
    """Короткая запись числа без лишних нулей: 1.5 → "1.5", 1.0 → "1"."""
    return format(value.normalize(), "f")


def _rounded(value: Decimal, places: Decimal = _DISPLAY_PLACES) -> Decimal:
    """Округление для расшифровки: 1.18625 → 1.1863 (ROUND_HALF_UP)."""
    return value.quantize(places, rounding=ROUND_HALF_UP)


class RewardCalculator:
    """Калькулятор награды за одну заявку.

    Stateless: хранит только immutable конфигурацию, поэтому один экземпляр
    можно использовать из любого количества потоков.
    """

    def __init__(self, config: RewardConfig | None = None):
        """Инициализация калькулятора.

        Args:
            config: конфигурация наград (опционально, используется default)
        """
        self.config = config or DEFAULT_REWARD_CONFIG

    def calculate(self, claim: ClaimInput) -> RewardResult:
        """Расчёт награды с полной расшифровкой.

        Args:
            claim: заявка пользователя

        Returns:
            RewardResult с компонентами, итогом и расшифровкой

        Raises:
            UnknownCategory: категория отсутствует в таблице мультипликаторов
            InvalidAmount: некорректное значение в конфигурации или заявке
        """
        with localcontext(DECIMAL_CONTEXT):
            return self._calculate(claim)

    def _calculate(self, claim: ClaimInput) -> RewardResult:
        cfg = self.config
        breakdown: list[str] = []

        # 1. Базовая награда
        base_fixed = to_fixed(cfg.base_reward)
        breakdown.append(f"Base reward: {_rounded(cfg.base_reward):f} QRON")

        # 2. Мультипликатор редкости категории
        category = claim.product_category
        category_multiplier = cfg.category_multipliers.get(category)
        if category_multiplier is None:
            raise UnknownCategory(f"No multiplier configured for category: {category.value!r}")
        category_fixed = to_fixed(category_multiplier)
        breakdown.append(
            f"Category ({category.value}): {_plain(category_multiplier)}x multiplier"
        )

        # 3. Бонус точности: строго ALIGNED, PENDING и MISALIGNED дают 0
        accuracy_bonus = (
            cfg.accuracy_bonus if claim.consensus_aligned is ConsensusState.ALIGNED else _ZERO
        )
        accuracy_fixed = to_fixed(accuracy_bonus)
        if accuracy_fixed > 0:
            breakdown.append(
                f"Accuracy bonus (consensus aligned): +{_rounded(accuracy_bonus):f} QRON"
            )

        # 4. Бонус региона высокого риска
        geo_bonus = cfg.geo_bonus if claim.is_high_risk_geo else _ZERO
        geo_fixed = to_fixed(geo_bonus)
        if geo_fixed > 0:
            breakdown.append(f"High-risk geography bonus: +{_rounded(geo_bonus):f} QRON")

        # 5. Бонус первой отметки контрафакта
        is_first_fake = claim.scan_type is ScanType.FAKE and claim.is_first_flag_in_region
        first_flag_bonus = cfg.first_flag_bonus if is_first_fake else _ZERO
        first_flag_fixed = to_fixed(first_flag_bonus)
        if first_flag_fixed > 0:
            breakdown.append(f"First fake flag in region: +{_rounded(first_flag_bonus):f} QRON")

        # 6. Мультипликатор репутации
        score = claim.user_reputation_score
        reputation_multiplier = (score / _HUNDRED) * cfg.reputation_span + cfg.reputation_floor
        reputation_fixed = to_fixed(reputation_multiplier)
        breakdown.append(
            f"Reputation ({_rounded(score, _SCORE_PLACES):f}): "
            f"{_rounded(reputation_multiplier):f}x multiplier"
        )

        # 7. Штраф за скорость сканирования (anti-farming)
        velocity_penalty = _ONE
        velocity = claim.scan_velocity_today
        if velocity > cfg.velocity_penalty_threshold:
            excess = velocity - cfg.velocity_penalty_threshold
            velocity_penalty = max(
                cfg.velocity_penalty_floor, _ONE - excess * cfg.velocity_penalty_rate
            )
            breakdown.append(
                f"Velocity penalty ({velocity} scans today, {excess} over limit): "
                f"{_rounded(velocity_penalty):f}x"
            )
        velocity_fixed = to_fixed(velocity_penalty)

        # 8. Итог: (base * category + bonuses) * reputation * velocity
        pre_multiplier_fixed = add(
            multiply(base_fixed, category_fixed), accuracy_fixed, geo_fixed, first_flag_fixed
        )
        after_reputation_fixed = multiply(pre_multiplier_fixed, reputation_fixed)
        final_fixed = multiply(after_reputation_fixed, velocity_fixed)
        final_reward = from_fixed(final_fixed)

        total_bonus = from_fixed(add(accuracy_fixed, geo_fixed, first_flag_fixed))
        breakdown.append(
            f"Final: ({_plain(cfg.base_reward)} x {_plain(category_multiplier)} "
            f"+ {_rounded(total_bonus):f}) "
            f"x {_rounded(reputation_multiplier):f} x {_rounded(velocity_penalty):f} "
            f"= {final_reward:.18f} QRON"
        )

        logger.debug(
            "Reward computed: scan_type=%s category=%s consensus=%s final=%s",
            claim.scan_type.value,
            category.value,
            claim.consensus_aligned.value,
            final_reward,
        )

        return RewardResult(
            base_reward=from_fixed(base_fixed),
            category_multiplier=from_fixed(category_fixed),
            accuracy_bonus=from_fixed(accuracy_fixed),
            geo_bonus=from_fixed(geo_fixed),
            first_flag_bonus=from_fixed(first_flag_fixed),
            reputation_multiplier=from_fixed(reputation_fixed),
            velocity_penalty=from_fixed(velocity_fixed),
            final_reward=final_reward,
            breakdown=tuple(breakdown),
        )

    def calculate_batch(self, claims: Iterable[ClaimInput]) -> list[RewardResult]:
        """Расчёт наград для нескольких заявок (порядок сохраняется)."""
        return [self.calculate(claim) for claim in claims]


def compute_reward(claim: ClaimInput, config: RewardConfig | None = None) -> RewardResult:
    """Расчёт награды за заявку.

    Args:
        claim: заявка пользователя
        config: конфигурация наград (опционально)

    Returns:
        RewardResult
    """
    return RewardCalculator(config).calculate(claim)
