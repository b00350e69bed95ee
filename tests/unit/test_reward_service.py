"""Тесты для Reward Service, display helpers и конфигурации

Покрытие:
- calculate_and_validate_reward: награда + дневной лимит
- calculate_batch_rewards
- format_qron, подписи категорий и типов скана
- RewardConfig: значения по умолчанию, валидация, immutability
"""

import dataclasses
from decimal import ROUND_DOWN, Decimal, localcontext

import pytest

from src.core.domain.claim import ClaimInput, ProductCategory, ScanType
from src.core.errors import UnknownCategory, UnknownScanType
from src.rewards import (
    DEFAULT_REWARD_CONFIG,
    REWARD_CONSTANTS,
    RewardConfig,
    calculate_and_validate_reward,
    calculate_batch_rewards,
    format_qron,
    get_category_display_name,
    get_scan_type_label,
)


@pytest.fixture
def claim():
    return ClaimInput.model_validate(
        {
            "scanType": "fake",
            "productCategory": "luxury_fashion",
            "isFirstFlagInRegion": True,
            "consensusAligned": True,
            "userReputationScore": 100,
            "userTenureDays": 30,
            "scanVelocityToday": 5,
            "isHighRiskGeo": True,
            "historicalConfidenceScore": 80,
        }
    )


# =============================================================================
# SERVICE
# =============================================================================


class TestCalculateAndValidateReward:
    def test_within_limit(self, claim):
        validated = calculate_and_validate_reward(claim, Decimal("10"))

        assert validated.reward.final_reward == Decimal("1.4375")
        assert validated.can_claim is True
        assert validated.limit_info.remaining == Decimal("15")

    def test_exceeds_limit(self, claim):
        validated = calculate_and_validate_reward(claim, Decimal("24"))

        assert validated.can_claim is False
        assert validated.limit_info.would_exceed is True
        assert validated.limit_info.remaining == Decimal("1")

    def test_custom_config_applies_to_both_steps(self, claim):
        config = RewardConfig(base_reward=Decimal("1"), max_daily_reward=Decimal("2"))
        validated = calculate_and_validate_reward(claim, 0, config)

        # (1 * 1.5 + 1.0) * 1.25
        assert validated.reward.final_reward == Decimal("3.125")
        assert validated.can_claim is False


class TestCalculateBatchRewards:
    def test_batch(self, claim):
        results = calculate_batch_rewards([claim, claim.with_consensus("misaligned")])
        assert [r.final_reward for r in results] == [Decimal("1.4375"), Decimal("1.1875")]

    def test_empty(self):
        assert calculate_batch_rewards([]) == []


# =============================================================================
# DISPLAY
# =============================================================================


class TestFormatQron:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("1.437500000000000000"), "1.4375"),
            (Decimal("25"), "25"),
            (Decimal("0"), "0"),
            ("0.000000000000000001", "0.000000000000000001"),
            (100, "100"),
            (0.1, "0.1"),
        ],
    )
    def test_trims_trailing_zeros(self, amount, expected):
        assert format_qron(amount) == expected

    def test_rounds_half_up_at_token_precision(self):
        with localcontext() as ctx:
            ctx.rounding = ROUND_DOWN
            assert format_qron("0.0000000000000000005") == "0.000000000000000001"
            assert format_qron("1.0000000000000000004") == "1"


class TestLabels:
    def test_category_names(self):
        assert get_category_display_name(ProductCategory.LUXURY_FASHION) == "Luxury Fashion"
        assert get_category_display_name("pharma") == "Pharmaceutical"
        assert get_category_display_name("food_bev") == "Food & Beverage"
        assert get_category_display_name("other") == "Other"

    def test_scan_type_labels(self):
        assert get_scan_type_label(ScanType.FAKE) == "Counterfeit"
        assert get_scan_type_label("authentic") == "Authentic"
        assert get_scan_type_label("suspicious") == "Suspicious"

    def test_unknown_values(self):
        with pytest.raises(UnknownCategory):
            get_category_display_name("toys")
        with pytest.raises(UnknownScanType):
            get_scan_type_label("genuine")


# =============================================================================
# CONFIG
# =============================================================================


class TestRewardConfig:
    def test_defaults(self):
        cfg = DEFAULT_REWARD_CONFIG

        assert cfg.base_reward == Decimal("0.1")
        assert cfg.accuracy_bonus == Decimal("0.2")
        assert cfg.geo_bonus == Decimal("0.3")
        assert cfg.first_flag_bonus == Decimal("0.5")
        assert cfg.max_daily_reward == Decimal("25.0")
        assert cfg.velocity_penalty_threshold == 50
        assert cfg.velocity_penalty_rate == Decimal("0.1")
        assert cfg.velocity_penalty_floor == Decimal("0.1")
        assert cfg.category_multipliers[ProductCategory.LUXURY_FASHION] == Decimal("1.5")
        assert set(cfg.category_multipliers) == set(ProductCategory)

    def test_constants_mirror_defaults(self):
        assert REWARD_CONSTANTS["BASE_REWARD"] == Decimal("0.1")
        assert REWARD_CONSTANTS["MAX_DAILY_REWARD"] == Decimal("25.0")
        assert REWARD_CONSTANTS["CATEGORY_MULTIPLIERS"][ProductCategory.PHARMA] == Decimal("1.4")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_REWARD_CONFIG.base_reward = Decimal("1")

    def test_category_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_REWARD_CONFIG.category_multipliers[ProductCategory.OTHER] = Decimal("9")

    def test_caller_dict_is_copied(self):
        table = {category: Decimal("1") for category in ProductCategory}
        cfg = RewardConfig(category_multipliers=table)
        table[ProductCategory.OTHER] = Decimal("5")

        assert cfg.category_multipliers[ProductCategory.OTHER] == Decimal("1")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"base_reward": Decimal("-0.1")},
            {"geo_bonus": Decimal("NaN")},
            {"max_daily_reward": 25.0},
            {"velocity_penalty_floor": Decimal("0")},
            {"velocity_penalty_floor": Decimal("1.5")},
            {"velocity_penalty_threshold": -1},
            {"category_multipliers": {ProductCategory.OTHER: Decimal("0")}},
        ],
    )
    def test_invalid_config_rejected(self, overrides):
        with pytest.raises(ValueError):
            RewardConfig(**overrides)
