"""
Domain models and value objects.

Contains fundamental domain entities like ClaimInput, RewardResult and the
QRON token unit conversions.
"""

from src.core.domain.claim import (
    ClaimInput,
    ConsensusState,
    ProductCategory,
    ScanType,
    parse_product_category,
    parse_scan_type,
)
from src.core.domain.reward import (
    DailyLimitDecision,
    RewardRange,
    RewardResult,
    ValidatedReward,
)
from src.core.domain.units import (
    MINOR_UNITS_PER_TOKEN,
    TOKEN_DECIMALS,
    from_minor_units,
    to_minor_units,
)

__all__ = [
    # Units module
    "TOKEN_DECIMALS",
    "MINOR_UNITS_PER_TOKEN",
    "to_minor_units",
    "from_minor_units",
    # Claim model
    "ClaimInput",
    "ConsensusState",
    "ProductCategory",
    "ScanType",
    "parse_product_category",
    "parse_scan_type",
    # Reward results
    "RewardResult",
    "DailyLimitDecision",
    "RewardRange",
    "ValidatedReward",
]
