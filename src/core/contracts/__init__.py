"""
Contract Validation Module

Модуль для валидации JSON контрактов ядра наград QRON.
Схемы поставляются в подкаталоге schema/ этого пакета.
"""

from .validators import (
    CLAIM_INPUT_SCHEMA,
    REWARD_RESULT_SCHEMA,
    SCHEMA_PACKAGE,
    ClaimInputValidator,
    ContractValidator,
    RewardResultValidator,
    SchemaLoader,
    get_schema_loader,
    validate_claim_input,
    validate_payload,
    validate_reward_result,
)

__all__ = [
    # Constants
    "CLAIM_INPUT_SCHEMA",
    "REWARD_RESULT_SCHEMA",
    "SCHEMA_PACKAGE",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ClaimInputValidator",
    "RewardResultValidator",
    # Functions
    "get_schema_loader",
    "validate_payload",
    "validate_claim_input",
    "validate_reward_result",
]
