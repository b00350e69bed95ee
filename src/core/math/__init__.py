"""
Core math modules для ядра наград QRON

Точная десятичная арифметика и защитные проверки числовых входов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    DECIMAL_CONTEXT,
    clamp,
    format_plain,
    is_valid_decimal,
    to_decimal,
    validate_in_range,
    validate_non_negative,
    validate_non_negative_int,
)

# Fixed Point (18 decimals)
from src.core.math.fixed_point import (
    FIXED_DECIMALS,
    INPUT_PRECISION_DIGITS,
    SCALE,
    add,
    from_fixed,
    multiply,
    to_fixed,
)

__all__ = [
    # Numerical Safeguards
    "DECIMAL_CONTEXT",
    "clamp",
    "format_plain",
    "is_valid_decimal",
    "to_decimal",
    "validate_in_range",
    "validate_non_negative",
    "validate_non_negative_int",
    # Fixed Point — Constants
    "FIXED_DECIMALS",
    "INPUT_PRECISION_DIGITS",
    "SCALE",
    # Fixed Point — Functions
    "add",
    "from_fixed",
    "multiply",
    "to_fixed",
]
