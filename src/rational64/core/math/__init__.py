"""
Core math modules для rational64

Целочисленные примитивы int64 и нормализация дробей.
"""

# Int64 arithmetic
from rational64.core.math.int64 import (
    # Range constants
    INT64_MAX,
    INT64_MIN,
    SHIFT_MASK,
    UINT64_MASK,
    # Wrap
    to_uint64,
    wrap_bits,
    wrap_int64,
    # Truncating division
    trunc_div,
    trunc_mod,
    # Validation
    is_int64,
    validate_integer,
)

# Normalizer
from rational64.core.math.normalizer import (
    DenominatorOverflowError,
    greatest_common_divisor,
    simplify,
)

__all__ = [
    # Int64 — Range constants
    "INT64_MAX",
    "INT64_MIN",
    "SHIFT_MASK",
    "UINT64_MASK",
    # Int64 — Wrap
    "to_uint64",
    "wrap_bits",
    "wrap_int64",
    # Int64 — Truncating division
    "trunc_div",
    "trunc_mod",
    # Int64 — Validation
    "is_int64",
    "validate_integer",
    # Normalizer — Exceptions
    "DenominatorOverflowError",
    # Normalizer — Functions
    "greatest_common_divisor",
    "simplify",
]
