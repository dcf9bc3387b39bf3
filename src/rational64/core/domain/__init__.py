"""
Domain models and value objects.

Contains the Fraction value type, its text format and conversion table.
"""

from rational64.core.domain.conversions import (
    FROM_FRACTION,
    INTO_FRACTION,
    UnknownPrimitiveError,
    from_primitive,
    to_primitive,
)
from rational64.core.domain.fraction import (
    MAX_VALUE,
    MIN_VALUE,
    NEGATIVE_ONE,
    ONE,
    ZERO,
    Fraction,
    FractionLike,
    fraction_max,
    fraction_min,
)
from rational64.core.domain.text_format import (
    FractionFormatError,
    format_fraction,
    parse,
    try_parse,
)

__all__ = [
    # Fraction model
    "Fraction",
    "FractionLike",
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "MIN_VALUE",
    "MAX_VALUE",
    "fraction_min",
    "fraction_max",
    # Text format
    "FractionFormatError",
    "format_fraction",
    "parse",
    "try_parse",
    # Conversions
    "INTO_FRACTION",
    "FROM_FRACTION",
    "UnknownPrimitiveError",
    "from_primitive",
    "to_primitive",
]
