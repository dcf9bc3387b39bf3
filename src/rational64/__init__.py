"""
rational64 — точные дроби на паре int64.

Публичный API: Fraction, известные константы, разбор/форматирование текста.
"""

from rational64.core.domain import (
    MAX_VALUE,
    MIN_VALUE,
    NEGATIVE_ONE,
    ONE,
    ZERO,
    Fraction,
    FractionFormatError,
    format_fraction,
    parse,
    try_parse,
)
from rational64.core.math import DenominatorOverflowError

__version__ = "1.0.0"

__all__ = [
    "Fraction",
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "MIN_VALUE",
    "MAX_VALUE",
    "format_fraction",
    "parse",
    "try_parse",
    "FractionFormatError",
    "DenominatorOverflowError",
]
