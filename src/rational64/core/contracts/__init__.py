"""
Contract Validation Module

JSON Schema контракт внешнего представления дробей (запись и текст).
"""

from .validators import (
    FRACTION_FORMAT_CHECKER,
    FractionContract,
    is_fraction_text,
    load_fraction_payload,
    load_schema,
    validate_fraction_payload,
)

__all__ = [
    # Classes
    "FractionContract",
    # Format checking
    "FRACTION_FORMAT_CHECKER",
    "is_fraction_text",
    # Functions
    "load_schema",
    "load_fraction_payload",
    "validate_fraction_payload",
]
