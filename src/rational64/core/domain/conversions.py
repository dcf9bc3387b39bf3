"""
Conversions — Таблица преобразований Fraction ↔ примитивные типы

Вместо десятков перегруженных операторов используется таблица пар
(имя примитивного типа, функция преобразования) в обе стороны.

В Fraction (INTO_FRACTION):
    bool, byte, sbyte, char, int16, uint16, int32, uint32, int64 — неявные,
    значение проверяется на диапазон исходного типа и становится value/1.
    uint64 — явное, битовый паттерн переинтерпретируется как int64.

Из Fraction (FROM_FRACTION):
    Целые типы: усечённое частное numerator/denominator, затем wrap до
    ширины целевого типа (unchecked). float32/float64: деление в плавающей
    точке соответствующей точности. decimal: частное decimal.Decimal.
    bool: numerator != 0. string: текстовый формат.
"""

import decimal
import struct
from typing import Any, Callable, Final

from rational64.core.domain.fraction import Fraction
from rational64.core.domain.text_format import format_fraction
from rational64.core.math.int64 import (
    UINT64_MASK,
    trunc_div,
    validate_integer,
    wrap_bits,
    wrap_int64,
)

# Точность decimal-частного (значащие цифры)
DECIMAL_PRECISION: Final[int] = 28

# Значащие биты мантиссы binary32 (включая неявную единицу)
FLOAT32_MANTISSA_BITS: Final[int] = 24


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownPrimitiveError(KeyError):
    """Имя примитивного типа отсутствует в таблице преобразований."""

    pass


# =============================================================================
# В FRACTION
# =============================================================================


def _integral_source(name: str, low: int, high: int) -> Callable[[Any], Fraction]:
    def convert(value: Any) -> Fraction:
        return Fraction(validate_integer(value, name, low, high))

    return convert


def _from_bool(value: Any) -> Fraction:
    if not isinstance(value, bool):
        raise TypeError(f"bool value expected, got {type(value).__name__}")
    return Fraction(1 if value else 0)


def _from_char(value: Any) -> Fraction:
    if not isinstance(value, str) or len(value) != 1:
        raise TypeError(f"char value must be a single character, got {value!r}")
    code = ord(value)
    if code > 0xFFFF:
        raise ValueError(f"char value must be a UTF-16 code unit, got U+{code:X}")
    return Fraction(code)


def _from_uint64(value: Any) -> Fraction:
    # Явное преобразование: старший бит становится знаком
    return Fraction(wrap_int64(validate_integer(value, "uint64", 0, UINT64_MASK)))


INTO_FRACTION: Final[dict[str, Callable[[Any], Fraction]]] = {
    "bool": _from_bool,
    "byte": _integral_source("byte", 0, 2**8 - 1),
    "sbyte": _integral_source("sbyte", -(2**7), 2**7 - 1),
    "char": _from_char,
    "int16": _integral_source("int16", -(2**15), 2**15 - 1),
    "uint16": _integral_source("uint16", 0, 2**16 - 1),
    "int32": _integral_source("int32", -(2**31), 2**31 - 1),
    "uint32": _integral_source("uint32", 0, 2**32 - 1),
    "int64": _integral_source("int64", -(2**63), 2**63 - 1),
    "uint64": _from_uint64,
}


# =============================================================================
# ИЗ FRACTION
# =============================================================================


def _to_float32(value: float) -> float:
    """Округление до одинарной точности (IEEE 754 binary32)."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _integral_target(bits: int, signed: bool) -> Callable[[Fraction], int]:
    def convert(value: Fraction) -> int:
        return wrap_bits(trunc_div(value.numerator, value.denominator), bits, signed)

    return convert


def _to_char(value: Fraction) -> str:
    return chr(wrap_bits(trunc_div(value.numerator, value.denominator), 16, signed=False))


def _int_to_float32(value: int) -> float:
    """
    Округление целого до binary32 напрямую, без промежуточного double.

    Округление к ближайшему, при равенстве к чётному.
    """
    magnitude = abs(value)
    excess = magnitude.bit_length() - FLOAT32_MANTISSA_BITS
    if excess > 0:
        mantissa, remainder = divmod(magnitude, 1 << excess)
        half = 1 << (excess - 1)
        if remainder > half or (remainder == half and mantissa & 1):
            mantissa += 1
        magnitude = mantissa << excess

    return float(-magnitude if value < 0 else magnitude)


def _to_single(value: Fraction) -> float:
    # Частное двух binary32, вычисленное в double, округляется к binary32 без ошибки
    return _to_float32(_int_to_float32(value.numerator) / _int_to_float32(value.denominator))


def _to_decimal(value: Fraction) -> decimal.Decimal:
    with decimal.localcontext() as context:
        context.prec = DECIMAL_PRECISION
        return decimal.Decimal(value.numerator) / decimal.Decimal(value.denominator)


FROM_FRACTION: Final[dict[str, Callable[[Fraction], Any]]] = {
    "bool": bool,
    "byte": _integral_target(8, signed=False),
    "sbyte": _integral_target(8, signed=True),
    "char": _to_char,
    "int16": _integral_target(16, signed=True),
    "uint16": _integral_target(16, signed=False),
    "int32": _integral_target(32, signed=True),
    "uint32": _integral_target(32, signed=False),
    "int64": _integral_target(64, signed=True),
    "uint64": _integral_target(64, signed=False),
    "float32": _to_single,
    "float64": float,
    "decimal": _to_decimal,
    "string": format_fraction,
}


# =============================================================================
# API
# =============================================================================


def from_primitive(value: Any, type_name: str) -> Fraction:
    """
    Преобразование примитивного значения в Fraction.

    Args:
        value: Исходное значение
        type_name: Имя исходного типа из INTO_FRACTION

    Raises:
        UnknownPrimitiveError: Если тип не поддерживается
        TypeError / ValueError: Если значение не принадлежит исходному типу

    Examples:
        >>> from_primitive(200, "byte")
        Fraction(200, 1)
        >>> from_primitive(2**64 - 1, "uint64")
        Fraction(-1, 1)
    """
    try:
        converter = INTO_FRACTION[type_name]
    except KeyError:
        raise UnknownPrimitiveError(type_name) from None
    return converter(value)


def to_primitive(value: Fraction, type_name: str) -> Any:
    """
    Явное преобразование Fraction в примитивный тип.

    Examples:
        >>> to_primitive(Fraction(7, 2), "int32")
        3
        >>> to_primitive(Fraction(300), "byte")
        44
    """
    try:
        converter = FROM_FRACTION[type_name]
    except KeyError:
        raise UnknownPrimitiveError(type_name) from None
    return converter(value)
