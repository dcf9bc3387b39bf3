"""
Int64 Arithmetic — Fixed-Width Integer Primitives

Модуль эмулирует семантику 64-битных знаковых целых поверх Python int:
- Границы диапазона int64 и маски разрядности
- Two's-complement wrap (unchecked overflow) для любой ширины
- Деление и остаток с усечением к нулю (truncating division)
- Проверки и валидация диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. wrap_int64(v) всегда лежит в [INT64_MIN, INT64_MAX]
2. a == trunc_div(a, b) * b + trunc_mod(a, b) для любых b != 0
3. Знак trunc_mod совпадает со знаком делимого
4. Переполнение НЕ детектируется: значения заворачиваются (wrap)
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

# Минимальное значение int64 (не имеет положительной пары)
INT64_MIN: Final[int] = -(2**63)

# Максимальное значение int64
INT64_MAX: Final[int] = 2**63 - 1

# Маска 64-битного беззнакового представления
UINT64_MASK: Final[int] = 2**64 - 1

# Маска величины сдвига: сдвиг 64-битного операнда учитывает только 6 младших бит
SHIFT_MASK: Final[int] = 63

# Допустимые ширины для wrap_bits
SUPPORTED_BIT_WIDTHS: Final[frozenset[int]] = frozenset({8, 16, 32, 64})


# =============================================================================
# TWO'S-COMPLEMENT WRAP
# =============================================================================


def wrap_bits(value: int, bits: int, signed: bool = True) -> int:
    """
    Приведение целого к заданной ширине с заворачиванием (two's complement).

    Args:
        value: Произвольное целое
        bits: Ширина в битах (8, 16, 32 или 64)
        signed: Знаковая интерпретация результата (default: True)

    Returns:
        Значение, усечённое до младших `bits` бит

    Raises:
        ValueError: Если ширина не поддерживается

    Examples:
        >>> wrap_bits(256, 8, signed=False)
        0
        >>> wrap_bits(200, 8)
        -56
        >>> wrap_bits(-1, 16, signed=False)
        65535
    """
    if bits not in SUPPORTED_BIT_WIDTHS:
        raise ValueError(f"bits must be one of {sorted(SUPPORTED_BIT_WIDTHS)}, got {bits}")

    mask = (1 << bits) - 1
    result = value & mask

    if signed and result >> (bits - 1):
        result -= 1 << bits

    return result


def wrap_int64(value: int) -> int:
    """
    Заворачивание произвольного целого в диапазон int64.

    Examples:
        >>> wrap_int64(INT64_MAX + 1) == INT64_MIN
        True
        >>> wrap_int64(-INT64_MIN) == INT64_MIN
        True
    """
    result = value & UINT64_MASK
    if result > INT64_MAX:
        result -= 1 << 64
    return result


def to_uint64(value: int) -> int:
    """Беззнаковое 64-битное представление (битовый паттерн) значения."""
    return value & UINT64_MASK


# =============================================================================
# TRUNCATING DIVISION
# =============================================================================


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от оператора //, который округляет к минус бесконечности,
    результат усекается к нулю: trunc_div(-7, 2) == -3.

    Args:
        numerator: Делимое
        denominator: Делитель

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
    """
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def trunc_mod(numerator: int, denominator: int) -> int:
    """
    Остаток от деления с усечением к нулю (знак следует за делимым).

    Examples:
        >>> trunc_mod(7, 3)
        1
        >>> trunc_mod(-7, 3)
        -1
        >>> trunc_mod(7, -3)
        1
    """
    return numerator - trunc_div(numerator, denominator) * denominator


# =============================================================================
# ВАЛИДАЦИЯ ДИАПАЗОНА
# =============================================================================


def is_int64(value: object) -> bool:
    """
    Проверка, является ли значение целым в диапазоне int64.

    bool считается целым (True == 1, False == 0).
    """
    return isinstance(value, int) and INT64_MIN <= value <= INT64_MAX


def validate_integer(value: object, name: str, low: int = INT64_MIN, high: int = INT64_MAX) -> int:
    """
    Валидация, что значение — целое (не bool) в диапазоне [low, high].

    Args:
        value: Проверяемое значение
        name: Имя исходного типа или параметра (для сообщения об ошибке)
        low: Нижняя граница включительно (по умолчанию INT64_MIN)
        high: Верхняя граница включительно (по умолчанию INT64_MAX)

    Returns:
        value как int

    Raises:
        TypeError: Если value не целое или является bool
        ValueError: Если value вне диапазона

    Examples:
        >>> validate_integer(200, "byte", 0, 255)
        200
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} value must be an integer, got {type(value).__name__}")

    if not low <= value <= high:
        raise ValueError(f"{name} value must be within [{low}, {high}], got {value}")

    return int(value)
