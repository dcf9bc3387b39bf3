"""
Normalizer — Canonical Form of a Numerator/Denominator Pair

Модуль приводит сырую пару (numerator, denominator) к каноническому виду:
- Ноль всегда представлен как 0/1
- Дробь несократима: gcd(|numerator|, denominator) == 1
- Знак хранится только в числителе, знаменатель строго положителен

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator == 0 → ZeroDivisionError (никогда не подменяется значением по умолчанию)
2. Результат: 1 <= denominator <= INT64_MAX
3. Числитель заворачивается в int64: simplify(INT64_MIN, -1) == (INT64_MIN, 1)
4. Знаменатель, не представимый в int64 (2**63), → DenominatorOverflowError

ПОЛИТИКА ПЕРЕПОЛНЕНИЯ:
    Отрицание INT64_MIN в int64 невозможно. Для числителя применяется
    unchecked wrap (результат снова INT64_MIN). Для знаменателя wrap нарушил бы
    инвариант положительности, поэтому возбуждается DenominatorOverflowError.
"""

from rational64.core.math.int64 import INT64_MAX, trunc_div, wrap_int64

# =============================================================================
# EXCEPTIONS
# =============================================================================


class DenominatorOverflowError(OverflowError):
    """
    Знаменатель после переноса знака не представим в int64.

    Возникает только для знаменателя INT64_MIN, взаимно простого с числителем:
    после смены знака он становится 2**63 > INT64_MAX.
    """

    pass


# =============================================================================
# GCD
# =============================================================================


def greatest_common_divisor(left: int, right: int) -> int:
    """
    Наибольший общий делитель (итеративный алгоритм Евклида).

    Работает по абсолютным значениям: больший операнд берётся по модулю
    меньшего, пока остаток не станет нулём. Модули вычисляются точно, поэтому
    |INT64_MIN| == 2**63 обрабатывается без переполнения.

    Args:
        left: Первое целое
        right: Второе целое (не ноль)

    Returns:
        gcd(|left|, |right|) >= 1

    Raises:
        ZeroDivisionError: Если right == 0

    Examples:
        >>> greatest_common_divisor(12, 18)
        6
        >>> greatest_common_divisor(-4, 6)
        2
        >>> greatest_common_divisor(0, 5)
        5
    """
    if right == 0:
        raise ZeroDivisionError("gcd divisor must be non-zero")

    left = abs(left)
    right = abs(right)

    while True:
        if left < right:
            left, right = right, left

        left %= right

        if left == 0:
            return right


# =============================================================================
# SIMPLIFY
# =============================================================================


def simplify(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары к канонической несократимой форме.

    Алгоритм:
        1. numerator == 0 → (0, 1)
        2. g = gcd(|numerator|, |denominator|)
        3. numerator /= g, denominator /= g
        4. denominator < 0 → смена знака обоих компонентов

    Args:
        numerator: Числитель (int64)
        denominator: Знаменатель (int64, не ноль)

    Returns:
        (numerator, denominator) в канонической форме

    Raises:
        ZeroDivisionError: Если denominator == 0
        DenominatorOverflowError: Если знаменатель после смены знака равен 2**63

    Examples:
        >>> simplify(2, 4)
        (1, 2)
        >>> simplify(2, -4)
        (-1, 2)
        >>> simplify(0, -7)
        (0, 1)
    """
    if denominator == 0:
        raise ZeroDivisionError("fraction denominator cannot be zero")

    if numerator == 0:
        return (0, 1)

    gcd = greatest_common_divisor(numerator, denominator)
    numerator = trunc_div(numerator, gcd)
    denominator = trunc_div(denominator, gcd)

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    if denominator > INT64_MAX:
        raise DenominatorOverflowError(
            f"Denominator {denominator} is not representable as int64 "
            f"after sign canonicalization (numerator={numerator})"
        )

    return (wrap_int64(numerator), denominator)

