"""
Text Format — Разбор и форматирование дробей

Текстовый контракт (единственный с посимвольной точностью):
    <integer>             — целое, знаменатель 1
    <integer>/<integer>   — ровно один слэш, не последним символом

<integer> — десятичное целое int64 с необязательным знаком +/- и
необязательными пробелами по краям. Групповые разделители, десятичная
точка и экспонента не поддерживаются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse(format_fraction(x)) == x для любой дроби
2. try_parse никогда не возбуждает исключений, при неудаче → (False, ZERO)
3. Нулевой знаменатель в тексте → ошибка разбора, а не ZeroDivisionError
"""

import logging
import re
from typing import Final, Optional

from rational64.core.domain.fraction import ZERO, Fraction
from rational64.core.math.int64 import is_int64
from rational64.core.math.normalizer import DenominatorOverflowError

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Разделитель числителя и знаменателя
SLASH: Final[str] = "/"

# Целое со знаком: только ASCII-цифры, пробелы по краям допускаются
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?[0-9]+)\s*", re.ASCII)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionFormatError(ValueError):
    """
    Текст не соответствует грамматике дроби.

    Возбуждается только строгим parse(); try_parse сообщает о неудаче флагом.
    """

    pass


# =============================================================================
# FORMAT
# =============================================================================


def format_fraction(value: Fraction) -> str:
    """
    Текстовое представление дроби.

    Examples:
        >>> format_fraction(Fraction(4, 2))
        '2'
        >>> format_fraction(Fraction(-3, 4))
        '-3/4'
    """
    if value.denominator == 1:
        return f"{value.numerator}"
    return f"{value.numerator}{SLASH}{value.denominator}"


# =============================================================================
# PARSE
# =============================================================================


def find_slash(text: str) -> Optional[int]:
    """
    Позиция единственного слэша в тексте.

    Returns:
        Индекс слэша; -1 если слэша нет; None если слэшей больше одного
        или слэш стоит последним символом
    """
    index = text.find(SLASH)
    if index == -1:
        return -1

    if index == len(text) - 1 or text.find(SLASH, index + 1) != -1:
        return None

    return index


def _parse_integer(segment: str) -> Optional[int]:
    """Разбор одного целого сегмента; None если это не int64."""
    match = _INTEGER_PATTERN.fullmatch(segment)
    if match is None:
        return None

    value = int(match.group(1))
    if not is_int64(value):
        return None

    return value


def try_parse(text: object) -> tuple[bool, Fraction]:
    """
    Разбор текста без исключений.

    Args:
        text: Текст дроби (None и любой не-str дают неудачу)

    Returns:
        (True, value) при успехе, (False, ZERO) при неудаче

    Examples:
        >>> try_parse("3/4")
        (True, Fraction(3, 4))
        >>> try_parse("1/2/3")
        (False, Fraction(0, 1))
    """
    if not isinstance(text, str):
        return (False, ZERO)

    slash = find_slash(text)
    if slash is None:
        logger.debug("Rejected fraction text %r: misplaced or repeated slash", text)
        return (False, ZERO)

    if slash == -1:
        numerator = _parse_integer(text)
        if numerator is None:
            logger.debug("Rejected fraction text %r: invalid integer", text)
            return (False, ZERO)
        return (True, Fraction(numerator))

    numerator = _parse_integer(text[:slash])
    denominator = _parse_integer(text[slash + 1 :])

    if numerator is None or denominator is None:
        logger.debug("Rejected fraction text %r: invalid integer segment", text)
        return (False, ZERO)

    if denominator == 0:
        logger.debug("Rejected fraction text %r: zero denominator", text)
        return (False, ZERO)

    try:
        value = Fraction(numerator, denominator)
    except DenominatorOverflowError:
        logger.debug("Rejected fraction text %r: denominator overflow", text)
        return (False, ZERO)

    return (True, value)


def parse(text: str) -> Fraction:
    """
    Строгий разбор текста.

    Raises:
        FractionFormatError: Если текст не соответствует грамматике
    """
    ok, value = try_parse(text)
    if not ok:
        raise FractionFormatError(f"Input string was not in a correct fraction format: {text!r}")
    return value
