"""
Тесты для модуля Text Format

Проверяет:
1. Форматирование: целое без слэша, иначе "n/d"
2. Разбор корректного текста (знаки, пробелы, сокращение)
3. Отклонение некорректного текста (слэши, пустые сегменты, нецифровые символы)
4. Нулевой знаменатель → ошибка разбора, а не ZeroDivisionError
5. Логирование отклонённого ввода
"""

import logging

import pytest

from rational64.core.domain import (
    MIN_VALUE,
    ZERO,
    Fraction,
    FractionFormatError,
    format_fraction,
    parse,
    try_parse,
)
from rational64.core.domain.text_format import find_slash


class TestFormatFraction:
    """Тесты для format_fraction"""

    def test_integral_has_no_slash(self) -> None:
        assert format_fraction(Fraction(4, 2)) == "2"
        assert format_fraction(ZERO) == "0"
        assert format_fraction(Fraction(-7)) == "-7"

    def test_proper_fraction(self) -> None:
        assert format_fraction(Fraction(3, 4)) == "3/4"
        assert format_fraction(Fraction(3, -4)) == "-3/4"

    def test_min_value(self) -> None:
        assert format_fraction(MIN_VALUE) == "-9223372036854775808"


class TestFindSlash:
    """Тесты для find_slash"""

    def test_no_slash(self) -> None:
        assert find_slash("12") == -1

    def test_single_slash(self) -> None:
        assert find_slash("1/2") == 1
        assert find_slash("/2") == 0

    def test_repeated_slash(self) -> None:
        assert find_slash("1/2/3") is None
        assert find_slash("1//2") is None

    def test_trailing_slash(self) -> None:
        assert find_slash("1/") is None
        assert find_slash("/") is None


class TestTryParse:
    """Тесты для try_parse"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3/4", Fraction(3, 4)),
            ("5", Fraction(5)),
            ("-6/8", Fraction(-3, 4)),
            ("6/-8", Fraction(-3, 4)),
            ("+1/+2", Fraction(1, 2)),
            (" 7 ", Fraction(7)),
            (" 1 / 2 ", Fraction(1, 2)),
            ("0/5", ZERO),
            ("-9223372036854775808", MIN_VALUE),
            ("9223372036854775807/9223372036854775807", Fraction(1)),
        ],
    )
    def test_accepts(self, text: str, expected: Fraction) -> None:
        ok, value = try_parse(text)
        assert ok
        assert value == expected

    @pytest.mark.parametrize(
        "text",
        [
            "1/2/3",
            "1/",
            "/2",
            "/",
            "abc",
            "",
            "   ",
            "1.5",
            "1e3",
            "1_000",
            "1 2",
            "0x10",
            "--1",
            "9223372036854775808",
            "1/9223372036854775808",
        ],
    )
    def test_rejects(self, text: str) -> None:
        assert try_parse(text) == (False, ZERO)

    def test_zero_denominator_rejected(self) -> None:
        """Нулевой знаменатель — неудача разбора, исключения нет"""
        assert try_parse("1/0") == (False, ZERO)
        assert try_parse("0/0") == (False, ZERO)

    def test_unrepresentable_denominator_rejected(self) -> None:
        assert try_parse("1/-9223372036854775808") == (False, ZERO)

    def test_none_rejected(self) -> None:
        assert try_parse(None) == (False, ZERO)

    @pytest.mark.parametrize("text", [123, 1.5, b"1/2", ["1", "2"], Fraction(1, 2)])
    def test_non_string_rejected(self, text: object) -> None:
        """Не-строка даёт неудачу, а не исключение"""
        assert try_parse(text) == (False, ZERO)

    def test_parse_non_string_raises_format_error(self) -> None:
        with pytest.raises(FractionFormatError):
            parse(123)

    def test_non_ascii_digits_rejected(self) -> None:
        assert try_parse("٣") == (False, ZERO)

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="rational64.core.domain.text_format")
        try_parse("1/")
        assert "misplaced or repeated slash" in caplog.text


class TestParse:
    """Тесты для parse"""

    def test_valid(self) -> None:
        assert parse("3/4") == Fraction(3, 4)
        assert parse("-10") == Fraction(-10)

    @pytest.mark.parametrize("text", ["1/2/3", "1/", "/2", "abc", "1/0"])
    def test_invalid_raises_format_error(self, text: str) -> None:
        with pytest.raises(FractionFormatError):
            parse(text)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="not in a correct fraction format"):
            parse("x/y")

    def test_zero_denominator_is_not_zero_division(self) -> None:
        """Нулевой знаменатель в тексте не пропагирует ZeroDivisionError"""
        with pytest.raises(FractionFormatError):
            parse("5/0")
