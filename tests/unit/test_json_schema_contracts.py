"""
Tests for JSON Schema Contract Validators

Комплексное тестирование контракта дроби:
- Загрузка и meta-валидация схемы
- Валидация записи {"numerator", "denominator"} и текстовой формы
- Совпадение текстовой ветки с парсером (is_valid(s) == try_parse(s)[0])
- Загрузка payload в каноническую Fraction
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from rational64.core.contracts import (
    FractionContract,
    is_fraction_text,
    load_fraction_payload,
    load_schema,
    validate_fraction_payload,
)
from rational64.core.domain import MAX_VALUE, MIN_VALUE, Fraction, try_parse

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def contract():
    """Контракт дроби."""
    return FractionContract()


@pytest.fixture
def valid_payloads():
    """Валидные представления дробей."""
    return [
        {"numerator": 1, "denominator": 2},
        {"numerator": -3, "denominator": 4},
        {"numerator": 0, "denominator": 1},
        {"numerator": 2, "denominator": 4},
        "3/4",
        "-5",
        " +1 / 2 ",
        "\t7\n",
    ]


# Текстовые входы: грамматика, диапазон int64, нулевой знаменатель, пробелы
TEXT_SAMPLES = [
    "0",
    "3/4",
    " -3 / 4 ",
    "+1/+2",
    "\t1\r\n",
    "\f1/2\v",
    "1/0",
    "0/0",
    "-0/5",
    "9223372036854775807",
    "9223372036854775808",
    "-9223372036854775808",
    "-9223372036854775809",
    "1/9223372036854775808",
    "1/-9223372036854775808",
    "\xa01",
    "1 /2",
    "١",
    "1/2/3",
    "1/",
    "/2",
    "1//2",
    "",
    " ",
    "abc",
    "1.5",
    "1e3",
    "1 2",
    "- 1",
    "++1",
]


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestLoadSchema:
    """Тесты загрузки схем"""

    def test_loads_fraction_schema(self) -> None:
        schema = load_schema("fraction")
        assert schema["title"] == "fraction"

    def test_schema_is_cached(self) -> None:
        assert load_schema("fraction") is load_schema("fraction")

    def test_missing_schema(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema("fraction", tmp_path)

    def test_invalid_schema(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            load_schema("broken", tmp_path)

    def test_contract_from_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FractionContract(tmp_path / "missing")


# =============================================================================
# VALIDATION
# =============================================================================


class TestFractionContract:
    """Тесты fraction контракта"""

    def test_valid_payloads(self, contract, valid_payloads) -> None:
        for payload in valid_payloads:
            contract.validate(payload)
            assert contract.is_valid(payload)

    @pytest.mark.parametrize(
        "payload",
        [
            {"numerator": 1, "denominator": 0},
            {"numerator": 1, "denominator": -2},
            {"numerator": 1},
            {"denominator": 2},
            {"numerator": 2**63, "denominator": 1},
            {"numerator": 1, "denominator": 2, "whole": 0},
            {"numerator": "1", "denominator": 2},
            {"numerator": True, "denominator": 2},
            "1/2/3",
            "1/",
            "/2",
            "abc",
            "1/0",
            "9223372036854775808",
            "\xa01",
            1.5,
            None,
        ],
    )
    def test_invalid_payloads(self, contract, payload) -> None:
        assert not contract.is_valid(payload)
        with pytest.raises(ValidationError):
            validate_fraction_payload(payload)

    def test_iter_errors(self, contract) -> None:
        errors = list(contract.iter_errors({"numerator": 1}))
        assert errors

    def test_model_dump_always_valid(self, contract) -> None:
        for value in [Fraction(6, -8), MIN_VALUE, MAX_VALUE, Fraction(1, 2**62)]:
            contract.validate(value.model_dump())

    def test_formatted_text_valid(self, contract) -> None:
        for value in [Fraction(6, -8), MIN_VALUE, MAX_VALUE, Fraction(7)]:
            contract.validate(str(value))


class TestTextMatchesParser:
    """Текстовая ветка контракта совпадает с парсером"""

    @pytest.mark.parametrize("text", TEXT_SAMPLES, ids=repr)
    def test_contract_agrees_with_try_parse(self, contract, text: str) -> None:
        assert contract.is_valid(text) == try_parse(text)[0]

    def test_non_ascii_whitespace_rejected(self, contract) -> None:
        """Неразрывный пробел не является пробелом грамматики"""
        assert not contract.is_valid("\xa01/2")
        assert contract.is_valid(" 1/2")

    def test_zero_denominator_rejected(self, contract) -> None:
        errors = list(contract.iter_errors("1/0"))
        assert errors

    def test_format_ignores_non_strings(self) -> None:
        assert is_fraction_text(42)
        assert is_fraction_text({"numerator": 1})
        assert is_fraction_text("1/2")
        assert not is_fraction_text("1/0")


# =============================================================================
# LOADING
# =============================================================================


class TestLoadPayload:
    """Загрузка payload в Fraction"""

    def test_load_record_normalizes(self, contract) -> None:
        assert contract.load({"numerator": 6, "denominator": 8}) == Fraction(3, 4)

    def test_load_text(self, contract) -> None:
        assert contract.load(" -6 / 8 ") == Fraction(-3, 4)

    def test_load_min_value(self) -> None:
        assert load_fraction_payload({"numerator": -(2**63), "denominator": 1}) == MIN_VALUE
        assert load_fraction_payload("-9223372036854775808") == MIN_VALUE

    @pytest.mark.parametrize("payload", ["1/0", {"numerator": 1, "denominator": 0}, "x"])
    def test_load_invalid_raises_validation_error(self, payload) -> None:
        with pytest.raises(ValidationError):
            load_fraction_payload(payload)

    @pytest.mark.parametrize("value", [Fraction(-3, 4), MIN_VALUE, MAX_VALUE, Fraction(0)])
    def test_dump_then_load(self, contract, value: Fraction) -> None:
        assert contract.load(contract.dump(value)) == value
        assert contract.load(contract.dump(value, as_text=True)) == value
