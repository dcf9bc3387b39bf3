"""
Fraction Contract — JSON Schema для внешнего представления дроби

Схема fraction.json принимает две формы:
- запись {"numerator": int64, "denominator": int64 >= 1} (вывод Fraction.model_dump())
- текст "<integer>" или "<integer>/<integer>"

Текстовая ветка описана дважды: pattern задаёт грамматику (только ASCII
пробелы и цифры), а формат "fraction-text" проверяется тем же try_parse,
что и в парсере. Поэтому для любой строки s:
    contract.is_valid(s) == try_parse(s)[0]
включая диапазон int64 и нулевой знаменатель.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Fraction.model_dump() и str(Fraction) всегда проходят контракт
2. load() возвращает каноническую дробь для любого валидного payload
3. Несократимая запись не требуется: {"numerator": 2, "denominator": 4} → 1/2
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, FormatChecker, ValidationError

from rational64.core.domain.fraction import Fraction
from rational64.core.domain.text_format import parse, try_parse

logger = logging.getLogger(__name__)

# Каталог схем внутри пакета
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Имя схемы дроби
FRACTION_SCHEMA_NAME: Final[str] = "fraction"

# Формат текстовой ветки, проверяется парсером
FRACTION_TEXT_FORMAT: Final[str] = "fraction-text"


# =============================================================================
# FORMAT CHECKER
# =============================================================================


FRACTION_FORMAT_CHECKER: Final[FormatChecker] = FormatChecker(formats=())


@FRACTION_FORMAT_CHECKER.checks(FRACTION_TEXT_FORMAT)
def is_fraction_text(instance: object) -> bool:
    """Формат применим только к строкам; строка валидна, если её принимает try_parse."""
    if not isinstance(instance, str):
        return True
    ok, _ = try_parse(instance)
    return ok


# =============================================================================
# SCHEMA LOADING
# =============================================================================


# Кэш загруженных схем по пути файла
_SCHEMAS: Dict[Path, Dict[str, Any]] = {}


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema из каталога схем.

    Результат кэшируется по пути файла схемы.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-валидацию
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if schema_path in _SCHEMAS:
        return _SCHEMAS[schema_path]

    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    logger.debug("Loaded schema %s from %s", schema_name, schema_path)
    _SCHEMAS[schema_path] = schema
    return schema


# =============================================================================
# CONTRACT
# =============================================================================


class FractionContract:
    """
    Контракт внешнего представления дроби: проверка формы и загрузка в Fraction.

    Examples:
        >>> contract = FractionContract()
        >>> contract.load({"numerator": 6, "denominator": 8})
        Fraction(3, 4)
        >>> contract.load(" -6 / 8 ")
        Fraction(-3, 4)
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.schema = load_schema(FRACTION_SCHEMA_NAME, schema_dir)
        self._validator = Draft202012Validator(self.schema, format_checker=FRACTION_FORMAT_CHECKER)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def load(self, data: Any) -> Fraction:
        """
        Проверка payload и построение канонической дроби.

        Raises:
            ValidationError: Если payload не соответствует контракту
        """
        self.validate(data)
        if isinstance(data, str):
            return parse(data)
        return Fraction(data["numerator"], data["denominator"])

    @staticmethod
    def dump(value: Fraction, as_text: bool = False) -> Any:
        """Внешнее представление дроби: запись или текст."""
        if as_text:
            return str(value)
        return value.model_dump()


# Общий экземпляр контракта
_FRACTION_CONTRACT = FractionContract()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction_payload(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    _FRACTION_CONTRACT.validate(data)


def load_fraction_payload(data: Any) -> Fraction:
    """Загрузка дроби из записи или текста, см. FractionContract.load."""
    return _FRACTION_CONTRACT.load(data)
