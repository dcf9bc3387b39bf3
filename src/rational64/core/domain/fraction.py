"""
Fraction — Точная дробь на паре int64

Immutable Pydantic модель рационального числа numerator/denominator.
Каждый экземпляр проходит через Normalizer при создании, поэтому все
живые значения находятся в канонической форме.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= denominator <= INT64_MAX
2. gcd(|numerator|, denominator) == 1, ноль хранится как 0/1
3. Знак только в числителе
4. Все операции создают НОВЫЙ экземпляр, существующие не изменяются
5. Равные значения имеют равный hash; порядок согласован с равенством

ПЕРЕПОЛНЕНИЕ:
    Промежуточные произведения и суммы заворачиваются в int64 (unchecked
    two's complement). Отдельный тип ошибки для переполнения не вводится,
    кроме DenominatorOverflowError (см. normalizer).

ПОРЯДОК:
    Сначала сравниваются усечённые частные numerator/denominator, затем
    перекрёстное умножение. Перекрёстное умножение выполняется в расширенной
    (точной) арифметике Python int, поэтому порядок точный и тотальный.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, model_validator

from rational64.core.math.int64 import (
    INT64_MAX,
    INT64_MIN,
    SHIFT_MASK,
    is_int64,
    to_uint64,
    trunc_div,
    trunc_mod,
    wrap_int64,
)
from rational64.core.math.normalizer import simplify

# Операнд бинарных операций: дробь или целое из диапазона int64
FractionLike = Union["Fraction", int]


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональное число с числителем и знаменателем int64.

    Создание: Fraction(numerator, denominator=1). Fraction() — это 0/1.

    Raises (при создании):
        ZeroDivisionError: Если denominator == 0
        DenominatorOverflowError: Если знаменатель не представим после смены знака
        ValidationError: Если компоненты не целые или вне диапазона int64
    """

    numerator: int = Field(
        0, ge=INT64_MIN, le=INT64_MAX, strict=True, description="Числитель (несёт знак)"
    )
    denominator: int = Field(
        1, ge=1, le=INT64_MAX, strict=True, description="Знаменатель (всегда положительный)"
    )

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __init__(self, numerator: Any = 0, denominator: Any = 1, **data: Any) -> None:
        # Лишние ключи отклоняет extra="forbid"
        super().__init__(numerator=numerator, denominator=denominator, **data)

    @model_validator(mode="before")
    @classmethod
    def normalize_components(cls, data: Any) -> Any:
        """
        Приведение сырой пары к канонической форме до валидации полей.

        Нецелые и выходящие за int64 значения пропускаются без изменений:
        их отклоняют ограничения полей (strict, ge/le).
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator", 0)
        denominator = data.get("denominator", 1)

        if not (is_int64(numerator) and is_int64(denominator)):
            return data

        numerator, denominator = simplify(int(numerator), int(denominator))
        return {**data, "numerator": numerator, "denominator": denominator}

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def is_positive(self) -> bool:
        """Строго положительное значение (ноль не положителен)."""
        return self.numerator > 0

    @property
    def is_negative(self) -> bool:
        """Строго отрицательное значение."""
        return self.numerator < 0

    @property
    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    @property
    def is_negative_one(self) -> bool:
        return self.numerator == -1 and self.denominator == 1

    @property
    def is_even(self) -> bool:
        """Чётность числителя."""
        return self.numerator % 2 == 0

    @property
    def is_odd(self) -> bool:
        return not self.is_even

    @property
    def is_pow2(self) -> bool:
        """
        Битовая проверка числителя: n & (n - 1) == 0.

        Проверяется только битовый паттерн числителя, поэтому ноль и
        INT64_MIN тоже дают True.
        """
        return self.numerator & wrap_int64(self.numerator - 1) == 0

    @property
    def is_min_value(self) -> bool:
        return self.numerator == INT64_MIN

    @property
    def is_max_value(self) -> bool:
        return self.numerator == INT64_MAX

    @property
    def sign(self) -> int:
        """Знак значения: -1, 0 или 1."""
        return (self.numerator > 0) - (self.numerator < 0)

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def reciprocal(self) -> "Fraction":
        """
        Обратная дробь denominator/numerator.

        Raises:
            ZeroDivisionError: Для нуля
            DenominatorOverflowError: Для нечётного числителя INT64_MIN
        """
        return Fraction(self.denominator, self.numerator)

    def increment(self) -> "Fraction":
        return self + ONE

    def decrement(self) -> "Fraction":
        return self - ONE

    def deconstruct(self) -> tuple[int, int]:
        """Компоненты дроби: (numerator, denominator)."""
        return (self.numerator, self.denominator)

    def __neg__(self) -> "Fraction":
        return Fraction(wrap_int64(-self.numerator), self.denominator)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        # -MIN_VALUE заворачивается в MIN_VALUE, поэтому abs(MIN_VALUE) отрицателен
        return self if self.numerator >= 0 else -self

    def __invert__(self) -> "Fraction":
        return self.reciprocal()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _add(self, right)

    def __radd__(self, other: Any) -> "Fraction":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return _add(left, self)

    def __sub__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _add(self, -right)

    def __rsub__(self, other: Any) -> "Fraction":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return _add(left, -self)

    def __mul__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _multiply(self, right)

    def __rmul__(self, other: Any) -> "Fraction":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return _multiply(left, self)

    def __truediv__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _multiply(self, right.reciprocal())

    def __rtruediv__(self, other: Any) -> "Fraction":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return _multiply(left, self.reciprocal())

    def __mod__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _modulo(self, right)

    def __rmod__(self, other: Any) -> "Fraction":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return _modulo(left, self)

    def __divmod__(self, other: Any) -> tuple["Fraction", "Fraction"]:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self.div_rem(right)

    def __rdivmod__(self, other: Any) -> tuple["Fraction", "Fraction"]:
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left.div_rem(self)

    def div_rem(self, other: FractionLike) -> tuple["Fraction", "Fraction"]:
        """
        Частное и остаток: (self / other, self % other).

        Обе части вычисляются независимо друг от друга.
        """
        right = _require(other)
        remainder = _modulo(self, right)
        return (_multiply(self, right.reciprocal()), remainder)

    # -------------------------------------------------------------------------
    # Сдвиги и побитовые операции
    # -------------------------------------------------------------------------

    def __lshift__(self, shift: Any) -> "Fraction":
        if not isinstance(shift, int):
            return NotImplemented
        return _multiply(self, Fraction(_power_of_two(shift)))

    def __rshift__(self, shift: Any) -> "Fraction":
        if not isinstance(shift, int):
            return NotImplemented
        return _multiply(self, Fraction(_power_of_two(shift)).reciprocal())

    def unsigned_shift_right(self, shift: int) -> "Fraction":
        """
        Логический сдвиг вправо битового паттерна числителя.

        Знаменатель не изменяется, результат заново нормализуется.

        Examples:
            >>> Fraction(-1).unsigned_shift_right(1) == Fraction(INT64_MAX)
            True
        """
        numerator = wrap_int64(to_uint64(self.numerator) >> (shift & SHIFT_MASK))
        return Fraction(numerator, self.denominator)

    def __and__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return Fraction(self.numerator & right.numerator, self.denominator & right.denominator)

    __rand__ = __and__

    def __or__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return Fraction(self.numerator | right.numerator, self.denominator | right.denominator)

    __ror__ = __or__

    def __xor__(self, other: Any) -> "Fraction":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return Fraction(self.numerator ^ right.numerator, self.denominator ^ right.denominator)

    __rxor__ = __xor__

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self.numerator == right.numerator and self.denominator == right.denominator

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Целые дроби хэшируются как int, чтобы Fraction(k) и k совпадали в dict
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Any) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _less_than(self, right)

    def __gt__(self, other: Any) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _less_than(right, self)

    def __le__(self, other: Any) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self == right or _less_than(self, right)

    def __ge__(self, other: Any) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self == right or _less_than(right, self)

    def compare_to(self, other: FractionLike) -> int:
        """
        Трёхзначное сравнение, согласованное с == и <.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other

        Raises:
            TypeError: Если other не дробь и не целое int64
        """
        right = _require(other)
        if _less_than(self, right):
            return -1
        if _less_than(right, self):
            return 1
        return 0

    def min(self, other: FractionLike) -> "Fraction":
        right = _require(other)
        return self if _less_than(self, right) else right

    def max(self, other: FractionLike) -> "Fraction":
        right = _require(other)
        return self if _less_than(right, self) else right

    # -------------------------------------------------------------------------
    # Числовые протоколы и текст
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __int__(self) -> int:
        return trunc_div(self.numerator, self.denominator)

    def __trunc__(self) -> int:
        return trunc_div(self.numerator, self.denominator)

    def __floor__(self) -> int:
        return self.numerator // self.denominator

    def __ceil__(self) -> int:
        return -(-self.numerator // self.denominator)

    def __float__(self) -> float:
        return float(self.numerator) / float(self.denominator)

    def __str__(self) -> str:
        from rational64.core.domain.text_format import format_fraction

        return format_fraction(self)

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"

    def __format__(self, format_spec: str) -> str:
        # Спецификация формата применяется к тексту дроби (выравнивание, ширина)
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """Строгий разбор текста, см. text_format.parse."""
        from rational64.core.domain.text_format import parse

        return parse(text)

    @classmethod
    def try_parse(cls, text: Optional[str]) -> tuple[bool, "Fraction"]:
        """Нестрогий разбор текста, см. text_format.try_parse."""
        from rational64.core.domain.text_format import try_parse

        return try_parse(text)


# =============================================================================
# ВНУТРЕННИЕ ОПЕРАЦИИ
# =============================================================================


def _coerce(value: object) -> Optional[Fraction]:
    """Неявное приведение операнда: Fraction как есть, int64 → value/1."""
    if isinstance(value, Fraction):
        return value
    if is_int64(value):
        return Fraction(int(value))
    return None


def _require(value: object) -> Fraction:
    right = _coerce(value)
    if right is None:
        raise TypeError(f"Expected Fraction or int64 integer, got {type(value).__name__}")
    return right


def _power_of_two(shift: int) -> int:
    # Величина сдвига маскируется как у 64-битного сдвига; 1 << 63 == INT64_MIN
    return wrap_int64(1 << (shift & SHIFT_MASK))


def _add(left: Fraction, right: Fraction) -> Fraction:
    numerator = wrap_int64(
        wrap_int64(left.numerator * right.denominator)
        + wrap_int64(right.numerator * left.denominator)
    )
    return Fraction(numerator, wrap_int64(left.denominator * right.denominator))


def _multiply(left: Fraction, right: Fraction) -> Fraction:
    return Fraction(
        wrap_int64(left.numerator * right.numerator),
        wrap_int64(left.denominator * right.denominator),
    )


def _modulo(left: Fraction, right: Fraction) -> Fraction:
    """
    Остаток от деления дробей.

    Целый делитель: (n mod c) / b. Иначе оба операнда приводятся к общему
    знаменателю: (a*d mod c*b) / (b*d). Остаток усекается к нулю.
    """
    if right.denominator == 1:
        return Fraction(trunc_mod(left.numerator, right.numerator), left.denominator)

    return Fraction(
        trunc_mod(
            wrap_int64(left.numerator * right.denominator),
            wrap_int64(right.numerator * left.denominator),
        ),
        wrap_int64(left.denominator * right.denominator),
    )


def _less_than(left: Fraction, right: Fraction) -> bool:
    # Частные проверяются первыми, перекрёстное произведение точное (без wrap)
    if trunc_div(left.numerator, left.denominator) < trunc_div(right.numerator, right.denominator):
        return True
    return left.numerator * right.denominator < right.numerator * left.denominator


# =============================================================================
# ИЗВЕСТНЫЕ КОНСТАНТЫ
# =============================================================================

ZERO = Fraction(0)
ONE = Fraction(1)
NEGATIVE_ONE = Fraction(-1)
MIN_VALUE = Fraction(INT64_MIN)
MAX_VALUE = Fraction(INT64_MAX)


def fraction_min(left: FractionLike, right: FractionLike) -> Fraction:
    """Меньшая из двух дробей."""
    return _require(left).min(right)


def fraction_max(left: FractionLike, right: FractionLike) -> Fraction:
    """Большая из двух дробей."""
    return _require(left).max(right)

