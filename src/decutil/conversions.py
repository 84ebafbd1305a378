"""
Conversions: Конверсия встроенных типов в Decimal

Единая точка входа to_d() и по одному конвертеру на исходный тип:
- int → точный Decimal
- float → аппроксимация до заданного числа значащих цифр (по умолчанию FLOAT_DIG)
- str → разобранный Decimal или Decimal(0) для некорректной строки
- numbers.Rational (Fraction) → аппроксимация, precision обязателен
- Decimal → тот же объект

to_digits() форматирует Decimal в строку вида "nnnnnn.mmm".

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. int конвертируется точно: to_d(n) == n
2. Некорректная строка даёт ровно Decimal(0) и не вызывает исключений
   (если не включён settings.strict_text)
3. to_d(d) is d для Decimal
4. Аппроксимированный результат не содержит хвостовых нулей дробной части
"""

import logging
import math
import numbers
from decimal import Decimal, InvalidOperation, localcontext
from functools import singledispatch
from typing import Any

from src.decutil.settings import (
    DEFAULT_ROUNDING,
    DEFAULT_SETTINGS,
    FLOAT_DIG,
    ConversionSettings,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_ROUNDING",
    "FLOAT_DIG",
    "DecimalConversionError",
    "decimal_to_d",
    "float_to_d",
    "int_to_d",
    "rational_to_d",
    "str_to_d",
    "to_d",
    "to_digits",
]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalConversionError(ValueError):
    """
    Строка не является валидной записью десятичного числа.

    Возникает только в строгом режиме (ConversionSettings.strict_text=True);
    по умолчанию str_to_d возвращает Decimal(0).
    """

    pass


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _check_precision(precision: Any, minimum: int) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be an integer, got {precision!r}")

    if precision < minimum:
        raise ValueError(f"precision must be >= {minimum}, got {precision}")


def _trim_fraction_zeros(value: Decimal) -> Decimal:
    """
    Удаление хвостовых нулей дробной части.

    В отличие от Decimal.normalize() экспонента не поднимается выше нуля:
    Decimal('100.0') → Decimal('100'), а не Decimal('1E+2').
    """
    if not value.is_finite():
        return value

    sign, digits, exponent = value.as_tuple()

    if value.is_zero():
        return Decimal((sign, (0,), max(exponent, 0)))

    trimmed = list(digits)
    while exponent < 0 and trimmed[-1] == 0:
        trimmed.pop()
        exponent += 1

    return Decimal((sign, tuple(trimmed), exponent))


# =============================================================================
# КОНВЕРТЕРЫ ПО ТИПАМ
# =============================================================================


def int_to_d(value: int) -> Decimal:
    """
    Конверсия int → Decimal (точная).

    Examples:
        >>> int_to_d(42)
        Decimal('42')
    """
    return Decimal(value)


def float_to_d(
    value: float,
    precision: int | None = None,
    *,
    settings: ConversionSettings | None = None,
) -> Decimal:
    """
    Конверсия float → Decimal с ограничением значащих цифр.

    Точное двоичное значение float округляется до precision значащих цифр
    режимом settings.rounding. Хвостовые нули дробной части удаляются.

    Args:
        value: Исходное значение
        precision: Количество значащих цифр (>= 0).
            None → settings.float_precision (по умолчанию FLOAT_DIG).
            0 → кратчайшее представление, восстанавливающее тот же float.
        settings: Настройки конверсии (default: DEFAULT_SETTINGS)

    Returns:
        Decimal; NaN/Inf переходят в Decimal('NaN')/Decimal('Infinity')

    Raises:
        TypeError: Если precision не целое число
        ValueError: Если precision < 0

    Examples:
        >>> float_to_d(0.5)
        Decimal('0.5')
        >>> float_to_d(0.1)
        Decimal('0.1')
        >>> float_to_d(3.14159, 3)
        Decimal('3.14')
    """
    settings = settings or DEFAULT_SETTINGS
    if precision is None:
        precision = settings.float_precision

    _check_precision(precision, 0)

    if precision == 0 or not math.isfinite(value):
        return _trim_fraction_zeros(Decimal(repr(float(value))))

    context = settings.context(precision)
    return _trim_fraction_zeros(context.create_decimal_from_float(value))


def str_to_d(text: str, *, settings: ConversionSettings | None = None) -> Decimal:
    """
    Конверсия str → Decimal.

    Строка разбирается точно (как Decimal(text)): допускаются пробелы по
    краям, подчёркивания между цифрами, NaN и Infinity. sNaN и не-ASCII
    цифры (например, "١٢٣") считаются некорректной записью.

    ВАЖНО: некорректная строка молча превращается в Decimal(0). Это
    намеренная политика, а не ошибка: "not a number" → Decimal('0').
    Для ошибки вместо нуля используется settings.strict_text=True.

    Args:
        text: Исходная строка
        settings: Настройки конверсии (default: DEFAULT_SETTINGS)

    Returns:
        Разобранное значение или Decimal(0)

    Raises:
        DecimalConversionError: Только при settings.strict_text=True
    """
    settings = settings or DEFAULT_SETTINGS

    # Ошибка синтаксиса должна быть исключением при любом текущем контексте
    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = True
        try:
            result = Decimal(text)
        except InvalidOperation:
            result = None

    if result is not None and text.isascii() and not result.is_snan():
        return result

    if settings.strict_text:
        raise DecimalConversionError(f"invalid decimal text: {text!r}")

    logger.debug("decimal_text_fallback", extra={"text": text})
    return Decimal(0)


def decimal_to_d(value: Decimal) -> Decimal:
    """Identity: возвращает тот же объект Decimal."""
    return value


def rational_to_d(
    value: numbers.Rational,
    precision: int,
    *,
    settings: ConversionSettings | None = None,
) -> Decimal:
    """
    Конверсия Rational (Fraction) → Decimal.

    numerator / denominator вычисляется с precision значащими цифрами.
    Значения по умолчанию для precision нет.

    Args:
        value: Рациональное число
        precision: Количество значащих цифр (>= 1, обязательный)
        settings: Настройки конверсии (default: DEFAULT_SETTINGS)

    Raises:
        TypeError: Если precision не целое число
        ValueError: Если precision < 1

    Examples:
        >>> rational_to_d(Fraction(7077085128725065, 2251799813685248), 3)
        Decimal('3.14')
    """
    settings = settings or DEFAULT_SETTINGS
    _check_precision(precision, 1)

    context = settings.context(precision)
    quotient = context.divide(Decimal(value.numerator), Decimal(value.denominator))
    return _trim_fraction_zeros(quotient)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def to_digits(value: Decimal) -> str:
    """
    Форматирование Decimal в строку вида "nnnnnn.mmm".

    Целая часть, точка и дробные цифры без хвостовых нулей (для целых
    значений дробная часть "0"). NaN, Infinity и ноль форматируются через str().

    Examples:
        >>> to_digits(Decimal('3.14'))
        '3.14'
        >>> to_digits(Decimal('42'))
        '42.0'
        >>> to_digits(Decimal('0.00'))
        '0.00'
    """
    if not isinstance(value, Decimal):
        raise TypeError(f"to_digits expects Decimal, got {type(value).__name__}")

    if value.is_nan() or value.is_infinite() or value.is_zero():
        return str(value)

    # copy_abs() не округляет по текущему контексту, в отличие от abs()
    integer, _, fraction = format(value.copy_abs(), "f").partition(".")
    fraction = fraction.rstrip("0") or "0"
    # Знак берётся от всего значения, а не от целой части: -0.5 → "-0.5", не "0.5"
    sign = "-" if value.is_signed() else ""

    return f"{sign}{integer}.{fraction}"


# =============================================================================
# ЕДИНАЯ ТОЧКА ВХОДА
# =============================================================================


def _reject_precision(value: Any, precision: int | None) -> None:
    if precision is not None:
        raise TypeError(f"{type(value).__name__} conversion takes no precision")


@singledispatch
def to_d(
    value: Any,
    precision: int | None = None,
    *,
    settings: ConversionSettings | None = None,
) -> Decimal:
    """
    Конверсия значения в Decimal по его типу.

    int, str и Decimal не принимают precision; для float он опционален,
    для Rational (Fraction) обязателен.

    Raises:
        TypeError: Неподдерживаемый тип (включая bool) или недопустимое
            использование precision
    """
    raise TypeError(f"cannot convert {type(value).__name__} to Decimal")


@to_d.register(bool)
def _bool_to_d(value, precision=None, *, settings=None):
    raise TypeError("cannot convert bool to Decimal")


@to_d.register(int)
def _int_to_d(value, precision=None, *, settings=None):
    _reject_precision(value, precision)
    return int_to_d(value)


@to_d.register(float)
def _float_to_d(value, precision=None, *, settings=None):
    return float_to_d(value, precision, settings=settings)


@to_d.register(str)
def _str_to_d(value, precision=None, *, settings=None):
    _reject_precision(value, precision)
    return str_to_d(value, settings=settings)


@to_d.register(Decimal)
def _decimal_to_d(value, precision=None, *, settings=None):
    _reject_precision(value, precision)
    return decimal_to_d(value)


@to_d.register(numbers.Rational)
def _rational_to_d(value, precision=None, *, settings=None):
    if precision is None:
        raise TypeError(f"precision is required to convert {type(value).__name__} to Decimal")
    return rational_to_d(value, precision, settings=settings)
