"""
Тесты для to_digits: форматирование Decimal в "nnnnnn.mmm"

Проверяет:
1. Целая часть + "." + дробные цифры
2. Дополнение нулями до экспоненты
3. NaN/Infinity/ноль через str()
4. Отсутствие округления по текущему контексту
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.decutil.conversions import to_d, to_digits


class TestToDigitsFinite:
    """Конечные ненулевые значения"""

    def test_simple_fraction(self) -> None:
        """3.14 → '3.14'"""
        assert to_digits(Decimal("3.14")) == "3.14"

    def test_integral_value_gets_zero_fraction(self) -> None:
        """Целое значение получает дробную часть '0'"""
        assert to_digits(Decimal("42")) == "42.0"
        assert to_digits(Decimal("1E+2")) == "100.0"
        assert to_digits(Decimal("7.000")) == "7.0"

    def test_fraction_zero_padded_to_exponent(self) -> None:
        """Ведущие нули дробной части сохраняются"""
        assert to_digits(Decimal("1.05")) == "1.05"
        assert to_digits(Decimal("0.000123")) == "0.000123"
        assert to_digits(Decimal("1.23E-7")) == "0.000000123"

    def test_trailing_fraction_zeros_dropped(self) -> None:
        """Хвостовые нули дробной части отбрасываются"""
        assert to_digits(Decimal("1.2300")) == "1.23"

    def test_negative_values(self) -> None:
        """Знак сохраняется, в том числе для значений в (-1, 0)"""
        assert to_digits(Decimal("-3.14")) == "-3.14"
        assert to_digits(Decimal("-0.5")) == "-0.5"
        assert to_digits(Decimal("-42")) == "-42.0"

    def test_no_context_rounding(self) -> None:
        """Длинные значения не округляются до точности контекста"""
        text = "1234567890123456789012345678901234.5678"
        assert to_digits(Decimal(text)) == text

    def test_round_trip_value(self) -> None:
        """Результат разбирается обратно в то же число"""
        for text in ("3.14", "-0.001", "12345.678", "1E+5", "9.99E-9", "-7"):
            value = Decimal(text)
            assert Decimal(to_digits(value)) == value


class TestToDigitsSpecial:
    """NaN, Infinity и ноль форматируются через str()"""

    @pytest.mark.parametrize(
        "text",
        ["NaN", "Infinity", "-Infinity", "0", "0.00", "-0", "0E+3"],
    )
    def test_default_string_form(self, text: str) -> None:
        """Специальные значения совпадают со str(value)"""
        value = Decimal(text)
        assert to_digits(value) == str(value)

    def test_zero(self) -> None:
        """Ноль не получает дробной части"""
        assert to_digits(Decimal(0)) == "0"


class TestToDigitsIntegration:
    """Сочетание с to_d"""

    def test_converted_values(self) -> None:
        """Значения после to_d"""
        assert to_digits(to_d(0.5)) == "0.5"
        assert to_digits(to_d(42)) == "42.0"
        assert to_digits(to_d("12.50")) == "12.5"
        assert to_digits(to_d(Fraction(7077085128725065, 2251799813685248), 3)) == "3.14"

    def test_non_decimal_rejected(self) -> None:
        """to_digits принимает только Decimal"""
        with pytest.raises(TypeError, match="to_digits expects Decimal"):
            to_digits(3.14)

        with pytest.raises(TypeError, match="to_digits expects Decimal"):
            to_digits("3.14")
