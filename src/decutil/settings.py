"""
ConversionSettings: Конфигурация конверсий в Decimal

Immutable Pydantic модель с параметрами, которые конвертеры берут по умолчанию:
- Количество значащих цифр для float (FLOAT_DIG)
- Режим округления при аппроксимации (ROUND_HALF_UP)
- Строгий режим разбора строк (по умолчанию выключен)

Настройки можно загрузить из JSON документа; документ сначала проверяется
JSON Schema контрактом (contracts/schema/conversion_settings.json), затем
собирается модель.
"""

import decimal
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Final, Union

from pydantic import BaseModel, Field

from src.decutil.contracts import validate_conversion_settings

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Количество десятичных цифр, которые float представляет без потерь
# (15 для IEEE-754 double)
FLOAT_DIG: Final[int] = sys.float_info.dig

# Режим округления при аппроксимации до заданного числа значащих цифр
DEFAULT_ROUNDING: Final[str] = decimal.ROUND_HALF_UP


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режимы округления модуля decimal (значения совпадают с ROUND_* константами)"""

    CEILING = decimal.ROUND_CEILING
    DOWN = decimal.ROUND_DOWN
    FLOOR = decimal.ROUND_FLOOR
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    HALF_UP = decimal.ROUND_HALF_UP
    UP = decimal.ROUND_UP
    UP_05 = decimal.ROUND_05UP


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class ConversionSettings(BaseModel):
    """
    Параметры конверсий в Decimal.

    Immutable модель (frozen=True): изменения создают новый экземпляр
    через model_copy(update=...).
    """

    float_precision: int = Field(
        FLOAT_DIG,
        ge=0,
        strict=True,
        description="Значащие цифры для float по умолчанию (0 = кратчайшее представление)",
    )
    rounding: RoundingMode = Field(
        RoundingMode.HALF_UP, description="Режим округления при аппроксимации"
    )
    strict_text: bool = Field(
        False,
        description="True: некорректная строка вызывает ошибку вместо Decimal(0)",
    )

    model_config = {"frozen": True}  # Immutable

    def context(self, precision: int) -> decimal.Context:
        """
        Контекст decimal для аппроксимации до precision значащих цифр.

        Args:
            precision: Количество значащих цифр (>= 1)

        Экспонента не ограничена диапазоном контекста по умолчанию
        (Emax=999999): очень большие и очень малые значения не дают
        Overflow и не обнуляются.

        Returns:
            Новый decimal.Context с режимом округления из настроек
        """
        return decimal.Context(
            prec=precision,
            rounding=self.rounding.value,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
        )


# Настройки по умолчанию (используются, когда settings=None)
DEFAULT_SETTINGS: Final[ConversionSettings] = ConversionSettings()


# =============================================================================
# ЗАГРУЗКА
# =============================================================================


def settings_from_dict(data: Dict[str, Any]) -> ConversionSettings:
    """
    Построение настроек из документа.

    Args:
        data: Документ настроек (dict, например из JSON)

    Returns:
        ConversionSettings

    Raises:
        jsonschema.ValidationError: Если документ нарушает контракт
        pydantic.ValidationError: Если значения не проходят валидацию модели
    """
    validate_conversion_settings(data)

    fields = {key: value for key, value in data.items() if key != "schema_version"}
    return ConversionSettings.model_validate(fields)


def load_settings(path: Union[str, Path]) -> ConversionSettings:
    """
    Загрузка настроек из JSON файла.

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return settings_from_dict(data)
