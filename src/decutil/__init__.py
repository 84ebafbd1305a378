"""
decutil: конверсии встроенных типов в Decimal

to_d() для int, float, str, Fraction и Decimal; to_digits() для Decimal.
"""

# Conversions
from src.decutil.conversions import (
    DecimalConversionError,
    decimal_to_d,
    float_to_d,
    int_to_d,
    rational_to_d,
    str_to_d,
    to_d,
    to_digits,
)

# Settings
from src.decutil.settings import (
    DEFAULT_ROUNDING,
    DEFAULT_SETTINGS,
    FLOAT_DIG,
    ConversionSettings,
    RoundingMode,
    load_settings,
    settings_from_dict,
)

__all__ = [
    # Conversions: Exceptions
    "DecimalConversionError",
    # Conversions: Functions
    "decimal_to_d",
    "float_to_d",
    "int_to_d",
    "rational_to_d",
    "str_to_d",
    "to_d",
    "to_digits",
    # Settings: Constants
    "DEFAULT_ROUNDING",
    "DEFAULT_SETTINGS",
    "FLOAT_DIG",
    # Settings: Types
    "ConversionSettings",
    "RoundingMode",
    # Settings: Functions
    "load_settings",
    "settings_from_dict",
]
