"""
Contract Validation Module

Модуль для валидации JSON документов настроек decutil.
"""

from .validators import (
    ContractValidator,
    ConversionSettingsValidator,
    SchemaLoader,
    validate_conversion_settings,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionSettingsValidator",
    # Functions
    "validate_conversion_settings",
]
