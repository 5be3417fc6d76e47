"""
Contract Validation Module

Модуль для валидации JSON контрактов complexmath.
"""

from .validators import (
    ComplexValueValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValueValidator",
    # Functions
    "validate_complex_value",
]
