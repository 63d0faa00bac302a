"""
Contract Validation Module

Модуль для валидации JSON контрактов InvoiceGenerator.
"""

from .validators import (
    ContractValidator,
    LineItemValidator,
    SchemaLoader,
    validate_line_item,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LineItemValidator",
    # Functions
    "validate_line_item",
]
