"""
Domain models and value objects.

Contains the LineItem contract and decimal conversion helpers.
"""

from invoice_generator.core.domain.decimals import (
    DECIMAL_ZERO,
    is_finite_decimal,
    to_decimal,
)
from invoice_generator.core.domain.line_item import LineItem

__all__ = [
    # Decimals module
    "DECIMAL_ZERO",
    "to_decimal",
    "is_finite_decimal",
    # LineItem model
    "LineItem",
]
