"""
Core math modules

Денежная арифметика (Decimal) и правило округления.
"""

from src.core.math.money import (
    CENT,
    CURRENCY_SYMBOL,
    ZERO,
    format_currency,
    round_money,
    to_decimal,
)

__all__ = [
    "CENT",
    "CURRENCY_SYMBOL",
    "ZERO",
    "format_currency",
    "round_money",
    "to_decimal",
]
