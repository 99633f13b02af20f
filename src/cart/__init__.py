"""Cart — выбор опций, слияние строк корзины и расчёт итогов.

Поток данных: Option Selector → Merge Engine → Cart → Pricing Calculator.
"""

from .merge_engine import add_to_cart, find_line, is_same_line, remove_item, update_quantity
from .option_selector import OptionSelector, initial_selection, toggle
from .pricing import DEFAULT_TAX_RATE, CartTotals, PricingConfig, calculate_totals, line_extension

__all__ = [
    "OptionSelector",
    "initial_selection",
    "toggle",
    "add_to_cart",
    "find_line",
    "is_same_line",
    "remove_item",
    "update_quantity",
    "DEFAULT_TAX_RATE",
    "CartTotals",
    "PricingConfig",
    "calculate_totals",
    "line_extension",
]
