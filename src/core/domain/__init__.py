"""
Domain models and value objects.

Contains fundamental domain entities like MenuItem, Selection, Cart, Order.
"""

from src.core.domain.cart import Cart, CartLine, CartState
from src.core.domain.menu import MenuItem, OptionGroup, SelectionMode
from src.core.domain.order import Order, OrderLineItem, OrderStatus
from src.core.domain.selection import (
    MultiChoice,
    Selection,
    SelectionError,
    SingleChoice,
    validate_selection,
)

__all__ = [
    # Menu model
    "MenuItem",
    "OptionGroup",
    "SelectionMode",
    # Selection model
    "Selection",
    "SingleChoice",
    "MultiChoice",
    "SelectionError",
    "validate_selection",
    # Cart model
    "Cart",
    "CartLine",
    "CartState",
    # Order model
    "Order",
    "OrderLineItem",
    "OrderStatus",
]
