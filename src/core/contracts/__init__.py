"""
Contract Validation Module

Модуль для валидации JSON документов заказа, позиции меню и баллов.
"""

from .validators import (
    ContractValidator,
    MenuItemValidator,
    OrderValidator,
    PointsProfileValidator,
    SchemaLoader,
    validate_menu_item,
    validate_order,
    validate_points_profile,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderValidator",
    "MenuItemValidator",
    "PointsProfileValidator",
    # Functions
    "validate_order",
    "validate_menu_item",
    "validate_points_profile",
]
