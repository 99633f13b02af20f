"""Catalog — живой снапшот меню."""

from .loader import MenuItemError, parse_menu_item
from .view import MENU_CATEGORIES, CatalogView

__all__ = ["MENU_CATEGORIES", "CatalogView", "MenuItemError", "parse_menu_item"]
