from __future__ import annotations

from typing import Any, Dict

from jsonschema import ValidationError as ContractError
from pydantic import ValidationError

from src.core.contracts import validate_menu_item
from src.core.domain.menu import MenuItem, OptionGroup, SelectionMode


class MenuItemError(ValueError):
    """Документ позиции меню не соответствует контракту или модели."""

    pass


def _to_group(d: Dict[str, Any]) -> OptionGroup:
    default = d.get("default")
    mode = d.get("mode")
    if mode is None:
        # Список в default означает MULTI
        mode = SelectionMode.MULTI if isinstance(default, list) else SelectionMode.SINGLE
    if isinstance(default, list):
        default = frozenset(default)
    return OptionGroup(
        type=d["type"],
        name=d["name"],
        choices=tuple(d.get("choices", [])),
        mode=mode,
        default=default,
    )


def parse_menu_item(doc_id: str, d: Dict[str, Any]) -> MenuItem:
    """MenuItem из документа каталога (id — ключ документа)."""
    try:
        validate_menu_item(d)
    except ContractError as e:
        raise MenuItemError(f"{doc_id}: {e.message}") from e

    try:
        return MenuItem(
            id=doc_id,
            name=d["name"],
            description=d.get("description", ""),
            price=str(d["price"]),
            image=d.get("image"),
            category=d["category"],
            options=tuple(_to_group(o) for o in d.get("options", [])),
        )
    except ValidationError as e:
        raise MenuItemError(f"{doc_id}: {e}") from e
