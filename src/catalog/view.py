from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from src.core.domain.menu import MenuItem
from src.ports.stores import Document, MenuCatalogPort
from src.ports.subscription import Subscription

from .loader import MenuItemError, parse_menu_item

logger = logging.getLogger(__name__)

# (id, название) категорий в порядке отображения
MENU_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("tacos", "Tacos"),
    ("burritos", "Burritos"),
    ("quesadillas", "Quesadillas"),
    ("sides", "Sides"),
    ("drinks", "Drinks"),
)


class CatalogView:
    """Последний снапшот каталога, получаемый по подписке.

    Каждый снапшот заменяет предыдущий целиком; невалидные документы
    пропускаются с предупреждением.
    """

    def __init__(self, catalog: MenuCatalogPort, namespace: str):
        self.catalog = catalog
        self.namespace = namespace
        self.items: Tuple[MenuItem, ...] = ()
        self.by_id: Dict[str, MenuItem] = {}
        self._listeners: List[Callable[[Tuple[MenuItem, ...]], None]] = []
        self._subscription: Optional[Subscription] = None
        self._closed = False

    def on_change(self, listener: Callable[[Tuple[MenuItem, ...]], None]) -> None:
        self._listeners.append(listener)

    def start(self) -> None:
        if self._closed or self._subscription is not None:
            return
        self._subscription = self.catalog.subscribe_menu(
            self.namespace, self._handle_snapshot, self._handle_error
        )

    def close(self) -> None:
        self._closed = True
        if self._subscription is not None:
            self._subscription.unsubscribe()

    def get(self, item_id: str) -> Optional[MenuItem]:
        return self.by_id.get(item_id)

    def by_category(self, category: str) -> List[MenuItem]:
        return [it for it in self.items if it.category == category]

    def _handle_snapshot(self, snapshot: Dict[str, Document]) -> None:
        if self._closed:
            return
        items = []
        for doc_id, d in snapshot.items():
            try:
                items.append(parse_menu_item(doc_id, d))
            except MenuItemError as e:
                logger.warning("Skipping menu item %s", e)
        self.items = tuple(items)
        self.by_id = {it.id: it for it in self.items}
        for listener in list(self._listeners):
            listener(self.items)

    def _handle_error(self, error: Exception) -> None:
        if self._closed:
            return
        logger.error("Error fetching menu items: %s", error)
