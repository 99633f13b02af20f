"""In-memory реализации портов хранилищ.

Используются в тестах и при локальном запуске без внешнего хранилища.
Документы лежат по тем же путям, что во внешнем хранилище
(artifacts/{app_id}/...). Семантика повторяет внешние хранилища:
снапшот целиком при каждом изменении каталога, время создания заказа
назначается хранилищем, отсутствие документа баллов передаётся как None.
"""

import asyncio
import copy
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from src.infra.settings import DEFAULT_APP_ID, menu_items_path, orders_path, points_path
from src.ports.stores import (
    Document,
    ErrorCallback,
    IdentityPort,
    MenuCatalogPort,
    OrderReceipt,
    OrderStorePort,
    ProfileStorePort,
)
from src.ports.subscription import Subscription

logger = logging.getLogger(__name__)


class InMemoryMenuCatalog(MenuCatalogPort):
    def __init__(
        self,
        documents: Optional[Dict[str, Document]] = None,
        namespace: str = DEFAULT_APP_ID,
    ):
        self._documents: Dict[str, Dict[str, Document]] = {}
        self._listeners: Dict[str, List[Callable[[Dict[str, Document]], None]]] = {}
        if documents:
            self._documents[menu_items_path(namespace)] = dict(documents)

    def subscribe_menu(self, namespace, on_snapshot, on_error: Optional[ErrorCallback] = None):
        path = menu_items_path(namespace)
        listeners = self._listeners.setdefault(path, [])
        listeners.append(on_snapshot)
        on_snapshot(self._snapshot(path))
        return Subscription(lambda: listeners.remove(on_snapshot))

    def publish(self, namespace: str, documents: Dict[str, Document]) -> None:
        """Заменяет содержимое каталога и рассылает полный снапшот."""
        path = menu_items_path(namespace)
        self._documents[path] = dict(documents)
        for listener in list(self._listeners.get(path, [])):
            listener(self._snapshot(path))

    def _snapshot(self, path: str) -> Dict[str, Document]:
        return copy.deepcopy(self._documents.get(path, {}))


class InMemoryOrderStore(OrderStorePort):
    """Order Store в памяти.

    fail_with — исключение, которым завершится следующая запись.
    hold — asyncio.Event, до установки которого запись приостановлена.
    """

    def __init__(self, fail_with: Optional[Exception] = None, hold: Optional[asyncio.Event] = None):
        self.fail_with = fail_with
        self.hold = hold
        self.calls = 0
        # путь коллекции заказов -> [(order_id, документ)]
        self.orders: Dict[str, List[Tuple[str, Document]]] = {}
        self._next_id = 1

    async def add_order(self, namespace: str, owner_id: str, document: Document) -> OrderReceipt:
        self.calls += 1
        if self.hold is not None:
            await self.hold.wait()
        if self.fail_with is not None:
            raise self.fail_with

        order_id = f"order-{self._next_id}"
        self._next_id += 1
        created_at = datetime.now(timezone.utc)
        stored = dict(document, createdAt=created_at.isoformat())
        path = orders_path(namespace, owner_id)
        self.orders.setdefault(path, []).append((order_id, stored))
        logger.debug("Stored %s at %s", order_id, path)
        return OrderReceipt(order_id=order_id, created_at=created_at)


class InMemoryProfileStore(ProfileStorePort):
    def __init__(self):
        self._documents: Dict[str, Optional[Document]] = {}
        self._listeners: Dict[str, List[Tuple[Callable, Optional[ErrorCallback]]]] = {}

    def subscribe_points(self, namespace, owner_id, on_value, on_error: Optional[ErrorCallback] = None):
        key = points_path(namespace, owner_id)
        entry = (on_value, on_error)
        listeners = self._listeners.setdefault(key, [])
        listeners.append(entry)
        on_value(self._document(key))
        return Subscription(lambda: listeners.remove(entry))

    def set_points(self, namespace: str, owner_id: str, value: Optional[int]) -> None:
        self._push(points_path(namespace, owner_id), {"value": value})

    def delete(self, namespace: str, owner_id: str) -> None:
        self._push(points_path(namespace, owner_id), None)

    def fail(self, namespace: str, owner_id: str, error: Exception) -> None:
        """Рассылает ошибку подписчикам (обрыв соединения и т.п.)."""
        for _, on_error in list(self._listeners.get(points_path(namespace, owner_id), [])):
            if on_error is not None:
                on_error(error)

    def _push(self, key: str, document: Optional[Document]) -> None:
        self._documents[key] = document
        for on_value, _ in list(self._listeners.get(key, [])):
            on_value(self._document(key))

    def _document(self, key: str) -> Optional[Document]:
        document = self._documents.get(key)
        return dict(document) if document is not None else None


class StaticIdentity(IdentityPort):
    def __init__(self, owner_id: Optional[str] = None):
        self.owner_id = owner_id

    def current_owner_id(self) -> Optional[str]:
        return self.owner_id
