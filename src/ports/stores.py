from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from .subscription import Subscription

Document = Dict[str, Any]
ErrorCallback = Callable[[Exception], None]


@dataclass(frozen=True)
class OrderReceipt:
    """Подтверждение сохранения заказа от Order Store."""

    order_id: str
    created_at: datetime


class MenuCatalogPort(ABC):
    @abstractmethod
    def subscribe_menu(
        self,
        namespace: str,
        on_snapshot: Callable[[Dict[str, Document]], None],
        on_error: Optional[ErrorCallback] = None,
    ) -> Subscription:
        """Полный снапшот {id: документ} при каждом изменении каталога."""
        pass


class OrderStorePort(ABC):
    @abstractmethod
    async def add_order(self, namespace: str, owner_id: str, document: Document) -> OrderReceipt:
        """Сохраняет один документ заказа; createdAt назначает хранилище."""
        pass


class ProfileStorePort(ABC):
    @abstractmethod
    def subscribe_points(
        self,
        namespace: str,
        owner_id: str,
        on_value: Callable[[Optional[Document]], None],
        on_error: Optional[ErrorCallback] = None,
    ) -> Subscription:
        """Живой документ баллов владельца; None — документа нет."""
        pass


class IdentityPort(ABC):
    @abstractmethod
    def current_owner_id(self) -> Optional[str]:
        """Непрозрачный идентификатор владельца или None до завершения авторизации."""
        pass
