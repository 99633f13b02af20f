"""RewardsTracker — живой прогресс баллов владельца.

Каноничное число баллов принадлежит Profile Store. Трекер только читает
живое значение и пересчитывает прогресс при каждом обновлении; после
close() обновления игнорируются, подписка снимается детерминированно.
"""

import logging
from typing import Callable, List, Optional

from jsonschema import ValidationError

from src.core.contracts import validate_points_profile
from src.ports.stores import Document, ProfileStorePort
from src.ports.subscription import Subscription

from .accrual import RewardsConfig, RewardsProgress, points_from_document

logger = logging.getLogger(__name__)


class RewardsTracker:
    def __init__(
        self,
        profile_store: ProfileStorePort,
        namespace: str,
        owner_id: str,
        config: Optional[RewardsConfig] = None,
    ):
        self.profile_store = profile_store
        self.namespace = namespace
        self.owner_id = owner_id
        self.config = config or RewardsConfig()
        self._progress = RewardsProgress.compute(0, self.config.threshold)
        self._listeners: List[Callable[[RewardsProgress], None]] = []
        self._subscription: Optional[Subscription] = None
        self._closed = False

    @property
    def progress(self) -> RewardsProgress:
        return self._progress

    @property
    def active(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def on_change(self, listener: Callable[[RewardsProgress], None]) -> None:
        self._listeners.append(listener)

    def start(self) -> None:
        """Подписка на документ баллов (повторный вызов — no-op)."""
        if self._closed or self._subscription is not None:
            return
        self._subscription = self.profile_store.subscribe_points(
            self.namespace, self.owner_id, self._handle_document, self._handle_error
        )

    def close(self) -> None:
        self._closed = True
        if self._subscription is not None:
            self._subscription.unsubscribe()

    def _handle_document(self, document: Optional[Document]) -> None:
        if self._closed:
            return
        if document is not None:
            try:
                validate_points_profile(document)
            except ValidationError as e:
                logger.warning("Ignoring invalid points document for %s: %s", self.owner_id, e.message)
                return

        points = points_from_document(document)
        self._progress = RewardsProgress.compute(points, self.config.threshold)
        for listener in list(self._listeners):
            listener(self._progress)

    def _handle_error(self, error: Exception) -> None:
        if self._closed:
            return
        # Последнее известное значение остаётся в силе
        logger.error("Error fetching user points for %s: %s", self.owner_id, error)
