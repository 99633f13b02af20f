"""
Store Settings — конфигурация внешних хранилищ

Значения читаются из переменных окружения (префикс ORDERING_) и
необязательного файла .env. Пространство имён тенанта app_id входит
в путь каждого документа; api_key и project_id обязательны для
подключения к хранилищу.

Раскладка документов:
- artifacts/{app_id}/public/data/menuItems          — каталог меню
- artifacts/{app_id}/users/{owner_id}/orders        — заказы владельца
- artifacts/{app_id}/users/{owner_id}/profile/points — баллы владельца
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_APP_ID = "default-app-id"

# Уже сообщённые наборы отсутствующих ключей (ошибка конфигурации логируется один раз)
_reported: set[frozenset[str]] = set()


# =============================================================================
# ПУТИ ДОКУМЕНТОВ
# =============================================================================


def menu_items_path(app_id: str) -> str:
    return f"artifacts/{app_id}/public/data/menuItems"


def orders_path(app_id: str, owner_id: str) -> str:
    return f"artifacts/{app_id}/users/{owner_id}/orders"


def points_path(app_id: str, owner_id: str) -> str:
    return f"artifacts/{app_id}/users/{owner_id}/profile/points"


# =============================================================================
# SETTINGS
# =============================================================================


class StoreSettings(BaseSettings):
    """Подключение и пространство имён для каталога, заказов и профиля."""

    model_config = SettingsConfigDict(env_prefix="ORDERING_", env_file=".env", extra="ignore")

    app_id: str = DEFAULT_APP_ID
    api_key: Optional[str] = None
    project_id: Optional[str] = None
    auth_domain: Optional[str] = None
    storage_bucket: Optional[str] = None
    auth_token: Optional[str] = None

    def missing_required(self) -> list[str]:
        return [name for name in ("api_key", "project_id") if not getattr(self, name)]

    def menu_items_path(self) -> str:
        return menu_items_path(self.app_id)

    def orders_path(self, owner_id: str) -> str:
        return orders_path(self.app_id, owner_id)

    def points_path(self, owner_id: str) -> str:
        return points_path(self.app_id, owner_id)


def load_store_settings(**overrides) -> StoreSettings:
    """
    Загрузка настроек с проверкой обязательной конфигурации.

    Именованные аргументы имеют приоритет над окружением.

    Raises:
        ConfigurationError: Если отсутствует api_key или project_id
    """
    try:
        settings = StoreSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid store configuration: {exc}") from exc

    missing = settings.missing_required()
    if missing:
        key = frozenset(missing)
        if key not in _reported:
            _reported.add(key)
            logger.error("Store configuration is incomplete, missing: %s", ", ".join(missing))
        raise ConfigurationError(f"Store configuration is incomplete, missing: {', '.join(missing)}")
    return settings
