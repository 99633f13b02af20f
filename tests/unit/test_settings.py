"""Тесты настроек хранилища и логирования."""

import logging

import pytest

from src.core.errors import ConfigurationError
from src.infra import settings as settings_module
from src.infra.logs import setup_logging
from src.infra.settings import (
    DEFAULT_APP_ID,
    StoreSettings,
    load_store_settings,
    menu_items_path,
    orders_path,
    points_path,
)

ENV_KEYS = (
    "ORDERING_APP_ID",
    "ORDERING_API_KEY",
    "ORDERING_PROJECT_ID",
    "ORDERING_AUTH_DOMAIN",
    "ORDERING_STORAGE_BUCKET",
    "ORDERING_AUTH_TOKEN",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Изолированное окружение: без ORDERING_* и без .env в рабочем каталоге."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings_module, "_reported", set())


class TestStoreSettings:
    """Тесты StoreSettings"""

    def test_defaults(self) -> None:
        settings = StoreSettings()
        assert settings.app_id == DEFAULT_APP_ID
        assert settings.api_key is None
        assert settings.missing_required() == ["api_key", "project_id"]

    def test_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ORDERING_APP_ID", "sabor-prod")
        monkeypatch.setenv("ORDERING_API_KEY", "key-1")
        monkeypatch.setenv("ORDERING_PROJECT_ID", "sabor")

        settings = load_store_settings()
        assert settings.app_id == "sabor-prod"
        assert settings.missing_required() == []

    def test_from_env_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text(
            "ORDERING_API_KEY=file-key\nORDERING_PROJECT_ID=file-project\n", encoding="utf-8"
        )
        settings = load_store_settings()
        assert settings.api_key == "file-key"

    def test_overrides_take_precedence(self, monkeypatch) -> None:
        monkeypatch.setenv("ORDERING_APP_ID", "from-env")
        settings = load_store_settings(app_id="from-code", api_key="k", project_id="p")
        assert settings.app_id == "from-code"

    def test_store_paths(self) -> None:
        settings = StoreSettings(app_id="sabor")
        assert settings.menu_items_path() == "artifacts/sabor/public/data/menuItems"
        assert settings.orders_path("u1") == "artifacts/sabor/users/u1/orders"
        assert settings.points_path("u1") == "artifacts/sabor/users/u1/profile/points"

    def test_paths_match_module_functions(self) -> None:
        settings = StoreSettings(app_id="sabor")
        assert settings.menu_items_path() == menu_items_path("sabor")
        assert settings.orders_path("u1") == orders_path("sabor", "u1")
        assert settings.points_path("u1") == points_path("sabor", "u1")


class TestMissingConfiguration:
    """Тесты неполной конфигурации"""

    def test_missing_keys_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="api_key, project_id"):
            load_store_settings()

    def test_partial_configuration(self) -> None:
        with pytest.raises(ConfigurationError, match="project_id"):
            load_store_settings(api_key="k")

    def test_reported_once(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger="src.infra.settings"):
            for _ in range(3):
                with pytest.raises(ConfigurationError):
                    load_store_settings()
        assert caplog.text.count("Store configuration is incomplete") == 1

    def test_error_code(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_store_settings()
        assert exc_info.value.code == "configuration_missing"


class TestLogging:
    """Тесты setup_logging"""

    def test_no_duplicate_handlers(self) -> None:
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        level_before = root.level
        try:
            setup_logging(logging.DEBUG)
            count = len(root.handlers)
            setup_logging(logging.DEBUG)
            assert len(root.handlers) == count
            assert root.level == logging.DEBUG
        finally:
            for handler in root.handlers[:]:
                if handler not in handlers_before:
                    root.removeHandler(handler)
            root.setLevel(level_before)
