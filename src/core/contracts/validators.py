"""
JSON Schema Contract Validators

Модуль для валидации документов, которыми ядро обменивается
с внешними хранилищами, согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (contracts/schema/):
- order.json          — документ заказа для Order Store
- menu_item.json      — документ позиции из Menu Catalog
- points_profile.json — документ баллов из Profile Store
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'order')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class OrderValidator(ContractValidator):
    """Валидатор документа заказа"""

    def __init__(self):
        super().__init__("order")


class MenuItemValidator(ContractValidator):
    """Валидатор документа позиции меню"""

    def __init__(self):
        super().__init__("menu_item")


class PointsProfileValidator(ContractValidator):
    """Валидатор документа баллов"""

    def __init__(self):
        super().__init__("points_profile")


# Экземпляры валидаторов создаются один раз при импорте модуля
_ORDER_VALIDATOR = OrderValidator()
_MENU_ITEM_VALIDATOR = MenuItemValidator()
_POINTS_PROFILE_VALIDATOR = PointsProfileValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_order(data: Dict[str, Any]) -> None:
    """
    Валидация документа заказа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _ORDER_VALIDATOR.validate(data)


def validate_menu_item(data: Dict[str, Any]) -> None:
    """
    Валидация документа позиции меню.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _MENU_ITEM_VALIDATOR.validate(data)


def validate_points_profile(data: Dict[str, Any]) -> None:
    """
    Валидация документа баллов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _POINTS_PROFILE_VALIDATOR.validate(data)


__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "OrderValidator",
    "MenuItemValidator",
    "PointsProfileValidator",
    "ValidationError",
    "validate_order",
    "validate_menu_item",
    "validate_points_profile",
]
