"""
MenuItem — Модель позиции меню и групп опций

Immutable Pydantic модели позиции каталога. Загружаются из внешнего
Menu Catalog и после загрузки не изменяются.

Кардинальность группы опций (SINGLE/MULTI) определяется один раз
при загрузке каталога; дальше код не ветвится по runtime-форме значения.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class SelectionMode(str, Enum):
    """Кардинальность группы опций"""

    SINGLE = "single"  # ровно один активный вариант
    MULTI = "multi"  # ноль или больше, переключаются независимо


# =============================================================================
# OPTION GROUP
# =============================================================================


class OptionGroup(BaseModel):
    """
    Группа опций позиции меню (например, "size" или "toppings").

    Default для SINGLE — одна метка, для MULTI — множество меток.
    Default всегда берётся из choices.
    """

    type: str = Field(..., min_length=1, description="Тег группы (ключ в Selection)")
    name: str = Field(..., min_length=1, description="Отображаемое название")
    choices: tuple[str, ...] = Field(default_factory=tuple, description="Доступные метки")
    mode: SelectionMode = Field(..., description="SINGLE или MULTI")
    default: Union[str, frozenset[str], None] = Field(
        None, description="Выбор по умолчанию"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def default_empty_multi(cls, data: Any) -> Any:
        """MULTI без default начинается с пустого множества"""
        if (
            isinstance(data, dict)
            and data.get("default") is None
            and data.get("mode") == SelectionMode.MULTI
        ):
            return {**data, "default": frozenset()}
        return data

    @model_validator(mode="after")
    def validate_default(self) -> "OptionGroup":
        """Проверка согласованности default с режимом и списком choices"""
        if len(set(self.choices)) != len(self.choices):
            raise ValueError(f"Option group '{self.type}' has duplicate choices")

        if self.mode == SelectionMode.SINGLE:
            if not isinstance(self.default, str):
                raise ValueError(
                    f"SINGLE option group '{self.type}' requires a single default label"
                )
            if self.default not in self.choices:
                raise ValueError(
                    f"Default '{self.default}' is not a choice of group '{self.type}'"
                )
        else:
            if not isinstance(self.default, frozenset):
                raise ValueError(
                    f"MULTI option group '{self.type}' requires a set of default labels"
                )
            unknown = set(self.default) - set(self.choices)
            if unknown:
                raise ValueError(
                    f"Defaults {sorted(unknown)} are not choices of group '{self.type}'"
                )
        return self


# =============================================================================
# MENU ITEM
# =============================================================================


class MenuItem(BaseModel):
    """
    Позиция меню.

    Immutable модель (frozen=True). Идентификатор уникален в пределах каталога.
    """

    id: str = Field(..., min_length=1, description="Идентификатор позиции в каталоге")
    name: str = Field(..., min_length=1, description="Название")
    description: str = Field("", description="Описание")
    price: Decimal = Field(..., ge=0, description="Цена за единицу (USD)")
    image: Optional[str] = Field(None, description="Ссылка на изображение")
    category: str = Field(..., min_length=1, description="Тег категории")
    options: tuple[OptionGroup, ...] = Field(
        default_factory=tuple, description="Упорядоченные группы опций"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_groups(self) -> "MenuItem":
        """Тег группы опций уникален в пределах позиции"""
        types = [group.type for group in self.options]
        if len(set(types)) != len(types):
            raise ValueError(f"Menu item '{self.id}' has duplicate option group types")
        return self

    def option_group(self, group_type: str) -> Optional[OptionGroup]:
        """Группа опций по тегу или None"""
        for group in self.options:
            if group.type == group_type:
                return group
        return None
