"""
Cart — Модель корзины и строки корзины

Immutable Pydantic модели. Все операции над корзиной (src.cart.merge_engine)
возвращают новый экземпляр Cart; состояние корзины не мутируется.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .selection import Selection


# =============================================================================
# ENUMS
# =============================================================================


class CartState(str, Enum):
    """
    Состояние корзины в сессии оформления заказа.

    ACTIVE → SUBMITTING → ACTIVE (пустая при успехе, без изменений при ошибке)
    """

    ACTIVE = "ACTIVE"
    SUBMITTING = "SUBMITTING"


# =============================================================================
# CART LINE
# =============================================================================


class CartLine(BaseModel):
    """
    Строка корзины: одна пара (позиция меню, конфигурация) с количеством.

    unit_price фиксируется в момент добавления и не зависит от
    последующих изменений цены в каталоге.
    """

    item_id: str = Field(..., min_length=1, description="Идентификатор MenuItem")
    name: str = Field(..., min_length=1, description="Название позиции на момент добавления")
    image: Optional[str] = Field(None, description="Ссылка на изображение")
    unit_price: Decimal = Field(..., ge=0, description="Цена за единицу на момент добавления")
    quantity: int = Field(..., ge=1, description="Количество (>= 1)")
    selection: Selection = Field(default_factory=Selection, description="Снапшот выбора опций")

    model_config = {"frozen": True}

    def with_quantity(self, quantity: int) -> "CartLine":
        """Копия строки с новым количеством (проходит валидацию CartLine)"""
        return CartLine.model_validate({**dict(self), "quantity": quantity})


# =============================================================================
# CART
# =============================================================================


class Cart(BaseModel):
    """
    Корзина: упорядоченная последовательность строк.

    Порядок вставки определяет порядок отображения (не влияет на цену).
    Две строки никогда не дублируют друг друга по правилу идентичности.
    """

    lines: tuple[CartLine, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        """Суммарное количество единиц (бейдж корзины)"""
        return sum(line.quantity for line in self.lines)
