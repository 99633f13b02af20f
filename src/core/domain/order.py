"""
Order — Снапшот заказа

Immutable Pydantic модель, создаётся только Checkout Orchestrator.
После создания ядро заказ не изменяет (прогресс статуса — забота
внешней системы исполнения заказов).

Документ заказа (to_document) повторяет раскладку, которую читает
внешний Order Store: userId, items[id/name/price/quantity/options],
subtotal, tax, total, status. createdAt назначает сервер.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_serializer

from .selection import Selection


# =============================================================================
# ENUMS
# =============================================================================


class OrderStatus(str, Enum):
    """Статус заказа (ядро создаёт только PENDING)"""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"


# =============================================================================
# ORDER MODELS
# =============================================================================


class OrderLineItem(BaseModel):
    """Строка заказа"""

    id: str = Field(..., min_length=1, description="Идентификатор MenuItem")
    name: str = Field(..., min_length=1, description="Название позиции")
    price: Decimal = Field(..., ge=0, description="Цена за единицу (USD)")
    quantity: int = Field(..., ge=1, description="Количество")
    options: Selection = Field(default_factory=Selection, description="Выбор опций")

    model_config = {"frozen": True}

    @field_serializer("price", when_used="json")
    def serialize_price(self, value: Decimal) -> float:
        return float(value)

    @field_serializer("options")
    def serialize_options(self, value: Selection) -> Dict[str, Any]:
        return value.to_document()


class Order(BaseModel):
    """
    Снапшот заказа.

    Денежные поля уже округлены (round-half-even до цента).
    created_at — None до подтверждения сохранения Order Store.
    """

    owner_id: str = Field(..., min_length=1, alias="userId", description="Владелец заказа")
    items: tuple[OrderLineItem, ...] = Field(..., min_length=1, description="Строки заказа")
    subtotal: Decimal = Field(..., ge=0, description="Сумма без налога")
    tax: Decimal = Field(..., ge=0, description="Налог")
    total: Decimal = Field(..., ge=0, description="Итого")
    status: OrderStatus = Field(OrderStatus.PENDING, description="Статус")
    created_at: Optional[datetime] = Field(
        None, alias="createdAt", description="Время создания (назначается сервером)"
    )
    order_id: Optional[str] = Field(None, description="Идентификатор, назначенный Order Store")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_serializer("subtotal", "tax", "total", when_used="json")
    def serialize_money(self, value: Decimal) -> float:
        return float(value)

    def to_document(self) -> Dict[str, Any]:
        """
        Документ для отправки в Order Store.

        createdAt и order_id не включаются: их назначает хранилище.
        """
        return self.model_dump(
            mode="json", by_alias=True, exclude={"created_at", "order_id"}
        )

    def confirmed(self, order_id: str, created_at: datetime) -> "Order":
        """Копия заказа с данными, назначенными хранилищем"""
        return self.model_copy(update={"order_id": order_id, "created_at": created_at})
