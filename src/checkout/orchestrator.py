"""Checkout Orchestrator — преобразование корзины в сохранённый заказ.

Порядок проверок checkout:
1. Корзина в SUBMITTING → CheckoutInProgressError (повторная отправка запрещена)
2. Пустая корзина → EmptyCartError (Order Store не вызывается)
3. Нет конфигурации хранилища → ConfigurationError; нет owner_id или хранилища → IdentityUnavailableError
4. Снапшот Order (status=pending) → контракт order.json → одна отправка в Order Store
5. Подтверждение → корзина очищается; ошибка → PersistenceError, корзина без изменений

Состояния корзины:
- ACTIVE: корзина редактируется
- SUBMITTING: идёт отправка заказа, правки отклоняются (CheckoutInProgressError)

Автоповтора нет: политика повторов — внешняя забота.
Все ошибки возвращаются в CheckoutResult.error и не пробрасываются в UI.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from jsonschema import ValidationError

from src.cart import merge_engine
from src.cart.pricing import CartTotals, PricingConfig, calculate_totals
from src.core.contracts import validate_order
from src.core.domain.cart import Cart, CartState
from src.core.domain.menu import MenuItem
from src.core.domain.order import Order, OrderLineItem, OrderStatus
from src.core.domain.selection import Selection
from src.core.errors import (
    CheckoutInProgressError,
    ConfigurationError,
    EmptyCartError,
    IdentityUnavailableError,
    OrderingError,
    PersistenceError,
)
from src.infra.settings import StoreSettings, load_store_settings
from src.ports.stores import OrderStorePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutConfig:
    """Конфигурация оформления заказа."""

    pricing: PricingConfig = field(default_factory=PricingConfig)
    validate_documents: bool = True  # проверка документа заказа по order.json


@dataclass(frozen=True)
class CheckoutResult:
    """Результат checkout."""

    success: bool
    order: Optional[Order]
    error: Optional[OrderingError]

    # Корзина после checkout (пустая при успехе, прежняя при ошибке)
    cart: Cart

    # Диагностика
    reason: str
    details: str


def build_order(cart: Cart, owner_id: str, pricing: PricingConfig = PricingConfig()) -> Order:
    """Снапшот заказа из текущей корзины.

    Денежные поля округляются здесь один раз (round-half-even до цента).
    created_at не заполняется: его назначает Order Store.
    """
    totals = calculate_totals(cart, pricing).rounded()
    items = tuple(
        OrderLineItem(
            id=line.item_id,
            name=line.name,
            price=line.unit_price,
            quantity=line.quantity,
            options=line.selection,
        )
        for line in cart.lines
    )
    return Order(
        owner_id=owner_id,
        items=items,
        subtotal=totals.subtotal,
        tax=totals.tax,
        total=totals.total,
        status=OrderStatus.PENDING,
    )


class CheckoutOrchestrator:
    """Сессия корзины одного владельца с оформлением заказа.

    Одновременно допускается не более одного checkout на экземпляр;
    это обеспечивает состояние SUBMITTING, а не блокировка.
    """

    def __init__(
        self,
        order_store: Optional[OrderStorePort],
        namespace: str,
        config: Optional[CheckoutConfig] = None,
        cart: Optional[Cart] = None,
        configuration_error: Optional[ConfigurationError] = None,
    ):
        """
        Args:
            order_store: Order Store (None — хранилище недоступно)
            namespace: пространство имён приложения/тенанта
            config: конфигурация checkout
            cart: начальная корзина
            configuration_error: ошибка конфигурации хранилища (checkout отключён)
        """
        self.namespace = namespace
        self.config = config or CheckoutConfig()
        self._order_store = order_store
        self._cart = cart or Cart()
        self._state = CartState.ACTIVE
        self._closed = False
        self._configuration_error = configuration_error

    @classmethod
    def from_settings(
        cls,
        order_store: Optional[OrderStorePort],
        settings: Optional[StoreSettings] = None,
        config: Optional[CheckoutConfig] = None,
    ) -> "CheckoutOrchestrator":
        """Сессия с namespace из настроек хранилища.

        Неполная конфигурация не роняет сессию: корзина работает,
        а checkout возвращает ConfigurationError.
        """
        if settings is not None:
            return cls(order_store, settings.app_id, config=config)
        try:
            settings = load_store_settings()
        except ConfigurationError as e:
            return cls(None, StoreSettings().app_id, config=config, configuration_error=e)
        return cls(order_store, settings.app_id, config=config)

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    # -------------------------------------------------------------------------
    # Правки корзины
    # -------------------------------------------------------------------------

    def add_to_cart(self, item: MenuItem, selection: Selection, quantity: int = 1) -> Cart:
        self._ensure_editable()
        self._cart = merge_engine.add_to_cart(self._cart, item, selection, quantity)
        return self._cart

    def update_quantity(self, line_index: int, new_quantity: int) -> Cart:
        self._ensure_editable()
        self._cart = merge_engine.update_quantity(self._cart, line_index, new_quantity)
        return self._cart

    def remove_item(self, line_index: int) -> Cart:
        self._ensure_editable()
        self._cart = merge_engine.remove_item(self._cart, line_index)
        return self._cart

    def totals(self) -> CartTotals:
        """Итоги для отображения (округлённые)"""
        return calculate_totals(self._cart, self.config.pricing).rounded()

    def _ensure_editable(self) -> None:
        if self._state == CartState.SUBMITTING:
            raise CheckoutInProgressError("Cart is being submitted; edits are rejected until checkout resolves")

    # -------------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------------

    async def checkout(self, owner_id: Optional[str]) -> CheckoutResult:
        """Оформление заказа из текущей корзины.

        Args:
            owner_id: непрозрачный идентификатор владельца (None до авторизации)

        Returns:
            CheckoutResult; ошибки возвращаются в поле error
        """
        # 1. Повторная отправка во время SUBMITTING
        if self._state == CartState.SUBMITTING:
            return self._failure(
                CheckoutInProgressError("A checkout is already in flight for this cart"),
                details="Second checkout rejected while SUBMITTING",
            )

        # 2. Пустая корзина
        if self._cart.is_empty:
            return self._failure(
                EmptyCartError("Your cart is empty. Please add items before checking out."),
                details="Cart has zero lines",
            )

        # 3. Конфигурация, идентичность и хранилище
        if self._configuration_error is not None:
            return self._failure(
                self._configuration_error,
                details="Order store is not configured",
            )

        store = self._order_store
        if not owner_id or store is None:
            logger.error("Order store or owner id not available, checkout blocked")
            return self._failure(
                IdentityUnavailableError("Cannot place order: owner identity or order store is not available"),
                details=f"owner_id={'set' if owner_id else 'missing'}, store={'set' if store else 'missing'}",
            )

        # 4. Снапшот заказа
        snapshot = self._cart
        order = build_order(snapshot, owner_id, self.config.pricing)
        document = order.to_document()
        if self.config.validate_documents:
            try:
                validate_order(document)
            except ValidationError as e:
                logger.error("Order document violates contract: %s", e.message)
                return self._failure(
                    PersistenceError(f"Order document rejected by contract: {e.message}"),
                    details="Contract validation failed before submission",
                )

        # 5. Отправка (единственная точка приостановки)
        self._state = CartState.SUBMITTING
        try:
            receipt = await store.add_order(self.namespace, owner_id, document)
        except Exception as e:
            logger.error("Error placing order for %s: %s", owner_id, e)
            return self._failure(
                PersistenceError(f"Failed to place order: {e}"),
                details=f"Order store raised {type(e).__name__}",
            )
        finally:
            self._state = CartState.ACTIVE

        confirmed = order.confirmed(receipt.order_id, receipt.created_at)

        if self._closed:
            # Сессия закрыта во время отправки: на результат не реагируем
            logger.info("Order %s confirmed after session close, cart left untouched", receipt.order_id)
            return CheckoutResult(
                success=True,
                order=confirmed,
                error=None,
                cart=self._cart,
                reason="order_placed_detached",
                details="Session closed while submitting",
            )

        self._cart = Cart()
        logger.info(
            "Order %s placed for %s: %d lines, total %s",
            receipt.order_id, owner_id, len(confirmed.items), confirmed.total,
        )
        return CheckoutResult(
            success=True,
            order=confirmed,
            error=None,
            cart=self._cart,
            reason="order_placed",
            details=f"Order {receipt.order_id} placed, {snapshot.item_count} units",
        )

    def close(self) -> None:
        """Отсоединение сессии (UI закрыт).

        Результат отправки, завершившейся после close(), не меняет корзину.
        Новые checkout получают IdentityUnavailableError.
        """
        self._closed = True
        self._order_store = None

    def _failure(self, error: OrderingError, details: str) -> CheckoutResult:
        return CheckoutResult(
            success=False,
            order=None,
            error=error,
            cart=self._cart,
            reason=error.code,
            details=details,
        )
