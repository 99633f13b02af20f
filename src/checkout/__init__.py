"""Checkout — оформление заказа из корзины.

- CheckoutOrchestrator: сессия корзины с состояниями ACTIVE/SUBMITTING
- build_order: снапшот заказа
- Таксономия ошибок (реэкспорт из src.core.errors)
"""

from src.core.errors import (
    CheckoutInProgressError,
    ConfigurationError,
    EmptyCartError,
    IdentityUnavailableError,
    OrderingError,
    PersistenceError,
)
from .orchestrator import CheckoutConfig, CheckoutOrchestrator, CheckoutResult, build_order

__all__ = [
    "CheckoutOrchestrator",
    "CheckoutConfig",
    "CheckoutResult",
    "build_order",
    "OrderingError",
    "EmptyCartError",
    "IdentityUnavailableError",
    "PersistenceError",
    "ConfigurationError",
    "CheckoutInProgressError",
]
