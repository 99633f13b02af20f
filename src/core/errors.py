"""Ошибки ядра заказов.

Все ошибки перехватываются на границе Checkout Orchestrator и возвращаются
вызывающему как значение (CheckoutResult.error), а не пробрасываются в UI.
Заблокированный или неудачный checkout оставляет корзину ровно такой,
какой её последний раз отредактировал пользователь.
"""


class OrderingError(Exception):
    """Базовая ошибка ядра заказов."""

    # Стабильный код для UI/логов
    code = "ordering_error"


class EmptyCartError(OrderingError):
    """Корзина пуста: checkout заблокирован, побочных эффектов нет."""

    code = "empty_cart"


class IdentityUnavailableError(OrderingError):
    """Идентификатор владельца или хранилище недоступны (повторить после авторизации)."""

    code = "identity_unavailable"


class PersistenceError(OrderingError):
    """Order Store не подтвердил сохранение; корзина сохранена, автоповтора нет."""

    code = "persistence_failed"


class ConfigurationError(OrderingError):
    """Отсутствует обязательная конфигурация каталога или хранилища.

    Фатальна только для затронутой функции, сообщается один раз.
    """

    code = "configuration_missing"


class CheckoutInProgressError(OrderingError):
    """Корзина в состоянии SUBMITTING: правки и повторный checkout отклоняются."""

    code = "checkout_in_progress"
