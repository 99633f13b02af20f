"""Ports — узкие интерфейсы внешних хранилищ и провайдера идентичности."""

from .stores import (
    Document,
    IdentityPort,
    MenuCatalogPort,
    OrderReceipt,
    OrderStorePort,
    ProfileStorePort,
)
from .subscription import Subscription

__all__ = [
    "Document",
    "IdentityPort",
    "MenuCatalogPort",
    "OrderReceipt",
    "OrderStorePort",
    "ProfileStorePort",
    "Subscription",
]
