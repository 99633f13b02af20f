"""Adapters — реализации портов хранилищ."""

from .memory import InMemoryMenuCatalog, InMemoryOrderStore, InMemoryProfileStore, StaticIdentity

__all__ = [
    "InMemoryMenuCatalog",
    "InMemoryOrderStore",
    "InMemoryProfileStore",
    "StaticIdentity",
]
