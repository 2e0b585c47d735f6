"""Domain port definitions for adapters."""

from __future__ import annotations

from .errors import StoreLookupError, UnknownStoreError
from .notification import ChangeNotifier
from .stores import EntityStore, HistoricalStore, StoreLocator

__all__ = [
    "ChangeNotifier",
    "EntityStore",
    "HistoricalStore",
    "StoreLocator",
    "StoreLookupError",
    "UnknownStoreError",
]
