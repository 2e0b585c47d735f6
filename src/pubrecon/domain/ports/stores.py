"""Ports for reading live and historical item stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pubrecon.domain.model import HistoricalEntry, HistoricalStoreName, StoredItem


@runtime_checkable
class EntityStore(Protocol):
    """Read-only lookup of entities in one named live store (source or target).

    Implementations must tolerate concurrent calls.
    """

    name: str

    def get(
        self,
        item_id: str,
        *,
        language: str | None = None,
        version: int | None = None,
    ) -> StoredItem | None: ...


@runtime_checkable
class HistoricalStore(Protocol):
    """Read-only access to the archive and recycle bin of one live store."""

    def entries(self, store: HistoricalStoreName, item_id: str) -> Sequence[HistoricalEntry]: ...


@runtime_checkable
class StoreLocator(Protocol):
    """Resolve the named stores referenced by a publish context.

    Unknown names raise ``UnknownStoreError``.
    """

    def entity_store(self, name: str) -> EntityStore: ...

    def historical_store(self, name: str) -> HistoricalStore: ...
