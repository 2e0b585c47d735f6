"""Store records and the normalized changed-item output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from .primitives import normalize_path

if TYPE_CHECKING:
    from .enums import OperationResultType, ResolutionSource, ResultChangeType
    from .primitives import ItemPath
    from .publishing import FieldChange, VarianceChange


@dataclass(frozen=True, slots=True, kw_only=True)
class StoredItem:
    """An entity as currently held by a live store."""

    item_id: str
    path: ItemPath
    language: str | None = None
    version: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HistoricalEntry:
    """Snapshot kept by the archive or recycle bin when an entity was removed.

    ``original_location`` is normalised like a live ``ItemPath``.
    """

    item_id: str
    original_location: str
    archived_at: datetime
    archived_by: str | None = None

    def __post_init__(self) -> None:
        if not self.original_location.strip():
            raise ValueError("Original location must not be blank")
        object.__setattr__(self, "original_location", normalize_path(self.original_location))
        if self.archived_at.tzinfo is None:
            object.__setattr__(self, "archived_at", self.archived_at.replace(tzinfo=UTC))


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangedItem:
    """Flattened description of what publishing changed for one entity.

    ``item_path`` and ``field_changes`` are only available when a live store
    still knows the entity. ``language``, ``version`` and ``result_change_type``
    come from the first variance change of the operation result; any further
    variance changes are kept in ``additional_variances``.
    """

    item_id: str
    operation_result_type: OperationResultType | str
    path: str
    resolved_from: ResolutionSource
    item_path: ItemPath | None = None
    language: str | None = None
    version: int | None = None
    result_change_type: ResultChangeType | None = None
    field_changes: tuple[FieldChange, ...] | None = None
    additional_variances: tuple[VarianceChange, ...] = ()
