"""Domain model for publish batch reconciliation."""

from __future__ import annotations

from .enums import (
    HistoricalStoreName,
    OperationResultType,
    ResolutionSource,
    ResultChangeType,
)
from .items import ChangedItem, HistoricalEntry, StoredItem
from .primitives import ItemPath, normalize_path
from .publishing import (
    FieldChange,
    OperationResult,
    PublishBatch,
    PublishContext,
    VarianceChange,
)

__all__ = [
    "ChangedItem",
    "FieldChange",
    "HistoricalEntry",
    "HistoricalStoreName",
    "ItemPath",
    "OperationResult",
    "OperationResultType",
    "PublishBatch",
    "PublishContext",
    "ResolutionSource",
    "ResultChangeType",
    "StoredItem",
    "VarianceChange",
    "normalize_path",
]
