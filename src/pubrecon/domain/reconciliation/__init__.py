"""Reconciliation of publish batch results into changed items.

Flow per batch:
1) classify results into pure deletions and live-lookupable changes
2) resolve each result against the live stores, falling back to the
   archive and recycle bin for removed entities
3) aggregate resolved items in canonical order
4) hand the items to a notifier when there is at least one
"""

from __future__ import annotations

from .classify import BatchGroup, ClassifiedBatch, classify_batch
from .contracts import (
    BatchReconciliation,
    EntityFailure,
    EntityReconciliation,
    ReconciliationStatus,
)
from .engine import BatchReconciler, reconcile_results
from .historical import HistoricalCandidate, find_historical, latest_entry, pick_historical
from .resolve import resolve_changed, resolve_deleted

__all__ = [
    "BatchGroup",
    "BatchReconciliation",
    "BatchReconciler",
    "ClassifiedBatch",
    "EntityFailure",
    "EntityReconciliation",
    "HistoricalCandidate",
    "ReconciliationStatus",
    "classify_batch",
    "find_historical",
    "latest_entry",
    "pick_historical",
    "reconcile_results",
    "resolve_changed",
    "resolve_deleted",
]
