"""Per-entity and per-batch reconciliation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pubrecon.domain.model import ChangedItem


class ReconciliationStatus(StrEnum):
    """Outcome of reconciling one operation result."""

    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    FAILED = "failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityReconciliation:
    """Result of reconciling a single entity.

    ``UNRESOLVED`` means no store knows the entity, which is a valid terminal
    outcome. ``FAILED`` means a store lookup raised while resolving it.
    """

    entity_id: str
    status: ReconciliationStatus
    item: ChangedItem | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        if (self.status is ReconciliationStatus.RESOLVED) != (self.item is not None):
            raise ValueError("Only resolved reconciliations carry a changed item")

    @classmethod
    def resolved(cls, item: ChangedItem, *, reason: str | None = None) -> EntityReconciliation:
        return cls(
            entity_id=item.item_id,
            status=ReconciliationStatus.RESOLVED,
            item=item,
            reason=reason,
        )

    @classmethod
    def unresolved(cls, entity_id: str, *, reason: str) -> EntityReconciliation:
        return cls(entity_id=entity_id, status=ReconciliationStatus.UNRESOLVED, reason=reason)

    @classmethod
    def failed(cls, entity_id: str, *, reason: str) -> EntityReconciliation:
        return cls(entity_id=entity_id, status=ReconciliationStatus.FAILED, reason=reason)


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityFailure:
    entity_id: str
    reason: str


@dataclass(frozen=True, slots=True, kw_only=True)
class BatchReconciliation:
    """Aggregated outcome of one batch, in canonical order."""

    items: tuple[ChangedItem, ...] = ()
    unresolved: tuple[str, ...] = ()
    failed: tuple[EntityFailure, ...] = ()

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[EntityReconciliation]) -> BatchReconciliation:
        items: list[ChangedItem] = []
        unresolved: list[str] = []
        failed: list[EntityFailure] = []
        for outcome in outcomes:
            if outcome.item is not None:
                items.append(outcome.item)
            elif outcome.status is ReconciliationStatus.FAILED:
                failed.append(
                    EntityFailure(entity_id=outcome.entity_id, reason=outcome.reason or "")
                )
            else:
                unresolved.append(outcome.entity_id)
        return cls(items=tuple(items), unresolved=tuple(unresolved), failed=tuple(failed))

    @property
    def processed(self) -> int:
        return len(self.items) + len(self.unresolved) + len(self.failed)
