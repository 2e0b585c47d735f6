"""Partition a batch into pure deletions and live-lookupable changes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pubrecon.domain.model import OperationResult


class BatchGroup(StrEnum):
    DELETED = "deleted"
    CHANGED = "changed"


@dataclass(frozen=True, slots=True)
class ClassifiedBatch:
    deleted: tuple[OperationResult, ...] = ()
    changed: tuple[OperationResult, ...] = ()

    def ordered(self) -> Iterator[tuple[BatchGroup, OperationResult]]:
        """Yield results in canonical order: deletions first, then changes."""

        for result in self.deleted:
            yield BatchGroup.DELETED, result
        for result in self.changed:
            yield BatchGroup.CHANGED, result

    def __len__(self) -> int:
        return len(self.deleted) + len(self.changed)


def classify_batch(results: Iterable[OperationResult]) -> ClassifiedBatch:
    """Split ``results`` into pure deletions and everything else.

    A deletion that still carries variance changes removed only some variants,
    so the entity is looked up like any other change.
    """

    deleted: list[OperationResult] = []
    changed: list[OperationResult] = []
    for result in results:
        if result.is_pure_deletion:
            deleted.append(result)
        else:
            changed.append(result)
    return ClassifiedBatch(deleted=tuple(deleted), changed=tuple(changed))
