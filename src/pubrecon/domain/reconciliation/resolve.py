"""Resolve one operation result into a changed item.

Changed results are looked up in the target store using the first variance
change. Pure deletions are looked up in the source store first (an item held
back by publishing restrictions still lives there) and otherwise in the
archive and recycle bin.

Store collaborators report lookup failures with ``StoreLookupError``; these
fail the entity being resolved, never the batch.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pubrecon.domain.model import ChangedItem, ResolutionSource, ResultChangeType
from pubrecon.domain.ports import StoreLookupError

from .contracts import EntityReconciliation
from .historical import find_historical

if TYPE_CHECKING:
    from pubrecon.domain.model import OperationResult
    from pubrecon.domain.ports import EntityStore, HistoricalStore

log = getLogger(__name__)


def resolve_changed(result: OperationResult, *, target: EntityStore) -> EntityReconciliation:
    """Describe a created/updated entity from its live state in ``target``."""

    entity_id = result.entity_id
    if not result.variance_changes:
        log.warning(
            "Item %s (%s) has no variance changes to look up; skipping",
            entity_id,
            result.operation_type,
        )
        return EntityReconciliation.unresolved(entity_id, reason="missing_variance")

    primary, *additional = result.variance_changes
    if additional:
        log.warning(
            "Item %s has %d variance changes; describing %s v%s and flagging the rest",
            entity_id,
            len(result.variance_changes),
            primary.language,
            primary.version,
        )

    try:
        stored = target.get(entity_id, language=primary.language, version=primary.version)
    except StoreLookupError as exc:
        log.warning("Lookup of item %s in %s failed: %s", entity_id, target.name, exc)
        return EntityReconciliation.failed(entity_id, reason=str(exc))

    if stored is None:
        log.debug("Item %s not found in target store %s", entity_id, target.name)
        return EntityReconciliation.unresolved(entity_id, reason="not_in_target")

    log.debug("Item %s found in target store %s", entity_id, target.name)
    return EntityReconciliation.resolved(
        ChangedItem(
            item_id=entity_id,
            operation_result_type=result.operation_type,
            path=stored.path.full_path,
            resolved_from=ResolutionSource.TARGET,
            item_path=stored.path,
            language=primary.language,
            version=primary.version,
            result_change_type=primary.change_kind,
            field_changes=result.field_changes,
            additional_variances=tuple(additional),
        )
    )


def resolve_deleted(
    result: OperationResult,
    *,
    source: EntityStore,
    history: HistoricalStore,
) -> EntityReconciliation:
    """Describe an entity removed from the target, live data first, then history."""

    entity_id = result.entity_id
    try:
        stored = source.get(entity_id)
        if stored is not None:
            log.debug("Item %s found in source store %s", entity_id, source.name)
            return EntityReconciliation.resolved(
                ChangedItem(
                    item_id=entity_id,
                    operation_result_type=result.operation_type,
                    path=stored.path.full_path,
                    resolved_from=ResolutionSource.SOURCE,
                    item_path=stored.path,
                    field_changes=result.field_changes,
                ),
                reason="restricted",
            )
        candidate = find_historical(history, entity_id)
    except StoreLookupError as exc:
        log.warning("Lookup of removed item %s failed: %s", entity_id, exc)
        return EntityReconciliation.failed(entity_id, reason=str(exc))

    if candidate is None:
        log.debug("Item %s not found in any store", entity_id)
        return EntityReconciliation.unresolved(entity_id, reason="not_found")

    return EntityReconciliation.resolved(
        ChangedItem(
            item_id=entity_id,
            operation_result_type=result.operation_type,
            path=candidate.entry.original_location,
            resolved_from=candidate.store.resolution_source,
            result_change_type=ResultChangeType.REMOVED,
        ),
        reason=str(candidate.store),
    )
