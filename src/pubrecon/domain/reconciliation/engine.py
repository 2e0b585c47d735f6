"""Batch-level reconciliation: classify, resolve each entity, aggregate, hand off."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pubrecon.config import DEFAULT_MAX_WORKERS, ConfigurationError, MissingCollaboratorError

from .classify import BatchGroup, classify_batch
from .contracts import BatchReconciliation
from .resolve import resolve_changed, resolve_deleted

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pubrecon.domain.model import OperationResult, PublishBatch
    from pubrecon.domain.ports import ChangeNotifier, EntityStore, HistoricalStore, StoreLocator

    from .contracts import EntityReconciliation

log = getLogger(__name__)


def reconcile_results(
    results: Iterable[OperationResult],
    *,
    source: EntityStore,
    target: EntityStore,
    history: HistoricalStore,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> BatchReconciliation:
    """Reconcile every result and aggregate the outcomes.

    Output order is deletions first, then changes, each in input order,
    regardless of how many workers resolve entities concurrently.
    """

    if max_workers < 1:
        raise ConfigurationError(f"max_workers must be at least 1, got {max_workers}")

    work = list(classify_batch(results).ordered())

    def reconcile_one(entry: tuple[BatchGroup, OperationResult]) -> EntityReconciliation:
        group, result = entry
        if group is BatchGroup.DELETED:
            return resolve_deleted(result, source=source, history=history)
        return resolve_changed(result, target=target)

    if max_workers == 1 or len(work) <= 1:
        outcomes = [reconcile_one(entry) for entry in work]
    else:
        with ThreadPoolExecutor(
            max_workers=min(max_workers, len(work)),
            thread_name_prefix="pubrecon-reconcile",
        ) as executor:
            outcomes = list(executor.map(reconcile_one, work))

    return BatchReconciliation.from_outcomes(outcomes)


@dataclass(slots=True)
class BatchReconciler:
    """Reconcile publish batches and pass the changed items to a notifier."""

    stores: StoreLocator
    notifier: ChangeNotifier
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if self.stores is None:
            raise MissingCollaboratorError("stores")
        if self.notifier is None:
            raise MissingCollaboratorError("notifier")
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")

    def process(self, batch: PublishBatch) -> BatchReconciliation:
        """Reconcile ``batch`` and notify once if anything resolved.

        Unknown store names raise ``UnknownStoreError``; notifier errors propagate.
        """

        if batch.total_result_count == 0:
            log.debug("Empty publish batch for job %s; nothing to reconcile", batch.context.job_id)
            return BatchReconciliation()

        context = batch.context
        log.debug("Processing published items and transforming into changed items")
        source = self.stores.entity_store(context.source_store)
        target = self.stores.entity_store(context.target_store)
        history = self.stores.historical_store(context.source_store)

        outcome = reconcile_results(
            batch.results,
            source=source,
            target=target,
            history=history,
            max_workers=self.max_workers,
        )
        log.info(
            "Reconciled batch for job %s: results=%s, changed=%s, unresolved=%s, failed=%s",
            context.job_id,
            batch.total_result_count,
            len(outcome.items),
            len(outcome.unresolved),
            len(outcome.failed),
        )

        if outcome.items:
            self.notifier(context, outcome.items)
        return outcome
