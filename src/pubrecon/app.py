"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import contextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import create_engine

from pubrecon.adapters.log_notifier import LogNotifier
from pubrecon.adapters.sqlalchemy import (
    SqlAlchemyStoreLocator,
    build_session_factory,
    create_all_tables,
)
from pubrecon.adapters.webhook import WebhookNotifier
from pubrecon.config import get_database_config, get_reconcile_config, get_webhook_config
from pubrecon.domain.reconciliation import BatchReconciler

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pubrecon.domain.model import PublishBatch
    from pubrecon.domain.ports import ChangeNotifier, StoreLocator
    from pubrecon.domain.reconciliation import BatchReconciliation

log = getLogger(__name__)


@contextmanager
def open_store_locator(
    names: Iterable[str] | None = None,
    *,
    database_uri: str | None = None,
) -> Iterator[SqlAlchemyStoreLocator]:
    """Yield a SQLAlchemy-backed locator; its engine is disposed on exit.

    Long-running hosts should keep one locator open and pass it to
    ``process_publish_batch`` as ``stores``.
    """

    uri = database_uri or get_database_config().uri
    store_names = names if names is not None else get_reconcile_config().store_names
    engine = create_engine(uri, future=True)
    try:
        yield SqlAlchemyStoreLocator(build_session_factory(engine), store_names)
    finally:
        engine.dispose()


def build_notifier() -> ChangeNotifier:
    """Post to the configured webhook, or log the changes when none is set."""

    webhook = get_webhook_config()
    if webhook is None:
        return LogNotifier()
    return WebhookNotifier(config=webhook)


def initialise_database(*, database_uri: str | None = None) -> str:
    uri = database_uri or get_database_config().uri
    engine = create_engine(uri, future=True)
    try:
        create_all_tables(engine)
    finally:
        engine.dispose()
    return uri


def process_publish_batch(
    batch: PublishBatch,
    *,
    stores: StoreLocator | None = None,
    notifier: ChangeNotifier | None = None,
    max_workers: int | None = None,
    database_uri: str | None = None,
) -> BatchReconciliation:
    """Reconcile one publish batch using the configured adapters."""

    config = get_reconcile_config()
    if stores is None:
        with open_store_locator(config.store_names, database_uri=database_uri) as locator:
            return process_publish_batch(
                batch,
                stores=locator,
                notifier=notifier,
                max_workers=max_workers,
            )

    reconciler = BatchReconciler(
        stores=stores,
        notifier=notifier or build_notifier(),
        max_workers=max_workers or config.max_workers,
    )
    log.info(
        "Starting reconciliation: job=%s, source=%s, target=%s, results=%s, max_workers=%s",
        batch.context.job_id,
        batch.context.source_store,
        batch.context.target_store,
        batch.total_result_count,
        reconciler.max_workers,
    )
    return reconciler.process(batch)
