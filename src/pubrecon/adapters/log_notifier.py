"""Notifier that reports reconciled changes to the log."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pubrecon.domain.model import ChangedItem, PublishContext

log = getLogger(__name__)


class LogNotifier:
    def __call__(self, context: PublishContext, items: Sequence[ChangedItem]) -> None:
        log.info(
            "Publish job %s (%s -> %s) changed %d item(s)",
            context.job_id,
            context.source_store,
            context.target_store,
            len(items),
        )
        for item in items:
            log.debug(
                "%s %s %s [%s] language=%s version=%s",
                item.operation_result_type,
                item.item_id,
                item.path,
                item.resolved_from,
                item.language,
                item.version,
            )
