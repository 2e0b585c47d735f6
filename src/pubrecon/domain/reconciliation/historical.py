"""Select the entry that best describes a removed entity from the historical stores."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pubrecon.domain.model import HistoricalStoreName

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pubrecon.domain.model import HistoricalEntry
    from pubrecon.domain.ports import HistoricalStore

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HistoricalCandidate:
    store: HistoricalStoreName
    entry: HistoricalEntry


def latest_entry(entries: Iterable[HistoricalEntry], item_id: str) -> HistoricalEntry | None:
    """Return the most recently archived entry for ``item_id``; first seen wins ties."""

    latest: HistoricalEntry | None = None
    for entry in entries:
        if entry.item_id != item_id:
            continue
        if latest is None or entry.archived_at > latest.archived_at:
            latest = entry
    return latest


def pick_historical(
    archive: HistoricalCandidate | None,
    recycle_bin: HistoricalCandidate | None,
) -> HistoricalCandidate | None:
    """Prefer the strictly later archive entry; the recycle bin wins exact ties."""

    if archive is None:
        return recycle_bin
    if recycle_bin is None:
        return archive
    if archive.entry.archived_at > recycle_bin.entry.archived_at:
        return archive
    return recycle_bin


def find_historical(history: HistoricalStore, item_id: str) -> HistoricalCandidate | None:
    """Query both historical stores for ``item_id`` and pick the winning entry.

    Raises ``StoreLookupError`` if either store fails.
    """

    candidates: dict[HistoricalStoreName, HistoricalCandidate | None] = {}
    for store in (HistoricalStoreName.RECYCLE_BIN, HistoricalStoreName.ARCHIVE):
        entry = latest_entry(history.entries(store, item_id), item_id)
        if entry is not None:
            log.debug("Item %s found in %s (archived at %s)", item_id, store, entry.archived_at)
        candidates[store] = HistoricalCandidate(store, entry) if entry is not None else None

    return pick_historical(
        archive=candidates[HistoricalStoreName.ARCHIVE],
        recycle_bin=candidates[HistoricalStoreName.RECYCLE_BIN],
    )
