from __future__ import annotations

from datetime import UTC, datetime

import pytest

from pubrecon.domain.model import (
    HistoricalEntry,
    HistoricalStoreName,
    ItemPath,
    OperationResult,
    OperationResultType,
    ResolutionSource,
    ResultChangeType,
)
from tests.helpers.results import deleted, updated, variance


def test_operation_result_type_parses_case_insensitively() -> None:
    assert OperationResultType("Deleted") is OperationResultType.DELETED
    assert OperationResultType("CREATED") is OperationResultType.CREATED
    assert OperationResultType("Modified") is OperationResultType.UPDATED


def test_operation_result_type_rejects_unknown_values() -> None:
    with pytest.raises(ValueError, match="renamed"):
        OperationResultType("renamed")


def test_operation_result_type_parse_keeps_host_defined_names() -> None:
    assert OperationResultType.parse("Modified") is OperationResultType.UPDATED
    assert OperationResultType.parse(" Moved ") == "Moved"
    with pytest.raises(ValueError):
        OperationResultType.parse(" ")


def test_result_change_type_accepts_publisher_aliases() -> None:
    assert ResultChangeType("Updated") is ResultChangeType.UPDATED
    assert ResultChangeType("Created") is ResultChangeType.ADDED
    assert ResultChangeType("deleted") is ResultChangeType.REMOVED


def test_item_path_normalizes_separators() -> None:
    path = ItemPath("sitecore//content/home/")

    assert path.full_path == "/sitecore/content/home"
    assert path.name == "home"
    assert path.parent_path == "/sitecore/content"
    assert path.segments == ("sitecore", "content", "home")
    assert str(path) == "/sitecore/content/home"


def test_item_path_root_has_no_parent() -> None:
    assert ItemPath("/sitecore").parent_path is None


def test_item_path_rejects_blank_values() -> None:
    with pytest.raises(ValueError, match="blank"):
        ItemPath("  ")


def test_pure_deletion_requires_empty_variance() -> None:
    assert deleted("A").is_pure_deletion
    assert not deleted("A", variance()).is_pure_deletion
    assert not updated("A").is_pure_deletion
    skipped = OperationResult(entity_id="A", operation_type=OperationResultType.SKIPPED)
    assert not skipped.is_pure_deletion


def test_historical_entry_assumes_utc_for_naive_timestamps() -> None:
    entry = HistoricalEntry(
        item_id="A",
        original_location="/home/a",
        archived_at=datetime(2024, 5, 1, 12, 0),  # noqa: DTZ001
    )

    assert entry.archived_at == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def test_historical_entry_normalizes_location_like_live_paths() -> None:
    entry = HistoricalEntry(
        item_id="A",
        original_location="sitecore//content/home/",
        archived_at=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
    )

    assert entry.original_location == ItemPath("sitecore//content/home/").full_path
    assert entry.original_location == "/sitecore/content/home"
    with pytest.raises(ValueError, match="blank"):
        HistoricalEntry(item_id="A", original_location=" ", archived_at=entry.archived_at)


def test_historical_store_names_map_to_resolution_sources() -> None:
    assert HistoricalStoreName.ARCHIVE.resolution_source is ResolutionSource.ARCHIVE
    assert HistoricalStoreName.RECYCLE_BIN.resolution_source is ResolutionSource.RECYCLE_BIN
