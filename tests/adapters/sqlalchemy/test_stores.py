"""Tests for SQLAlchemy-backed stores."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import insert
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker  # noqa: TC002

from pubrecon.adapters.sqlalchemy import (
    SqlAlchemyEntityStore,
    SqlAlchemyHistoricalStore,
    SqlAlchemyStoreLocator,
    archive_entry_table,
    item_table,
)
from pubrecon.domain.model import HistoricalStoreName
from pubrecon.domain.ports import StoreLookupError, UnknownStoreError
from pubrecon.domain.reconciliation import reconcile_results
from tests.helpers.results import deleted, updated, variance

T1 = datetime(2024, 6, 1, 8, 30, tzinfo=UTC)


@pytest.fixture
def seeded_engine(sqlite_engine: Engine) -> Engine:
    with sqlite_engine.begin() as connection:
        connection.execute(
            insert(item_table),
            [
                {"store": "web", "item_id": "A", "path": "/home/a", "language": "en", "version": 2},
                {"store": "web", "item_id": "A", "path": "/home/a", "language": "de", "version": 1},
                {"store": "master", "item_id": "R", "path": "/home/restricted", "language": "en",
                 "version": 1},
            ],
        )
        connection.execute(
            insert(archive_entry_table),
            [
                {"store": "master", "archive_name": "archive", "item_id": "B",
                 "original_location": "/home/b-old", "archived_at": T1},
                {"store": "master", "archive_name": "recyclebin", "item_id": "B",
                 "original_location": "/home/b-older", "archived_at": T1 - timedelta(days=1)},
                {"store": "web", "archive_name": "archive", "item_id": "B",
                 "original_location": "/elsewhere", "archived_at": T1 + timedelta(days=1)},
            ],
        )
    return sqlite_engine


def test_entity_store_filters_by_language_and_version(
    seeded_engine: Engine,
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    _ = seeded_engine
    store = SqlAlchemyEntityStore(sqlite_session_factory, "web")

    english = store.get("A", language="en", version=2)
    missing_version = store.get("A", language="en", version=5)
    any_variant = store.get("A")

    assert english is not None
    assert english.path.full_path == "/home/a"
    assert english.language == "en"
    assert english.version == 2
    assert missing_version is None
    assert any_variant is not None
    assert store.get("R") is None


def test_historical_store_scopes_entries_to_store_and_archive(
    seeded_engine: Engine,
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    _ = seeded_engine
    store = SqlAlchemyHistoricalStore(sqlite_session_factory, "master")

    archived = store.entries(HistoricalStoreName.ARCHIVE, "B")
    recycled = store.entries(HistoricalStoreName.RECYCLE_BIN, "B")

    assert [entry.original_location for entry in archived] == ["/home/b-old"]
    assert archived[0].archived_at == T1
    assert [entry.original_location for entry in recycled] == ["/home/b-older"]
    assert store.entries(HistoricalStoreName.ARCHIVE, "unknown") == ()


def test_historical_store_rejects_unknown_archive_names(
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    store = SqlAlchemyHistoricalStore(sqlite_session_factory, "master")

    with pytest.raises(UnknownStoreError):
        store.entries("trash", "B")  # type: ignore[arg-type]


def test_store_locator_rejects_unconfigured_names(
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    locator = SqlAlchemyStoreLocator(sqlite_session_factory, ["master", "web"])

    assert locator.entity_store("web").name == "web"
    assert locator.historical_store("master").name == "master"
    with pytest.raises(UnknownStoreError):
        locator.entity_store("preview")


def test_entity_store_wraps_database_errors(
    sqlite_engine: Engine,
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    with sqlite_engine.begin() as connection:
        item_table.drop(connection)

    with pytest.raises(StoreLookupError) as exc:
        SqlAlchemyEntityStore(sqlite_session_factory, "web").get("A")

    assert exc.value.store == "web"
    assert exc.value.item_id == "A"


def test_reconcile_results_against_sqlite_stores(
    seeded_engine: Engine,
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    _ = seeded_engine
    locator = SqlAlchemyStoreLocator(sqlite_session_factory, ["master", "web"])

    outcome = reconcile_results(
        [updated("A", variance("en", 2)), deleted("B"), deleted("R"), deleted("gone")],
        source=locator.entity_store("master"),
        target=locator.entity_store("web"),
        history=locator.historical_store("master"),
        max_workers=3,
    )

    assert [(item.item_id, item.path) for item in outcome.items] == [
        ("B", "/home/b-old"),
        ("R", "/home/restricted"),
        ("A", "/home/a"),
    ]
    assert outcome.unresolved == ("gone",)


def test_unusable_rows_fail_only_their_entity(
    sqlite_engine: Engine,
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    with sqlite_engine.begin() as connection:
        connection.execute(
            insert(item_table),
            [
                {"store": "web", "item_id": "A", "path": "", "language": "en", "version": 1},
                {"store": "web", "item_id": "C", "path": "/home/c", "language": "en", "version": 1},
            ],
        )
        connection.execute(
            insert(archive_entry_table),
            [
                {"store": "master", "archive_name": "archive", "item_id": "B",
                 "original_location": "  ", "archived_at": T1},
            ],
        )
    locator = SqlAlchemyStoreLocator(sqlite_session_factory, ["master", "web"])

    outcome = reconcile_results(
        [updated("A", variance("en", 1)), deleted("B"), updated("C", variance("en", 1))],
        source=locator.entity_store("master"),
        target=locator.entity_store("web"),
        history=locator.historical_store("master"),
        max_workers=2,
    )

    assert [(item.item_id, item.path) for item in outcome.items] == [("C", "/home/c")]
    assert [failure.entity_id for failure in outcome.failed] == ["B", "A"]
    assert "unusable" in outcome.failed[1].reason


def test_entity_store_reports_blank_path_as_lookup_error(
    sqlite_engine: Engine,
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    with sqlite_engine.begin() as connection:
        connection.execute(insert(item_table), [{"store": "web", "item_id": "A", "path": " "}])

    with pytest.raises(StoreLookupError) as exc:
        SqlAlchemyEntityStore(sqlite_session_factory, "web").get("A")

    assert exc.value.store == "web"
    assert exc.value.item_id == "A"
