"""Store implementations backed by SQLAlchemy sessions.

Every lookup opens its own short-lived session, so one store instance can be
shared by concurrent reconciliation workers.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from pubrecon.adapters.sqlalchemy.mappings import archive_entry_table, item_table
from pubrecon.domain.model import HistoricalEntry, HistoricalStoreName, ItemPath, StoredItem
from pubrecon.domain.ports import StoreLookupError, UnknownStoreError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy import Engine, Row

log = getLogger(__name__)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


class SqlAlchemyEntityStore:
    def __init__(self, session_factory: sessionmaker[Session], name: str) -> None:
        self.session_factory = session_factory
        self.name = name

    def get(
        self,
        item_id: str,
        *,
        language: str | None = None,
        version: int | None = None,
    ) -> StoredItem | None:
        stmt = (
            select(
                item_table.c.item_id,
                item_table.c.path,
                item_table.c.language,
                item_table.c.version,
            )
            .where(item_table.c.store == self.name)
            .where(item_table.c.item_id == item_id)
        )
        if language is not None:
            stmt = stmt.where(item_table.c.language == language)
        if version is not None:
            stmt = stmt.where(item_table.c.version == version)
        stmt = stmt.order_by(item_table.c.language, item_table.c.version.desc()).limit(1)

        try:
            with self.session_factory() as session:
                row = session.execute(stmt).first()
        except SQLAlchemyError as exc:
            raise StoreLookupError(
                f"Lookup of {item_id} in {self.name} failed: {exc}",
                store=self.name,
                item_id=item_id,
            ) from exc

        if row is None:
            return None
        try:
            return StoredItem(
                item_id=row.item_id,
                path=ItemPath(row.path),
                language=row.language,
                version=row.version,
            )
        except ValueError as exc:
            raise StoreLookupError(
                f"Item {item_id} in {self.name} has an unusable row: {exc}",
                store=self.name,
                item_id=item_id,
            ) from exc


class SqlAlchemyHistoricalStore:
    def __init__(self, session_factory: sessionmaker[Session], name: str) -> None:
        self.session_factory = session_factory
        self.name = name

    def entries(self, store: HistoricalStoreName, item_id: str) -> tuple[HistoricalEntry, ...]:
        try:
            archive_name = HistoricalStoreName(store)
        except ValueError as exc:
            raise UnknownStoreError(str(store)) from exc

        stmt = (
            select(
                archive_entry_table.c.item_id,
                archive_entry_table.c.original_location,
                archive_entry_table.c.archived_at,
                archive_entry_table.c.archived_by,
            )
            .where(archive_entry_table.c.store == self.name)
            .where(archive_entry_table.c.archive_name == archive_name.value)
            .where(archive_entry_table.c.item_id == item_id)
            .order_by(archive_entry_table.c.id)
        )
        try:
            with self.session_factory() as session:
                rows = session.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise StoreLookupError(
                f"Lookup of {item_id} in {self.name}/{archive_name} failed: {exc}",
                store=f"{self.name}/{archive_name}",
                item_id=item_id,
            ) from exc
        try:
            return _entries_from_rows(rows)
        except (TypeError, ValueError) as exc:
            raise StoreLookupError(
                f"Item {item_id} in {self.name}/{archive_name} has an unusable entry: {exc}",
                store=f"{self.name}/{archive_name}",
                item_id=item_id,
            ) from exc


def _entries_from_rows(rows: Iterable[Row[Any]]) -> tuple[HistoricalEntry, ...]:
    return tuple(
        HistoricalEntry(
            item_id=row.item_id,
            original_location=row.original_location,
            archived_at=row.archived_at,
            archived_by=row.archived_by,
        )
        for row in rows
    )


class SqlAlchemyStoreLocator:
    """Hand out stores for a fixed set of configured store names."""

    def __init__(self, session_factory: sessionmaker[Session], names: Iterable[str]) -> None:
        self.session_factory = session_factory
        self.names = frozenset(names)
        if not self.names:
            raise ValueError("At least one store name must be configured")

    def entity_store(self, name: str) -> SqlAlchemyEntityStore:
        self._check(name)
        return SqlAlchemyEntityStore(self.session_factory, name)

    def historical_store(self, name: str) -> SqlAlchemyHistoricalStore:
        self._check(name)
        return SqlAlchemyHistoricalStore(self.session_factory, name)

    def _check(self, name: str) -> None:
        if name not in self.names:
            log.error("Store %r is not configured (known: %s)", name, ", ".join(sorted(self.names)))
            raise UnknownStoreError(name)


if TYPE_CHECKING:
    from pubrecon.domain.ports import EntityStore, HistoricalStore, StoreLocator

    _factory_stub = cast("sessionmaker[Session]", object())
    _entity_check: EntityStore = SqlAlchemyEntityStore(_factory_stub, "master")
    _history_check: HistoricalStore = SqlAlchemyHistoricalStore(_factory_stub, "master")
    _locator_check: StoreLocator = SqlAlchemyStoreLocator(_factory_stub, ["master"])
