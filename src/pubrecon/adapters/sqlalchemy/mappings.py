"""SQLAlchemy table metadata for the live and historical item stores."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# One row per item version held by a named live store (e.g. "master", "web").
item_table = Table(
    "item",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("store", String(64), nullable=False),
    Column("item_id", String(64), nullable=False),
    Column("path", String(1024), nullable=False),
    Column("language", String(32), nullable=True),
    Column("version", Integer, nullable=True),
    UniqueConstraint("store", "item_id", "language", "version"),
    Index("ix_item_store_item_id", "store", "item_id"),
)

archive_entry_table = Table(
    "archive_entry",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("store", String(64), nullable=False),
    Column("archive_name", String(32), nullable=False),
    Column("item_id", String(64), nullable=False),
    Column("original_location", String(1024), nullable=False),
    Column("archived_at", UTCDateTime(), nullable=False),
    Column("archived_by", String(255), nullable=True),
    Index("ix_archive_entry_lookup", "store", "archive_name", "item_id"),
)


def create_all_tables(engine: Engine) -> None:
    """Create the store tables if they do not exist yet."""

    log.info("Creating item store tables")
    metadata.create_all(engine, checkfirst=True)
