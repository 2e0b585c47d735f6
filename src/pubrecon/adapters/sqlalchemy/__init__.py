"""SQLAlchemy adapter package for pubrecon."""

from __future__ import annotations

from .mappings import archive_entry_table, create_all_tables, item_table, metadata
from .stores import (
    SqlAlchemyEntityStore,
    SqlAlchemyHistoricalStore,
    SqlAlchemyStoreLocator,
    build_session_factory,
)

__all__ = [
    "SqlAlchemyEntityStore",
    "SqlAlchemyHistoricalStore",
    "SqlAlchemyStoreLocator",
    "archive_entry_table",
    "build_session_factory",
    "create_all_tables",
    "item_table",
    "metadata",
]
