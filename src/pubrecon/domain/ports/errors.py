"""Errors raised by store collaborators."""

from __future__ import annotations

from pubrecon.config.errors import ConfigurationError


class StoreLookupError(RuntimeError):
    """Raised by a store when a single lookup fails.

    Reconciliation treats this as a failure of the entity being resolved and
    carries on with the rest of the batch.
    """

    def __init__(self, message: str, *, store: str, item_id: str | None = None) -> None:
        super().__init__(message)
        self.store = store
        self.item_id = item_id


class UnknownStoreError(ConfigurationError):
    """Raised when a store name is not configured. Always fatal for the batch."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown store: {name!r}")
        self.name = name
