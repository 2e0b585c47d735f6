"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class OperationResultType(StrEnum):
    """Operation the publisher applied to one entity in the target store."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    SKIPPED = "skipped"

    @classmethod
    def _missing_(cls, value: object) -> OperationResultType | None:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        if normalized == "modified":
            return cls.UPDATED
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def parse(cls, value: str) -> OperationResultType | str:
        """Return the known member for ``value``, or the host-defined name unchanged."""

        try:
            return cls(value)
        except ValueError:
            name = value.strip()
            if not name:
                raise
            return name


class ResultChangeType(StrEnum):
    """Fine-grained change classification of a variant or field."""

    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"

    @classmethod
    def _missing_(cls, value: object) -> ResultChangeType | None:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        alias = _CHANGE_TYPE_ALIASES.get(normalized)
        if alias is not None:
            return cls(alias)
        for member in cls:
            if member.value == normalized:
                return member
        return None


_CHANGE_TYPE_ALIASES: dict[str, str] = {
    "created": "added",
    "modified": "updated",
    "deleted": "removed",
}


class ResolutionSource(StrEnum):
    """Store that supplied the data for a changed item."""

    TARGET = "target"
    SOURCE = "source"
    ARCHIVE = "archive"
    RECYCLE_BIN = "recycle_bin"


class HistoricalStoreName(StrEnum):
    """Names of the historical stores retaining removed entities."""

    ARCHIVE = "archive"
    RECYCLE_BIN = "recyclebin"

    @property
    def resolution_source(self) -> ResolutionSource:
        if self is HistoricalStoreName.ARCHIVE:
            return ResolutionSource.ARCHIVE
        return ResolutionSource.RECYCLE_BIN
