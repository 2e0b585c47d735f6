"""Raw publish batch input: per-entity operation results and their context."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import OperationResultType, ResultChangeType


@dataclass(frozen=True, slots=True, kw_only=True)
class VarianceChange:
    """Per-language/per-version change attached to an operation result."""

    language: str
    version: int
    change_kind: ResultChangeType


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldChange:
    """Per-field change descriptor reported by the publisher."""

    field_id: str
    change_kind: ResultChangeType
    language: str | None = None
    version: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationResult:
    """Outcome of publishing one entity within a batch.

    ``operation_type`` is a plain string for host-defined operations that have
    no ``OperationResultType`` member; those are treated as changes.
    """

    entity_id: str
    operation_type: OperationResultType | str
    variance_changes: tuple[VarianceChange, ...] = ()
    field_changes: tuple[FieldChange, ...] | None = None

    @property
    def is_pure_deletion(self) -> bool:
        """Deleted with no variant detail: the entity left the target entirely."""

        return self.operation_type is OperationResultType.DELETED and not self.variance_changes


@dataclass(frozen=True, slots=True, kw_only=True)
class PublishContext:
    """Publish job a batch belongs to and the named stores it touched."""

    source_store: str
    target_store: str
    job_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PublishBatch:
    context: PublishContext
    results: tuple[OperationResult, ...] = field(default_factory=tuple)

    @property
    def total_result_count(self) -> int:
        return len(self.results)
