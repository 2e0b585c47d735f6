"""Translate batch manifests into domain publish batches."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pubrecon.domain.model import (
    FieldChange,
    OperationResult,
    OperationResultType,
    PublishBatch,
    PublishContext,
    ResultChangeType,
    VarianceChange,
)

from .schema import BatchManifest, FieldChangePayload, OperationResultPayload

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def _parse_change_type(value: str) -> ResultChangeType:
    try:
        return ResultChangeType(value)
    except ValueError as exc:
        raise ValueError(f"Unknown change type: {value!r}") from exc


def _parse_field_change(payload: FieldChangePayload) -> FieldChange:
    return FieldChange(
        field_id=payload.field_id,
        change_kind=_parse_change_type(payload.change_type),
        language=payload.language,
        version=payload.version,
    )


def parse_operation_result(payload: OperationResultPayload | dict[str, object]) -> OperationResult:
    """Translate one manifest result entry into an ``OperationResult``."""

    model = (
        payload
        if isinstance(payload, OperationResultPayload)
        else OperationResultPayload.model_validate(payload)
    )
    try:
        operation_type = OperationResultType.parse(model.type)
    except ValueError as exc:
        raise ValueError(f"Missing operation type for {model.entity_id}") from exc
    if not isinstance(operation_type, OperationResultType):
        log.debug("Result %s has host-defined operation type %r", model.entity_id, operation_type)

    field_changes = model.metadata.field_changes
    return OperationResult(
        entity_id=model.entity_id,
        operation_type=operation_type,
        variance_changes=tuple(
            VarianceChange(
                language=variance.language,
                version=variance.version,
                change_kind=_parse_change_type(variance.change_type),
            )
            for variance in model.metadata.variance_changes
        ),
        field_changes=(
            tuple(_parse_field_change(change) for change in field_changes)
            if field_changes is not None
            else None
        ),
    )


def parse_publish_batch(payload: BatchManifest | dict[str, object]) -> PublishBatch:
    manifest = (
        payload if isinstance(payload, BatchManifest) else BatchManifest.model_validate(payload)
    )
    context = PublishContext(
        source_store=manifest.context.source_database_name,
        target_store=manifest.context.target_database_name,
        job_id=manifest.context.job_id,
    )
    return PublishBatch(
        context=context,
        results=tuple(parse_operation_result(result) for result in manifest.results),
    )


def load_publish_batch(path: Path) -> PublishBatch:
    """Read and translate a JSON manifest file."""

    return parse_publish_batch(BatchManifest.model_validate_json(path.read_text(encoding="utf-8")))
