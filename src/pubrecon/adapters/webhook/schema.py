"""Pydantic models for the changed-items webhook payload."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pubrecon.domain.model import ChangedItem, FieldChange, PublishContext, VarianceChange


class WebhookBaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class FieldChangeModel(WebhookBaseModel):
    field_id: str = Field(serialization_alias="fieldId")
    change_type: str = Field(serialization_alias="changeType")
    language: str | None = None
    version: int | None = None


class VarianceModel(WebhookBaseModel):
    language: str
    version: int
    change_type: str = Field(serialization_alias="changeType")


class ChangedItemModel(WebhookBaseModel):
    item_id: str = Field(serialization_alias="itemId")
    operation_result_type: str = Field(serialization_alias="operationResultType")
    path: str
    resolved_from: str = Field(serialization_alias="resolvedFrom")
    item_path: str | None = Field(default=None, serialization_alias="itemPath")
    parent_path: str | None = Field(default=None, serialization_alias="parentPath")
    language: str | None = None
    version: int | None = None
    result_change_type: str | None = Field(default=None, serialization_alias="resultChangeType")
    field_changes: list[FieldChangeModel] | None = Field(
        default=None, serialization_alias="fieldChanges"
    )
    additional_variances: list[VarianceModel] | None = Field(
        default=None, serialization_alias="additionalVariances"
    )


class ChangedItemsNotification(WebhookBaseModel):
    job_id: str | None = Field(default=None, serialization_alias="jobId")
    source: str
    target: str
    items: list[ChangedItemModel]


def _field_change_model(change: FieldChange) -> FieldChangeModel:
    return FieldChangeModel(
        field_id=change.field_id,
        change_type=change.change_kind.value,
        language=change.language,
        version=change.version,
    )


def _variance_model(variance: VarianceChange) -> VarianceModel:
    return VarianceModel(
        language=variance.language,
        version=variance.version,
        change_type=variance.change_kind.value,
    )


def changed_item_model(item: ChangedItem) -> ChangedItemModel:
    return ChangedItemModel(
        item_id=item.item_id,
        operation_result_type=str(item.operation_result_type),
        path=item.path,
        resolved_from=item.resolved_from.value,
        item_path=item.item_path.full_path if item.item_path else None,
        parent_path=item.item_path.parent_path if item.item_path else None,
        language=item.language,
        version=item.version,
        result_change_type=item.result_change_type.value if item.result_change_type else None,
        field_changes=(
            [_field_change_model(change) for change in item.field_changes]
            if item.field_changes is not None
            else None
        ),
        additional_variances=(
            [_variance_model(variance) for variance in item.additional_variances]
            if item.additional_variances
            else None
        ),
    )


def build_notification(
    context: PublishContext,
    items: Sequence[ChangedItem],
) -> ChangedItemsNotification:
    return ChangedItemsNotification(
        job_id=context.job_id,
        source=context.source_store,
        target=context.target_store,
        items=[changed_item_model(item) for item in items],
    )
