"""Pydantic models describing a publish batch manifest (JSON)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class VarianceChangePayload(ManifestBaseModel):
    language: str
    version: int
    change_type: str = Field(alias="changeType")

    @model_validator(mode="before")
    @classmethod
    def _normalize_tuple_schema(cls, value: object) -> object:
        # The publisher emits variance changes as [language, version, changeType] triples.
        if isinstance(value, Sequence) and not isinstance(value, str):
            items = list(cast(Sequence[object], value))
            if len(items) != 3:
                raise ValueError(f"Variance change must have 3 elements, got {len(items)}")
            return {"language": items[0], "version": items[1], "changeType": items[2]}
        return value


class FieldChangePayload(ManifestBaseModel):
    field_id: str = Field(alias="fieldId")
    change_type: str = Field(alias="changeType")
    language: str | None = None
    version: int | None = None

    _normalize_language = field_validator("language", mode="before")(_blank_to_none)


class ResultMetadataPayload(ManifestBaseModel):
    variance_changes: list[VarianceChangePayload] = Field(
        default_factory=list, alias="varianceChanges"
    )
    field_changes: list[FieldChangePayload] | None = Field(default=None, alias="fieldChanges")


class OperationResultPayload(ManifestBaseModel):
    entity_id: str = Field(alias="entityId")
    type: str
    metadata: ResultMetadataPayload = Field(default_factory=ResultMetadataPayload)

    @field_validator("entity_id")
    @classmethod
    def _require_entity_id(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("entityId must not be blank")
        return stripped


class JobContextPayload(ManifestBaseModel):
    source_database_name: str = Field(alias="sourceDatabaseName")
    target_database_name: str = Field(alias="targetDatabaseName")
    job_id: str | None = Field(default=None, alias="jobId")

    _normalize_job_id = field_validator("job_id", mode="before")(_blank_to_none)


class BatchManifest(ManifestBaseModel):
    context: JobContextPayload
    results: list[OperationResultPayload] = Field(default_factory=list)
