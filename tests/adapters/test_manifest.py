from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from pubrecon.adapters.manifest import (
    load_publish_batch,
    parse_operation_result,
    parse_publish_batch,
)
from pubrecon.domain.model import OperationResultType, ResultChangeType

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def manifest_payload() -> dict[str, object]:
    return {
        "context": {
            "jobId": "4f1c",
            "sourceDatabaseName": "master",
            "targetDatabaseName": "web",
        },
        "results": [
            {
                "entityId": "A",
                "type": "Updated",
                "metadata": {
                    "varianceChanges": [["en", "2", "Updated"]],
                    "fieldChanges": [
                        {"fieldId": "title", "changeType": "Modified", "language": "en"}
                    ],
                },
            },
            {"entityId": "B", "type": "Deleted", "metadata": {"varianceChanges": []}},
            {"entityId": "C", "type": "Created"},
        ],
    }


def test_parse_publish_batch_translates_context_and_results(
    manifest_payload: dict[str, object],
) -> None:
    batch = parse_publish_batch(manifest_payload)

    assert batch.context.source_store == "master"
    assert batch.context.target_store == "web"
    assert batch.context.job_id == "4f1c"
    assert batch.total_result_count == 3

    first, second, third = batch.results
    assert first.operation_type is OperationResultType.UPDATED
    assert first.variance_changes[0].language == "en"
    assert first.variance_changes[0].version == 2
    assert first.variance_changes[0].change_kind is ResultChangeType.UPDATED
    assert first.field_changes is not None
    assert first.field_changes[0].field_id == "title"
    assert first.field_changes[0].change_kind is ResultChangeType.UPDATED
    assert second.is_pure_deletion
    assert second.field_changes is None
    assert third.variance_changes == ()


def test_parse_operation_result_accepts_object_variances() -> None:
    result = parse_operation_result(
        {
            "entityId": " X ",
            "type": "deleted",
            "metadata": {
                "varianceChanges": [{"language": "de", "version": 3, "changeType": "Deleted"}]
            },
        }
    )

    assert result.entity_id == "X"
    assert not result.is_pure_deletion
    assert result.variance_changes[0].change_kind is ResultChangeType.REMOVED


def test_parse_operation_result_keeps_host_defined_operation_type() -> None:
    result = parse_operation_result(
        {
            "entityId": "X",
            "type": " Moved ",
            "metadata": {"varianceChanges": [["en", 1, "Updated"]]},
        }
    )

    assert result.operation_type == "Moved"
    assert not isinstance(result.operation_type, OperationResultType)
    assert not result.is_pure_deletion


def test_parse_publish_batch_accepts_host_defined_operation_type(
    manifest_payload: dict[str, object],
) -> None:
    results = manifest_payload["results"]
    assert isinstance(results, list)
    results.append({"entityId": "D", "type": "Moved"})

    batch = parse_publish_batch(manifest_payload)

    assert [result.entity_id for result in batch.results] == ["A", "B", "C", "D"]
    assert batch.results[-1].operation_type == "Moved"


def test_parse_operation_result_rejects_blank_operation_type() -> None:
    with pytest.raises(ValueError, match="Missing operation type"):
        parse_operation_result({"entityId": "X", "type": "  "})


def test_parse_operation_result_rejects_malformed_variance() -> None:
    with pytest.raises(ValidationError):
        parse_operation_result(
            {"entityId": "X", "type": "Updated", "metadata": {"varianceChanges": [["en", "1"]]}}
        )


def test_parse_operation_result_rejects_blank_entity_id() -> None:
    with pytest.raises(ValidationError):
        parse_operation_result({"entityId": "  ", "type": "Updated"})


def test_load_publish_batch_reads_json_file(
    tmp_path: Path,
    manifest_payload: dict[str, object],
) -> None:
    path = tmp_path / "batch.json"
    path.write_text(json.dumps(manifest_payload), encoding="utf-8")

    batch = load_publish_batch(path)

    assert [result.entity_id for result in batch.results] == ["A", "B", "C"]
