from __future__ import annotations

from pubrecon.domain.reconciliation import BatchGroup, classify_batch
from pubrecon.domain.model import OperationResult
from tests.helpers.results import created, deleted, updated, variance


def test_classify_batch_splits_pure_deletions_from_changes() -> None:
    results = [
        updated("A"),
        deleted("B"),
        created("C"),
        deleted("D", variance("de", 3)),
        deleted("E"),
    ]

    classified = classify_batch(results)

    assert [result.entity_id for result in classified.deleted] == ["B", "E"]
    assert [result.entity_id for result in classified.changed] == ["A", "C", "D"]
    assert len(classified) == 5


def test_classified_batch_orders_deletions_first() -> None:
    classified = classify_batch([updated("A"), deleted("B"), updated("C")])

    assert [(group, result.entity_id) for group, result in classified.ordered()] == [
        (BatchGroup.DELETED, "B"),
        (BatchGroup.CHANGED, "A"),
        (BatchGroup.CHANGED, "C"),
    ]


def test_classify_batch_handles_empty_input() -> None:
    classified = classify_batch([])

    assert classified.deleted == ()
    assert classified.changed == ()
    assert list(classified.ordered()) == []


def test_classify_batch_treats_host_defined_operations_as_changes() -> None:
    moved = OperationResult(entity_id="M", operation_type="Moved")

    classified = classify_batch([deleted("B"), moved])

    assert [result.entity_id for result in classified.deleted] == ["B"]
    assert classified.changed == (moved,)
