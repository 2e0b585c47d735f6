"""Publish batch manifest adapter."""

from __future__ import annotations

from .schema import (
    BatchManifest,
    FieldChangePayload,
    JobContextPayload,
    OperationResultPayload,
    VarianceChangePayload,
)
from .translator import load_publish_batch, parse_operation_result, parse_publish_batch

__all__ = [
    "BatchManifest",
    "FieldChangePayload",
    "JobContextPayload",
    "OperationResultPayload",
    "VarianceChangePayload",
    "load_publish_batch",
    "parse_operation_result",
    "parse_publish_batch",
]
