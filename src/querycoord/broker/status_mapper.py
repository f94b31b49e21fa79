"""Status code to broker error mapping."""

from __future__ import annotations

from typing import Any

from ..errors import (
    CollectionNotFound,
    IndexNotFound,
    PartitionNotFound,
    RemoteOperationFailed,
    SegmentNotFound,
)
from ..models.common import ErrorCode, Status

# Numeric codes carried in Status.code by newer authorities.
COLLECTION_NOT_FOUND_CODE = 100
PARTITION_NOT_FOUND_CODE = 200
SEGMENT_NOT_FOUND_CODE = 600
INDEX_NOT_FOUND_CODE = 700

STATUS_CODE_ERRORS: dict[int, type[RemoteOperationFailed]] = {
    COLLECTION_NOT_FOUND_CODE: CollectionNotFound,
    PARTITION_NOT_FOUND_CODE: PartitionNotFound,
    SEGMENT_NOT_FOUND_CODE: SegmentNotFound,
    INDEX_NOT_FOUND_CODE: IndexNotFound,
}

LEGACY_ERROR_CODE_ERRORS: dict[ErrorCode, type[RemoteOperationFailed]] = {
    ErrorCode.COLLECTION_NOT_EXISTS: CollectionNotFound,
    ErrorCode.INDEX_NOT_EXIST: IndexNotFound,
}

_ERROR_KIND_CODES: dict[type[RemoteOperationFailed], str] = {
    CollectionNotFound: "collection_not_found",
    PartitionNotFound: "partition_not_found",
    SegmentNotFound: "segment_not_found",
    IndexNotFound: "index_not_found",
    RemoteOperationFailed: "remote_operation_failed",
}


def classify_status(status: Status) -> type[RemoteOperationFailed]:
    """
    Pick the error kind for a non-success status.

    The numeric ``code`` is checked first; the legacy ``error_code`` is the
    fallback. Anything unrecognized maps to RemoteOperationFailed.

    Args:
        status: Non-success status from a response envelope

    Returns:
        Error class to raise
    """
    if status.code in STATUS_CODE_ERRORS:
        return STATUS_CODE_ERRORS[status.code]
    if status.code == 0 and status.error_code in LEGACY_ERROR_CODE_ERRORS:
        return LEGACY_ERROR_CODE_ERRORS[status.error_code]
    return RemoteOperationFailed


def status_to_error(
    status: Status,
    operation: str,
    details: dict[str, Any] | None = None,
) -> RemoteOperationFailed:
    """
    Build the typed error for a non-success status.

    Args:
        status: Non-success status from a response envelope
        operation: Broker operation name, for diagnostics
        details: Operation arguments to attach

    Returns:
        RemoteOperationFailed (or an EntityNotFound subclass)
    """
    error_cls = classify_status(status)
    reason = status.reason or status.detail
    summary = reason or f"error code {int(status.error_code)}"
    return error_cls(
        code=_ERROR_KIND_CODES[error_cls],
        message=f"{operation} failed: {summary}",
        details={"operation": operation, **(details or {})},
        retryable=status.retriable,
        error_code=status.error_code,
        status_code=status.code,
        reason=reason,
    )
