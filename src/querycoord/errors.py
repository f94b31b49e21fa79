"""Structured errors raised by the coordinator broker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models.common import ErrorCode


@dataclass
class BrokerError(Exception):
    """Base for every broker failure."""

    code: str
    message: str
    details: dict[str, Any] | None = None
    retryable: bool = False

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details or {},
            "retryable": self.retryable,
        }


@dataclass
class MissingCapability(BrokerError):
    """An operation needs an authority client the broker was built without."""


@dataclass
class RemoteCallFailed(BrokerError):
    """The remote call produced no envelope (transport error, timeout, empty reply)."""

    retryable: bool = True


@dataclass
class RemoteOperationFailed(BrokerError):
    """The authority answered with a non-success status."""

    error_code: ErrorCode = ErrorCode.UNEXPECTED_ERROR
    status_code: int = 0
    reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["error_code"] = int(self.error_code)
        payload["status_code"] = self.status_code
        payload["reason"] = self.reason
        return payload


@dataclass
class EntityNotFound(RemoteOperationFailed):
    """The authority does not know the requested entity."""


@dataclass
class CollectionNotFound(EntityNotFound):
    pass


@dataclass
class PartitionNotFound(EntityNotFound):
    pass


@dataclass
class SegmentNotFound(EntityNotFound):
    pass


@dataclass
class IndexNotFound(EntityNotFound):
    pass
