"""Shared envelope types used by every authority response."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ErrorCode(IntEnum):
    """Legacy status codes carried in ``Status.error_code``."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    CONNECT_FAILED = 2
    PERMISSION_DENIED = 3
    COLLECTION_NOT_EXISTS = 4
    ILLEGAL_ARGUMENT = 5
    META_FAILED = 15
    INDEX_NOT_EXIST = 25
    EMPTY_COLLECTION = 26
    RATE_LIMIT = 49
    NOT_READY_SERVE = 56
    DATA_COORD_NA = 100


class MsgType(IntEnum):
    """Request kinds stamped into ``MsgBase``."""

    UNDEFINED = 0
    DESCRIBE_COLLECTION = 103
    SHOW_PARTITIONS = 206
    SEGMENT_INFO = 1206
    GET_RECOVERY_INFO = 1209


@dataclass
class Status:
    """Outcome of a remote call.

    ``code`` is the newer numeric error code; ``error_code`` is the legacy
    enum. An envelope is successful only when both are zero.
    """

    error_code: ErrorCode = ErrorCode.SUCCESS
    reason: str = ""
    code: int = 0
    retriable: bool = False
    detail: str = ""

    @classmethod
    def success(cls) -> Status:
        return cls()

    def is_success(self) -> bool:
        return self.error_code == ErrorCode.SUCCESS and self.code == 0


@dataclass
class MsgBase:
    msg_type: MsgType = MsgType.UNDEFINED
    msg_id: int = 0
    timestamp: int = 0
    source_id: int = 0


@dataclass
class MsgPosition:
    """Checkpoint inside a virtual channel."""

    channel_name: str = ""
    msg_id: bytes = b""
    msg_group: str = ""
    timestamp: int = 0


@dataclass
class KeyValuePair:
    key: str
    value: str


@dataclass
class Response:
    """Base for every response envelope; ``status`` may be omitted by the server."""

    status: Status | None = field(default=None, kw_only=True)
