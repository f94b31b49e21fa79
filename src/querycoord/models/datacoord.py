"""Data authority (data coordinator) recovery and segment types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .common import MsgBase, MsgPosition, Response


class SegmentState(IntEnum):
    NONE = 0
    NOT_EXIST = 1
    GROWING = 2
    SEALED = 3
    FLUSHED = 4
    FLUSHING = 5
    DROPPED = 6
    IMPORTING = 7


class SegmentLevel(IntEnum):
    LEGACY = 0
    L0 = 1
    L1 = 2
    L2 = 3


@dataclass
class Binlog:
    entries_num: int = 0
    timestamp_from: int = 0
    timestamp_to: int = 0
    log_path: str = ""
    log_size: int = 0
    log_id: int = 0


@dataclass
class FieldBinlog:
    field_id: int = 0
    binlogs: list[Binlog] = field(default_factory=list)


@dataclass
class VchannelInfo:
    """Recovery descriptor of one virtual (DML) channel."""

    collection_id: int = 0
    channel_name: str = ""
    seek_position: MsgPosition | None = None
    unflushed_segment_ids: list[int] = field(default_factory=list)
    flushed_segment_ids: list[int] = field(default_factory=list)
    dropped_segment_ids: list[int] = field(default_factory=list)
    level_zero_segment_ids: list[int] = field(default_factory=list)


@dataclass
class SegmentBinlogs:
    """Binlog references of a segment (recovery protocol v1)."""

    segment_id: int = 0
    field_binlogs: list[FieldBinlog] = field(default_factory=list)
    num_of_rows: int = 0
    statslogs: list[FieldBinlog] = field(default_factory=list)
    deltalogs: list[FieldBinlog] = field(default_factory=list)
    insert_channel: str = ""


@dataclass
class SegmentInfo:
    """Full segment metadata (recovery protocol v2 and segment lookups)."""

    id: int = 0
    collection_id: int = 0
    partition_id: int = 0
    insert_channel: str = ""
    num_of_rows: int = 0
    state: SegmentState = SegmentState.NONE
    max_row_num: int = 0
    dml_position: MsgPosition | None = None
    binlogs: list[FieldBinlog] = field(default_factory=list)
    statslogs: list[FieldBinlog] = field(default_factory=list)
    deltalogs: list[FieldBinlog] = field(default_factory=list)
    level: SegmentLevel = SegmentLevel.LEGACY


@dataclass
class GetRecoveryInfoRequest:
    collection_id: int
    partition_id: int
    base: MsgBase = field(default_factory=MsgBase)


@dataclass
class GetRecoveryInfoResponse(Response):
    channels: list[VchannelInfo] = field(default_factory=list)
    binlogs: list[SegmentBinlogs] = field(default_factory=list)


@dataclass
class GetRecoveryInfoRequestV2:
    collection_id: int
    partition_ids: list[int] = field(default_factory=list)
    base: MsgBase = field(default_factory=MsgBase)


@dataclass
class GetRecoveryInfoResponseV2(Response):
    channels: list[VchannelInfo] = field(default_factory=list)
    segments: list[SegmentInfo] = field(default_factory=list)


@dataclass
class GetSegmentInfoRequest:
    segment_ids: list[int] = field(default_factory=list)
    include_unhealthy: bool = False
    base: MsgBase = field(default_factory=MsgBase)


@dataclass
class GetSegmentInfoResponse(Response):
    infos: list[SegmentInfo] = field(default_factory=list)
    channel_checkpoint: dict[str, MsgPosition] = field(default_factory=dict)
