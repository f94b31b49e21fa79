"""Index descriptors served by the data authority."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .common import KeyValuePair, Response


class IndexState(IntEnum):
    NONE = 0
    UNISSUED = 1
    IN_PROGRESS = 2
    FINISHED = 3
    FAILED = 4
    RETRY = 5


@dataclass
class IndexInfo:
    """Collection-level index definition."""

    collection_id: int = 0
    field_id: int = 0
    index_name: str = ""
    index_id: int = 0
    type_params: list[KeyValuePair] = field(default_factory=list)
    index_params: list[KeyValuePair] = field(default_factory=list)
    user_index_params: list[KeyValuePair] = field(default_factory=list)
    indexed_rows: int = 0
    total_rows: int = 0
    state: IndexState = IndexState.NONE
    is_auto_index: bool = False


@dataclass
class IndexFilePathInfo:
    """Index files built for one field of one segment."""

    segment_id: int = 0
    field_id: int = 0
    index_id: int = 0
    build_id: int = 0
    index_name: str = ""
    index_params: list[KeyValuePair] = field(default_factory=list)
    index_file_paths: list[str] = field(default_factory=list)
    serialized_size: int = 0
    index_version: int = 0
    num_rows: int = 0


@dataclass
class SegmentIndexInfo:
    collection_id: int = 0
    segment_id: int = 0
    enable_index: bool = False
    index_infos: list[IndexFilePathInfo] = field(default_factory=list)


@dataclass
class FieldIndexInfo:
    """Flattened per-field index materialization handed to loaders."""

    field_id: int = 0
    enable_index: bool = True
    index_name: str = ""
    index_id: int = 0
    build_id: int = 0
    index_params: list[KeyValuePair] = field(default_factory=list)
    index_file_paths: list[str] = field(default_factory=list)
    index_size: int = 0
    index_version: int = 0
    num_rows: int = 0


@dataclass
class DescribeIndexRequest:
    collection_id: int
    index_name: str = ""


@dataclass
class DescribeIndexResponse(Response):
    index_infos: list[IndexInfo] = field(default_factory=list)


@dataclass
class GetIndexInfoRequest:
    collection_id: int
    segment_ids: list[int] = field(default_factory=list)
    index_name: str = ""


@dataclass
class GetIndexInfoResponse(Response):
    segment_info: dict[int, SegmentIndexInfo] = field(default_factory=dict)
