"""Collection authority (root coordinator) requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .common import KeyValuePair, MsgBase, Response


class DataType(IntEnum):
    NONE = 0
    BOOL = 1
    INT8 = 2
    INT16 = 3
    INT32 = 4
    INT64 = 5
    FLOAT = 10
    DOUBLE = 11
    VARCHAR = 21
    JSON = 23
    BINARY_VECTOR = 100
    FLOAT_VECTOR = 101


@dataclass
class FieldSchema:
    field_id: int = 0
    name: str = ""
    data_type: DataType = DataType.NONE
    is_primary_key: bool = False
    auto_id: bool = False
    description: str = ""
    type_params: list[KeyValuePair] = field(default_factory=list)
    index_params: list[KeyValuePair] = field(default_factory=list)


@dataclass
class CollectionSchema:
    name: str = ""
    description: str = ""
    auto_id: bool = False
    fields: list[FieldSchema] = field(default_factory=list)
    enable_dynamic_field: bool = False


@dataclass
class DescribeCollectionRequest:
    collection_id: int
    base: MsgBase = field(default_factory=MsgBase)


@dataclass
class DescribeCollectionResponse(Response):
    schema: CollectionSchema | None = None
    collection_id: int = 0
    virtual_channel_names: list[str] = field(default_factory=list)
    physical_channel_names: list[str] = field(default_factory=list)
    shards_num: int = 0


@dataclass
class ShowPartitionsRequest:
    collection_id: int
    base: MsgBase = field(default_factory=MsgBase)


@dataclass
class ShowPartitionsResponse(Response):
    partition_names: list[str] = field(default_factory=list)
    partition_ids: list[int] = field(default_factory=list)
