# Models - request/response envelopes and domain values

from .common import ErrorCode, KeyValuePair, MsgBase, MsgPosition, MsgType, Response, Status
from .rootcoord import (
    CollectionSchema,
    DataType,
    DescribeCollectionRequest,
    DescribeCollectionResponse,
    FieldSchema,
    ShowPartitionsRequest,
    ShowPartitionsResponse,
)
from .datacoord import (
    Binlog,
    FieldBinlog,
    GetRecoveryInfoRequest,
    GetRecoveryInfoRequestV2,
    GetRecoveryInfoResponse,
    GetRecoveryInfoResponseV2,
    GetSegmentInfoRequest,
    GetSegmentInfoResponse,
    SegmentBinlogs,
    SegmentInfo,
    SegmentLevel,
    SegmentState,
    VchannelInfo,
)
from .index import (
    DescribeIndexRequest,
    DescribeIndexResponse,
    FieldIndexInfo,
    GetIndexInfoRequest,
    GetIndexInfoResponse,
    IndexFilePathInfo,
    IndexInfo,
    IndexState,
    SegmentIndexInfo,
)

__all__ = [
    "ErrorCode",
    "KeyValuePair",
    "MsgBase",
    "MsgPosition",
    "MsgType",
    "Response",
    "Status",
    "CollectionSchema",
    "DataType",
    "DescribeCollectionRequest",
    "DescribeCollectionResponse",
    "FieldSchema",
    "ShowPartitionsRequest",
    "ShowPartitionsResponse",
    "Binlog",
    "FieldBinlog",
    "GetRecoveryInfoRequest",
    "GetRecoveryInfoRequestV2",
    "GetRecoveryInfoResponse",
    "GetRecoveryInfoResponseV2",
    "GetSegmentInfoRequest",
    "GetSegmentInfoResponse",
    "SegmentBinlogs",
    "SegmentInfo",
    "SegmentLevel",
    "SegmentState",
    "VchannelInfo",
    "DescribeIndexRequest",
    "DescribeIndexResponse",
    "FieldIndexInfo",
    "GetIndexInfoRequest",
    "GetIndexInfoResponse",
    "IndexFilePathInfo",
    "IndexInfo",
    "IndexState",
    "SegmentIndexInfo",
]
