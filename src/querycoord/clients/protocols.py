"""Call interfaces the broker expects from each authority's transport."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models.datacoord import (
    GetRecoveryInfoRequest,
    GetRecoveryInfoRequestV2,
    GetRecoveryInfoResponse,
    GetRecoveryInfoResponseV2,
    GetSegmentInfoRequest,
    GetSegmentInfoResponse,
)
from ..models.index import (
    DescribeIndexRequest,
    DescribeIndexResponse,
    GetIndexInfoRequest,
    GetIndexInfoResponse,
)
from ..models.rootcoord import (
    DescribeCollectionRequest,
    DescribeCollectionResponse,
    ShowPartitionsRequest,
    ShowPartitionsResponse,
)


@runtime_checkable
class RootCoordClient(Protocol):
    """Collection authority. Implementations must be safe for concurrent use."""

    async def describe_collection(
        self, request: DescribeCollectionRequest
    ) -> DescribeCollectionResponse: ...

    async def show_partitions(
        self, request: ShowPartitionsRequest
    ) -> ShowPartitionsResponse: ...


@runtime_checkable
class DataCoordClient(Protocol):
    """Data authority. Implementations must be safe for concurrent use."""

    async def get_recovery_info(
        self, request: GetRecoveryInfoRequest
    ) -> GetRecoveryInfoResponse: ...

    async def get_recovery_info_v2(
        self, request: GetRecoveryInfoRequestV2
    ) -> GetRecoveryInfoResponseV2: ...

    async def describe_index(
        self, request: DescribeIndexRequest
    ) -> DescribeIndexResponse: ...

    async def get_segment_info(
        self, request: GetSegmentInfoRequest
    ) -> GetSegmentInfoResponse: ...

    async def get_index_infos(
        self, request: GetIndexInfoRequest
    ) -> GetIndexInfoResponse: ...
