"""Coordinator broker - metadata lookups against the collection and data authorities."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog

from ..clients.protocols import DataCoordClient, RootCoordClient
from ..config.manager import ConfigManager
from ..errors import MissingCapability, RemoteCallFailed, RemoteOperationFailed
from ..models.common import MsgBase, MsgType, Response, Status
from ..models.datacoord import (
    GetRecoveryInfoRequest,
    GetRecoveryInfoRequestV2,
    GetSegmentInfoRequest,
    GetSegmentInfoResponse,
    SegmentBinlogs,
    SegmentInfo,
    VchannelInfo,
)
from ..models.index import (
    DescribeIndexRequest,
    FieldIndexInfo,
    GetIndexInfoRequest,
    IndexInfo,
)
from ..models.rootcoord import (
    CollectionSchema,
    DescribeCollectionRequest,
    ShowPartitionsRequest,
)
from .status_mapper import status_to_error
from .transforms import flatten_segment_index_infos

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0

ResponseT = TypeVar("ResponseT", bound=Response)


class CoordinatorBroker:
    """
    Facade over the two metadata authorities used during collection load and recovery.

    Holds no mutable state after construction; safe to share between tasks
    as long as the authority clients are.

    Every operation takes a keyword-only ``timeout`` (seconds) bounding the
    remote call; without it ``broker.timeout_seconds`` applies. Expiry of that
    bound raises ``RemoteCallFailed(code="remote_call_timeout")``. A deadline
    the caller imposes around the await (its own ``asyncio.timeout``) and task
    cancellation are not converted and reach the caller unchanged.
    """

    def __init__(
        self,
        data_coord: Optional[DataCoordClient],
        root_coord: Optional[RootCoordClient],
        config_manager: Optional[ConfigManager] = None,
    ):
        """
        Initialize coordinator broker.

        Args:
            data_coord: Data authority client, or None if its operations are never used
            root_coord: Collection authority client, or None if its operations are never used
            config_manager: ConfigManager for the remote call timeout (optional for tests)
        """
        self._data_coord = data_coord
        self._root_coord = root_coord
        self._config_manager = config_manager

    @property
    def config_manager(self) -> Optional[ConfigManager]:
        return self._config_manager

    # ----- collection authority -----

    async def get_collection_schema(
        self, collection_id: int, *, timeout: Optional[float] = None
    ) -> CollectionSchema:
        """Fetch the schema of a collection."""
        operation = "get_collection_schema"
        root_coord = self._require_root_coord(operation)
        request = DescribeCollectionRequest(
            collection_id=collection_id,
            base=MsgBase(msg_type=MsgType.DESCRIBE_COLLECTION),
        )
        details = {"collection_id": collection_id}

        resp = await self._call(
            operation, root_coord.describe_collection, request, details, timeout
        )
        if resp.schema is None:
            raise self._empty_payload(operation, "schema", details)
        return resp.schema

    async def get_partitions(
        self, collection_id: int, *, timeout: Optional[float] = None
    ) -> list[int]:
        """
        List partition IDs of a collection.

        Raises:
            CollectionNotFound: If the collection authority does not know the collection
        """
        operation = "get_partitions"
        root_coord = self._require_root_coord(operation)
        request = ShowPartitionsRequest(
            collection_id=collection_id,
            base=MsgBase(msg_type=MsgType.SHOW_PARTITIONS),
        )

        resp = await self._call(
            operation,
            root_coord.show_partitions,
            request,
            {"collection_id": collection_id},
            timeout,
        )
        return list(resp.partition_ids)

    # ----- data authority -----

    async def get_recovery_info(
        self, collection_id: int, partition_id: int, *, timeout: Optional[float] = None
    ) -> tuple[list[VchannelInfo], list[SegmentBinlogs]]:
        """Fetch channel and segment binlog references (recovery protocol v1)."""
        operation = "get_recovery_info"
        data_coord = self._require_data_coord(operation)
        request = GetRecoveryInfoRequest(
            collection_id=collection_id,
            partition_id=partition_id,
            base=MsgBase(msg_type=MsgType.GET_RECOVERY_INFO),
        )

        resp = await self._call(
            operation,
            data_coord.get_recovery_info,
            request,
            {"collection_id": collection_id, "partition_id": partition_id},
            timeout,
        )
        return list(resp.channels), list(resp.binlogs)

    async def get_recovery_info_v2(
        self, collection_id: int, *partition_ids: int, timeout: Optional[float] = None
    ) -> tuple[list[VchannelInfo], list[SegmentInfo]]:
        """
        Fetch channel and full segment info (recovery protocol v2).

        No partition IDs means the whole collection.
        """
        operation = "get_recovery_info_v2"
        data_coord = self._require_data_coord(operation)
        request = GetRecoveryInfoRequestV2(
            collection_id=collection_id,
            partition_ids=list(partition_ids),
            base=MsgBase(msg_type=MsgType.GET_RECOVERY_INFO),
        )

        resp = await self._call(
            operation,
            data_coord.get_recovery_info_v2,
            request,
            {"collection_id": collection_id, "partition_ids": list(partition_ids)},
            timeout,
        )
        return list(resp.channels), list(resp.segments)

    async def describe_index(
        self, collection_id: int, *, timeout: Optional[float] = None
    ) -> list[IndexInfo]:
        """List index definitions of a collection."""
        operation = "describe_index"
        data_coord = self._require_data_coord(operation)
        request = DescribeIndexRequest(collection_id=collection_id)

        resp = await self._call(
            operation,
            data_coord.describe_index,
            request,
            {"collection_id": collection_id},
            timeout,
        )
        return list(resp.index_infos)

    async def get_segment_info(
        self, *segment_ids: int, timeout: Optional[float] = None
    ) -> GetSegmentInfoResponse:
        """
        Fetch segment info, returning the whole response.

        Callers read envelope fields such as ``channel_checkpoint`` besides
        ``infos``. No segment IDs yields an empty response without a remote call.
        """
        operation = "get_segment_info"
        data_coord = self._require_data_coord(operation)
        if not segment_ids:
            return GetSegmentInfoResponse(status=Status.success())

        request = GetSegmentInfoRequest(
            segment_ids=list(segment_ids),
            include_unhealthy=True,
            base=MsgBase(msg_type=MsgType.SEGMENT_INFO),
        )
        return await self._call(
            operation,
            data_coord.get_segment_info,
            request,
            {"segment_ids": list(segment_ids)},
            timeout,
        )

    async def get_index_info(
        self, collection_id: int, segment_id: int, *, timeout: Optional[float] = None
    ) -> list[FieldIndexInfo]:
        """
        Fetch the per-field index files of one segment.

        A segment with no index data yields an empty list.
        """
        operation = "get_index_info"
        data_coord = self._require_data_coord(operation)
        request = GetIndexInfoRequest(
            collection_id=collection_id,
            segment_ids=[segment_id],
        )

        resp = await self._call(
            operation,
            data_coord.get_index_infos,
            request,
            {"collection_id": collection_id, "segment_id": segment_id},
            timeout,
        )
        infos = flatten_segment_index_infos(resp.segment_info, segment_id)
        if not infos:
            logger.debug(
                "segment_index_info_absent",
                collection_id=collection_id,
                segment_id=segment_id,
            )
        return infos

    # ----- shared protocol -----

    async def _call(
        self,
        operation: str,
        call: Callable[[Any], Awaitable[Optional[ResponseT]]],
        request: Any,
        details: dict[str, Any],
        timeout: Optional[float],
    ) -> ResponseT:
        """
        Invoke a remote method within the call timeout and validate its envelope.

        Only the broker's own timeout becomes RemoteCallFailed; an outer
        deadline or cancellation propagates as CancelledError/TimeoutError.

        Raises:
            RemoteCallFailed: No envelope (exception, timeout or empty reply)
            RemoteOperationFailed: Non-success status (EntityNotFound kinds included)
        """
        timeout_seconds = self._timeout_seconds(timeout)
        try:
            async with asyncio.timeout(timeout_seconds):
                resp = await call(request)
        except TimeoutError as exc:
            logger.warning(
                "remote_call_timeout",
                operation=operation,
                timeout_seconds=timeout_seconds,
                **details,
            )
            raise RemoteCallFailed(
                code="remote_call_timeout",
                message=f"{operation} timed out after {timeout_seconds}s",
                details={"operation": operation, **details},
            ) from exc
        except Exception as exc:
            logger.warning(
                "remote_call_failed",
                operation=operation,
                error=str(exc),
                **details,
            )
            raise RemoteCallFailed(
                code="remote_call_failed",
                message=f"{operation} failed: {exc}",
                details={"operation": operation, **details},
            ) from exc

        if resp is None:
            logger.warning("remote_call_empty_response", operation=operation, **details)
            raise RemoteCallFailed(
                code="empty_response",
                message=f"{operation} returned no response",
                details={"operation": operation, **details},
            )

        status = resp.status
        if status is not None and not status.is_success():
            error = status_to_error(status, operation, details)
            logger.warning(
                "remote_operation_failed",
                operation=operation,
                error_code=int(status.error_code),
                status_code=status.code,
                reason=error.reason,
                **details,
            )
            raise error

        return resp

    def _timeout_seconds(self, timeout: Optional[float]) -> float:
        if timeout is not None:
            return timeout
        if self._config_manager is not None:
            return float(self._config_manager.get("broker.timeout_seconds"))
        return DEFAULT_TIMEOUT_SECONDS

    def _require_root_coord(self, operation: str) -> RootCoordClient:
        if self._root_coord is None:
            raise MissingCapability(
                code="missing_root_coord",
                message=f"{operation} requires a collection authority client",
                details={"operation": operation},
            )
        return self._root_coord

    def _require_data_coord(self, operation: str) -> DataCoordClient:
        if self._data_coord is None:
            raise MissingCapability(
                code="missing_data_coord",
                message=f"{operation} requires a data authority client",
                details={"operation": operation},
            )
        return self._data_coord

    def _empty_payload(
        self, operation: str, field_name: str, details: dict[str, Any]
    ) -> RemoteOperationFailed:
        logger.warning("remote_payload_missing", operation=operation, field=field_name, **details)
        return RemoteOperationFailed(
            code="empty_payload",
            message=f"{operation} succeeded without {field_name}",
            details={"operation": operation, **details},
            reason=f"missing {field_name}",
        )
