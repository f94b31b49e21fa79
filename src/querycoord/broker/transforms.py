"""Pure payload transforms applied after a successful envelope check."""

from __future__ import annotations

from ..models.index import FieldIndexInfo, IndexFilePathInfo, SegmentIndexInfo


def to_field_index_info(info: IndexFilePathInfo) -> FieldIndexInfo:
    """Convert one per-segment index file record into a loader-facing record."""
    return FieldIndexInfo(
        field_id=info.field_id,
        enable_index=True,
        index_name=info.index_name,
        index_id=info.index_id,
        build_id=info.build_id,
        index_params=list(info.index_params),
        index_file_paths=list(info.index_file_paths),
        index_size=info.serialized_size,
        index_version=info.index_version,
        num_rows=info.num_rows,
    )


def flatten_segment_index_infos(
    segment_info: dict[int, SegmentIndexInfo] | None,
    segment_id: int,
) -> list[FieldIndexInfo]:
    """
    Flatten the index records of one segment out of a keyed response payload.

    Order follows the nested ``index_infos`` sequence. A missing mapping or a
    segment absent from it yields an empty list.

    Args:
        segment_info: Mapping of segment ID to its index records
        segment_id: Segment to extract

    Returns:
        Ordered list of FieldIndexInfo
    """
    if not segment_info:
        return []
    entry = segment_info.get(segment_id)
    if entry is None:
        return []
    return [to_field_index_info(info) for info in entry.index_infos]
