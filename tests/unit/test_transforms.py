"""Unit tests for the segment index flattening transform."""

from querycoord.broker.transforms import flatten_segment_index_infos, to_field_index_info
from querycoord.models import IndexFilePathInfo, KeyValuePair, SegmentIndexInfo


def _segment(segment_id: int, index_ids: list[int]) -> SegmentIndexInfo:
    return SegmentIndexInfo(
        segment_id=segment_id,
        index_infos=[IndexFilePathInfo(segment_id=segment_id, index_id=i) for i in index_ids],
    )


def test_flatten_present_segment_keeps_order():
    mapping = {10000: _segment(10000, [3, 1, 2]), 10001: _segment(10001, [9])}

    infos = flatten_segment_index_infos(mapping, 10000)

    assert [info.index_id for info in infos] == [3, 1, 2]


def test_flatten_absent_segment():
    mapping = {10000: _segment(10000, [1, 2, 3])}

    assert flatten_segment_index_infos(mapping, 99999) == []


def test_flatten_empty_or_missing_mapping():
    assert flatten_segment_index_infos({}, 10000) == []
    assert flatten_segment_index_infos(None, 10000) == []


def test_flatten_segment_without_indexes():
    assert flatten_segment_index_infos({1: SegmentIndexInfo(segment_id=1)}, 1) == []


def test_to_field_index_info_maps_fields():
    source = IndexFilePathInfo(
        segment_id=1,
        field_id=101,
        index_id=7,
        build_id=70,
        index_name="vec_idx",
        index_params=[KeyValuePair("index_type", "HNSW")],
        index_file_paths=["a", "b"],
        serialized_size=2048,
        index_version=3,
        num_rows=500,
    )

    info = to_field_index_info(source)

    assert info.field_id == 101
    assert info.enable_index is True
    assert info.index_name == "vec_idx"
    assert info.index_id == 7
    assert info.build_id == 70
    assert info.index_params == [KeyValuePair("index_type", "HNSW")]
    assert info.index_file_paths == ["a", "b"]
    assert info.index_size == 2048
    assert info.index_version == 3
    assert info.num_rows == 500


def test_to_field_index_info_copies_lists():
    source = IndexFilePathInfo(index_file_paths=["a"])

    info = to_field_index_info(source)
    info.index_file_paths.append("b")

    assert source.index_file_paths == ["a"]
