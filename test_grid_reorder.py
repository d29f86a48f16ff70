import pytest

from grid_reorder import NOT_FOUND, ReorderError, reorder_items, resolve_indexes


@pytest.mark.parametrize(
    "source, target, expected",
    [
        ([0], 2, ["b", "c", "a", "d"]),
        ([3], 0, ["d", "a", "b", "c"]),
        ([1, 2], 1, ["a", "b", "c", "d"]),
        ([0, 1], 2, ["c", "d", "a", "b"]),
        ([2, 0], 0, ["c", "a", "b", "d"]),
        ([1], 3, ["a", "c", "d", "b"]),
        ([0], 10, ["b", "c", "d", "a"]),
    ],
)
def test_reorder_items(source, target, expected):
    assert reorder_items(["a", "b", "c", "d"], source, target) == expected


def test_reorder_keeps_given_order_not_index_order():
    assert reorder_items(["a", "b", "c", "d", "e"], [3, 1], 0) == ["d", "b", "a", "c", "e"]


def test_reorder_does_not_mutate_input():
    items = ["a", "b", "c"]
    result = reorder_items(items, [0], 2)
    assert items == ["a", "b", "c"]
    assert result is not items


def test_reorder_contiguous_block_to_own_start_is_noop():
    items = list(range(6))
    assert reorder_items(items, [2, 3, 4], 2) == items


def test_target_equal_to_length_appends():
    items = ["a", "b", "c"]
    assert reorder_items(items, [0], 2) == ["b", "c", "a"]


@pytest.mark.parametrize(
    "source, target",
    [
        ([NOT_FOUND], 0),
        ([4], 0),
        ([1, 1], 0),
        ([0], -1),
    ],
)
def test_reorder_rejects_invalid_indexes(source, target):
    with pytest.raises(ReorderError):
        reorder_items(["a", "b", "c"], source, target)


def test_resolve_indexes_marks_missing_ids():
    items = [{"id": "x"}, {"id": "y"}]
    assert resolve_indexes(items, ["y", "q", "x"], key=lambda i: i["id"]) == [1, NOT_FOUND, 0]
