import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.linked_lists import (
    ListNode,
    from_values,
    merge_k_lists,
    merge_two_lists,
    remove_nth_from_end,
    to_values,
)

sorted_lists = st.lists(st.integers(-100, 100), max_size=20).map(sorted)


def _is_sorted(values):
    return all(a <= b for a, b in zip(values, values[1:]))


@given(st.lists(st.integers()))
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_list_is_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_node_iteration():
    node = ListNode(1, ListNode(2, ListNode(3)))
    assert list(node) == [1, 2, 3]


def test_merge_k_five_lists():
    lists = [
        from_values([1, 3, 5]),
        from_values([2, 4, 6]),
        from_values([0, 7, 8]),
        from_values([9, 10, 11]),
        from_values([12, 13, 14]),
    ]
    assert to_values(merge_k_lists(lists)) == list(range(15))


def test_merge_k_empty_input():
    assert merge_k_lists([]) is None


def test_merge_k_single_list():
    assert to_values(merge_k_lists([from_values([1, 2, 3])])) == [1, 2, 3]


@pytest.mark.parametrize(
    ("inputs", "expected"),
    [
        ([[1, 4, 7], [2, 5, 8]], [1, 2, 4, 5, 7, 8]),
        ([[1, 3, 5], [1, 3, 5], [2, 3, 4]], [1, 1, 2, 3, 3, 3, 4, 5, 5]),
        ([[1], [2, 4, 6, 8, 10], [3, 7]], [1, 2, 3, 4, 6, 7, 8, 10]),
        ([[5], [1], [3], [2]], [1, 2, 3, 5]),
        ([[-10, -5, 0], [-7, -3, 4], [-1, 2, 6]], [-10, -7, -5, -3, -1, 0, 2, 4, 6]),
        ([[5, 5, 5], [5, 5], [5]], [5, 5, 5, 5, 5, 5]),
    ],
)
def test_merge_k_cases(inputs, expected):
    merged = to_values(merge_k_lists([from_values(v) for v in inputs]))
    assert _is_sorted(merged)
    assert merged == expected


@given(st.lists(sorted_lists, max_size=6))
def test_merge_k_is_sorted_permutation(inputs):
    merged = to_values(merge_k_lists([from_values(v) for v in inputs]))
    assert _is_sorted(merged)
    assert sorted(merged) == sorted(x for v in inputs for x in v)


@given(sorted_lists, sorted_lists)
def test_merge_two_is_sorted_permutation(first, second):
    merged = to_values(merge_two_lists(from_values(first), from_values(second)))
    assert _is_sorted(merged)
    assert sorted(merged) == sorted(first + second)


def test_merge_two_with_empty_side():
    head = from_values([1, 2])
    assert merge_two_lists(None, head) is head
    assert merge_two_lists(head, None) is head


@pytest.mark.parametrize(
    ("values", "n", "expected"),
    [
        ([1, 2, 3, 4, 5], 1, [1, 2, 3, 4]),
        ([1, 2, 3, 4, 5], 3, [1, 2, 4, 5]),
        ([1, 2, 3, 4, 5], 2, [1, 2, 3, 5]),
        ([1, 2, 3], 3, [2, 3]),
        ([1, 2], 1, [1]),
        ([1, 2], 2, [2]),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 4, [1, 2, 3, 4, 5, 6, 8, 9, 10]),
        ([1, 1, 1, 1, 1], 3, [1, 1, 1, 1]),
        ([10, 20, 30, 40, 50], 2, [10, 20, 30, 50]),
        ([10, 20, 30, 40, 50, 60], 4, [10, 20, 40, 50, 60]),
    ],
)
def test_remove_nth_cases(values, n, expected):
    assert to_values(remove_nth_from_end(from_values(values), n)) == expected


@pytest.mark.parametrize("n", [5, 0, -1])
def test_remove_nth_out_of_range_leaves_list(n):
    head = from_values([1, 2, 3])
    result = remove_nth_from_end(head, n)
    assert result is head
    assert to_values(result) == [1, 2, 3]


def test_remove_only_element():
    assert remove_nth_from_end(from_values([42]), 1) is None


def test_remove_from_empty():
    assert remove_nth_from_end(None, 1) is None


@given(st.lists(st.integers(), min_size=1, max_size=20), st.data())
def test_remove_nth_drops_one_element(values, data):
    n = data.draw(st.integers(1, len(values)))
    result = to_values(remove_nth_from_end(from_values(values), n))
    assert len(result) == len(values) - 1
    assert result == values[: len(values) - n] + values[len(values) - n + 1 :]