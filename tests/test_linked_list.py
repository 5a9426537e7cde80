import pytest

from dsakit.linked_list import (
    ListNode,
    add_two_numbers,
    append,
    from_iterable,
    merge_two_lists,
    remove_nodes,
    reverse_list,
    to_list,
)


@pytest.mark.parametrize("values", [[], [1], [5, 2, 13, 3, 8], [1, 1, 1]])
def test_round_trip(values):
    assert to_list(from_iterable(values)) == values


def test_from_empty_is_none():
    assert from_iterable([]) is None


def test_iteration_yields_values():
    head = ListNode(1, ListNode(2, ListNode(4)))
    assert list(head) == [1, 2, 4]


def test_append_builds_in_order():
    head = ListNode(5)
    for value in (2, 13, 3, 8):
        result = append(head, value)
        assert result is head
    assert to_list(head) == [5, 2, 13, 3, 8]


def test_append_to_empty_creates_node():
    head = append(None, 7)
    assert to_list(head) == [7]


@pytest.mark.parametrize("values", [[], [1], [5, 2, 13, 3, 8]])
def test_reverse(values):
    assert to_list(reverse_list(from_iterable(values))) == values[::-1]


def test_reverse_twice_is_identity():
    values = [1, 2, 4]
    assert to_list(reverse_list(reverse_list(from_iterable(values)))) == values


def test_remove_nodes_source_example():
    assert to_list(remove_nodes(from_iterable([5, 2, 13, 3, 8]))) == [13, 8]


def test_remove_nodes_keeps_equal_values():
    assert to_list(remove_nodes(from_iterable([1, 1, 1, 1]))) == [1, 1, 1, 1]


def test_remove_nodes_empty():
    assert remove_nodes(None) is None


@pytest.mark.parametrize("values", [[3, 9, 2, 7, 7, 1], [10, 4, 6, 2], [2, 4, 6]])
def test_remove_nodes_result_non_increasing(values):
    result = to_list(remove_nodes(from_iterable(values)))
    assert result == sorted(result, reverse=True)
    assert result[0] == max(values)
    assert result[-1] == values[-1]


def test_merge_source_example():
    merged = merge_two_lists(from_iterable([1, 2, 4]), from_iterable([1, 3, 4]))
    assert to_list(merged) == sorted([1, 2, 4, 1, 3, 4])


def test_merge_with_empty_sides():
    only = from_iterable([1, 2])
    assert merge_two_lists(None, None) is None
    assert merge_two_lists(None, only) is only
    assert merge_two_lists(only, None) is only


def test_merge_reuses_nodes_and_prefers_first_on_ties():
    a = from_iterable([1, 3])
    b = from_iterable([1, 2])
    merged = merge_two_lists(a, b)
    assert merged is a
    assert merged.next is b


def test_add_two_numbers_classic():
    result = add_two_numbers(from_iterable([2, 4, 3]), from_iterable([5, 6, 4]))
    assert to_list(result) == [7, 0, 8]


def _as_int(digits):
    return int("".join(str(d) for d in reversed(digits)))


@pytest.mark.parametrize(
    "a, b", [([9, 9, 9, 9], [9, 9]), ([0], [0]), ([5], [5]), ([1, 8], [0])]
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = to_list(add_two_numbers(from_iterable(a), from_iterable(b)))
    assert _as_int(result) == _as_int(a) + _as_int(b)
    assert all(0 <= d <= 9 for d in result)


def test_add_two_empty_lists():
    assert add_two_numbers(None, None) is None