import pytest

from algobook.linked_list import (
    RandomNode,
    add_two_numbers,
    copy_random_list,
    delete_duplicates,
    find_duplicate,
    has_cycle,
    merge_k_lists,
    merge_two_lists,
    remove_nth_from_end,
    reorder_list,
    reverse_between,
    reverse_k_group,
    reverse_list,
    rotate_right,
)
from algobook.structures import list_from_values, values_of_list


def _digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits)))


def test_add_two_numbers_example():
    result = add_two_numbers(list_from_values([2, 4, 3]), list_from_values([5, 6, 4]))
    assert values_of_list(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b", [([9, 9, 9, 9], [9, 9]), ([0], [0]), ([1], [9, 9, 9]), ([5], [5])]
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = values_of_list(add_two_numbers(list_from_values(a), list_from_values(b)))
    assert _digits_to_int(result) == _digits_to_int(a) + _digits_to_int(b)


def test_add_two_empty_lists():
    assert add_two_numbers(None, None) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    expected = values.copy()
    del expected[-n]
    assert values_of_list(remove_nth_from_end(list_from_values(values), n)) == expected


def test_remove_only_node():
    assert remove_nth_from_end(list_from_values([7]), 1) is None


@pytest.mark.parametrize("n", [0, 6])
def test_remove_nth_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(list_from_values([1, 2, 3, 4, 5]), n)


def test_merge_two_lists():
    a, b = [1, 2, 4], [1, 3, 4, 6]
    merged = merge_two_lists(list_from_values(a), list_from_values(b))
    assert values_of_list(merged) == sorted(a + b)


def test_merge_two_lists_with_empty():
    assert values_of_list(merge_two_lists(None, list_from_values([3]))) == [3]
    assert merge_two_lists(None, None) is None


def test_merge_k_lists():
    parts = [[1, 4, 5], [1, 3, 4], [2, 6], [], [0]]
    merged = merge_k_lists(list_from_values(p) for p in parts)
    assert values_of_list(merged) == sorted(sum(parts, []))


def test_merge_k_lists_empty():
    assert merge_k_lists([]) is None


def test_reverse_k_group_example():
    head = reverse_k_group(list_from_values([1, 2, 3, 4, 5]), 2)
    assert values_of_list(head) == [2, 1, 4, 3, 5]


def test_reverse_k_group_whole_and_single():
    values = [1, 2, 3, 4, 5]
    assert values_of_list(reverse_k_group(list_from_values(values), 1)) == values
    assert values_of_list(reverse_k_group(list_from_values(values), 5)) == values[::-1]
    assert values_of_list(reverse_k_group(list_from_values(values), 6)) == values


def test_reverse_k_group_rejects_zero():
    with pytest.raises(ValueError):
        reverse_k_group(list_from_values([1, 2]), 0)


def test_copy_random_list():
    nodes = [RandomNode(v) for v in (7, 13, 11, 10, 1)]
    for first, second in zip(nodes, nodes[1:]):
        first.next = second
    randoms = [None, 0, 4, 2, 0]
    for node, target in zip(nodes, randoms):
        node.random = None if target is None else nodes[target]

    copy = copy_random_list(nodes[0])
    copied = []
    node = copy
    while node is not None:
        copied.append(node)
        node = node.next
    assert [n.val for n in copied] == [n.val for n in nodes]
    assert not any(c is o for c in copied for o in nodes)
    for node, target in zip(copied, randoms):
        if target is None:
            assert node.random is None
        else:
            assert node.random is copied[target]


def test_copy_random_list_empty():
    assert copy_random_list(None) is None


def test_has_cycle():
    head = list_from_values([3, 2, 0, -4])
    assert not has_cycle(head)
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head.next
    assert has_cycle(head)


def test_has_cycle_small():
    assert not has_cycle(None)
    single = list_from_values([1])
    assert not has_cycle(single)
    single.next = single
    assert has_cycle(single)


def test_reorder_list_example():
    head = list_from_values([1, 2, 3, 4, 5])
    reorder_list(head)
    assert values_of_list(head) == [1, 5, 2, 4, 3]


def test_reorder_list_keeps_values_and_head():
    values = [1, 2, 3, 4]
    head = list_from_values(values)
    reorder_list(head)
    result = values_of_list(head)
    assert sorted(result) == values
    assert result[0] == values[0]
    assert result[1] == values[-1]


@pytest.mark.parametrize("nums, dup", [([1, 3, 4, 2, 2], 2), ([3, 1, 3, 4, 2], 3)])
def test_find_duplicate(nums, dup):
    assert find_duplicate(nums) == dup


def test_reverse_list():
    values = [1, 2, 3, 4, 5]
    assert values_of_list(reverse_list(list_from_values(values))) == values[::-1]
    assert reverse_list(None) is None


@pytest.mark.parametrize("k", [0, 1, 2, 4, 5, 7])
def test_rotate_right(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[len(values) - shift:] + values[: len(values) - shift]
    assert values_of_list(rotate_right(list_from_values(values), k)) == expected


def test_rotate_right_negative():
    with pytest.raises(ValueError):
        rotate_right(list_from_values([1, 2]), -1)


def test_delete_duplicates():
    values = [1, 1, 2, 3, 3, 3, 4]
    result = values_of_list(delete_duplicates(list_from_values(values)))
    assert result == sorted(set(values))


def test_reverse_between():
    values = [1, 2, 3, 4, 5]
    result = values_of_list(reverse_between(list_from_values(values), 2, 4))
    assert result == values[:1] + values[1:4][::-1] + values[4:]


def test_reverse_between_whole_and_single():
    values = [1, 2, 3]
    assert values_of_list(reverse_between(list_from_values(values), 1, 3)) == values[::-1]
    assert values_of_list(reverse_between(list_from_values(values), 2, 2)) == values


@pytest.mark.parametrize("left, right", [(0, 2), (3, 2), (2, 4)])
def test_reverse_between_bad_positions(left, right):
    with pytest.raises(ValueError):
        reverse_between(list_from_values([1, 2, 3]), left, right)