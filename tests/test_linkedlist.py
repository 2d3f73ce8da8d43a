import pytest

from algopuzzles.linkedlist import LinkedList


def test_iteration_keeps_insertion_order():
    values = [5, 3, 9, 1]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0


def test_append_adds_at_end():
    linked = LinkedList([1, 2])
    linked.append(7)
    assert list(linked) == [1, 2, 7]
    assert len(linked) == 3


@pytest.mark.parametrize("values", [[4, 2, 8, 2, 0, -3], [1], [], [3, 3, 3]])
def test_sort_orders_values(values):
    linked = LinkedList(values)
    linked.sort()
    assert list(linked) == sorted(values)
    assert len(linked) == len(values)


def test_append_after_sort_goes_to_end():
    linked = LinkedList([3, 1, 2])
    linked.sort()
    linked.append(0)
    assert list(linked) == [1, 2, 3, 0]


def test_merge_sorted_lists():
    first = [1, 4, 4, 9, 12]
    second = [2, 4, 5, 10, 20, 21]
    target = LinkedList(first)
    source = LinkedList(second)
    target.merge(source)
    assert list(target) == sorted(first + second)
    assert len(target) == len(first) + len(second)
    assert list(source) == []
    assert len(source) == 0


def test_merge_into_empty_and_append_after():
    target = LinkedList()
    target.merge(LinkedList([1, 2, 3]))
    target.append(4)
    assert list(target) == [1, 2, 3, 4]


def test_merge_empty_other_changes_nothing():
    target = LinkedList([1, 5])
    target.merge(LinkedList())
    assert list(target) == [1, 5]


def test_merge_with_itself_rejected():
    linked = LinkedList([1])
    with pytest.raises(ValueError):
        linked.merge(linked)