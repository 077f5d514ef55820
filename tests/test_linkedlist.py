import pytest

from teachos.linkedlist import LinkedList, SortedList


def int_compare(x, y):
    if x < y:
        return -1
    if x == y:
        return 0
    return 1


def by_first(x, y):
    return int_compare(x[0], y[0])


def test_append_keeps_order():
    lst = LinkedList()
    for value in (9, 5, 7):
        lst.append(value)
    assert list(lst) == [9, 5, 7]
    assert len(lst) == 3
    assert lst.front() == 9


def test_prepend_reverses_order():
    lst = LinkedList()
    for value in (9, 5, 7):
        lst.prepend(value)
    assert list(lst) == [7, 5, 9]
    assert lst.front() == 7


def test_duplicate_append_and_prepend_rejected():
    lst = LinkedList()
    lst.append(9)
    with pytest.raises(ValueError):
        lst.append(9)
    with pytest.raises(ValueError):
        lst.prepend(9)
    assert len(lst) == 1


def test_remove_front_returns_items_in_order():
    lst = LinkedList()
    for value in (9, 5, 7):
        lst.append(value)
    assert [lst.remove_front() for _ in range(3)] == [9, 5, 7]
    assert lst.is_empty()


def test_empty_list_errors():
    lst = LinkedList()
    with pytest.raises(IndexError):
        lst.remove_front()
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(ValueError):
        lst.remove(9)


def test_remove_last_then_append_links_correctly():
    lst = LinkedList()
    for value in (9, 5, 7):
        lst.append(value)
    lst.remove(7)
    lst.append(11)
    assert list(lst) == [9, 5, 11]
    lst.sanity_check()
    assert len(lst) == 3


def test_remove_middle_and_first():
    lst = LinkedList()
    for value in (9, 5, 7):
        lst.append(value)
    lst.remove(5)
    assert list(lst) == [9, 7]
    lst.remove(9)
    assert list(lst) == [7]
    assert 9 not in lst and 7 in lst
    lst.remove(7)
    assert lst.is_empty()
    lst.append(3)
    assert list(lst) == [3]


def test_remove_missing_item_raises():
    lst = LinkedList()
    lst.append(9)
    with pytest.raises(ValueError):
        lst.remove(5)
    assert list(lst) == [9]


def test_apply_visits_every_item_in_order():
    lst = LinkedList()
    for value in (9, 5, 7):
        lst.append(value)
    seen = []
    lst.apply(seen.append)
    assert seen == [9, 5, 7]


def test_self_test_leaves_list_empty():
    lst = LinkedList()
    lst.self_test([9, 5, 7])
    assert lst.is_empty()
    assert list(lst) == []


def test_self_test_requires_empty_list():
    lst = LinkedList()
    lst.append(1)
    with pytest.raises(AssertionError):
        lst.self_test([9, 5, 7])
    assert list(lst) == [1]
    assert len(lst) == 1


def test_sorted_insert_orders_items():
    lst = SortedList(int_compare)
    for value in (9, 5, 7):
        lst.insert(value)
    assert list(lst) == [5, 7, 9]
    assert lst.front() == 5


def test_sorted_append_and_prepend_insert_in_order():
    lst = SortedList(int_compare)
    lst.append(9)
    lst.prepend(5)
    lst.append(7)
    lst.prepend(11)
    assert list(lst) == sorted([9, 5, 7, 11])
    lst.sanity_check()
    assert len(lst) == 4


def test_sorted_insert_at_end_updates_last():
    lst = SortedList(int_compare)
    lst.insert(5)
    lst.insert(9)
    lst.insert(7)
    lst.insert(12)
    assert list(lst) == [5, 7, 9, 12]
    assert lst.remove_front() == 5


def test_sorted_equal_items_keep_insertion_order():
    lst = SortedList(by_first)
    lst.insert((1, "a"))
    lst.insert((0, "b"))
    lst.insert((1, "c"))
    assert list(lst) == [(0, "b"), (1, "a"), (1, "c")]


def test_sorted_rejects_duplicates():
    lst = SortedList(int_compare)
    lst.insert(5)
    with pytest.raises(ValueError):
        lst.insert(5)
    assert len(lst) == 1


def test_sorted_self_test_leaves_list_empty():
    lst = SortedList(int_compare)
    lst.self_test([9, 5, 7])
    assert lst.is_empty()


def test_sorted_remove_front_yields_sorted_sequence():
    values = [14, 3, 8, 1, 10, 6]
    lst = SortedList(int_compare)
    for value in values:
        lst.insert(value)
    out = [lst.remove_front() for _ in values]
    assert out == sorted(values)