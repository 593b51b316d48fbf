import pytest

from dsakit.doubly_linked_list import DoublyLinkedList


def assert_consistent(lst):
    forward = list(lst)
    assert list(reversed(lst)) == forward[::-1]
    assert len(lst) == len(forward)


def test_append_and_iterate_both_ways():
    lst = DoublyLinkedList()
    for value in (1, 2, 3):
        lst.append(value)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]
    assert len(lst) == 3


def test_add_at_begin():
    lst = DoublyLinkedList([2, 3])
    lst.add_at_begin(1)
    assert list(lst) == [1, 2, 3]
    assert_consistent(lst)


def test_add_at_begin_on_empty():
    lst = DoublyLinkedList()
    lst.add_at_begin(4)
    assert list(reversed(lst)) == [4]
    assert_consistent(lst)


def test_add_after_middle():
    lst = DoublyLinkedList([10, 30])
    lst.add_after(1, 20)
    assert list(lst) == [10, 20, 30]
    assert_consistent(lst)


def test_add_after_last_updates_tail():
    lst = DoublyLinkedList([10, 20])
    lst.add_after(2, 30)
    assert list(reversed(lst)) == [30, 20, 10]
    lst.append(40)
    assert list(lst) == [10, 20, 30, 40]
    assert_consistent(lst)


@pytest.mark.parametrize("location", [0, 4])
def test_add_after_invalid(location):
    lst = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.add_after(location, 9)
    assert list(lst) == [1, 2, 3]


def test_delete_at_positions():
    lst = DoublyLinkedList([1, 2, 3, 4, 5])
    assert lst.delete_at(1) == 1
    assert_consistent(lst)
    assert lst.delete_at(2) == 3
    assert_consistent(lst)
    assert lst.delete_at(3) == 5
    assert list(lst) == [2, 4]
    assert_consistent(lst)


def test_delete_only_node_empties_list():
    lst = DoublyLinkedList([7])
    assert lst.delete_at(1) == 7
    assert list(lst) == []
    assert list(reversed(lst)) == []
    lst.append(8)
    assert list(lst) == [8]


def test_delete_at_invalid():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.delete_at(3)
    with pytest.raises(IndexError):
        lst.delete_at(0)
    assert list(lst) == [1, 2]