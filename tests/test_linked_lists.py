import pytest

from dsakit.linked_lists import DoublyLinkedList, LinkedList


def test_singly_append_prepend_order():
    lst = LinkedList().append(1).append(2).prepend(0)
    assert list(lst) == [0, 1, 2]
    assert len(lst) == 3


def test_singly_str_format():
    assert str(LinkedList([1, 2])) == "[1 --> 2]"
    assert str(LinkedList()) == "[]"


def test_singly_nested_lists_print():
    outer = LinkedList().append(LinkedList([1, 2])).append(LinkedList([3, 4])).append(
        LinkedList([5, 6])
    )
    assert str(outer) == "[[1 --> 2] --> [3 --> 4] --> [5 --> 6]]"


def test_singly_remove():
    lst = LinkedList([10, 20, 30, 40])
    assert lst.remove(0) == 10
    assert lst.remove(2) == 40
    assert list(lst) == [20, 30]


def test_singly_remove_errors():
    with pytest.raises(IndexError, match="empty"):
        LinkedList().remove(0)
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError, match="out of bounds"):
        lst.remove(2)
    with pytest.raises(IndexError, match="out of bounds"):
        lst.remove(-1)
    assert list(lst) == [1, 2]


def test_singly_insert_positions():
    lst = LinkedList([1, 3])
    lst.insert(1, 2).insert(0, 0).insert(100, 4)
    assert list(lst) == [0, 1, 2, 3, 4]


def test_singly_insert_into_empty():
    assert list(LinkedList().insert(5, "x")) == ["x"]


def test_singly_reverse_round_trip():
    items = list(range(7))
    lst = LinkedList(items)
    assert list(lst.reverse()) == items[::-1]
    assert list(lst.reverse()) == items


def test_doubly_example_from_demo():
    lst = DoublyLinkedList().append(1).append(2).prepend(0)
    assert str(lst) == "[0 <-> 1 <-> 2]"
    lst.reverse()
    assert str(lst) == "[2 <-> 1 <-> 0]"


def test_doubly_backwards_matches_reverse():
    items = ["a", "b", "c", "d"]
    lst = DoublyLinkedList(items)
    assert list(lst.backwards()) == items[::-1]
    lst.reverse()
    assert list(lst) == items[::-1]
    assert list(lst.backwards()) == items


def test_doubly_remove_keeps_links():
    lst = DoublyLinkedList([1, 2, 3, 4])
    assert lst.remove(3) == 4
    assert lst.remove(1) == 2
    assert lst.remove(0) == 1
    assert list(lst) == [3]
    assert list(lst.backwards()) == [3]


def test_doubly_remove_errors():
    with pytest.raises(IndexError):
        DoublyLinkedList().remove(0)
    lst = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        lst.remove(1)
    with pytest.raises(IndexError):
        lst.remove(-2)


def test_doubly_insert_keeps_links():
    lst = DoublyLinkedList([1, 3])
    lst.insert(1, 2).insert(3, 4).insert(0, 0).insert(50, 5)
    assert list(lst) == [0, 1, 2, 3, 4, 5]
    assert list(lst.backwards()) == [5, 4, 3, 2, 1, 0]
    assert len(lst) == 6