import pytest

from dsakit.array import DynamicArray


def make(*items, capacity=10):
    array = DynamicArray(capacity)
    for item in items:
        array.push(item)
    return array


def test_push_chain_and_iterate():
    array = DynamicArray()
    assert array.push(1).push(2) is array
    assert list(array) == [1, 2]
    assert len(array) == 2


def test_str_of_ints():
    assert str(make(1, 2)) == "[1, 2]"


def test_str_of_nested_arrays():
    outer = make(make(1, 2), make(2, 2), make(3, 2))
    assert str(outer) == "[[1, 2], [2, 2], [3, 2]]"


def test_empty_str():
    assert str(DynamicArray()) == "[]"


def test_grows_when_full():
    array = make(*range(11))
    assert list(array) == list(range(11))
    assert array.capacity >= len(array)
    assert array.capacity > 10


def test_shrinks_when_half_empty():
    array = make(1, 2)
    before = array.capacity
    assert array.pop() == 2
    assert array.capacity < before
    assert array.capacity >= len(array)


def test_pop_returns_last():
    array = make(4, 5, 6)
    assert array.pop() == 6
    assert list(array) == [4, 5]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray().pop()


def test_remove_shifts_left():
    array = make(4, 5, 6, 7)
    assert array.remove(1) == 5
    assert list(array) == [4, 6, 7]


def test_remove_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray().remove(0)


def test_remove_out_of_bounds_raises():
    with pytest.raises(IndexError):
        make(1).remove(3)


@pytest.mark.parametrize("index", [0, 1, 3])
def test_insert_matches_list(index):
    items = [10, 20, 30]
    array = make(*items)
    array.insert(index, 99)
    items.insert(index, 99)
    assert list(array) == items


def test_insert_grows_full_array():
    array = make(1, 2, capacity=2)
    array.insert(1, 5)
    assert list(array) == [1, 5, 2]
    assert array.capacity >= 3


def test_insert_out_of_bounds_raises():
    with pytest.raises(IndexError):
        make(1, 2).insert(5, 0)


def test_sort_orders_items():
    values = [5, 8, 4, 3, 9, 1]
    array = make(*values)
    assert array.sort() is array
    assert list(array) == sorted(values)


def test_reverse():
    values = [1, 2, 3, 4, 5]
    array = make(*values)
    array.reverse()
    assert list(array) == values[::-1]


def test_reverse_empty():
    assert list(DynamicArray().reverse()) == []


def test_fill_uses_whole_capacity():
    array = DynamicArray(4).fill(7)
    assert len(array) == array.capacity
    assert all(item == 7 for item in array)


def test_getitem_and_setitem():
    array = make(1, 2, 3)
    array[1] = 42
    assert array[1] == 42
    assert array[0] == 1


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_getitem_out_of_bounds(index):
    with pytest.raises(IndexError):
        make(1, 2, 3)[index]


def test_setitem_out_of_bounds():
    array = make(1)
    with pytest.raises(IndexError):
        array[1] = 5
    assert list(array) == [1]
    assert len(array) == 1


def test_invalid_capacity():
    with pytest.raises(ValueError):
        DynamicArray(0)


def test_push_after_draining_to_empty():
    array = make(1, 2, 3)
    while len(array):
        array.pop()
    array.push(8)
    assert list(array) == [8]