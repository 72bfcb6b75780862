import pytest

from algoshelf.circular_doubly_linked_list import CircularDoublyLinkedList
from algoshelf.singly_linked_list import EmptyListError


def make(values):
    lst = CircularDoublyLinkedList(values[0])
    for value in values[1:]:
        lst.insert_at(len(lst) + 1, value)
    return lst


def test_new_list_holds_first_value():
    lst = CircularDoublyLinkedList(8)
    assert list(lst) == [8]
    assert list(lst.backwards()) == [8]
    assert len(lst) == 1


def test_insert_at_positions():
    lst = CircularDoublyLinkedList(1)
    lst.insert_at(1, 0)
    assert list(lst) == [0, 1]
    lst.insert_at(3, 2)
    assert list(lst) == [0, 1, 2]
    lst.insert_at(2, 9)
    assert list(lst) == [0, 9, 1, 2]
    assert list(lst.backwards()) == [2, 1, 9, 0]


def test_insert_past_end_appends():
    lst = make([1, 2])
    lst.insert_at(99, 3)
    assert list(lst) == [1, 2, 3]
    assert list(lst.backwards()) == [3, 2, 1]


def test_insert_invalid_position():
    with pytest.raises(IndexError):
        CircularDoublyLinkedList(1).insert_at(0, 2)


def test_delete_at():
    lst = make([0, 1, 2, 3])
    lst.delete_at(1)
    assert list(lst) == [1, 2, 3]
    lst.delete_at(2)
    assert list(lst) == [1, 3]
    assert list(lst.backwards()) == [3, 1]
    assert len(lst) == 2


def test_delete_past_end_removes_last():
    lst = make([4, 5, 6])
    lst.delete_at(40)
    assert list(lst) == [4, 5]


def test_delete_only_node_empties_list():
    lst = CircularDoublyLinkedList(3)
    lst.delete_at(7)
    assert list(lst) == []
    assert list(lst.backwards()) == []
    assert len(lst) == 0
    for operation in (lst.reverse, lst.copy, lst.sorted_copy):
        with pytest.raises(EmptyListError):
            operation()
    with pytest.raises(EmptyListError):
        lst.delete_at(1)
    with pytest.raises(EmptyListError):
        lst.index_of(3)
    lst.insert_at(5, 3)
    assert list(lst) == [3]


def test_index_of_and_delete_value():
    lst = make([5, 6, 7, 6])
    assert lst.index_of(7) == 3
    with pytest.raises(ValueError):
        lst.index_of(42)
    lst.delete_value(6)
    assert list(lst) == [5, 7, 6]
    with pytest.raises(ValueError):
        lst.delete_value(42)


@pytest.mark.parametrize("values", [[2], [3, 1, 2], [5, -1, 5, 0, 2]])
def test_sorted_copy(values):
    lst = make(values)
    ordered = lst.sorted_copy()
    assert list(ordered) == sorted(values)
    assert list(ordered.backwards()) == sorted(values, reverse=True)
    assert list(lst) == values


@pytest.mark.parametrize("values", [[2], [3, 1, 2], [9, 8, 7, 6, 5]])
def test_reverse(values):
    lst = make(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    assert list(lst.backwards()) == values


def test_copy_is_independent():
    values = [1, 2, 3]
    lst = make(values)
    duplicate = lst.copy()
    assert list(duplicate) == values
    duplicate.delete_at(2)
    assert list(lst) == values
    assert len(duplicate) == 2