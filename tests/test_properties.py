"""Behavioral properties and scenarios that hold for any list state."""

import pytest

from tailchain import DoublyLinkedList, SinglyLinkedList

LIST_TYPES = [SinglyLinkedList, DoublyLinkedList]
SIZES = [0, 1, 2, 5, 50]


def values_of(lst: SinglyLinkedList[object] | DoublyLinkedList[object]) -> list[object]:
    """Read every element back through get()."""
    return [lst.get(i) for i in range(len(lst))]


@pytest.mark.parametrize("cls", LIST_TYPES)
@pytest.mark.parametrize("size", SIZES)
def test_appends_preserve_order(cls: type, size: int) -> None:
    """Test that N appends give length N and insertion order."""
    lst = cls()
    for i in range(size):
        lst.append(i * 10)
    assert len(lst) == size
    assert values_of(lst) == [i * 10 for i in range(size)]


@pytest.mark.parametrize("cls", LIST_TYPES)
@pytest.mark.parametrize("size", SIZES)
def test_pop_returns_reverse_order(cls: type, size: int) -> None:
    """Test that draining with pop yields values newest first."""
    lst = cls(range(size))
    drained = [lst.pop() for _ in range(size)]
    assert drained == list(reversed(range(size)))
    assert lst.pop() is None
    assert len(lst) == 0

    lst.append("again")
    assert values_of(lst) == ["again"]


@pytest.mark.parametrize("cls", LIST_TYPES)
@pytest.mark.parametrize("size", SIZES)
def test_pop_first_returns_insertion_order(cls: type, size: int) -> None:
    """Test that draining with pop_first yields values oldest first."""
    lst = cls(range(size))
    drained = [lst.pop_first() for _ in range(size)]
    assert drained == list(range(size))
    assert lst.pop_first() is None


@pytest.mark.parametrize("cls", LIST_TYPES)
@pytest.mark.parametrize("size", SIZES)
def test_insert_at_ends_matches_prepend_and_append(cls: type, size: int) -> None:
    """Test insert(0, v) == prepend(v) and insert(len(), v) == append(v)."""
    via_insert = cls(range(size))
    via_ends = cls(range(size))

    via_insert.insert(0, "head")
    via_ends.prepend("head")
    via_insert.insert(len(via_insert), "tail")
    via_ends.append("tail")

    assert values_of(via_insert) == values_of(via_ends)
    assert via_insert.last() == via_ends.last() == "tail"
    via_insert.check_invariants()


@pytest.mark.parametrize("cls", LIST_TYPES)
@pytest.mark.parametrize("size", SIZES)
def test_reverse_twice_restores_list(cls: type, size: int) -> None:
    """Test that reverse is its own inverse, including the tail cache."""
    lst = cls(range(size))
    original_last = lst._last

    lst.reverse()
    lst.reverse()

    assert values_of(lst) == list(range(size))
    assert lst._last == original_last
    lst.check_invariants()


@pytest.mark.parametrize("cls", LIST_TYPES)
@pytest.mark.parametrize("size", SIZES)
def test_out_of_range_access_changes_nothing(cls: type, size: int) -> None:
    """Test that get/set outside [0, len()) return None without mutation."""
    lst = cls(range(size))
    for index in (-1, size, size + 3):
        assert lst.get(index) is None
        assert lst.set(index, "x") is None
    assert len(lst) == size
    assert values_of(lst) == list(range(size))


@pytest.mark.parametrize("cls", LIST_TYPES)
def test_scenario_three_appends(cls: type) -> None:
    """Test appending 1, 2, 3 to an empty list."""
    lst = cls()
    lst.append(1)
    lst.append(2)
    lst.append(3)
    assert lst.get(0) == 1
    assert lst.get(1) == 2
    assert lst.get(2) == 3
    assert len(lst) == 3


@pytest.mark.parametrize("cls", LIST_TYPES)
def test_scenario_remove_middle(cls: type) -> None:
    """Test removing index 1 from [1, 2, 3]."""
    lst = cls([1, 2, 3])
    lst.remove(1)
    assert values_of(lst) == [1, 3]
    assert len(lst) == 2


@pytest.mark.parametrize("cls", LIST_TYPES)
def test_scenario_set_returns_old_value(cls: type) -> None:
    """Test set(1, 25) on [10, 20, 30]."""
    lst = cls([10, 20, 30])
    assert lst.set(1, 25) == 20
    assert lst.get(1) == 25


@pytest.mark.parametrize("cls", LIST_TYPES)
def test_scenario_pop_empty(cls: type) -> None:
    """Test popping an empty list."""
    lst = cls()
    assert lst.pop() is None
    assert len(lst) == 0
