import copy
import logging
import random

import pytest

from traversal_collections import ElementNotFoundError, SortedIntContainer


def test_starts_empty():
    container = SortedIntContainer()
    assert container.size() == 0
    assert len(container) == 0
    assert list(container) == []


def test_constructor_sorts_values():
    container = SortedIntContainer([5, -1, 3, 3, 0])
    assert list(container) == [-1, 0, 3, 3, 5]


def test_constructor_rejects_non_iterables():
    with pytest.raises(TypeError):
        SortedIntContainer(5)


def test_insert_keeps_order_after_every_call():
    rng = random.Random(1234)
    container = SortedIntContainer()
    for _ in range(200):
        container.insert(rng.randint(-50, 50))
        values = list(container)
        assert all(a <= b for a, b in zip(values, values[1:]))
    assert container.size() == 200


def test_insert_accepts_duplicates():
    container = SortedIntContainer()
    for value in [2, 1, 2, 2, 0]:
        container.insert(value)
    assert list(container) == [0, 1, 2, 2, 2]
    assert container.count(2) == 3


@pytest.mark.parametrize("value", [1.5, "1", None])
def test_insert_rejects_non_integers(value):
    container = SortedIntContainer([1])
    with pytest.raises(TypeError):
        container.insert(value)
    assert list(container) == [1]


def test_remove_drops_one_occurrence():
    container = SortedIntContainer([1, 2, 2, 3])
    container.remove(2)
    assert list(container) == [1, 2, 3]
    assert container.size() == 3


def test_remove_missing_value_leaves_container_unchanged():
    container = SortedIntContainer([1, 2, 3])
    with pytest.raises(ElementNotFoundError):
        container.remove(4)
    assert list(container) == [1, 2, 3]


def test_remove_missing_value_is_a_value_error():
    container = SortedIntContainer()
    with pytest.raises(ValueError):
        container.remove(0)


def test_discard_ignores_missing_values():
    container = SortedIntContainer([1, 3])
    container.discard(2)
    assert list(container) == [1, 3]
    container.discard(3)
    assert list(container) == [1]


def test_extend_and_clear():
    container = SortedIntContainer([5])
    container.extend([3, 9, 1])
    assert list(container) == [1, 3, 5, 9]
    container.extend(range(20, 0, -2))
    assert list(container) == sorted([1, 3, 5, 9, *range(20, 0, -2)])
    container.clear()
    assert container.size() == 0


def test_sequence_protocol():
    container = SortedIntContainer([4, 2, 8, 6])
    assert container[0] == 2
    assert container[-1] == 8
    assert list(reversed(container)) == [8, 6, 4, 2]
    assert 6 in container
    assert 5 not in container
    assert "6" not in container
    assert container.index(6) == 2
    with pytest.raises(ElementNotFoundError):
        container.index(5)
    with pytest.raises(IndexError):
        container[4]
    with pytest.raises(TypeError):
        container[1:3]


def test_equality_and_copy():
    container = SortedIntContainer([3, 1, 2])
    duplicate = container.copy()
    assert duplicate == container
    assert duplicate is not container
    duplicate.insert(0)
    assert duplicate != container
    assert copy.deepcopy(container) == container
    assert container != [1, 2, 3]


def test_repr_round_trips():
    assert repr(SortedIntContainer()) == "SortedIntContainer()"
    container = SortedIntContainer([2, 1])
    assert repr(container) == "SortedIntContainer([1, 2])"
    assert eval(repr(container)) == container


def test_unhashable():
    with pytest.raises(TypeError):
        hash(SortedIntContainer())


def test_mutations_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="traversal_collections")
    container = SortedIntContainer()
    container.insert(7)
    container.remove(7)
    messages = [record.getMessage() for record in caplog.records]
    assert "inserted 7" in messages
    assert "removed 7 at index 0" in messages


@pytest.mark.parametrize("value", [True, False])
def test_booleans_are_stored_as_ints(value):
    container = SortedIntContainer([value])
    container.insert(value)
    container.extend([value])
    assert all(type(element) is int for element in container)
    assert repr(container) == f"SortedIntContainer([{int(value)}, {int(value)}, {int(value)}])"


def test_count_of_non_integers_is_zero():
    container = SortedIntContainer([1, 1, 2])
    assert container.count("x") == 0
    assert container.count(1.0) == 0
    assert container.count(None) == 0
    assert container.count(1) == 2
    assert container.count(True) == 2
