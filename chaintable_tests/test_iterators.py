import pytest

from chaintable.errors import IllegalState, NoSuchElement
from chaintable.table import HashTable


@pytest.mark.parametrize("view", ["entries", "keys", "values"])
def test_empty_table_iterator_exhausted(table, view):
    iterator = getattr(table, view)().iterator()

    assert not iterator.has_next()
    with pytest.raises(NoSuchElement):
        iterator.next()
    with pytest.raises(StopIteration):
        next(iterator)


def test_has_next_does_not_consume(filled_table):
    iterator = filled_table.keys().iterator()

    assert iterator.has_next()
    assert iterator.has_next()

    seen = []
    while iterator.has_next():
        seen.append(iterator.next())

    assert sorted(seen) == [0, 1, 2, 3, 4]
    with pytest.raises(NoSuchElement):
        iterator.next()


def test_for_loop_terminates(filled_table):
    assert sorted(key for key in filled_table.keys()) == [0, 1, 2, 3, 4]
    assert sorted(filled_table.values()) == [f"value-{i}" for i in range(5)]


def test_iterator_walks_chain_before_next_bucket(colliding_table):
    colliding_table.put(3, 30)
    iterator = colliding_table.entries().iterator()

    assert iterator.next() == (3, 30)
    assert [iterator.next().key for _ in range(5)] == [7, 17, 27, 37, 47]
    assert not iterator.has_next()


def test_each_iterator_is_fresh(filled_table):
    keys = filled_table.keys()
    first = keys.iterator()
    first.next()

    second = keys.iterator()

    assert first is not second
    assert len(list(second)) == 5


def test_iterator_sees_value_changes(filled_table):
    iterator = filled_table.values().iterator()
    filled_table.put(0, "changed")
    filled_table.put(1, "changed")
    filled_table.put(2, "changed")
    filled_table.put(3, "changed")
    filled_table.put(4, "changed")

    assert list(iterator) == ["changed"] * 5


def test_iterator_remove(filled_table):
    iterator = filled_table.keys().iterator()
    removed = iterator.next()

    iterator.remove()

    assert not filled_table.contains_key(removed)
    assert filled_table.size() == 4
    assert len(list(iterator)) == 4


def test_iterator_remove_every_element_in_chain(colliding_table):
    iterator = colliding_table.entries().iterator()
    while iterator.has_next():
        entry = iterator.next()
        if entry.key in (17, 37):
            iterator.remove()

    assert colliding_table.keys().to_list() == [7, 27, 47]
    assert colliding_table.size() == 3


def test_iterator_remove_all(filled_table):
    iterator = filled_table.values().iterator()
    while iterator.has_next():
        iterator.next()
        iterator.remove()

    assert filled_table.is_empty()
    assert list(filled_table.entries()) == []


def test_iterator_remove_requires_next(filled_table):
    iterator = filled_table.keys().iterator()

    with pytest.raises(IllegalState):
        iterator.remove()

    iterator.next()
    iterator.remove()
    with pytest.raises(IllegalState):
        iterator.remove()


def test_iterator_after_clear_is_exhausted(filled_table):
    filled_table.clear()

    iterator = filled_table.entries().iterator()

    assert not iterator.has_next()


def test_iteration_order_is_deterministic():
    table = HashTable(capacity=8)
    for word in ("alpha", "beta", "gamma", "delta", "epsilon"):
        table.put(word, len(word))

    assert table.keys().to_list() == table.keys().to_list()
    assert [e.key for e in table.entries()] == table.keys().to_list()
    assert [e.value for e in table.entries()] == table.values().to_list()
