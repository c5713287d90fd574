import pytest

from chained_hash.chained_hash_set import ChainedHashSet
from chained_hash.errors import ConcurrentModification, ElementNotFound, TraversalExhausted


def test_duplicates_are_ignored(letters_set):
    assert letters_set.size() == 3
    assert sorted(letters_set) == ["a", "b", "c"]
    for item in ["a", "b", "c"]:
        assert letters_set.contains(item)
    assert not letters_set.contains("d")


def test_remove_twice_raises_element_not_found(letters_set):
    letters_set.remove("a")

    assert letters_set.size() == 2
    assert "a" not in letters_set
    with pytest.raises(ElementNotFound):
        letters_set.remove("a")
    assert letters_set.size() == 2


def test_element_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        ChainedHashSet().remove("ghost")


def test_add_existing_does_not_restart_traversal(letters_set):
    it = iter(letters_set)
    letters_set.add("b")

    assert len(list(it)) == 3


def test_add_new_element_invalidates_traversal(letters_set):
    it = iter(letters_set)
    letters_set.add("z")

    with pytest.raises(ConcurrentModification):
        next(it)


def test_iteration_yields_elements_only():
    s = ChainedHashSet()
    for i in range(300):
        s.add(i)

    items = list(s)
    assert len(items) == 300
    assert set(items) == set(range(300))


def test_iterator_exhaustion():
    s = ChainedHashSet()
    s.add(None)
    it = iter(s)

    assert it.has_next()
    assert next(it) is None
    assert not it.has_next()
    with pytest.raises(TraversalExhausted):
        next(it)


def test_custom_hash_function():
    s = ChainedHashSet(hash_function=lambda item: 0)
    for word in ["x", "y", "z", "x"]:
        s.add(word)

    assert len(s) == 3
    assert repr(s) == "ChainedHashSet({'x', 'y', 'z'})"


def test_finished_set_traversal_ignores_later_adds(letters_set):
    it = iter(letters_set)
    list(it)
    letters_set.add("z")

    assert not it.has_next()
    with pytest.raises(TraversalExhausted):
        next(it)
