"""Tests for fail-fast iteration (unionfind/iteration.py)"""

import pytest

from unionfind import (
    ConcurrentModificationError,
    FailFastIterator,
    HashUnionFindSet,
    identity,
)


@pytest.fixture
def union_find() -> HashUnionFindSet[int, int]:
    return HashUnionFindSet(identity, [1, 2, 3])


class TestFailFastIterator:
    def test_wraps_iterator(self):
        counter = [0]
        iterator = FailFastIterator(iter("abc"), lambda: counter[0])
        assert list(iterator) == ["a", "b", "c"]

    def test_detects_counter_change(self):
        counter = [0]
        iterator = FailFastIterator(iter("abc"), lambda: counter[0])
        assert next(iterator) == "a"
        counter[0] += 1
        with pytest.raises(ConcurrentModificationError):
            next(iterator)

    def test_is_its_own_iterator(self):
        iterator = FailFastIterator(iter(()), lambda: 0)
        assert iter(iterator) is iterator
        with pytest.raises(StopIteration):
            next(iterator)


class TestUnionFindIteration:
    def test_yields_every_element(self, union_find):
        assert set(union_find) == {1, 2, 3}

    def test_empty(self):
        assert list(HashUnionFindSet(identity)) == []

    def test_add_during_iteration(self, union_find):
        iterator = iter(union_find)
        next(iterator)
        union_find.add(4)
        with pytest.raises(ConcurrentModificationError):
            next(iterator)

    def test_remove_during_iteration(self, union_find):
        with pytest.raises(ConcurrentModificationError):
            for element in union_find:
                union_find.remove(element)

    def test_union_during_iteration(self, union_find):
        iterator = iter(union_find)
        next(iterator)
        union_find.union(1, 2)
        with pytest.raises(ConcurrentModificationError):
            next(iterator)

    def test_clear_during_iteration(self, union_find):
        iterator = iter(union_find)
        union_find.clear()
        with pytest.raises(ConcurrentModificationError):
            next(iterator)

    def test_compacting_find_during_iteration(self, union_find):
        """find moves elements around, so it invalidates iterators too."""
        union_find.union(1, 2)
        iterator = iter(union_find)
        next(iterator)
        union_find.find(2)
        with pytest.raises(ConcurrentModificationError):
            next(iterator)

    def test_plain_queries_during_iteration(self, union_find):
        union_find.union(1, 2)
        union_find.find(2)
        iterator = iter(union_find)
        next(iterator)

        union_find.find(1)
        union_find.connected(1, 2)
        union_find.element_set(3)
        union_find.sets()
        union_find.number_of_sets()
        assert len(list(iterator)) == 2

    def test_no_op_mutations_during_iteration(self, union_find):
        iterator = iter(union_find)
        next(iterator)
        union_find.add(1)
        union_find.remove(42)
        union_find.union(3, 3)
        assert len(list(iterator)) == 2

    def test_copy_is_not_watched(self, union_find):
        copied = union_find.copy()
        iterator = iter(copied)
        union_find.remove(1)
        assert set(iterator) == {1, 2, 3}
