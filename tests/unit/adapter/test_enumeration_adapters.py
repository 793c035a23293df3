"""Tests for adapting enumerations and iterators to each other."""
import pytest

from patternbook.adapter import EnumerationIterator, IteratorEnumeration, ListEnumeration
from patternbook.core.exceptions import UnsupportedOperationError


class TestEnumerationIterator:
    def test_iterates_enumeration(self):
        assert list(EnumerationIterator(ListEnumeration([1, 2, 3]))) == [1, 2, 3]

    def test_stays_exhausted(self):
        iterator = EnumerationIterator(ListEnumeration(["a"]))
        assert next(iterator) == "a"
        with pytest.raises(StopIteration):
            next(iterator)
        with pytest.raises(StopIteration):
            next(iterator)

    def test_remove_is_unsupported(self):
        iterator = EnumerationIterator(ListEnumeration([1]))
        with pytest.raises(UnsupportedOperationError) as exc_info:
            iterator.remove()
        assert exc_info.value.operation == "remove"
        assert exc_info.value.adaptee == "ListEnumeration"


class TestIteratorEnumeration:
    def test_walks_any_iterable(self):
        enumeration = IteratorEnumeration(x * 2 for x in range(3))
        items = []
        while enumeration.has_more_elements():
            items.append(enumeration.next_element())
        assert items == [0, 2, 4]

    def test_empty(self):
        enumeration = IteratorEnumeration([])
        assert not enumeration.has_more_elements()
        with pytest.raises(IndexError):
            enumeration.next_element()

    def test_handles_none_items(self):
        enumeration = IteratorEnumeration([None])
        assert enumeration.has_more_elements()
        assert enumeration.next_element() is None
        assert not enumeration.has_more_elements()

    def test_round_trip_through_both_adapters(self):
        assert list(EnumerationIterator(IteratorEnumeration("abc"))) == ["a", "b", "c"]


class TestListEnumeration:
    def test_exhausted_raises(self):
        enumeration = ListEnumeration([])
        with pytest.raises(IndexError):
            enumeration.next_element()
