"""Adapting a legacy enumeration interface to Python iteration."""
from typing import Generic, Iterable, Iterator, List, Protocol, TypeVar

from patternbook.core.exceptions import UnsupportedOperationError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Enumeration(Protocol[T_co]):
    """The legacy interface."""

    def has_more_elements(self) -> bool:
        ...

    def next_element(self) -> T_co:
        ...


class ListEnumeration(Generic[T]):
    """An enumeration over a list snapshot."""

    def __init__(self, items: Iterable[T]):
        self._items: List[T] = list(items)
        self._position = 0

    def has_more_elements(self) -> bool:
        return self._position < len(self._items)

    def next_element(self) -> T:
        if not self.has_more_elements():
            raise IndexError("Enumeration has no more elements")
        item = self._items[self._position]
        self._position += 1
        return item


class EnumerationIterator(Generic[T]):
    """Presents an Enumeration through the iterator protocol."""

    def __init__(self, enumeration: Enumeration[T]):
        self._enumeration = enumeration

    def __iter__(self) -> "EnumerationIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._enumeration.has_more_elements():
            raise StopIteration
        return self._enumeration.next_element()

    def remove(self) -> None:
        raise UnsupportedOperationError("remove", type(self._enumeration).__name__)


class IteratorEnumeration(Generic[T]):
    """Presents any iterable through the Enumeration interface."""

    _EXHAUSTED = object()

    def __init__(self, iterable: Iterable[T]):
        self._iterator: Iterator[T] = iter(iterable)
        self._lookahead = self._advance()

    def _advance(self):
        return next(self._iterator, self._EXHAUSTED)

    def has_more_elements(self) -> bool:
        return self._lookahead is not self._EXHAUSTED

    def next_element(self) -> T:
        if not self.has_more_elements():
            raise IndexError("Enumeration has no more elements")
        item = self._lookahead
        self._lookahead = self._advance()
        return item
