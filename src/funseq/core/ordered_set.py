"""Sorted, duplicate-free sequence."""

import logging
from bisect import bisect_left
from typing import Any, Callable, Generic, List, Optional

from funseq.core.errors import InvalidIndexError
from funseq.core.iterators import IndexedIterator
from funseq.core.protocol import Sequence
from funseq.core.types import T, Visitor

__all__ = ["OrderedSet"]

logger = logging.getLogger(__name__)


class OrderedSet(Sequence[T], Generic[T]):
    """Container keeping its elements sorted and unique.

    Elements are ordered by ``key(item)`` (the item itself when no key is
    given). Two items are the same element when their keys compare equal.
    Iteration visits elements in ascending key order, so the combinators see
    an ordered set exactly like any other sequence.

    Args:
        *items: Initial elements, in any order.
        key: Optional callable returning the sort key of an element.
    """

    def __init__(self, *items: T, key: Optional[Callable[[T], Any]] = None) -> None:
        self._key = key
        self._items: List[T] = []
        for item in items:
            self._insert(item)

    def _key_of(self, item: T) -> Any:
        return item if self._key is None else self._key(item)

    def _locate(self, item: T) -> int:
        return bisect_left(self._items, self._key_of(item), key=self._key_of)

    def _insert(self, item: T) -> bool:
        pos = self._locate(item)
        if pos < len(self._items) and self._key_of(self._items[pos]) == self._key_of(
            item
        ):
            return False
        self._items.insert(pos, item)
        return True

    def traverse(self, visitor: Visitor[T]) -> bool:
        for item in self._items:
            if not visitor(item):
                return False
        return True

    def append(self, item: T, *items: T) -> "OrderedSet[T]":
        """Insert items at their sorted positions; already present items are ignored."""
        self._insert(item)
        for other in items:
            self._insert(other)
        return self

    def size(self) -> int:
        return len(self._items)

    def swap(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        if not isinstance(other, OrderedSet):
            raise TypeError(
                f"Cannot swap OrderedSet with {type(other).__name__}; both must be OrderedSet."
            )
        self._items, other._items = other._items, self._items
        self._key, other._key = other._key, self._key
        return self

    def create_iterator(self) -> IndexedIterator[T]:
        return IndexedIterator(self)

    def create(self, *items: T) -> "OrderedSet[T]":
        return OrderedSet(*items, key=self._key)

    def contains(self, item: T) -> bool:
        pos = self._locate(item)
        return pos < len(self._items) and self._key_of(
            self._items[pos]
        ) == self._key_of(item)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __getitem__(self, i: int) -> T:
        if i < 0 or i >= len(self._items):
            message = f"Invalid index {i} for OrderedSet of size {len(self._items)}"
            logger.error(message)
            raise InvalidIndexError(message)
        return self._items[i]

    def __repr__(self) -> str:
        return f"OrderedSet(size={len(self._items)})"
