"""List-backed sequence used to build every combinator result."""

import logging
from typing import Generic, List, Optional

from funseq.core.errors import InvalidIndexError
from funseq.core.iterators import IndexedIterator
from funseq.core.protocol import Sequence
from funseq.core.types import T, Visitor

__all__ = ["SList"]

logger = logging.getLogger(__name__)


class SList(Sequence[T], Generic[T]):
    """Ordered, appendable container over a Python list.

    Appends are amortized O(1). ``swap`` exchanges the backing lists of two
    ``SList`` instances without copying elements.

    Examples:
        >>> lst = SList(1, 2, 3)
        >>> lst.append(4, 5).size()
        5
        >>> lst.first()
        1
    """

    def __init__(self, *items: T) -> None:
        self._items: List[T] = list(items)

    def traverse(self, visitor: Visitor[T]) -> bool:
        for item in self._items:
            if not visitor(item):
                return False
        return True

    def append(self, item: T, *items: T) -> "SList[T]":
        self._items.append(item)
        self._items.extend(items)
        return self

    def size(self) -> int:
        return len(self._items)

    def swap(self, other: "SList[T]") -> "SList[T]":
        if not isinstance(other, SList):
            raise TypeError(
                f"Cannot swap SList with {type(other).__name__}; both must be SList."
            )
        self._items, other._items = other._items, self._items
        return self

    def create_iterator(self) -> IndexedIterator[T]:
        return IndexedIterator(self)

    def create(self, *items: T) -> "SList[T]":
        return SList(*items)

    def first(self) -> Optional[T]:
        """Return the first element, or None if the list is empty."""
        if not self._items:
            return None
        return self._items[0]

    def nth(self, i: int) -> T:
        """Return the element at position ``i``.

        Raises:
            InvalidIndexError: If ``i`` is outside ``[0, size)``.
        """
        if i < 0 or i >= len(self._items):
            message = f"Invalid index {i} for SList of size {len(self._items)}"
            logger.error(message)
            raise InvalidIndexError(message)
        return self._items[i]

    def __getitem__(self, i: int) -> T:
        return self.nth(i)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"SList({', '.join(repr(item) for item in self._items)})"
