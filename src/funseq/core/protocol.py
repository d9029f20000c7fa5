"""Capability contracts every container must satisfy to work with the combinators."""

from abc import ABC, abstractmethod
from typing import Generic, Iterator

from funseq.core.types import T, Visitor

__all__ = ["SequentialIterator", "Sequence"]


class SequentialIterator(ABC, Generic[T]):
    """Forward-only cursor over a sequence.

    After ``reset_first`` the cursor is on the first element, if any.
    ``get_curr`` and ``next`` are defined only while ``has_curr`` is True.
    """

    @abstractmethod
    def reset_first(self) -> "SequentialIterator[T]":
        """Reposition the cursor on the first element."""
        pass

    @abstractmethod
    def has_curr(self) -> bool:
        """Return True if the cursor is positioned on an element."""
        pass

    @abstractmethod
    def get_curr(self) -> T:
        """Return the element under the cursor.

        Raises:
            IteratorExhaustedError: If the cursor is past the last element.
        """
        pass

    @abstractmethod
    def next(self) -> "SequentialIterator[T]":
        """Advance the cursor exactly one position.

        Raises:
            IteratorExhaustedError: If the cursor is past the last element.
        """
        pass


class Sequence(ABC, Generic[T]):
    """Abstract base class for ordered, traversable, appendable containers."""

    @abstractmethod
    def traverse(self, visitor: Visitor[T]) -> bool:
        """Visit the elements in order.

        Args:
            visitor: Called with each element; returning False stops the walk.

        Returns:
            True if every element was visited, False if the visitor stopped early.
        """
        pass

    @abstractmethod
    def append(self, item: T, *items: T) -> "Sequence[T]":
        """Append one or more items, preserving the current order."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""
        pass

    @abstractmethod
    def swap(self, other: "Sequence[T]") -> "Sequence[T]":
        """Exchange contents with another container of the same type in O(1)."""
        pass

    @abstractmethod
    def create_iterator(self) -> SequentialIterator[T]:
        """Return a new cursor positioned on the first element."""
        pass

    @abstractmethod
    def create(self, *items: T) -> "Sequence[T]":
        """Return a new container of the same concrete type holding ``items``."""
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        it = self.create_iterator()
        while it.has_curr():
            yield it.get_curr()
            it.next()
