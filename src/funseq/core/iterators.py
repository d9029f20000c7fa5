"""Cursor shared by the index-addressable containers."""

import logging
from typing import Generic, Protocol

from funseq.core.errors import IteratorExhaustedError
from funseq.core.protocol import SequentialIterator
from funseq.core.types import T

__all__ = ["Indexable", "IndexedIterator"]

logger = logging.getLogger(__name__)


class Indexable(Protocol[T]):
    """Anything reporting its size and returning the element at a position."""

    def size(self) -> int: ...

    def __getitem__(self, pos: int) -> T: ...


class IndexedIterator(SequentialIterator[T], Generic[T]):
    """Forward cursor over any container supporting ``size()`` and ``[pos]``.

    The cursor keeps a reference to the container, not to its storage, so it
    follows the container's contents after a ``swap``.
    """

    def __init__(self, container: Indexable[T]) -> None:
        self._container = container
        self._pos = 0

    def reset_first(self) -> "IndexedIterator[T]":
        self._pos = 0
        return self

    def has_curr(self) -> bool:
        return self._pos < self._container.size()

    def get_curr(self) -> T:
        self._check_curr("get_curr")
        return self._container[self._pos]

    def next(self) -> "IndexedIterator[T]":
        self._check_curr("next")
        self._pos += 1
        return self

    def _check_curr(self, operation: str) -> None:
        if not self.has_curr():
            message = (
                f"{operation} called past the end of a "
                f"{type(self._container).__name__} of size {self._container.size()}"
            )
            logger.error(message)
            raise IteratorExhaustedError(message)

    def __repr__(self) -> str:
        return f"IndexedIterator(container={type(self._container).__name__}, pos={self._pos})"
