"""Index-addressable tuple with in-place reversal and rotation.

A ``Tuple`` is a contiguous, growable container of heterogeneous values with
O(1) positional reads and writes. Besides the ``Sequence`` capability it offers
a family of reversal and rotation operations that work inside the existing
storage:

    - **reverse_interval**: two-pointer swap walking inward over ``[i, j]``
    - **rotate_interval_right_in_place / rotate_interval_left_in_place**:
      rotation of ``[i, j]`` by three reversals, O(j - i) time and O(1) extra
      space
    - **reverse / rotate_right / rotate_left**: the same on a clone

Every reversal or rotation keeps the multiset of elements and the size; only
the order changes. Bad indices and malformed ranges raise a ``SequenceFault``
subclass.

Examples:
    >>> t = Tuple(1, 2, 3, 4, 5)
    >>> list(t.rotate_right(2))
    [3, 4, 5, 1, 2]
    >>> list(t.rotate_interval_left_in_place(1, 3, 1))
    [1, 4, 2, 3, 5]
"""

import logging
from typing import Any, Generic, List

from pydantic import ValidationError

from funseq.core import config
from funseq.core.errors import InvalidIndexError, InvalidRangeError
from funseq.core.iterators import IndexedIterator
from funseq.core.protocol import Sequence
from funseq.core.types import T, Visitor, slot_count_adapter

__all__ = ["Tuple"]

logger = logging.getLogger(__name__)


def _fault(error: type, message: str) -> Exception:
    logger.error(message)
    return error(message)


class Tuple(Sequence[T], Generic[T]):
    """Fixed-growable ordered container of heterogeneous values.

    The elements live in a single list held by ``_items``; ``swap`` exchanges
    that handle between two tuples, so no element is copied.

    Args:
        *items: Initial elements, in order.
    """

    def __init__(self, *items: T) -> None:
        self._items: List[Any] = list(items)

    @classmethod
    def build(cls, n: int) -> "Tuple[T]":
        """Return a tuple with ``n`` slots, each ``None`` until set.

        Raises:
            InvalidRangeError: If ``n`` is not a non-negative int.
        """
        try:
            n = slot_count_adapter.validate_python(n, strict=True)
        except ValidationError as e:
            raise _fault(InvalidRangeError, f"Invalid slot count n = {n!r}") from e

        tuple_ = cls()
        tuple_._items = [None] * n
        return tuple_

    # --- Positional access ---
    def _check_index(self, i: int) -> None:
        if i < 0 or i >= len(self._items):
            raise _fault(
                InvalidIndexError,
                f"Invalid index {i} for Tuple of size {len(self._items)}",
            )

    def set(self, i: int, item: T) -> None:
        """Replace the element at position ``i``."""
        self._check_index(i)
        self._items[i] = item

    def nth(self, i: int) -> T:
        """Return the element at position ``i``."""
        self._check_index(i)
        return self._items[i]

    def __getitem__(self, i: int) -> T:
        return self.nth(i)

    def __setitem__(self, i: int, item: T) -> None:
        self.set(i, item)

    # --- Sequence capability ---
    def traverse(self, visitor: Visitor[T]) -> bool:
        for item in self._items:
            if not visitor(item):
                return False
        return True

    def append(self, item: T, *items: T) -> "Tuple[T]":
        self._items.append(item)
        self._items.extend(items)
        return self

    def size(self) -> int:
        return len(self._items)

    def swap(self, other: "Tuple[T]") -> "Tuple[T]":
        if not isinstance(other, Tuple):
            raise TypeError(
                f"Cannot swap Tuple with {type(other).__name__}; both must be Tuple."
            )
        self._items, other._items = other._items, self._items
        return self

    def create_iterator(self) -> IndexedIterator[T]:
        return IndexedIterator(self)

    def create(self, *items: T) -> "Tuple[T]":
        return Tuple(*items)

    def clone(self) -> "Tuple[T]":
        """Return a new tuple holding the same element references."""
        logger.debug(f"Cloning Tuple of size {len(self._items)}")
        return Tuple(*self._items)

    # --- Reversal ---
    def reverse_interval(self, i: int, j: int) -> "Tuple[T]":
        """Reverse in place the elements in the closed range ``[i, j]``.

        Raises:
            InvalidRangeError: If ``i`` or ``j`` is out of bounds or ``i > j``.
        """
        size = len(self._items)
        if i < 0 or i >= size:
            raise _fault(InvalidRangeError, f"Invalid value for i = {i} (size {size})")
        if j < 0 or j >= size:
            raise _fault(InvalidRangeError, f"Invalid value for j = {j} (size {size})")
        if i > j:
            raise _fault(InvalidRangeError, f"i = {i} is greater than j = {j}")

        items = self._items
        while i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1

        return self

    def reverse_in_place(self) -> "Tuple[T]":
        """Reverse the whole tuple in place. An empty tuple is left as is."""
        if not self._items:
            return self
        return self.reverse_interval(0, len(self._items) - 1)

    def reverse(self) -> "Tuple[T]":
        """Return a reversed copy of the tuple."""
        return self.clone().reverse_in_place()

    # --- Rotation ---
    def _validate_rotate_indexes(self, i: int, j: int, n: int) -> int:
        """Check the range ``[i, j]`` and return ``n`` normalized for it."""
        size = len(self._items)
        if i > j:
            raise _fault(InvalidRangeError, f"i = {i} is greater than j = {j}")

        if i < 0 or i >= size or j < 0 or j >= size:
            raise _fault(
                InvalidRangeError, f"Invalid i = {i} or j = {j} (size {size})"
            )

        if config.settings.rotation_modulus == "tuple":
            n = n % size
            span = j - i
            if n > span:
                raise _fault(
                    InvalidRangeError,
                    f"n = {n} greater than interval size = {span}",
                )
            return n

        return n % (j - i + 1)

    def rotate_interval_right_in_place(self, i: int, j: int, n: int) -> "Tuple[T]":
        """Rotate ``[i, j]`` in place so its first ``n`` elements move to its end.

        Reverses ``[i, i+n-1]``, then ``[i+n, j]``, then ``[i, j]``.

        Raises:
            InvalidRangeError: If the range is malformed, or ``n`` is rejected
                under the ``"tuple"`` rotation modulus.
        """
        n = self._validate_rotate_indexes(i, j, n)
        if n == 0:
            return self

        logger.debug(f"Rotating [{i}, {j}] right by {n}")
        self.reverse_interval(i, i + n - 1)
        self.reverse_interval(i + n, j)
        self.reverse_interval(i, j)

        return self

    def rotate_interval_left_in_place(self, i: int, j: int, n: int) -> "Tuple[T]":
        """Rotate ``[i, j]`` in place so its last ``n`` elements move to its front.

        Mirror of ``rotate_interval_right_in_place``, split at ``j - n + 1``.
        """
        n = self._validate_rotate_indexes(i, j, n)
        if n == 0:
            return self

        logger.debug(f"Rotating [{i}, {j}] left by {n}")
        self.reverse_interval(j - n + 1, j)
        self.reverse_interval(i, j - n)
        self.reverse_interval(i, j)

        return self

    def rotate_right_in_place(self, n: int) -> "Tuple[T]":
        """Rotate in place the whole tuple ``n`` positions to the right."""
        return self.rotate_interval_right_in_place(0, len(self._items) - 1, n)

    def rotate_left_in_place(self, n: int) -> "Tuple[T]":
        """Rotate in place the whole tuple ``n`` positions to the left."""
        return self.rotate_interval_left_in_place(0, len(self._items) - 1, n)

    def rotate_right(self, n: int) -> "Tuple[T]":
        """Return a copy of the tuple rotated ``n`` positions to the right."""
        return self.clone().rotate_right_in_place(n)

    def rotate_left(self, n: int) -> "Tuple[T]":
        """Return a copy of the tuple rotated ``n`` positions to the left."""
        return self.clone().rotate_left_in_place(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Tuple({', '.join(repr(item) for item in self._items)})"
