"""Higher-order combinators over the ``Sequence`` capability.

Every function in this module talks to its input only through ``traverse`` and
``create_iterator``, so it accepts any container satisfying the capability
(``SList``, ``OrderedSet``, ``Tuple`` or a caller's own implementation).
Results are freshly built ``SList`` instances (or ``Tuple`` for ``tunzip``)
that never share storage with the inputs. All functions are eager and run in a
single pass unless noted.

The module provides:
    - **Traversal**: ``for_each``, ``all_of``, ``exist``
    - **Transformation**: ``map_seq``, ``map_if``, ``filter_seq``, ``split``
    - **Zipping**: ``zip_seq``, ``unzip_seq``, ``tzip``, ``tunzip``
    - **Slicing**: ``take``, ``drop``
    - **Lookup**: ``find``, ``nth``, ``position``
    - **Reduction**: ``foldl``

Note:
    Lookups report absence with ordinary values (``None`` from ``find`` and
    ``nth``, ``-1`` from ``position``). Misuse of a container, such as reading
    an exhausted cursor, raises a ``SequenceFault`` instead.

Examples:
    >>> from funseq.core import SList
    >>> from funseq.functional.combinators import map_seq, foldl
    >>>
    >>> numbers = SList(1, 2, 3, 4)
    >>> list(map_seq(numbers, lambda x: x * 10))
    [10, 20, 30, 40]
    >>> foldl(numbers, 0, lambda acc, x: acc + x)
    10
"""

import logging
import typing as tp

from funseq.core.pair import Pair
from funseq.core.protocol import Sequence
from funseq.core.slist import SList
from funseq.core.tuple import Tuple
from funseq.core.types import A, B, T, U, Folder, Predicate, Transform

__all__ = [
    "for_each",
    "all_of",
    "exist",
    "map_seq",
    "map_if",
    "filter_seq",
    "zip_seq",
    "unzip_seq",
    "split",
    "find",
    "take",
    "drop",
    "foldl",
    "nth",
    "position",
    "tzip",
    "tunzip",
]

logger = logging.getLogger(__name__)


def for_each(seq: Sequence[T], operation: tp.Callable[[T], tp.Any]) -> Sequence[T]:
    """Call ``operation`` on every item of ``seq`` in order.

    Returns:
        ``seq`` itself, for chaining.
    """

    def visit(item: T) -> bool:
        operation(item)
        return True

    seq.traverse(visit)
    return seq


def all_of(seq: Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if every item satisfies ``predicate``.

    True for an empty sequence. Stops at the first item failing the predicate.
    """
    return seq.traverse(predicate)


def exist(seq: Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if at least one item satisfies ``predicate``.

    Stops at the first matching item.
    """
    return not all_of(seq, lambda item: not predicate(item))


def map_seq(seq: Sequence[T], transformation: Transform[T, U]) -> SList[U]:
    """Return a new list with ``transformation`` applied to every item."""
    ret: SList[U] = SList()
    for_each(seq, lambda item: ret.append(transformation(item)))
    return ret


def map_if(
    seq: Sequence[T],
    transformation: Transform[T, U],
    predicate: Predicate[T],
) -> SList[U]:
    """Return a new list with ``transformation`` applied to the items satisfying ``predicate``.

    Items failing the predicate are left out; relative order is kept.
    """
    ret: SList[U] = SList()

    def visit(item: T) -> None:
        if predicate(item):
            ret.append(transformation(item))

    for_each(seq, visit)
    return ret


def filter_seq(seq: Sequence[T], predicate: Predicate[T]) -> SList[T]:
    """Return a new list with the items satisfying ``predicate``, in order."""
    ret: SList[T] = SList()

    def visit(item: T) -> None:
        if predicate(item):
            ret.append(item)

    for_each(seq, visit)
    return ret


def zip_seq(s1: Sequence[A], s2: Sequence[B]) -> SList[Pair[A, B]]:
    """Zip two sequences into a list of pairs.

    The result is truncated to the shorter sequence; trailing items of the
    longer one are dropped.
    """
    ret: SList[Pair[A, B]] = SList()

    it1, it2 = s1.create_iterator(), s2.create_iterator()
    while it1.has_curr() and it2.has_curr():
        ret.append(Pair(item1=it1.get_curr(), item2=it2.get_curr()))
        it1.next()
        it2.next()

    return ret


def unzip_seq(seq: Sequence[Pair[A, B]]) -> tp.Tuple[SList[A], SList[B]]:
    """Split a sequence of pairs into the list of first and the list of second items."""
    l1: SList[A] = SList()
    l2: SList[B] = SList()

    it = seq.create_iterator()
    while it.has_curr():
        pair = it.get_curr()
        l1.append(pair.item1)
        l2.append(pair.item2)
        it.next()

    return l1, l2


def split(seq: Sequence[T], predicate: Predicate[T]) -> tp.Tuple[SList[T], SList[T]]:
    """Partition ``seq`` by ``predicate``.

    Returns:
        Tuple of (items satisfying ``predicate``, the remaining items), both in
        their original relative order.
    """
    matching: SList[T] = SList()
    rest: SList[T] = SList()

    def visit(item: T) -> None:
        if predicate(item):
            matching.append(item)
        else:
            rest.append(item)

    for_each(seq, visit)
    return matching, rest


def find(seq: Sequence[T], predicate: Predicate[T]) -> tp.Optional[T]:
    """Return the first item satisfying ``predicate``, or None if there is none."""
    it = seq.create_iterator()
    while it.has_curr():
        item = it.get_curr()
        if predicate(item):
            return item
        it.next()
    return None


def take(seq: Sequence[T], n: int) -> SList[T]:
    """Return the first ``min(n, size)`` items. A negative ``n`` takes nothing."""
    ret: SList[T] = SList()

    it = seq.create_iterator()
    while it.has_curr() and n > 0:
        ret.append(it.get_curr())
        n -= 1
        it.next()

    return ret


def drop(seq: Sequence[T], n: int) -> SList[T]:
    """Return the items following the first ``n``. A negative ``n`` skips nothing."""
    ret: SList[T] = SList()

    skipped = 0
    it = seq.create_iterator()
    while it.has_curr():
        if skipped < n:
            skipped += 1
        else:
            ret.append(it.get_curr())
        it.next()

    return ret


def foldl(seq: Sequence[T], init: U, f: Folder[U, T]) -> U:
    """Left fold: ``f(...f(f(init, e0), e1)..., eN)``.

    The accumulation follows iteration order strictly; ``f`` need not be
    associative.
    """
    acc = init

    def visit(item: T) -> None:
        nonlocal acc
        acc = f(acc, item)

    for_each(seq, visit)
    return acc


def nth(seq: Sequence[T], n: int) -> tp.Optional[T]:
    """Return the item at 0-based position ``n``, or None if ``n`` is out of range."""
    if n < 0 or n >= seq.size():
        return None

    it = seq.create_iterator()
    while it.has_curr():
        if n == 0:
            return it.get_curr()
        n -= 1
        it.next()

    return None


def position(seq: Sequence[T], predicate: Predicate[T]) -> int:
    """Return the 0-based position of the first item satisfying ``predicate``, or -1."""
    pos = 0
    it = seq.create_iterator()
    while it.has_curr():
        if predicate(it.get_curr()):
            return pos
        pos += 1
        it.next()

    return -1


def tzip(seq: Sequence[tp.Any], *seqs: Sequence[tp.Any]) -> SList[Tuple[tp.Any]]:
    """Zip several sequences into a list of tuples.

    One tuple of size ``1 + len(seqs)`` is built per item of ``seq``, so the
    result always has ``seq.size()`` tuples. The remaining sequences are then
    folded in from left to right, each one zipped against the tuples built so
    far. When one of them is shorter than ``seq``, the trailing tuples keep
    ``None`` in its slot.

    Args:
        seq: Sequence providing slot 0 and the number of tuples.
        *seqs: Sequences providing slots 1, 2, ... in order.

    Returns:
        List of tuples, one per item of ``seq``.
    """
    tuple_size = len(seqs) + 1
    ret: SList[Tuple[tp.Any]] = SList()

    it = seq.create_iterator()
    while it.has_curr():
        tuple_ = Tuple.build(tuple_size)
        tuple_.set(0, it.get_curr())
        ret.append(tuple_)
        it.next()

    for slot, other in enumerate(seqs, start=1):
        for_each(zip_seq(ret, other), lambda pair: pair.item1.set(slot, pair.item2))

    logger.debug(f"tzip built {ret.size()} tuples of size {tuple_size}")
    return ret


def tunzip(tuples: Sequence[Tuple[tp.Any]]) -> Tuple[SList[tp.Any]]:
    """Unzip a sequence of tuples into a tuple of lists.

    The number of lists is taken from the first tuple; every tuple is assumed
    to have that size. An empty input gives an empty tuple.
    """
    it = tuples.create_iterator()
    if not it.has_curr():
        return Tuple()

    tuple_size = it.get_curr().size()
    result: Tuple[SList[tp.Any]] = Tuple.build(tuple_size)
    for i in range(tuple_size):
        result.set(i, SList())

    while it.has_curr():
        tuple_ = it.get_curr()
        for i in range(tuple_.size()):
            result.nth(i).append(tuple_.nth(i))
        it.next()

    logger.debug(f"tunzip built {tuple_size} lists")
    return result
