"""Containers and capability contracts."""

from funseq.core.errors import (
    SequenceFault,
    InvalidIndexError,
    InvalidRangeError,
    IteratorExhaustedError,
)
from funseq.core.protocol import SequentialIterator, Sequence
from funseq.core.iterators import IndexedIterator
from funseq.core.pair import Pair
from funseq.core.slist import SList
from funseq.core.ordered_set import OrderedSet
from funseq.core.tuple import Tuple

__all__ = [
    "SequenceFault",
    "InvalidIndexError",
    "InvalidRangeError",
    "IteratorExhaustedError",
    "SequentialIterator",
    "Sequence",
    "IndexedIterator",
    "Pair",
    "SList",
    "OrderedSet",
    "Tuple",
]
