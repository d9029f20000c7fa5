"""funseq: functional combinators over ordered containers."""

from funseq.logger.logger import logger
from funseq.core import (
    Sequence,
    SequentialIterator,
    SequenceFault,
    InvalidIndexError,
    InvalidRangeError,
    IteratorExhaustedError,
    Pair,
    SList,
    OrderedSet,
    Tuple,
)
from funseq.core.config import Settings, settings

__all__ = [
    "logger",
    "Sequence",
    "SequentialIterator",
    "SequenceFault",
    "InvalidIndexError",
    "InvalidRangeError",
    "IteratorExhaustedError",
    "Pair",
    "SList",
    "OrderedSet",
    "Tuple",
    "Settings",
    "settings",
]

__version__ = "0.1.0"
