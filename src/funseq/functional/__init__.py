"""Functional primitives for funseq.

This module provides the combinators (map, filter, fold, zip and friends)
that operate on any container implementing the ``Sequence`` capability.
Utilities are stateless and never mutate their inputs, so they can be
composed into pipelines.
"""

from funseq.functional.combinators import (
    for_each,
    all_of,
    exist,
    map_seq,
    map_if,
    filter_seq,
    zip_seq,
    unzip_seq,
    split,
    find,
    take,
    drop,
    foldl,
    nth,
    position,
    tzip,
    tunzip,
)

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
