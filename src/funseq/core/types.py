"""Reusable type definitions for the funseq package.

Type Aliases:
    Predicate: A callable mapping an item to a boolean.
    Transform: A callable mapping an item to a new value.
    Visitor: A traversal callback; returning False stops the traversal.
    Folder: A left-fold step ``(accumulator, item) -> accumulator``.
    SlotCount: A non-negative int, validated through pydantic.
"""

from typing import Annotated, Callable, TypeVar
import annotated_types as at
from pydantic import TypeAdapter

__all__ = [
    "T",
    "U",
    "A",
    "B",
    "Predicate",
    "Transform",
    "Visitor",
    "Folder",
    "SlotCount",
    "slot_count_adapter",
]

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")

Predicate = Callable[[T], bool]
Transform = Callable[[T], U]
Visitor = Callable[[T], bool]
Folder = Callable[[U, T], U]

# Number of slots of a pre-sized tuple
SlotCount = Annotated[int, at.Ge(0)]

slot_count_adapter = TypeAdapter(SlotCount)
