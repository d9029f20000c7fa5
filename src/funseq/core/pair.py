"""Immutable ordered pair returned by ``zip_seq``."""

from typing import Generic
from pydantic import BaseModel, ConfigDict, Field

from funseq.core.types import A, B

__all__ = ["Pair"]


class Pair(BaseModel, Generic[A, B]):
    """Two values in a fixed order."""

    item1: A = Field(..., description="Element taken from the first sequence.")
    item2: B = Field(..., description="Element taken from the second sequence.")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __repr__(self) -> str:
        return f"Pair({self.item1!r}, {self.item2!r})"
