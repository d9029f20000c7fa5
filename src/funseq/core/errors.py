"""Fault types raised on programming errors.

These signal misuse of the containers (bad index, malformed range, reading an
exhausted cursor). They are not meant to be caught as part of normal control
flow; absence of a value is reported by ordinary return values instead
(``None`` from ``find``/``nth``, ``-1`` from ``position``).
"""

__all__ = [
    "SequenceFault",
    "InvalidIndexError",
    "InvalidRangeError",
    "IteratorExhaustedError",
]


class SequenceFault(Exception):
    """Base class for unrecoverable misuse of a sequence."""


class InvalidIndexError(SequenceFault, IndexError):
    """A positional index outside ``[0, size)``."""


class InvalidRangeError(SequenceFault, ValueError):
    """A malformed ``[i, j]`` range, rotation count or slot count."""


class IteratorExhaustedError(SequenceFault):
    """``get_curr`` or ``next`` called on a cursor past the last element."""
