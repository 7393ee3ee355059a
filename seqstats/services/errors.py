"""Error taxonomy shared by the sequence toolkit.

Every error is a ``ValueError`` so callers can handle bad input the same way
they handle any other rejected value. The ``result`` attribute holds the
zero/default value the failed call stands in for.
"""
from __future__ import annotations

from typing import Any

__all__: list[str] = [
    "SeqStatsError",
    "EmptyError",
    "SizeMismatchError",
    "TooSmallError",
]


class SeqStatsError(ValueError):
    """Base class for toolkit failures."""

    default_message = "invalid input"

    def __init__(self, message: str | None = None, *, result: Any = 0):
        super().__init__(message or self.default_message)
        self.result = result


class EmptyError(SeqStatsError):
    """The sequence has no elements but the computation needs at least one."""

    default_message = "empty sequence"


class SizeMismatchError(SeqStatsError):
    """Two sequences that must pair up element by element differ in length."""

    default_message = "different size"

    def __init__(self, left: int, right: int, *, result: Any = 0):
        super().__init__(f"different size: {left} != {right}", result=result)
        self.left = left
        self.right = right


class TooSmallError(SeqStatsError):
    """The population is smaller than the requested sample."""

    default_message = "population too small"

    def __init__(self, size: int, k: int):
        super().__init__(
            f"cannot draw {k} elements from a population of {size}", result=[]
        )
        self.size = size
        self.k = k
