"""Extrema and index functions."""
from __future__ import annotations

from typing import Sequence

from seqstats.services.errors import EmptyError
from seqstats.services.types import N, ensure_numeric

__all__: list[str] = [
    "arg_min",
    "arg_max",
    "minimum",
    "maximum",
]


def arg_min(values: Sequence[N]) -> int:
    """
    Return the index of the smallest element.
    The first occurrence wins when the minimum appears more than once.
    Raises EmptyError if input is empty.
    """
    if len(values) == 0:
        raise EmptyError(result=0)
    ensure_numeric(values)
    am, m = 0, values[0]
    for i in range(1, len(values)):
        # strict comparison keeps the earliest index on ties
        if values[i] < m:
            am, m = i, values[i]
    return am


def arg_max(values: Sequence[N]) -> int:
    """
    Return the index of the largest element.
    The first occurrence wins when the maximum appears more than once.
    Raises EmptyError if input is empty.
    """
    if len(values) == 0:
        raise EmptyError(result=0)
    ensure_numeric(values)
    am, m = 0, values[0]
    for i in range(1, len(values)):
        if values[i] > m:
            am, m = i, values[i]
    return am


def minimum(values: Sequence[N]) -> N:
    """Return the smallest element, chosen by arg_min."""
    return values[arg_min(values)]


def maximum(values: Sequence[N]) -> N:
    """Return the largest element, chosen by arg_max."""
    return values[arg_max(values)]
