"""Vector arithmetic: dot product, Euclidean norm, cosine similarity."""
from __future__ import annotations

import math
from numbers import Integral
from typing import Sequence

from seqstats.services.errors import SizeMismatchError
from seqstats.services.types import (
    N, Number, ensure_numeric, ieee_div, ieee_exp, to_float)

__all__: list[str] = [
    "dot",
    "magnitude",
    "cosine_sim",
]


def dot(a: Sequence[N], b: Sequence[Number]) -> N:
    """
    Dot product of two equally sized sequences: sum of a[i] * b[i].
    Raises SizeMismatchError if the lengths differ.
    """
    if len(a) != len(b):
        raise SizeMismatchError(len(a), len(b), result=0)
    ensure_numeric(a, "a")
    ensure_numeric(b, "b")
    t = 0
    for x, y in zip(a, b):
        t += x * y
    return t


def magnitude(values: Sequence[N]) -> float:
    """Euclidean norm. The empty vector has magnitude 0.0."""
    ensure_numeric(values)
    t = 0
    for v in values:
        t += v * v
    f = to_float(t)
    if math.isinf(f) and isinstance(t, Integral):
        # sum of squares of big ints overflows float, the root may not
        return ieee_exp(math.log(t) / 2)
    return math.sqrt(f)


def cosine_sim(a: Sequence[N], b: Sequence[N]) -> float:
    """
    Cosine similarity: dot(a, b) / (|a| * |b|).

    A zero-magnitude operand is not trapped: the division follows float
    semantics and yields nan (or inf).
    Raises SizeMismatchError if the lengths differ.
    """
    if len(a) != len(b):
        raise SizeMismatchError(len(a), len(b), result=0.0)
    d = dot(a, b)
    return ieee_div(d, magnitude(a) * magnitude(b))
