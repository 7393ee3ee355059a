"""Aggregate statistics over numeric sequences."""
from __future__ import annotations

import math
from typing import Sequence

from seqstats.services.errors import EmptyError
from seqstats.services.types import (
    N, ensure_numeric, ieee_div, ieee_exp, ieee_log, to_float)

__all__: list[str] = [
    "total",
    "product",
    "mean",
    "geo_mean",
    "harmonic_mean",
    "median",
    "var",
    "std",
]


def total(values: Sequence[N]) -> N:
    """Sum of values. An empty sequence sums to 0."""
    ensure_numeric(values)
    s = 0
    for v in values:
        s += v
    return s


def product(values: Sequence[N]) -> N:
    """Product of values. An empty sequence multiplies to 1."""
    ensure_numeric(values)
    p = 1
    for v in values:
        p *= v
    return p


def mean(values: Sequence[N]) -> float:
    """
    Arithmetic mean, always a float.
    Raises EmptyError if input is empty.
    """
    if len(values) == 0:
        raise EmptyError(result=0.0)
    return to_float(total(values)) / len(values)


def geo_mean(values: Sequence[N]) -> float:
    """
    Geometric mean: exp of the mean of the natural logs.

    Zero or negative elements are not rejected; they follow float semantics
    (ln 0 is -inf, ln of a negative is nan) and propagate into the result.
    Raises EmptyError if input is empty.
    """
    if len(values) == 0:
        raise EmptyError(result=0.0)
    ensure_numeric(values)
    s = 0.0
    for v in values:
        s += ieee_log(v)
    s /= len(values)
    return ieee_exp(s)


def harmonic_mean(values: Sequence[N]) -> float:
    """
    Harmonic mean: n / sum(1/v).

    A zero element makes its reciprocal inf instead of raising.
    Raises EmptyError if input is empty.
    """
    if len(values) == 0:
        raise EmptyError(result=0.0)
    ensure_numeric(values)
    s = 0.0
    for v in values:
        s += ieee_div(1.0, v)
    return ieee_div(len(values), s)


def median(values: Sequence[N]) -> float:
    """
    Middle value of the sorted sequence, or the mean of the two middle values
    for an even count. Sorts a copy; the caller's sequence is left untouched.
    Raises EmptyError if input is empty.
    """
    if len(values) == 0:
        raise EmptyError(result=0.0)
    ensure_numeric(values)
    vs = sorted(values)
    i = len(vs) // 2
    if len(vs) % 2 == 1:
        return to_float(vs[i])
    return (to_float(vs[i - 1]) + to_float(vs[i])) / 2


def var(values: Sequence[N]) -> float:
    """
    Population variance (divides by n, not n - 1).
    Raises EmptyError if input is empty.
    """
    m = mean(values)
    td = 0.0
    for v in values:
        d = m - to_float(v)
        td += d * d
    return td / len(values)


def std(values: Sequence[N]) -> float:
    """Population standard deviation."""
    return math.sqrt(var(values))
