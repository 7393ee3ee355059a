"""Element type checks and float helpers."""
from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Sequence, TypeVar, Union

__all__: list[str] = [
    "Number",
    "N",
    "ensure_numeric",
    "to_float",
    "ieee_div",
    "ieee_log",
    "ieee_exp",
]

Number = Union[int, float]
N = TypeVar("N", bound=Real)


def ensure_numeric(values: Sequence, name: str = "values") -> None:
    """Raise TypeError unless every element is a real number.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    for i, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, Real):
            raise TypeError(
                f"{name}[{i}] must be a real number, got {type(v).__name__}"
            )


def to_float(x) -> float:
    """Convert to float, saturating to +-inf when ``x`` is out of float range."""
    try:
        return float(x)
    except OverflowError:
        # x itself cannot go through copysign, compare instead
        return math.inf if x > 0 else -math.inf


def ieee_div(num: float, den: float) -> float:
    """Divide like IEEE 754 floats: x/0 is +-inf and 0/0 is nan."""
    num, den = to_float(num), to_float(den)
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        # sign of a zero denominator matters: 1/-0.0 is -inf
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def ieee_log(x) -> float:
    """Natural log with ln(0) = -inf and ln(x < 0) = nan instead of raising."""
    if isinstance(x, Integral) and not isinstance(x, bool) and x > 0:
        # math.log takes ints of any size
        return math.log(x)
    x = to_float(x)
    if x == 0.0:
        return -math.inf
    if x < 0.0 or math.isnan(x):
        return math.nan
    return math.log(x)


def ieee_exp(x: float) -> float:
    """exp that returns inf on overflow instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf
