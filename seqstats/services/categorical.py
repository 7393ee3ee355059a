"""Frequency-based selection."""
from __future__ import annotations

from collections import Counter
from typing import Hashable, Sequence, TypeVar

from seqstats.services.errors import EmptyError

__all__: list[str] = [
    "mode",
]

H = TypeVar("H", bound=Hashable)


def mode(values: Sequence[H]) -> H:
    """
    Return the most common element.

    Among equally common elements the one that appears first in ``values``
    wins: Counter keeps first-seen insertion order and most_common(1)
    returns the first entry holding the highest count.
    Raises EmptyError if input is empty.
    """
    if len(values) == 0:
        raise EmptyError(result=None)
    freq = Counter(values)
    value, _ = freq.most_common(1)[0]
    return value
