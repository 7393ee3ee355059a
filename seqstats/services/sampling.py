"""Random sampling and in-place shuffling."""
from __future__ import annotations

import logging
import random
from typing import MutableSequence, Optional, Sequence, TypeVar

from seqstats.services.errors import TooSmallError

__all__: list[str] = [
    "sample",
    "shuffle",
]

T = TypeVar("T")

logger = logging.getLogger(__name__)


def sample(
    values: Sequence[T], k: int, rng: Optional[random.Random] = None
) -> list[T]:
    """
    Draw ``k`` elements without replacement.

    The indices of ``values`` are permuted at random and the first ``k`` are
    taken, so the result follows permutation order, not source order. The
    source sequence is not modified. Pass ``rng`` for reproducible draws.
    Raises TooSmallError if ``k`` exceeds the population size.
    """
    if k < 0:
        raise ValueError(f"sample size must be non-negative, got {k}")
    if k > len(values):
        raise TooSmallError(len(values), k)
    rng = rng or random
    idx = list(range(len(values)))
    rng.shuffle(idx)
    logger.debug("sampling %d of %d elements", k, len(values))
    return [values[i] for i in idx[:k]]


def shuffle(values: MutableSequence[T], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``values`` in place (Fisher-Yates). Returns None."""
    rng = rng or random
    logger.debug("shuffling %d elements in place", len(values))
    rng.shuffle(values)
