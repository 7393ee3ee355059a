"""Numeric summary built from the toolkit functions."""
from __future__ import annotations

import logging
from typing import Sequence

from seqstats.schemas import NumericSummary, SeriesIn
from seqstats.services.aggregate import mean, median, std, total, var
from seqstats.services.extrema import maximum, minimum
from seqstats.services.vector import magnitude

__all__: list[str] = [
    "numeric_summary",
    "summarize",
]

logger = logging.getLogger(__name__)


def numeric_summary(values: Sequence[float] | Sequence[int]) -> dict[str, float]:
    """
    Compute count, min, max, sum, mean, median, population variance and
    stddev, and magnitude for a sequence of numbers.
    Raises EmptyError (a ValueError) if input is empty.
    """
    return {
        "count": len(values),
        "min": minimum(values),
        "max": maximum(values),
        "sum": total(values),
        "mean": mean(values),
        "median": median(values),
        "variance": var(values),
        "stddev": std(values),
        "magnitude": magnitude(values),
    }


def summarize(values: Sequence[float] | Sequence[int]) -> NumericSummary:
    """Validate ``values`` and return the summary as a NumericSummary model."""
    body = SeriesIn(numbers=list(values))
    logger.debug("summarizing %d numbers", len(body.numbers))
    return NumericSummary(**numeric_summary(body.numbers))
