"""Per-label statistics: count, total, extrema, mean, population stdev."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import psutil

from ..core.errors import EmptySeriesError


@dataclass(frozen=True)
class SeriesStats:
    """Read-only statistics snapshot for one sample series (microseconds)."""

    count: int
    total: int
    min: int
    max: int
    mean: float
    stdev: float


def compute_stats(series: Sequence[int]) -> SeriesStats:
    """Compute statistics over a sample series.

    Args:
        series: Durations in microseconds, in call order.

    Returns:
        SeriesStats. The standard deviation is the population one
        (divisor = count, not count - 1).

    Raises:
        EmptySeriesError: If the series has no samples.
    """
    if len(series) == 0:
        raise EmptySeriesError("cannot compute statistics of an empty series")

    x = np.asarray(series, dtype=np.int64)
    total = int(np.sum(x))
    count = x.shape[0]
    return SeriesStats(
        count=count,
        total=total,
        min=int(np.min(x)),
        max=int(np.max(x)),
        mean=total / count,
        stdev=float(np.std(x.astype(np.float64), ddof=0)),
    )


def relative_stdev(stats: SeriesStats) -> float:
    """Return stdev as a percentage of the mean, or 0.0 when the mean is 0."""
    if stats.mean == 0:
        return 0.0
    return stats.stdev * 100.0 / stats.mean


def percent_of(total: int, elapsed: int) -> float:
    """Share of the run spent in a label.

    Args:
        total: Summed duration for the label.
        elapsed: Run duration, same unit.

    Returns:
        total / elapsed * 100, or 0.0 for an empty run. Nested scopes
        can push the sum over all labels past 100.
    """
    if elapsed <= 0:
        return 0.0
    return total * 100.0 / elapsed


def memory_usage_bytes() -> int:
    """Return current process RSS memory in bytes."""
    return psutil.Process().memory_info().rss
