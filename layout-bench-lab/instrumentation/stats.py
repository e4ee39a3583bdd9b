"""
Summary statistics over layout timings.

Percentiles are read straight from the sorted samples at a floor index
(no interpolation) so results can be compared one to one with other
implementations of this benchmark:

    median = s[n // 2]
    p95    = s[floor(n * 0.95)]
    p99    = s[floor(n * 0.99)]
"""

import math
from dataclasses import asdict, dataclass
from typing import Sequence


class InvalidInput(ValueError):
    """Raised when statistics are requested for an empty sample."""


@dataclass(frozen=True)
class StatSummary:
    """Six-number digest of one set of timed runs, in milliseconds."""

    average: float
    median: float
    min: float
    max: float
    p95: float
    p99: float
    count: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


def floor_index(n: int, fraction: float) -> int:
    """Zero-based index of the ``fraction`` quantile in ``n`` sorted samples."""
    return min(int(math.floor(n * fraction)), n - 1)


def summarize(durations: Sequence[float]) -> StatSummary:
    """Summarize a non-empty sequence of durations.

    Raises:
        InvalidInput: If ``durations`` is empty.
    """
    if not durations:
        raise InvalidInput("Cannot summarize an empty sequence of durations")

    samples = sorted(durations)
    n = len(samples)

    return StatSummary(
        average=sum(samples) / n,
        median=samples[n // 2],
        min=samples[0],
        max=samples[-1],
        p95=samples[floor_index(n, 0.95)],
        p99=samples[floor_index(n, 0.99)],
        count=n,
    )
