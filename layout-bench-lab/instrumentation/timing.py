"""
Timing utilities for layout benchmarking.

All measurements come from a monotonic clock (``time.perf_counter`` by
default) and are reported in fractional milliseconds. Callers read the
clock themselves, directly around the measured call, so nothing but
that call lands inside the interval.
"""

import time
from typing import Callable

Clock = Callable[[], float]

DEFAULT_CLOCK: Clock = time.perf_counter


def elapsed_ms(start: float, end: float) -> float:
    """Milliseconds between two clock readings taken in seconds."""
    return (end - start) * 1000
