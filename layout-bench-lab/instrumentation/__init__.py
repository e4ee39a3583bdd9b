"""
Instrumentation module for layout engine benchmarking.

Provides timing, statistics and host information utilities.
"""

from .timing import (
    DEFAULT_CLOCK,
    Clock,
    elapsed_ms,
)

from .stats import (
    InvalidInput,
    StatSummary,
    floor_index,
    summarize,
)

from .system import (
    SystemInfo,
    collect_system_info,
)

__all__ = [
    # Timing
    "DEFAULT_CLOCK",
    "Clock",
    "elapsed_ms",
    # Statistics
    "InvalidInput",
    "StatSummary",
    "floor_index",
    "summarize",
    # System
    "SystemInfo",
    "collect_system_info",
]
