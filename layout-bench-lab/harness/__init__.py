"""
Benchmark harness for layout engine experiments.

Provides configuration, timed execution, orchestration and reporting.
"""

from .config import BenchmarkConfig

from .executor import (
    LayoutComputationFailure,
    TimedExecutor,
)

from .runner import (
    BenchmarkRunner,
    NoAdaptersAvailable,
    ResultsTable,
    RunWarning,
)

from .reporter import (
    ChartReporter,
    ComparisonRow,
    ConsoleReporter,
    JSONReporter,
    compare,
    comparison_pair,
    speedup,
)

__all__ = [
    # Config
    "BenchmarkConfig",
    # Executor
    "LayoutComputationFailure",
    "TimedExecutor",
    # Runner
    "BenchmarkRunner",
    "NoAdaptersAvailable",
    "ResultsTable",
    "RunWarning",
    # Reporter
    "ChartReporter",
    "ComparisonRow",
    "ConsoleReporter",
    "JSONReporter",
    "compare",
    "comparison_pair",
    "speedup",
]
