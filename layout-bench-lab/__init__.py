"""
Layout Bench Lab - A benchmark suite for flexbox layout engines.

Measures the wall-clock cost of a single layout computation across
interchangeable layout engine bindings, given identical input trees.

Key modules:
- engines: Engine adapter interface, bindings and detection
- scenarios: Reference layout trees
- instrumentation: Timing, statistics and host information
- harness: Benchmark orchestration and reporting
"""

__version__ = "0.1.0"
