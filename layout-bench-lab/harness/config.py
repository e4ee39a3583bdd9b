"""
Benchmark configuration.
"""

import os
from dataclasses import dataclass
from typing import Optional

from engines.base import Direction

ITERATIONS_ENV = "LAYOUT_BENCH_ITERATIONS"
WARMUP_ENV = "LAYOUT_BENCH_WARMUP"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for a benchmark run."""

    iterations: int = 100
    warmup_iterations: int = 10
    width: float = 800
    height: float = 600
    direction: Direction = Direction.LTR

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")
        if self.warmup_iterations < 0:
            raise ValueError(
                f"warmup_iterations must not be negative, got {self.warmup_iterations}"
            )

    @classmethod
    def from_env(
        cls,
        iterations: Optional[int] = None,
        warmup_iterations: Optional[int] = None,
    ) -> "BenchmarkConfig":
        """Build a config from explicit values, falling back to the environment.

        Reads LAYOUT_BENCH_ITERATIONS and LAYOUT_BENCH_WARMUP when the
        corresponding argument is None.
        """
        if iterations is None:
            iterations = int(os.getenv(ITERATIONS_ENV, cls.iterations))
        if warmup_iterations is None:
            warmup_iterations = int(os.getenv(WARMUP_ENV, cls.warmup_iterations))
        return cls(iterations=iterations, warmup_iterations=warmup_iterations)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "iterations": self.iterations,
            "warmup_iterations": self.warmup_iterations,
            "width": self.width,
            "height": self.height,
            "direction": self.direction.value,
        }
