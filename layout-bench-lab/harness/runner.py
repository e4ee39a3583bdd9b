"""
Benchmark orchestrator for layout engine comparisons.

Runs every scenario against every available engine with a fixed
two-phase protocol: a warmup pass whose timings are discarded, then a
measured pass whose timings are summarized.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

from engines.base import LayoutEngine
from instrumentation.stats import StatSummary, summarize
from scenarios.definitions import Scenario, ScenarioRegistry

from .config import BenchmarkConfig
from .executor import LayoutComputationFailure, TimedExecutor


@dataclass(frozen=True)
class RunWarning:
    """A non-fatal problem recorded during a run."""

    engine: str
    scenario: str
    phase: str
    message: str

    def to_dict(self) -> dict:
        return {
            "engine": self.engine,
            "scenario": self.scenario,
            "phase": self.phase,
            "message": self.message,
        }


class ResultsTable:
    """Read-only results of a run: engine name -> scenario name -> StatSummary.

    ``engines`` keeps the order engines were measured in. An engine whose
    every scenario failed still appears there, with no summaries.
    """

    def __init__(
        self,
        summaries: Optional[Mapping[str, Mapping[str, StatSummary]]] = None,
        labels: Optional[Mapping[str, str]] = None,
        warnings: tuple = (),
        unavailable: Optional[Mapping[str, str]] = None,
    ):
        summaries = summaries or {}
        self._summaries = MappingProxyType({
            engine: MappingProxyType(dict(by_scenario))
            for engine, by_scenario in summaries.items()
        })
        self.engines: tuple[str, ...] = tuple(summaries.keys())
        self.labels = MappingProxyType(dict(labels or {}))
        self.warnings: tuple[RunWarning, ...] = tuple(warnings)
        self.unavailable = MappingProxyType(dict(unavailable or {}))

    def __getitem__(self, engine: str) -> Mapping[str, StatSummary]:
        return self._summaries[engine]

    def __contains__(self, engine: object) -> bool:
        return engine in self._summaries

    def __iter__(self) -> Iterator[str]:
        return iter(self.engines)

    def __len__(self) -> int:
        return len(self._summaries)

    def get(self, engine: str, scenario: str) -> Optional[StatSummary]:
        """Summary for one (engine, scenario) pair, or None if not measured."""
        by_scenario = self._summaries.get(engine)
        if by_scenario is None:
            return None
        return by_scenario.get(scenario)

    def label(self, engine: str) -> str:
        """Display name for an engine."""
        return self.labels.get(engine, engine)

    def engines_with_results(self) -> list[str]:
        """Engines that produced at least one summary, in run order."""
        return [e for e in self.engines if self._summaries[e]]

    def to_dict(self) -> dict:
        """Convert results to dictionary for serialization."""
        return {
            "engines": list(self.engines),
            "labels": dict(self.labels),
            "results": {
                engine: {name: s.to_dict() for name, s in by_scenario.items()}
                for engine, by_scenario in self._summaries.items()
            },
            "warnings": [w.to_dict() for w in self.warnings],
            "unavailable": dict(self.unavailable),
        }


class NoAdaptersAvailable(Exception):
    """Raised when a run has no engine to measure."""

    def __init__(self, unavailable: Optional[Mapping[str, str]] = None):
        self.unavailable = dict(unavailable or {})
        self.results = ResultsTable(unavailable=self.unavailable)
        message = "No layout engines available"
        if self.unavailable:
            reasons = "; ".join(f"{n}: {r}" for n, r in self.unavailable.items())
            message = f"{message} ({reasons})"
        super().__init__(message)


class BenchmarkRunner:
    """Orchestrates benchmark execution.

    Everything runs sequentially in one thread: engines in the order
    given, scenarios in registry order, iterations one after another.
    """

    def __init__(
        self,
        config: Optional[BenchmarkConfig] = None,
        executor: Optional[TimedExecutor] = None,
        verbose: bool = True,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ):
        self.config = config or BenchmarkConfig()
        self.executor = executor or TimedExecutor(
            width=self.config.width,
            height=self.config.height,
            direction=self.config.direction,
        )
        self.verbose = verbose
        self.progress_callback = progress_callback

    def collect(
        self,
        scenario: Scenario,
        engine: LayoutEngine,
        count: int,
        phase: str = "measure",
    ) -> tuple[list[float], list[RunWarning]]:
        """Run ``count`` timed iterations and return their durations.

        Iterations whose layout call fails are dropped and reported as
        warnings. Any other error propagates.
        """
        durations: list[float] = []
        warnings: list[RunWarning] = []

        for _ in range(count):
            try:
                durations.append(self.executor.run(scenario, engine))
            except LayoutComputationFailure as e:
                warnings.append(RunWarning(engine.name, scenario.name, phase, str(e)))

        return durations, warnings

    def run_scenario(
        self,
        scenario: Scenario,
        engine: LayoutEngine,
    ) -> tuple[Optional[StatSummary], list[RunWarning]]:
        """Warm up, measure and summarize one (scenario, engine) pair.

        Returns (None, warnings) when no measured iteration succeeded or
        the pair could not be run at all.
        """
        try:
            # Warmup timings are discarded
            _, warmup_warnings = self.collect(
                scenario, engine, self.config.warmup_iterations, phase="warmup"
            )
            durations, measure_warnings = self.collect(
                scenario, engine, self.config.iterations, phase="measure"
            )
        except Exception as e:
            return None, [RunWarning(engine.name, scenario.name, "scenario", repr(e))]

        warnings = warmup_warnings + measure_warnings
        if not durations:
            warnings.append(RunWarning(
                engine.name, scenario.name, "measure",
                "every measured iteration failed; no statistics computed",
            ))
            return None, warnings

        return summarize(durations), warnings

    def run_all(
        self,
        registry: ScenarioRegistry,
        engines: list[LayoutEngine],
        unavailable: Optional[Mapping[str, str]] = None,
    ) -> ResultsTable:
        """Benchmark every scenario against every engine.

        Raises:
            NoAdaptersAvailable: If ``engines`` is empty. The exception
                carries an empty ResultsTable as ``results``.
        """
        if not engines:
            raise NoAdaptersAvailable(unavailable)

        total = len(engines) * len(registry)
        completed = 0
        summaries: dict[str, dict[str, StatSummary]] = {}
        warnings: list[RunWarning] = []

        for engine in engines:
            if self.verbose:
                print(f"\nBenchmarking {engine.label}")
                print(f"  Warmup iterations: {self.config.warmup_iterations}")
                print(f"  Measured iterations: {self.config.iterations}")

            by_scenario: dict[str, StatSummary] = {}
            for scenario in registry:
                if self.verbose:
                    print(f"  {scenario.name}...", end="", flush=True)

                summary, scenario_warnings = self.run_scenario(scenario, engine)
                warnings.extend(scenario_warnings)
                if summary is not None:
                    by_scenario[scenario.name] = summary

                if self.verbose:
                    if summary is not None:
                        print(f" {summary.average:.3f}ms avg")
                    else:
                        print(" failed")

                completed += 1
                if self.progress_callback:
                    self.progress_callback(completed, total)

            summaries[engine.name] = by_scenario

        return ResultsTable(
            summaries=summaries,
            labels={engine.name: engine.label for engine in engines},
            warnings=tuple(warnings),
            unavailable=unavailable,
        )
