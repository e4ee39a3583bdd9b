"""
Results aggregation and visualization for layout benchmarks.

Provides engine-to-engine comparison, CLI tables, JSON export and charts.
"""

import json
import math
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from instrumentation.stats import StatSummary
from instrumentation.system import SystemInfo
from scenarios.definitions import Scenario, ScenarioRegistry

from .config import BenchmarkConfig
from .runner import ResultsTable


@dataclass(frozen=True)
class ComparisonRow:
    """Average layout time of one scenario on two engines.

    ``speedup_ratio`` is time_b / time_a: how many times faster engine A
    is than engine B on this scenario.
    """

    scenario_name: str
    time_a: float
    time_b: float
    speedup_ratio: float

    def to_dict(self) -> dict:
        return {
            "scenario_name": self.scenario_name,
            "time_a": self.time_a,
            "time_b": self.time_b,
            # JSON has no inf or nan
            "speedup_ratio": self.speedup_ratio if math.isfinite(self.speedup_ratio) else None,
        }


def speedup(time_a: float, time_b: float) -> float:
    """Ratio time_b / time_a, with inf or nan when time_a is zero."""
    if time_a == 0:
        return math.inf if time_b > 0 else math.nan
    return time_b / time_a


def comparison_pair(results: ResultsTable) -> Optional[tuple[str, str]]:
    """Engines compared by default: the first two with results, in run order.

    Run order is the fixed engine detection order, so the pair and the
    direction of the ratio do not depend on the measured data.
    """
    candidates = results.engines_with_results()
    if len(candidates) < 2:
        return None
    return candidates[0], candidates[1]


def compare(
    results: ResultsTable,
    registry: ScenarioRegistry,
    first: Optional[str] = None,
    second: Optional[str] = None,
) -> list[ComparisonRow]:
    """Compare two engines scenario by scenario, in registry order.

    Scenarios missing from either engine are skipped. Returns an empty
    list when fewer than two engines have results.
    """
    if first is None or second is None:
        pair = comparison_pair(results)
        if pair is None:
            return []
        first = pair[0] if first is None else first
        second = pair[1] if second is None else second

    rows = []
    for scenario in registry:
        summary_a = results.get(first, scenario.name)
        summary_b = results.get(second, scenario.name)
        if summary_a is None or summary_b is None:
            continue
        rows.append(ComparisonRow(
            scenario_name=scenario.name,
            time_a=summary_a.average,
            time_b=summary_b.average,
            speedup_ratio=speedup(summary_a.average, summary_b.average),
        ))
    return rows


class ConsoleReporter:
    """Generates console/CLI reports."""

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def _color(self, text: str, color: str) -> str:
        """Apply ANSI color if enabled."""
        if not self.use_color:
            return text

        colors = {
            "green": "\033[92m",
            "red": "\033[91m",
            "yellow": "\033[93m",
            "blue": "\033[94m",
            "bold": "\033[1m",
            "reset": "\033[0m",
        }

        return f"{colors.get(color, '')}{text}{colors['reset']}"

    def format_duration(self, ms: float) -> str:
        """Format duration for display."""
        return f"{ms:.3f}ms"

    def format_speedup(self, ratio: float) -> str:
        """Format speedup ratio with color."""
        text = f"{ratio:.2f}x"
        if ratio > 1:
            return self._color(text, "green")
        elif ratio < 1:
            return self._color(text, "red")
        return text

    def scenario_block(self, scenario: Scenario, summary: StatSummary) -> str:
        """Six statistics for one scenario on one engine."""
        lines = []
        lines.append(self._color(scenario.name, "bold"))
        lines.append(f"  {scenario.description} ({scenario.expected_node_count} nodes)")
        lines.append(f"  {'Average:':<9}{self.format_duration(summary.average)}")
        lines.append(f"  {'Median:':<9}{self.format_duration(summary.median)}")
        lines.append(f"  {'Min:':<9}{self.format_duration(summary.min)}")
        lines.append(f"  {'Max:':<9}{self.format_duration(summary.max)}")
        lines.append(f"  {'P95:':<9}{self.format_duration(summary.p95)}")
        lines.append(f"  {'P99:':<9}{self.format_duration(summary.p99)}")
        return "\n".join(lines)

    def engine_report(
        self,
        results: ResultsTable,
        registry: ScenarioRegistry,
        engine: str,
    ) -> str:
        """All scenario blocks for one engine."""
        lines = []
        lines.append(self._color(f"\n{'=' * 64}", "blue"))
        lines.append(self._color(f"Engine: {results.label(engine)}", "bold"))
        lines.append(self._color(f"{'=' * 64}", "blue"))

        for scenario in registry:
            summary = results.get(engine, scenario.name)
            if summary is None:
                lines.append(f"\n{self._color(scenario.name, 'bold')}")
                lines.append(self._color("  No successful iterations", "red"))
                continue
            lines.append("")
            lines.append(self.scenario_block(scenario, summary))

        return "\n".join(lines)

    def comparison_table(
        self,
        rows: list[ComparisonRow],
        label_a: str,
        label_b: str,
    ) -> str:
        """Generate a comparison table for two engines."""
        if not rows:
            return "No comparison to display"

        headers = ["Scenario", label_a, label_b, "Speedup"]
        col_widths = [30, 12, 12, 10]

        lines = []
        lines.append(self._color(f"\n{'=' * sum(col_widths)}", "blue"))
        lines.append(self._color("Performance Comparison Summary", "bold"))
        lines.append(self._color(f"{'=' * sum(col_widths)}", "blue"))

        header_row = ""
        for i, header in enumerate(headers):
            header_row += f"{header:<{col_widths[i]}}"
        lines.append(self._color(header_row, "bold"))
        lines.append("-" * sum(col_widths))

        for row in rows:
            name = row.scenario_name[:27] + "..." if len(row.scenario_name) > 30 else row.scenario_name
            lines.append(
                f"{name:<{col_widths[0]}}"
                f"{self.format_duration(row.time_a):<{col_widths[1]}}"
                f"{self.format_duration(row.time_b):<{col_widths[2]}}"
                f"{self.format_speedup(row.speedup_ratio)}"
            )

        lines.append(f"\nSpeedup = {label_b} average / {label_a} average")
        return "\n".join(lines)

    def warnings_block(self, results: ResultsTable) -> str:
        """Unavailable engines and dropped iterations."""
        lines = []

        if results.unavailable:
            lines.append(f"\n{self._color('Unavailable engines:', 'yellow')}")
            for name, reason in results.unavailable.items():
                lines.append(f"  - {name}: {reason}")

        if results.warnings:
            lines.append(f"\n{self._color('Warnings:', 'red')}")
            for warning in results.warnings[:5]:
                lines.append(f"  - [{warning.engine}/{warning.phase}] {warning.message}")
            if len(results.warnings) > 5:
                lines.append(f"  ... and {len(results.warnings) - 5} more")

        return "\n".join(lines)

    def system_info_block(self, info: SystemInfo) -> str:
        """Host details for the report footer."""
        lines = []
        lines.append(f"\n{self._color('System Information', 'bold')}")
        lines.append(f"  Runtime: {info.runtime}")
        lines.append(f"  Platform: {info.platform} {info.machine}")
        lines.append(f"  CPU Cores: {info.cpu_count if info.cpu_count is not None else 'N/A'}")
        memory = f"{info.memory_gb}GB" if info.memory_gb is not None else "N/A"
        lines.append(f"  Memory: {memory}")
        return "\n".join(lines)

    def full_report(
        self,
        results: ResultsTable,
        registry: ScenarioRegistry,
        system_info: Optional[SystemInfo] = None,
    ) -> str:
        """Per-engine blocks, the comparison table when possible, warnings and host info."""
        sections = [self.engine_report(results, registry, e) for e in results.engines]

        pair = comparison_pair(results)
        if pair is not None:
            rows = compare(results, registry, *pair)
            sections.append(
                self.comparison_table(rows, results.label(pair[0]), results.label(pair[1]))
            )

        warnings = self.warnings_block(results)
        if warnings:
            sections.append(warnings)

        if system_info is not None:
            sections.append(self.system_info_block(system_info))

        return "\n".join(sections)


class JSONReporter:
    """Exports results as JSON for further analysis."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results")

    def save_results(
        self,
        results: ResultsTable,
        registry: ScenarioRegistry,
        config: Optional[BenchmarkConfig] = None,
        system_info: Optional[SystemInfo] = None,
        name: str = "layout_benchmark",
    ) -> Path:
        """Save a run, its comparison rows and its context to JSON."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.output_dir / f"{name}_{timestamp}.json"

        pair = comparison_pair(results)
        data = {
            "name": name,
            "timestamp": timestamp,
            "config": config.to_dict() if config else None,
            "system": system_info.to_dict() if system_info else None,
            "scenarios": [s.to_dict() for s in registry],
            **results.to_dict(),
            "comparison": {
                "engine_a": pair[0],
                "engine_b": pair[1],
                "rows": [r.to_dict() for r in compare(results, registry, *pair)],
            } if pair else None,
        }

        with open(filepath, "w") as f:
            json.dump(data, f, indent=2, allow_nan=False)

        return filepath

    def load_result(self, filepath: Path) -> dict:
        """Load a result from JSON."""
        with open(filepath) as f:
            return json.load(f)


class ChartReporter:
    """Generates visual charts using matplotlib."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results/charts")
        self._matplotlib_available = False
        self._check_matplotlib()

    def _check_matplotlib(self):
        """Check if matplotlib is available."""
        try:
            import matplotlib
            matplotlib.use("Agg")  # Non-interactive backend
            self._matplotlib_available = True
        except ImportError:
            self._matplotlib_available = False

    @property
    def available(self) -> bool:
        return self._matplotlib_available

    def average_comparison_chart(
        self,
        results: ResultsTable,
        registry: ScenarioRegistry,
        filename: Optional[str] = None,
    ) -> Optional[Path]:
        """Bar chart of average layout time per scenario, one bar per engine."""
        if not self._matplotlib_available:
            print("Warning: matplotlib not available for charts")
            return None

        import matplotlib.pyplot as plt
        import numpy as np

        engines = results.engines_with_results()
        if not engines:
            return None

        names = registry.names()
        x = np.arange(len(names))
        width = 0.8 / len(engines)

        fig, ax = plt.subplots(figsize=(12, 6))
        for i, engine in enumerate(engines):
            averages = []
            for name in names:
                summary = results.get(engine, name)
                averages.append(summary.average if summary else 0.0)
            offset = (i - (len(engines) - 1) / 2) * width
            ax.bar(x + offset, averages, width, label=results.label(engine))

        ax.set_xlabel("Scenario")
        ax.set_ylabel("Average layout time (ms)")
        ax.set_title("Layout Engine Comparison")
        ax.set_xticks(x)
        ax.set_xticklabels(names, rotation=30, ha="right")
        ax.legend()

        fig.tight_layout()

        self.output_dir.mkdir(parents=True, exist_ok=True)
        filename = filename or "layout_average_comparison.png"
        filepath = self.output_dir / filename
        fig.savefig(filepath, dpi=150, bbox_inches="tight")
        plt.close(fig)

        return filepath
