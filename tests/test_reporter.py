"""Tests for engine comparison and report rendering."""

from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from harness import (
    BenchmarkConfig,
    ChartReporter,
    ComparisonRow,
    ConsoleReporter,
    JSONReporter,
    ResultsTable,
    RunWarning,
    compare,
    comparison_pair,
    speedup,
)
from instrumentation.stats import StatSummary
from instrumentation.system import SystemInfo
from scenarios import default_registry, get_scenario


def _summary(value: float) -> StatSummary:
    return StatSummary(average=value, median=value, min=value, max=value, p95=value, p99=value, count=1)


def full_table(a: float = 1.0, b: float = 2.0) -> ResultsTable:
    names = default_registry().names()
    return ResultsTable(
        {
            "yoga": {name: _summary(a) for name in names},
            "taffy": {name: _summary(b) for name in names},
        },
        labels={"yoga": "Yoga", "taffy": "Taffy"},
    )


SYSTEM = SystemInfo(
    python_implementation="CPython",
    python_version="3.12.1",
    platform="linux",
    machine="x86_64",
    cpu_count=8,
    memory_gb=16,
)


# ── compare ───────────────────────────────────────────────────────────────


def test_one_row_per_scenario_with_complete_data() -> None:
    registry = default_registry()
    rows = compare(full_table(), registry)
    assert len(rows) == len(registry)
    assert [r.scenario_name for r in rows] == registry.names()


def test_missing_scenario_is_skipped() -> None:
    registry = default_registry()
    names = registry.names()
    table = ResultsTable({
        "yoga": {name: _summary(1.0) for name in names},
        "taffy": {name: _summary(2.0) for name in names[1:]},
    })
    rows = compare(table, registry)
    assert len(rows) < len(registry)
    assert names[0] not in [r.scenario_name for r in rows]


def test_speedup_is_second_over_first() -> None:
    rows = compare(full_table(a=0.5, b=2.0), default_registry())
    assert all(r.speedup_ratio == 4.0 for r in rows)
    assert all((r.time_a, r.time_b) == (0.5, 2.0) for r in rows)


def test_pair_follows_run_order_not_names() -> None:
    table = ResultsTable({
        "zeta": {"Deep Nested Layout": _summary(1.0)},
        "alpha": {"Deep Nested Layout": _summary(3.0)},
    })
    assert comparison_pair(table) == ("zeta", "alpha")
    (row,) = compare(table, default_registry())
    assert row.speedup_ratio == 3.0


def test_explicit_engines() -> None:
    rows = compare(full_table(a=1.0, b=4.0), default_registry(), first="taffy", second="yoga")
    assert all(r.speedup_ratio == 0.25 for r in rows)


def test_fewer_than_two_engines_gives_no_rows() -> None:
    table = ResultsTable({"yoga": {"Deep Nested Layout": _summary(1.0)}, "taffy": {}})
    assert comparison_pair(table) is None
    assert compare(table, default_registry()) == []


def test_zero_baseline_does_not_crash() -> None:
    assert speedup(0.0, 1.0) == math.inf
    assert math.isnan(speedup(0.0, 0.0))
    assert speedup(2.0, 1.0) == 0.5


# ── ConsoleReporter ───────────────────────────────────────────────────────


def test_scenario_block_has_six_statistics() -> None:
    summary = StatSummary(average=1.23456, median=1.0, min=0.5, max=2.0, p95=1.9, p99=2.0, count=10)
    block = ConsoleReporter(use_color=False).scenario_block(get_scenario("Simple Flexbox Layout"), summary)

    assert "Simple Flexbox Layout" in block
    assert "(11 nodes)" in block
    assert "Average: 1.235ms" in block
    for label in ("Median:", "Min:", "Max:", "P95:", "P99:"):
        assert label in block
    assert "P95:     1.900ms" in block


def test_comparison_table_columns() -> None:
    rows = [ComparisonRow("Simple Flexbox Layout", 0.1, 0.25, 2.5)]
    table = ConsoleReporter(use_color=False).comparison_table(rows, "Yoga", "Taffy")

    assert "Scenario" in table
    assert "Yoga" in table
    assert "Taffy" in table
    assert "Speedup" in table
    assert "0.100ms" in table
    assert "0.250ms" in table
    assert "2.50x" in table


def test_comparison_table_empty() -> None:
    assert ConsoleReporter().comparison_table([], "A", "B") == "No comparison to display"


def test_full_report_with_two_engines() -> None:
    report = ConsoleReporter(use_color=False).full_report(full_table(), default_registry(), SYSTEM)

    assert "Engine: Yoga" in report
    assert "Engine: Taffy" in report
    assert "Performance Comparison Summary" in report
    assert "2.00x" in report
    assert "Runtime: CPython 3.12.1" in report
    assert "Memory: 16GB" in report


def test_full_report_single_engine_has_no_comparison() -> None:
    table = ResultsTable({"yoga": {"Deep Nested Layout": _summary(1.0)}}, labels={"yoga": "Yoga"})
    report = ConsoleReporter(use_color=False).full_report(table, default_registry())

    assert "Performance Comparison Summary" not in report
    assert "No successful iterations" in report


def test_warnings_block() -> None:
    warnings = tuple(
        RunWarning("yoga", "Deep Nested Layout", "measure", f"failure {i}") for i in range(7)
    )
    table = ResultsTable({"yoga": {}}, warnings=warnings, unavailable={"taffy": "stretchable is not installed"})
    block = ConsoleReporter(use_color=False).warnings_block(table)

    assert "taffy: stretchable is not installed" in block
    assert "failure 4" in block
    assert "failure 5" not in block
    assert "... and 2 more" in block


def test_system_info_block_without_memory() -> None:
    info = SystemInfo("PyPy", "3.10.14", "darwin", "arm64", None, None)
    block = ConsoleReporter(use_color=False).system_info_block(info)
    assert "CPU Cores: N/A" in block
    assert "Memory: N/A" in block


def test_color_toggle() -> None:
    assert "\033[" in ConsoleReporter(use_color=True).format_speedup(2.0)
    assert ConsoleReporter(use_color=False).format_speedup(2.0) == "2.00x"


# ── JSONReporter ──────────────────────────────────────────────────────────


def test_json_reporter_round_trip(tmp_path: Path) -> None:
    reporter = JSONReporter(tmp_path)
    registry = default_registry()
    path = reporter.save_results(full_table(), registry, BenchmarkConfig(), SYSTEM)

    assert path.parent == tmp_path
    data = reporter.load_result(path)
    assert data["config"]["iterations"] == 100
    assert data["system"]["cpu_count"] == 8
    assert data["engines"] == ["yoga", "taffy"]
    assert [s["name"] for s in data["scenarios"]] == registry.names()
    assert data["comparison"]["engine_a"] == "yoga"
    assert len(data["comparison"]["rows"]) == len(registry)
    assert json.loads(path.read_text())["results"]["taffy"]["Deep Nested Layout"]["average"] == 2.0


def test_json_reporter_zero_average_is_strict_json(tmp_path: Path) -> None:
    def reject(constant: str) -> None:
        raise ValueError(f"non-standard JSON constant {constant}")

    table = ResultsTable({
        "yoga": {"Deep Nested Layout": _summary(0.0), "Simple Flexbox Layout": _summary(0.0)},
        "taffy": {"Deep Nested Layout": _summary(1.0), "Simple Flexbox Layout": _summary(0.0)},
    })
    path = JSONReporter(tmp_path).save_results(table, default_registry())

    data = json.loads(path.read_text(), parse_constant=reject)
    ratios = {r["scenario_name"]: r["speedup_ratio"] for r in data["comparison"]["rows"]}
    assert ratios == {"Simple Flexbox Layout": None, "Deep Nested Layout": None}


def test_comparison_row_to_dict_keeps_finite_ratio() -> None:
    assert ComparisonRow("Deep Nested Layout", 1.0, 2.0, 2.0).to_dict()["speedup_ratio"] == 2.0
    assert ComparisonRow("Deep Nested Layout", 0.0, 2.0, math.inf).to_dict()["speedup_ratio"] is None


def test_json_reporter_single_engine(tmp_path: Path) -> None:
    table = ResultsTable({"yoga": {"Deep Nested Layout": _summary(1.0)}})
    path = JSONReporter(tmp_path).save_results(table, default_registry())
    data = json.loads(path.read_text())
    assert data["comparison"] is None
    assert data["config"] is None


# ── ChartReporter ─────────────────────────────────────────────────────────


def test_chart_written(tmp_path: Path) -> None:
    pytest.importorskip("matplotlib")
    reporter = ChartReporter(tmp_path)
    path = reporter.average_comparison_chart(full_table(), default_registry())
    assert path == tmp_path / "layout_average_comparison.png"
    assert path.exists()


def test_chart_skipped_without_results(tmp_path: Path) -> None:
    pytest.importorskip("matplotlib")
    table = ResultsTable({"yoga": {}})
    assert ChartReporter(tmp_path).average_comparison_chart(table, default_registry()) is None
