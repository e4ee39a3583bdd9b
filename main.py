#!/usr/bin/env python3
"""
Layout Bench Lab - Main entry point for running benchmarks.

Usage:
    python main.py [options]

Benchmarks every reference scenario against each installed layout
engine, prints per-engine statistics and, when two engines are
available, a side-by-side comparison.
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add layout-bench-lab to path for package imports
sys.path.insert(0, str(Path(__file__).parent / "layout-bench-lab"))

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_ENGINES = 2


def list_available_scenarios():
    """Print the reference scenarios."""
    from scenarios import LAYOUT_SCENARIOS

    print("Available scenarios:")
    for scenario in LAYOUT_SCENARIOS:
        print(f"  {scenario.name:<25} {scenario.description} ({scenario.expected_node_count} nodes)")


def run_benchmarks(args) -> int:
    """Detect engines, run every scenario and print the report."""
    from engines import detect_engines
    from harness import (
        BenchmarkConfig,
        BenchmarkRunner,
        ChartReporter,
        ConsoleReporter,
        JSONReporter,
        NoAdaptersAvailable,
    )
    from instrumentation import collect_system_info
    from scenarios import default_registry

    config = BenchmarkConfig.from_env(
        iterations=args.iterations,
        warmup_iterations=args.warmup,
    )
    registry = default_registry()
    if args.scenarios:
        registry = registry.select(args.scenarios)

    reporter = ConsoleReporter(use_color=not args.no_color)
    system_info = collect_system_info()

    print(f"\nRunning layout benchmark on {system_info.runtime}\n")

    engines, unavailable = detect_engines(args.engines)
    for engine in engines:
        print(f"  Using {engine.label}")
    for name, reason in unavailable.items():
        print(f"  {name} not available: {reason}")

    runner = BenchmarkRunner(config=config, verbose=not args.quiet)
    try:
        results = runner.run_all(registry, engines, unavailable)
    except NoAdaptersAvailable as e:
        print(f"\nError: {e}")
        return EXIT_NO_ENGINES

    print(reporter.full_report(results, registry, system_info))

    if args.json:
        path = JSONReporter(args.output_dir).save_results(
            results, registry, config, system_info
        )
        print(f"\nResults saved to {path}")

    if args.charts:
        path = ChartReporter(args.output_dir / "charts").average_comparison_chart(
            results, registry
        )
        if path:
            print(f"Chart saved to {path}")

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    from engines import list_engines

    parser = argparse.ArgumentParser(
        description="Layout Bench Lab - Benchmark flexbox layout engines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py
    python main.py --iterations 500 --warmup 50
    python main.py --engines yoga --scenarios "Deep Nested Layout"
    python main.py --json --charts --output-dir results
        """,
    )

    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Measured iterations per scenario (default: 100, or LAYOUT_BENCH_ITERATIONS)",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=None,
        help="Discarded warmup iterations per scenario (default: 10, or LAYOUT_BENCH_WARMUP)",
    )
    parser.add_argument(
        "--engines",
        nargs="+",
        choices=list_engines(),
        default=None,
        help="Engines to benchmark (default: all installed)",
    )
    parser.add_argument(
        "--scenarios",
        nargs="+",
        default=None,
        help="Scenario names to run (default: all)",
    )
    parser.add_argument(
        "--list-scenarios",
        action="store_true",
        help="List available scenarios and exit",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("results"),
        help="Directory to save results (default: results/)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Save results as JSON in the output directory",
    )
    parser.add_argument(
        "--charts",
        action="store_true",
        help="Save a comparison chart (requires matplotlib)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in the report",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print per-scenario progress",
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_scenarios:
        list_available_scenarios()
        sys.exit(EXIT_OK)

    try:
        exit_code = run_benchmarks(args)
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user")
        sys.exit(EXIT_FAILURE)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(EXIT_FAILURE)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
