"""
Scenario definitions for layout engine benchmarking.
"""

from .definitions import (
    Scenario,
    ScenarioRegistry,
    LAYOUT_SCENARIOS,
    build_simple_flexbox,
    build_nested_grid,
    build_deep_nested,
    build_complex_app,
    default_registry,
    get_scenario,
    list_scenarios,
)

__all__ = [
    "Scenario",
    "ScenarioRegistry",
    "LAYOUT_SCENARIOS",
    "build_simple_flexbox",
    "build_nested_grid",
    "build_deep_nested",
    "build_complex_app",
    "default_registry",
    "get_scenario",
    "list_scenarios",
]
