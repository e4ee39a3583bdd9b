"""
Layout scenario definitions for engine benchmarking.

Each scenario is a deterministic recipe that builds one tree through the
engine adapter interface. The four reference scenarios cover common
layout shapes:
1. Simple flex container
2. Nested grid
3. Deep nesting
4. Realistic application shell

Their structure must stay exactly as written so that results stay
comparable with other implementations of this benchmark.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from engines.base import Edge, FlexDirection, LayoutEngine

BuildFn = Callable[[LayoutEngine], Any]


@dataclass(frozen=True)
class Scenario:
    """Definition of a layout benchmark scenario."""

    name: str
    description: str
    expected_node_count: int
    build: BuildFn

    def __post_init__(self):
        if self.expected_node_count <= 0:
            raise ValueError(
                f"Scenario {self.name!r}: expected_node_count must be positive"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "expected_node_count": self.expected_node_count,
        }


# ============================================================================
# Scenario 1: Simple flex container
# ============================================================================

def build_simple_flexbox(engine: LayoutEngine) -> Any:
    root = engine.create_node()
    engine.set_flex_direction(root, FlexDirection.ROW)
    engine.set_width(root, 800)
    engine.set_height(root, 600)

    for i in range(10):
        child = engine.create_node()
        engine.set_flex_grow(child, 1)
        engine.set_height(child, 50)
        engine.set_margin(child, Edge.ALL, 5)
        engine.insert_child(root, child, i)

    return root


# ============================================================================
# Scenario 2: Nested grid
# ============================================================================

def build_nested_grid(engine: LayoutEngine) -> Any:
    root = engine.create_node()
    engine.set_flex_direction(root, FlexDirection.COLUMN)
    engine.set_width(root, 1000)
    engine.set_height(root, 1000)

    for row in range(10):
        row_node = engine.create_node()
        engine.set_flex_direction(row_node, FlexDirection.ROW)
        engine.set_flex_grow(row_node, 1)

        for col in range(10):
            cell = engine.create_node()
            engine.set_flex_grow(cell, 1)
            engine.set_margin(cell, Edge.ALL, 2)
            engine.set_padding(cell, Edge.ALL, 5)
            engine.insert_child(row_node, cell, col)

        engine.insert_child(root, row_node, row)

    return root


# ============================================================================
# Scenario 3: Deep nesting
# ============================================================================

def build_deep_nested(engine: LayoutEngine) -> Any:
    root = engine.create_node()
    engine.set_width(root, 800)
    engine.set_height(root, 600)

    current = root
    for i in range(20):
        child = engine.create_node()
        engine.set_flex_grow(child, 1)
        engine.set_padding(child, Edge.ALL, 10 if i % 2 == 0 else 5)
        engine.set_margin(child, Edge.ALL, 2)
        engine.insert_child(current, child, 0)
        current = child

    return root


# ============================================================================
# Scenario 4: Application shell
# ============================================================================

def _build_header(engine: LayoutEngine) -> Any:
    header = engine.create_node()
    engine.set_height(header, 60)
    engine.set_flex_direction(header, FlexDirection.ROW)
    engine.set_padding(header, Edge.ALL, 10)

    for i in range(5):
        item = engine.create_node()
        engine.set_width(item, 100)
        engine.set_margin(item, Edge.RIGHT, 10)
        engine.insert_child(header, item, i)

    return header


def _build_sidebar(engine: LayoutEngine) -> Any:
    sidebar = engine.create_node()
    engine.set_width(sidebar, 250)
    engine.set_flex_direction(sidebar, FlexDirection.COLUMN)
    engine.set_padding(sidebar, Edge.ALL, 15)

    for i in range(10):
        item = engine.create_node()
        engine.set_height(item, 40)
        engine.set_margin(item, Edge.BOTTOM, 5)
        engine.insert_child(sidebar, item, i)

    return sidebar


def _build_content(engine: LayoutEngine) -> Any:
    content = engine.create_node()
    engine.set_flex_grow(content, 1)
    engine.set_flex_direction(content, FlexDirection.COLUMN)
    engine.set_padding(content, Edge.ALL, 20)

    for i in range(15):
        section = engine.create_node()
        engine.set_height(section, 80)
        engine.set_margin(section, Edge.BOTTOM, 15)
        engine.set_flex_direction(section, FlexDirection.ROW)

        for j in range(3):
            item = engine.create_node()
            engine.set_flex_grow(item, 1)
            engine.set_margin(item, Edge.RIGHT, 10 if j < 2 else 0)
            engine.insert_child(section, item, j)

        engine.insert_child(content, section, i)

    return content


def _build_footer(engine: LayoutEngine) -> Any:
    footer = engine.create_node()
    engine.set_height(footer, 50)
    engine.set_flex_direction(footer, FlexDirection.ROW)
    engine.set_padding(footer, Edge.ALL, 15)

    for i in range(3):
        item = engine.create_node()
        engine.set_flex_grow(item, 1)
        engine.set_margin(item, Edge.RIGHT, 20 if i < 2 else 0)
        engine.insert_child(footer, item, i)

    return footer


def build_complex_app(engine: LayoutEngine) -> Any:
    root = engine.create_node()
    engine.set_flex_direction(root, FlexDirection.COLUMN)
    engine.set_width(root, 1200)
    engine.set_height(root, 800)

    header = _build_header(engine)

    main = engine.create_node()
    engine.set_flex_grow(main, 1)
    engine.set_flex_direction(main, FlexDirection.ROW)
    engine.insert_child(main, _build_sidebar(engine), 0)
    engine.insert_child(main, _build_content(engine), 1)

    footer = _build_footer(engine)

    engine.insert_child(root, header, 0)
    engine.insert_child(root, main, 1)
    engine.insert_child(root, footer, 2)

    return root


LAYOUT_SCENARIOS = [
    Scenario(
        name="Simple Flexbox Layout",
        description="Basic flex container with 10 children",
        expected_node_count=11,
        build=build_simple_flexbox,
    ),
    Scenario(
        name="Nested Flexbox Grid",
        description="Grid layout with 100 items (10x10)",
        expected_node_count=111,
        build=build_nested_grid,
    ),
    Scenario(
        name="Deep Nested Layout",
        description="Deeply nested structure (depth 20)",
        expected_node_count=21,
        build=build_deep_nested,
    ),
    Scenario(
        name="Complex App Layout",
        description="Realistic app layout with header, sidebar, content, footer",
        # Reported label; the tree itself holds 84 nodes
        expected_node_count=50,
        build=build_complex_app,
    ),
]


# ============================================================================
# Scenario Registry
# ============================================================================

class ScenarioRegistry:
    """Ordered collection of scenarios.

    Iteration order is registration order, which is also report order.
    """

    def __init__(self, scenarios: Optional[list[Scenario]] = None):
        self._scenarios: list[Scenario] = []
        for scenario in scenarios or []:
            self.register(scenario)

    def register(self, scenario: Scenario) -> Scenario:
        """Add a scenario to the end of the registry."""
        if self.get(scenario.name) is not None:
            raise ValueError(f"Scenario already registered: {scenario.name}")
        self._scenarios.append(scenario)
        return scenario

    def get(self, name: str) -> Optional[Scenario]:
        """Get a scenario by name."""
        for scenario in self._scenarios:
            if scenario.name == name:
                return scenario
        return None

    def names(self) -> list[str]:
        """Scenario names in registry order."""
        return [s.name for s in self._scenarios]

    def select(self, names: list[str]) -> "ScenarioRegistry":
        """Build a registry holding only the named scenarios, in registry order."""
        unknown = [n for n in names if self.get(n) is None]
        if unknown:
            raise ValueError(f"Unknown scenario(s): {', '.join(unknown)}")
        return ScenarioRegistry([s for s in self._scenarios if s.name in names])

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._scenarios))

    def __len__(self) -> int:
        return len(self._scenarios)

    def __contains__(self, name: object) -> bool:
        return any(s.name == name for s in self._scenarios)


def default_registry() -> ScenarioRegistry:
    """Fresh registry holding the reference scenarios."""
    return ScenarioRegistry(LAYOUT_SCENARIOS)


def get_scenario(name: str) -> Optional[Scenario]:
    """Get a reference scenario by name."""
    for scenario in LAYOUT_SCENARIOS:
        if scenario.name == name:
            return scenario
    return None


def list_scenarios() -> list[str]:
    """List the reference scenario names."""
    return [s.name for s in LAYOUT_SCENARIOS]
