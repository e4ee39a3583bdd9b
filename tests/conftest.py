"""Shared fixtures: in-memory engines and a controllable clock."""

from __future__ import annotations

from typing import Any, Iterable, Optional

import pytest

from engines.base import Direction, Edge, FlexDirection, LayoutEngine


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingEngine(LayoutEngine):
    """Engine storing every property on plain dict nodes."""

    name = "recording"
    label = "Recording"

    def __init__(self, name: Optional[str] = None) -> None:
        if name is not None:
            self.name = name
            self.label = name.title()
        self.nodes_created = 0
        self.layout_calls: list[tuple[Any, float, float, Direction]] = []

    def create_node(self) -> dict:
        self.nodes_created += 1
        return {"props": {}, "children": []}

    def set_flex_direction(self, node: dict, direction: FlexDirection) -> None:
        node["props"]["flex_direction"] = direction

    def set_width(self, node: dict, value: float) -> None:
        node["props"]["width"] = value

    def set_height(self, node: dict, value: float) -> None:
        node["props"]["height"] = value

    def set_flex_grow(self, node: dict, value: float) -> None:
        node["props"]["flex_grow"] = value

    def set_margin(self, node: dict, edge: Edge, value: float) -> None:
        node["props"][("margin", edge)] = value

    def set_padding(self, node: dict, edge: Edge, value: float) -> None:
        node["props"][("padding", edge)] = value

    def insert_child(self, parent: dict, child: dict, index: int) -> None:
        parent["children"].insert(index, child)

    def compute_layout(self, root: Any, width: float, height: float, direction: Direction) -> None:
        self.layout_calls.append((root, width, height, direction))


class ScriptedEngine(RecordingEngine):
    """Engine whose layout call advances a FakeClock by scripted durations.

    Args:
        clock: Clock advanced on every layout call
        durations_ms: Per-call durations, cycled; a None entry makes that call raise
    """

    def __init__(
        self,
        clock: FakeClock,
        durations_ms: Iterable[Optional[float]],
        name: Optional[str] = None,
    ) -> None:
        super().__init__(name)
        self.clock = clock
        self.durations_ms = list(durations_ms)

    def compute_layout(self, root: Any, width: float, height: float, direction: Direction) -> None:
        duration = self.durations_ms[len(self.layout_calls) % len(self.durations_ms)]
        super().compute_layout(root, width, height, direction)
        if duration is None:
            raise RuntimeError("layout exploded")
        self.clock.advance(duration / 1000)


class ReleasingEngine(RecordingEngine):
    """Engine that exposes release() and remembers what was freed."""

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name)
        self.released: list[Any] = []

    def release(self, root: Any) -> None:
        self.released.append(root)


def walk(node: dict) -> list[tuple]:
    """Pre-order (properties, child count) for every node in a tree."""
    entries = [(sorted(node["props"].items(), key=repr), len(node["children"]))]
    for child in node["children"]:
        entries.extend(walk(child))
    return entries


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recording_engine() -> RecordingEngine:
    return RecordingEngine()
