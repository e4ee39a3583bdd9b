"""
Engine adapter interface for layout benchmarking.

Every layout engine binding exposes the same small set of tree
operations so that scenarios can be built once and timed against
whichever engines happen to be installed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FlexDirection(Enum):
    """Main axis of a flex container."""

    ROW = "row"
    COLUMN = "column"


class Edge(Enum):
    """Box edge targeted by margin and padding setters."""

    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    ALL = "all"


class Direction(Enum):
    """Writing direction passed to a layout computation."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class LayoutBox:
    """Computed border box of a node, relative to its parent."""

    x: float
    y: float
    width: float
    height: float


class AdapterUnavailable(Exception):
    """Raised by a loader when its engine binding cannot be used."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Engine '{name}' unavailable: {reason}")


class LayoutEngine:
    """Base class for layout engine adapters.

    Subclasses implement the node operations against a concrete binding.
    Nodes are opaque to the harness; only the adapter that created a node
    may operate on it.

    An adapter may also define ``release(root)`` to free a native tree.
    The executor looks it up with ``getattr`` and skips it when absent.

    ``get_child`` and ``layout_box`` read a computed tree back. They are
    for checking results and are never called inside the timed interval.
    """

    name: str = "engine"
    label: str = "Layout Engine"

    def create_node(self) -> Any:
        raise NotImplementedError

    def set_flex_direction(self, node: Any, direction: FlexDirection) -> None:
        raise NotImplementedError

    def set_width(self, node: Any, value: float) -> None:
        raise NotImplementedError

    def set_height(self, node: Any, value: float) -> None:
        raise NotImplementedError

    def set_flex_grow(self, node: Any, value: float) -> None:
        raise NotImplementedError

    def set_margin(self, node: Any, edge: Edge, value: float) -> None:
        raise NotImplementedError

    def set_padding(self, node: Any, edge: Edge, value: float) -> None:
        raise NotImplementedError

    def insert_child(self, parent: Any, child: Any, index: int) -> None:
        raise NotImplementedError

    def finalize(self, root: Any) -> Any:
        """Return the handle to lay out.

        Called once per tree, after construction and before timing starts.
        Bindings that assemble their native tree lazily do it here.
        """
        return root

    def compute_layout(
        self,
        root: Any,
        width: float,
        height: float,
        direction: Direction,
    ) -> None:
        raise NotImplementedError

    def get_child(self, node: Any, index: int) -> Any:
        raise NotImplementedError

    def layout_box(self, node: Any) -> LayoutBox:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
