"""
Taffy engine adapter.

Drives the Rust Taffy engine through the ``stretchable`` bindings.
stretchable takes a node's style when the node is created, so this
adapter records properties on lightweight pending nodes and builds the
native tree in ``finalize``, before the timed layout call.

``stretchable.Node.compute_layout`` reads the whole layout back into
Python boxes after computing it. The timed call goes to ``taffylib``
directly instead, so only Taffy's own layout pass is measured.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .base import AdapterUnavailable, Direction, Edge, FlexDirection, LayoutBox, LayoutEngine

# stretchable is an optional dependency
try:
    from stretchable import Node
    from stretchable.node import taffy, taffylib
    from stretchable.style import AUTO
    from stretchable.style import FlexDirection as TaffyFlexDirection
    from stretchable.style.geometry.size import SizeAvailableSpace
    STRETCHABLE_AVAILABLE = True
except ImportError:
    STRETCHABLE_AVAILABLE = False
    Node = None
    taffy = None
    taffylib = None


# Order expected by stretchable for four-sided values
_SIDES = (Edge.TOP, Edge.RIGHT, Edge.BOTTOM, Edge.LEFT)


@dataclass
class PendingNode:
    """Node properties recorded before the native tree exists."""

    # Yoga lays out columns by default; match it so both engines do the same work
    flex_direction: FlexDirection = FlexDirection.COLUMN
    width: Optional[float] = None
    height: Optional[float] = None
    flex_grow: float = 0.0
    margin: dict = field(default_factory=dict)
    padding: dict = field(default_factory=dict)
    children: list = field(default_factory=list)


def _set_edge(sides: dict, edge: Edge, value: float) -> None:
    if edge is Edge.ALL:
        for side in _SIDES:
            sides[side] = value
    else:
        sides[edge] = value


def _walk(root: Any) -> list:
    """Every native node under ``root``, parents before children."""
    nodes = []
    stack = [root]
    while stack:
        node = stack.pop()
        nodes.append(node)
        stack.extend(node)
    return nodes


class TaffyEngine(LayoutEngine):
    """Adapter for the Taffy engine."""

    name = "taffy"
    label = "Taffy"

    def __init__(self):
        if not STRETCHABLE_AVAILABLE:
            raise AdapterUnavailable(self.name, "stretchable is not installed")

        self._flex_directions = {
            FlexDirection.ROW: TaffyFlexDirection.ROW,
            FlexDirection.COLUMN: TaffyFlexDirection.COLUMN,
        }
        self._available_space: dict = {}

    def create_node(self) -> PendingNode:
        return PendingNode()

    def set_flex_direction(self, node: PendingNode, direction: FlexDirection) -> None:
        node.flex_direction = direction

    def set_width(self, node: PendingNode, value: float) -> None:
        node.width = value

    def set_height(self, node: PendingNode, value: float) -> None:
        node.height = value

    def set_flex_grow(self, node: PendingNode, value: float) -> None:
        node.flex_grow = value

    def set_margin(self, node: PendingNode, edge: Edge, value: float) -> None:
        _set_edge(node.margin, edge, value)

    def set_padding(self, node: PendingNode, edge: Edge, value: float) -> None:
        _set_edge(node.padding, edge, value)

    def insert_child(self, parent: PendingNode, child: PendingNode, index: int) -> None:
        parent.children.insert(index, child)

    def finalize(self, root: PendingNode) -> Any:
        return self._build(root)

    def _build(self, pending: PendingNode) -> Any:
        native = Node(
            flex_direction=self._flex_directions[pending.flex_direction],
            flex_grow=pending.flex_grow,
            size=(
                AUTO if pending.width is None else pending.width,
                AUTO if pending.height is None else pending.height,
            ),
            margin=tuple(pending.margin.get(side, 0) for side in _SIDES),
            padding=tuple(pending.padding.get(side, 0) for side in _SIDES),
        )
        for child in pending.children:
            native.add(self._build(child))
        return native

    def available_space(self, width: float, height: float) -> dict:
        """Taffy's available-space argument for a viewport, built once per size."""
        key = (width, height)
        space = self._available_space.get(key)
        if space is None:
            space = SizeAvailableSpace(width, height).to_dict()
            self._available_space[key] = space
        return space

    def compute_layout(
        self,
        root: Any,
        width: float,
        height: float,
        direction: Direction,
    ) -> None:
        # Taffy has no writing direction input; every tree is laid out LTR
        if not taffylib.node_compute_layout(
            taffy._ptr, root._node_id, self.available_space(width, height)
        ):
            raise RuntimeError("taffy layout failed")

    def release(self, root: Any) -> None:
        """Drop every native node of the tree rooted at ``root``.

        stretchable never frees nodes on its own, so each tree would
        otherwise stay allocated for the lifetime of the process.
        """
        for node in reversed(_walk(root)):
            taffylib.node_drop(taffy._ptr, node._node_id)

    def get_child(self, node: Any, index: int) -> Any:
        return node[index]

    def layout_box(self, node: Any) -> LayoutBox:
        layout = taffylib.PyLayout()
        taffylib.node_get_layout(taffy._ptr, node._node_id, layout)
        return LayoutBox(layout.x, layout.y, layout.width, layout.height)


def load() -> TaffyEngine:
    """Loader used by engine detection."""
    return TaffyEngine()
