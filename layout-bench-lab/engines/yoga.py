"""
Yoga engine adapter.

Drives Facebook's Yoga flexbox engine through the ``poga`` bindings,
which expose Yoga's C API one function at a time.
"""

from typing import Any

from .base import AdapterUnavailable, Direction, Edge, FlexDirection, LayoutBox, LayoutEngine

# poga is an optional dependency
try:
    from poga import libpoga_capi as yg
    POGA_AVAILABLE = True
except ImportError:
    POGA_AVAILABLE = False
    yg = None


class YogaEngine(LayoutEngine):
    """Adapter for the native Yoga engine."""

    name = "yoga"
    label = "Yoga"

    def __init__(self):
        if not POGA_AVAILABLE:
            raise AdapterUnavailable(self.name, "poga is not installed")

        try:
            self._flex_directions = {
                FlexDirection.ROW: yg.YGFlexDirection.Row,
                FlexDirection.COLUMN: yg.YGFlexDirection.Column,
            }
            self._edges = {
                Edge.LEFT: yg.YGEdge.Left,
                Edge.TOP: yg.YGEdge.Top,
                Edge.RIGHT: yg.YGEdge.Right,
                Edge.BOTTOM: yg.YGEdge.Bottom,
                Edge.ALL: yg.YGEdge.All,
            }
            self._directions = {
                Direction.LTR: yg.YGDirection.LTR,
                Direction.RTL: yg.YGDirection.RTL,
            }
        except AttributeError as e:
            raise AdapterUnavailable(self.name, f"unsupported poga version: {e}") from e

    def create_node(self) -> Any:
        return yg.YGNodeNew()

    def set_flex_direction(self, node: Any, direction: FlexDirection) -> None:
        yg.YGNodeStyleSetFlexDirection(node, self._flex_directions[direction])

    def set_width(self, node: Any, value: float) -> None:
        yg.YGNodeStyleSetWidth(node, value)

    def set_height(self, node: Any, value: float) -> None:
        yg.YGNodeStyleSetHeight(node, value)

    def set_flex_grow(self, node: Any, value: float) -> None:
        yg.YGNodeStyleSetFlexGrow(node, value)

    def set_margin(self, node: Any, edge: Edge, value: float) -> None:
        yg.YGNodeStyleSetMargin(node, self._edges[edge], value)

    def set_padding(self, node: Any, edge: Edge, value: float) -> None:
        yg.YGNodeStyleSetPadding(node, self._edges[edge], value)

    def insert_child(self, parent: Any, child: Any, index: int) -> None:
        yg.YGNodeInsertChild(parent, child, index)

    def compute_layout(
        self,
        root: Any,
        width: float,
        height: float,
        direction: Direction,
    ) -> None:
        yg.YGNodeCalculateLayout(root, width, height, self._directions[direction])

    def release(self, root: Any) -> None:
        """Free the native tree rooted at ``root``."""
        yg.YGNodeFreeRecursive(root)

    def get_child(self, node: Any, index: int) -> Any:
        return yg.YGNodeGetChild(node, index)

    def layout_box(self, node: Any) -> LayoutBox:
        return LayoutBox(
            yg.YGNodeLayoutGetLeft(node),
            yg.YGNodeLayoutGetTop(node),
            yg.YGNodeLayoutGetWidth(node),
            yg.YGNodeLayoutGetHeight(node),
        )


def load() -> YogaEngine:
    """Loader used by engine detection."""
    return YogaEngine()
