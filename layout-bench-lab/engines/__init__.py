"""
Layout engine adapters.

Provides the adapter interface, the concrete engine bindings and
startup detection of the engines that are installed.
"""

from .base import (
    AdapterUnavailable,
    Direction,
    Edge,
    FlexDirection,
    LayoutBox,
    LayoutEngine,
)

from .detection import (
    ENGINE_LOADERS,
    EngineLoader,
    detect_engines,
    list_engines,
)

__all__ = [
    # Interface
    "AdapterUnavailable",
    "Direction",
    "Edge",
    "FlexDirection",
    "LayoutBox",
    "LayoutEngine",
    # Detection
    "ENGINE_LOADERS",
    "EngineLoader",
    "detect_engines",
    "list_engines",
]
