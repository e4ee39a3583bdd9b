"""
Startup detection of installed layout engines.

Loaders are tried in a fixed order. That order is also the order in which
engines are benchmarked and compared: the first engine found is the
comparison baseline.
"""

from typing import Callable, Optional

from . import taffy, yoga
from .base import AdapterUnavailable, LayoutEngine

EngineLoader = Callable[[], LayoutEngine]

ENGINE_LOADERS: dict[str, EngineLoader] = {
    "yoga": yoga.load,
    "taffy": taffy.load,
}


def list_engines() -> list[str]:
    """Names of all known engines in detection order."""
    return list(ENGINE_LOADERS.keys())


def detect_engines(
    names: Optional[list[str]] = None,
    loaders: Optional[dict[str, EngineLoader]] = None,
) -> tuple[list[LayoutEngine], dict[str, str]]:
    """Load every requested engine that is usable.

    Args:
        names: Engines to try, or None for all. The loader order is kept
            regardless of the order given here.
        loaders: Loader mapping to use instead of ENGINE_LOADERS.

    Returns:
        (engines, unavailable) where unavailable maps engine name to the
        reason it could not be loaded.
    """
    loaders = ENGINE_LOADERS if loaders is None else loaders

    if names is not None:
        unknown = [n for n in names if n not in loaders]
        if unknown:
            raise ValueError(
                f"Unknown engine(s): {', '.join(unknown)}. "
                f"Available: {', '.join(loaders)}"
            )

    engines: list[LayoutEngine] = []
    unavailable: dict[str, str] = {}

    for name, loader in loaders.items():
        if names is not None and name not in names:
            continue
        try:
            engines.append(loader())
        except AdapterUnavailable as e:
            unavailable[name] = e.reason
        except ImportError as e:
            unavailable[name] = str(e)

    return engines, unavailable
