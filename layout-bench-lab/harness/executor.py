"""
Timed execution of a single scenario iteration.
"""

from engines.base import Direction, LayoutEngine
from instrumentation.timing import DEFAULT_CLOCK, Clock, elapsed_ms
from scenarios.definitions import Scenario


class LayoutComputationFailure(Exception):
    """Raised when an engine fails to lay out a scenario's tree."""

    def __init__(self, scenario: Scenario, engine: LayoutEngine, cause: Exception):
        self.scenario = scenario
        self.engine = engine
        self.cause = cause
        super().__init__(
            f"{engine.name}: layout of '{scenario.name}' failed: {cause!r}"
        )


class TimedExecutor:
    """Builds a fresh tree and times one layout computation on it.

    Only the ``compute_layout`` call falls inside the timed interval;
    building and releasing the tree do not.
    """

    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        direction: Direction = Direction.LTR,
        clock: Clock = DEFAULT_CLOCK,
    ):
        self.width = width
        self.height = height
        self.direction = direction
        self.clock = clock

    def run(self, scenario: Scenario, engine: LayoutEngine) -> float:
        """Run one iteration and return the layout duration in milliseconds.

        Raises:
            LayoutComputationFailure: If the engine's layout call raises.
        """
        root = engine.finalize(scenario.build(engine))
        clock = self.clock
        try:
            try:
                start = clock()
                engine.compute_layout(root, self.width, self.height, self.direction)
                end = clock()
            except Exception as e:
                raise LayoutComputationFailure(scenario, engine, e) from e
            return elapsed_ms(start, end)
        finally:
            release = getattr(engine, "release", None)
            if release is not None:
                release(root)
