import logging
import time
from dataclasses import dataclass
from typing import FrozenSet

from .draw import TextRenderer
from .grid import Grid
from .guard import Guard
from .patrol_engine import PatrolEngine
from .position import Position
from .termination import Termination

logger = logging.getLogger(__name__)


@dataclass
class PatrolReport:
    termination: Termination
    guard: Guard
    ticks: int

    @property
    def visited(self) -> FrozenSet[Position]:
        return self.guard.visited

    @property
    def visited_count(self) -> int:
        """Distinct in-bounds cells occupied before the terminating step, start included."""
        return self.guard.visited_count


def simulate(
    grid: Grid,
    guard: Guard,
    window: TextRenderer | None = None,
    render_delay: float = 0.0,
) -> PatrolReport:
    """Run the patrol until the guard leaves the grid or gets stuck in a loop.

    Every tick moves the guard by one cell. At most ``width * height * 4``
    distinct arrival states exist, so the loop always ends.
    """
    engine = PatrolEngine(grid)

    t = 0
    while True:  # simulation loop
        if window:
            window.update_grid(grid, guard, t)
            if render_delay:
                time.sleep(render_delay)

        termination = engine.patrol(guard)
        if termination is not None:
            break
        t += 1

    logger.debug(
        "patrol ended with %s at %s after %d ticks, %d cells visited",
        termination,
        guard.position,
        t,
        guard.visited_count,
    )
    return PatrolReport(termination=termination, guard=guard, ticks=t)
