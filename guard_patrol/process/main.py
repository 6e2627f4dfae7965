import logging
from typing import Iterable, Tuple

from guard_patrol.config import SimulationConfig
from guard_patrol.optimizer import PlacementReport, placement_search
from guard_patrol.simulator import (
    Grid,
    GuardStart,
    PatrolReport,
    Position,
    TextRenderer,
    simulate,
)
from guard_patrol.utils import timing_decorator

logger = logging.getLogger(__name__)


class MainProcess:
    def __init__(
        self,
        config: SimulationConfig,
        grid: Grid,
        start: GuardStart,
        window: TextRenderer | None = None,
    ):
        self.config = config
        self.grid = grid
        self.start = start
        if window is None and config.simulator.render:
            window = TextRenderer()
        self.window = window

    @timing_decorator
    def solve_part_one(self) -> PatrolReport:
        report = simulate(
            self.grid,
            self.start.spawn(),
            window=self.window,
            render_delay=self.config.simulator.render_delay if self.window else 0.0,
        )
        logger.info(
            "Game over: %s after %d ticks, %d cells visited",
            report.termination,
            report.ticks,
            report.visited_count,
        )
        return report

    @timing_decorator
    def solve_part_two(self, visited: Iterable[Position]) -> PlacementReport:
        return placement_search(self.grid, self.start, visited, self.config.search)

    def run(self) -> Tuple[PatrolReport, PlacementReport]:
        part_one = self.solve_part_one()
        part_two = self.solve_part_two(part_one.visited)
        return part_one, part_two
