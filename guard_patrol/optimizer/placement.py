import logging
import time
from dataclasses import dataclass, field
from multiprocessing.pool import Pool
from typing import Iterable, List

from guard_patrol.config import SearchSettings
from guard_patrol.simulator import Grid, GuardStart, Position, Termination

from .common import TrialEvaluator

logger = logging.getLogger(__name__)


@dataclass
class PlacementReport:
    loop_positions: List[Position] = field(default_factory=list)
    trials: int = 0
    elapsed: float = 0.0

    @property
    def loop_count(self) -> int:
        return len(self.loop_positions)


def candidate_positions(
    grid: Grid, start: GuardStart, visited: Iterable[Position]
) -> List[Position]:
    """Cells of the original path that may take a new obstacle, row by row.

    Cells the guard never reached are never candidates.
    """
    return sorted(
        (
            position
            for position in frozenset(visited)
            if position != start.position
            and grid.in_bounds(position.x, position.y)
            and not grid.is_obstacle(position)
        ),
        key=lambda position: (position.y, position.x),
    )


def placement_search(
    grid: Grid,
    start: GuardStart,
    visited: Iterable[Position],
    settings: SearchSettings | None = None,
) -> PlacementReport:
    """Count single-obstacle placements on the original path that trap the guard."""
    settings = settings or SearchSettings()
    evaluator = TrialEvaluator(grid, start)
    candidates = candidate_positions(grid, start, visited)

    start_time = time.perf_counter()
    logger.info("trying %d candidate obstacle placements", len(candidates))

    if settings.parallel and candidates:
        with Pool(processes=settings.processes) as pool:
            outcomes = pool.map(evaluator, candidates, chunksize=settings.chunk_size)
        trials = len(outcomes)
    else:
        outcomes = [evaluator.evaluate(candidate) for candidate in candidates]
        trials = evaluator.get_evaluation_count()

    loop_positions = [
        candidate
        for candidate, outcome in zip(candidates, outcomes)
        if outcome == Termination.STUCK
    ]
    elapsed = time.perf_counter() - start_time
    logger.info(
        "%d of %d placements trap the guard (%.2f s)",
        len(loop_positions),
        trials,
        elapsed,
    )
    return PlacementReport(loop_positions=loop_positions, trials=trials, elapsed=elapsed)
