from guard_patrol.config import SearchSettings
from guard_patrol.optimizer import TrialEvaluator, candidate_positions, placement_search
from guard_patrol.simulator import Position, Termination, simulate
from guard_patrol.utils import parse_grid

from guard_patrol.test_simulator import EXAMPLE, OPEN_RECTANGLE


def _original_run(text):
    grid, start = parse_grid(text)
    return grid, start, simulate(grid, start.spawn())


def test_candidates_come_from_the_original_path():
    grid, start, report = _original_run(OPEN_RECTANGLE)
    candidates = candidate_positions(grid, start, report.visited)

    assert start.position not in candidates
    assert set(candidates) == report.visited - {start.position}
    assert candidates == [
        Position(1, 1),
        Position(2, 1),
        Position(3, 1),
        Position(1, 2),
        Position(3, 2),
        Position(0, 3),
        Position(2, 3),
        Position(3, 3),
    ]


def test_candidates_skip_existing_obstacles():
    grid, start = parse_grid(OPEN_RECTANGLE)
    visited = {start.position, Position(1, 0), Position(2, 2)}
    assert candidate_positions(grid, start, visited) == [Position(2, 2)]


def test_candidates_skip_cells_outside_the_grid():
    grid, start = parse_grid(OPEN_RECTANGLE)
    visited = {start.position, Position(2, 2), Position(-1, 0), Position(5, 0), Position(0, 5)}
    assert candidate_positions(grid, start, visited) == [Position(2, 2)]


def test_single_loop_placement_closes_the_rectangle():
    grid, start, report = _original_run(OPEN_RECTANGLE)
    assert report.termination == Termination.OUT_OF_BOUNDS

    placements = placement_search(grid, start, report.visited)
    assert placements.loop_count == 1
    assert placements.loop_positions == [Position(0, 3)]
    assert placements.trials == 8


def test_example_has_six_loop_placements():
    grid, start, report = _original_run(EXAMPLE)
    placements = placement_search(grid, start, report.visited)
    assert placements.loop_count == 6
    assert placements.trials == report.visited_count - 1
    assert set(placements.loop_positions) <= report.visited


def test_search_does_not_mutate_inputs():
    grid, start, report = _original_run(OPEN_RECTANGLE)
    visited = set(report.visited)
    snapshot = set(visited)
    obstacles = grid.obstacle_positions()

    placement_search(grid, start, visited)

    assert visited == snapshot
    assert grid.obstacle_positions() == obstacles
    assert report.visited == snapshot


def test_parallel_search_matches_sequential():
    grid, start, report = _original_run(EXAMPLE)
    settings = SearchSettings(parallel=True, processes=2, chunk_size=4)
    placements = placement_search(grid, start, report.visited, settings)
    sequential = placement_search(grid, start, report.visited)
    assert placements.loop_positions == sequential.loop_positions
    assert placements.trials == sequential.trials


def test_empty_candidate_list():
    grid, start = parse_grid("^\n")
    placements = placement_search(
        grid, start, {start.position}, SearchSettings(parallel=True)
    )
    assert placements.loop_count == 0
    assert placements.trials == 0


def test_trial_evaluator_counts_evaluations():
    grid, start = parse_grid(OPEN_RECTANGLE)
    evaluator = TrialEvaluator(grid, start)
    assert evaluator.evaluate(Position(0, 3)) == Termination.STUCK
    assert evaluator.evaluate(Position(1, 2)) == Termination.OUT_OF_BOUNDS
    assert evaluator.get_evaluation_count() == 2
    assert not grid.is_obstacle(Position(0, 3))
