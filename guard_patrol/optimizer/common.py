from guard_patrol.simulator import Grid, GuardStart, Position, Termination, simulate


class TrialEvaluator:
    """Re-runs the patrol from the original start with one extra obstacle."""

    def __init__(self, grid: Grid, start: GuardStart):
        self.grid = grid
        self.start = start
        self.evaluations: int = 0

    def evaluate(self, candidate: Position) -> Termination:
        self.evaluations += 1
        trial_grid = self.grid.with_obstacle(candidate)
        return simulate(trial_grid, self.start.spawn()).termination

    def __call__(self, candidate: Position) -> Termination:
        return self.evaluate(candidate)

    def get_evaluation_count(self) -> int:
        return self.evaluations
