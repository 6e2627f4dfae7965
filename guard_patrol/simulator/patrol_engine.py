from .grid import Grid
from .guard import Guard
from .termination import Termination

# After this many turns without moving, every facing has been tried.
MAX_TURNS_IN_PLACE = 3


class PatrolEngine:
    def __init__(self, grid: Grid):
        self.grid = grid

    def step(self, guard: Guard) -> Termination | None:
        """Advance the guard by a single action: one turn or one move.

        Returns the termination reason, or None when the patrol goes on.
        """
        next_position = self.grid.neighbor(guard.position, guard.direction)
        if next_position is None:
            return Termination.OUT_OF_BOUNDS

        if self.grid.is_obstacle(next_position):
            if guard.turns_in_place >= MAX_TURNS_IN_PLACE:
                # boxed in on all four sides
                return Termination.STUCK
            guard.turn()
            return None

        if guard.has_faced(next_position, guard.direction):
            return Termination.STUCK

        guard.move_to(next_position)
        return None

    def patrol(self, guard: Guard) -> Termination | None:
        """Turn as often as needed, then move one cell."""
        position = guard.position
        while True:
            termination = self.step(guard)
            if termination is not None or guard.position != position:
                return termination
