from pathlib import Path
from typing import List, Tuple

from guard_patrol.simulator import Direction, Grid, GuardStart, Position

OBSTACLE = "#"
GUARD_GLYPHS = {direction.value: direction for direction in Direction}


def parse_grid(text: str) -> Tuple[Grid, GuardStart]:
    """Parse a text map into a grid and the guard's start state.

    ``#`` marks an obstacle, ``^ > v <`` the guard and its facing, anything
    else is open floor. Blank lines are ignored.

    The width is taken from the first row and every other row must match it;
    a ragged map raises ValueError instead of being padded or truncated.
    """
    rows = [line for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("grid is empty")

    width = len(rows[0])
    height = len(rows)

    obstacles: List[Position] = []
    guards: List[GuardStart] = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"row {y} has length {len(row)}, expected {width} like the first row"
            )
        for x, char in enumerate(row):
            if char == OBSTACLE:
                obstacles.append(Position(x, y))
            elif char in GUARD_GLYPHS:
                guards.append(GuardStart(Position(x, y), GUARD_GLYPHS[char]))

    if not guards:
        raise ValueError("grid has no guard, expected one of '^', '>', 'v', '<'")
    if len(guards) > 1:
        positions = ", ".join(str(guard.position) for guard in guards)
        raise ValueError(f"grid has {len(guards)} guards at {positions}, expected one")

    return Grid.from_positions(width, height, obstacles), guards[0]


def load_grid(path: str | Path) -> Tuple[Grid, GuardStart]:
    grid_path = Path(path)

    if not grid_path.exists():
        raise FileNotFoundError(f"Grid file not found at {path}")
    return parse_grid(grid_path.read_text())
