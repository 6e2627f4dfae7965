import sys
from typing import TextIO

from .grid import Grid
from .guard import Guard
from .position import Position

OBSTACLE = "#"
VISITED = "x"
FLOOR = "."


def render_grid(grid: Grid, guard: Guard) -> str:
    """Text picture of the patrol: guard glyph, visited cells, obstacles, floor."""
    rows = []
    for y in range(grid.height):
        line = []
        for x in range(grid.width):
            cell = Position(x, y)
            if cell == guard.position:
                line.append(str(guard.direction))
            elif cell in guard.history:
                line.append(VISITED)
            elif grid.is_obstacle(cell):
                line.append(OBSTACLE)
            else:
                line.append(FLOOR)
        rows.append("".join(line))
    return "\n".join(rows)


class TextRenderer:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def update_grid(self, grid: Grid, guard: Guard, tick: int):
        self.stream.write(f"Time: {tick}\n")
        self.stream.write(render_grid(grid, guard))
        self.stream.write("\n\n")
        self.stream.flush()
