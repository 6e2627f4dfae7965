from .position import Position, Direction
from .termination import Termination
from .grid import Grid
from .guard import Guard, GuardStart
from .patrol_engine import PatrolEngine
from .simulation_engine import PatrolReport, simulate
from .draw import TextRenderer, render_grid

__all__ = [
    "Position",
    "Direction",
    "Termination",
    "Grid",
    "Guard",
    "GuardStart",
    "PatrolEngine",
    "PatrolReport",
    "simulate",
    "TextRenderer",
    "render_grid",
]
