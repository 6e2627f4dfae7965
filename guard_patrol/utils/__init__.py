from .grid_reader import load_grid, parse_grid
from .measure_time import timing_decorator
