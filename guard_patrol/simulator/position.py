from dataclasses import dataclass
from enum import StrEnum
from typing import Tuple


@dataclass(frozen=True)
class Position:
    """Immutable cell coordinate; x is the column, y the row (growing downward)."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(StrEnum):
    """Guard facing. The value is the glyph used on the map."""

    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    def turn_right(self) -> "Direction":
        return _CLOCKWISE[self]

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.value


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}
