from typing import Any, FrozenSet, Iterable

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .position import Direction, Position


class Grid(BaseModel):
    """Bounded map with fixed obstacles.

    ``obstacles`` is a boolean array of shape ``(width, height)`` indexed
    ``[x, y]``. It is copied on construction and locked read-only, so a grid
    can be shared freely between trials and worker processes.
    """

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    obstacles: NDArray[np.bool_]

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("obstacles", mode="before")
    @classmethod
    def copy_obstacles(cls, value: Any) -> NDArray[np.bool_]:
        return np.array(value, dtype=np.bool_)

    @model_validator(mode="after")
    def check_shape(self) -> "Grid":
        if self.obstacles.shape != (self.width, self.height):
            raise ValueError(
                f"obstacle array has shape {self.obstacles.shape}, "
                f"expected {(self.width, self.height)}"
            )
        return self

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        self.obstacles.flags.writeable = False

    @classmethod
    def from_positions(
        cls, width: int, height: int, positions: Iterable[Position]
    ) -> "Grid":
        walls = np.zeros((width, height), dtype=np.bool_)
        for position in positions:
            if not (0 <= position.x < width and 0 <= position.y < height):
                raise ValueError(f"obstacle {position} lies outside a {width}x{height} grid")
            walls[position.x, position.y] = True
        return cls(width=width, height=height, obstacles=walls)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, position: Position) -> bool:
        """False for cells outside the grid; negative coordinates never wrap."""
        if not self.in_bounds(position.x, position.y):
            return False
        return bool(self.obstacles[position.x, position.y])

    def neighbor(self, position: Position, direction: Direction) -> Position | None:
        """Cell one step ahead, or None when that step leaves the grid."""
        dx, dy = direction.delta
        x, y = position.x + dx, position.y + dy
        if not self.in_bounds(x, y):
            return None
        return Position(x, y)

    def with_obstacle(self, position: Position) -> "Grid":
        """Copy of this grid with one extra obstacle.

        The caller guarantees ``position`` is neither an existing obstacle nor
        the guard's start cell.
        """
        if not self.in_bounds(position.x, position.y):
            raise ValueError(f"cannot place an obstacle at {position}: out of bounds")
        walls = self.obstacles.copy()
        walls[position.x, position.y] = True
        return Grid(width=self.width, height=self.height, obstacles=walls)

    def obstacle_positions(self) -> FrozenSet[Position]:
        xs, ys = np.nonzero(self.obstacles)
        return frozenset(Position(int(x), int(y)) for x, y in zip(xs, ys))
