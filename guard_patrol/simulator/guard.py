from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List

from .position import Direction, Position


@dataclass(frozen=True)
class GuardStart:
    """Where and how the guard begins a patrol."""

    position: Position
    direction: Direction

    def spawn(self) -> "Guard":
        return Guard(position=self.position, direction=self.direction)


@dataclass
class Guard:
    """Patrolling agent with its visited history.

    The history maps every occupied cell to the directions the guard faced on
    arrival there, in arrival order. The start cell is recorded with the
    initial direction.
    """

    position: Position
    direction: Direction
    history: Dict[Position, List[Direction]] = field(default_factory=dict)
    turns_in_place: int = 0

    def __post_init__(self):
        self.history.setdefault(self.position, [self.direction])

    @property
    def visited(self) -> FrozenSet[Position]:
        return frozenset(self.history)

    @property
    def visited_count(self) -> int:
        return len(self.history)

    @property
    def first_directions(self) -> Dict[Position, Direction]:
        return {position: headings[0] for position, headings in self.history.items()}

    def has_faced(self, position: Position, direction: Direction) -> bool:
        return direction in self.history.get(position, ())

    def turn(self):
        self.direction = self.direction.turn_right()
        self.turns_in_place += 1

    def move_to(self, position: Position):
        self.position = position
        self.turns_in_place = 0
        headings = self.history.setdefault(position, [])
        if self.direction not in headings:
            headings.append(self.direction)
