from enum import StrEnum


class Termination(StrEnum):
    """Why a patrol ended. Both are ordinary outcomes, not errors."""

    OUT_OF_BOUNDS = "out_of_bounds"
    STUCK = "stuck"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
