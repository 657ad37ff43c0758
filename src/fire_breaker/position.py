"""Grid coordinates and the cardinal directions fire can spread in."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import ErrorKind, RuleViolation


@dataclass(frozen=True)
class Coordinate:
    """Immutable (row, col) position on the board."""

    row: int
    col: int

    def in_bounds(self, rows: int, cols: int) -> bool:
        return 0 <= self.row < rows and 0 <= self.col < cols

    def check(self, rows: int, cols: int) -> None:
        """
        Ensure the coordinate lies on a board of the given size.

        Raises:
            RuleViolation: OUT_OF_BOUNDS if it does not
        """
        if not self.in_bounds(rows, cols):
            raise RuleViolation(ErrorKind.OUT_OF_BOUNDS)

    def offset(self, d_row: int, d_col: int) -> "Coordinate":
        return Coordinate(self.row + d_row, self.col + d_col)

    def neighbours(
        self,
        rows: int,
        cols: int,
        direction: Optional["CardinalDirection"] = None,
    ) -> List["Coordinate"]:
        """
        Enumerate the straight on-board neighbours a fire spreads to.

        Args:
            rows: Number of rows of the board
            cols: Number of columns of the board
            direction: Restricts the neighbours, defaults to all four

        Returns:
            Neighbours in the order of the direction's offsets
        """
        if direction is None:
            direction = CardinalDirection.ALL_DIRECTIONS
        candidates = [self.offset(d_row, d_col) for d_row, d_col in direction.offsets]
        return [candidate for candidate in candidates if candidate.in_bounds(rows, cols)]

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


class CardinalDirection(Enum):
    """
    Direction of a fire roll.

    The value is the die face selecting it; the offsets are the straight
    neighbours a big fire spreads to when rolled in that direction.
    """
    ALL_DIRECTIONS = (1, ((-1, 0), (0, 1), (1, 0), (0, -1)))
    NORTH = (2, ((-1, 0),))
    EAST = (3, ((0, 1),))
    SOUTH = (4, ((1, 0),))
    WEST = (5, ((0, -1),))
    NONE = (6, ())

    def __init__(self, roll: int, offsets: tuple):
        self.roll = roll
        self.offsets = offsets

    @classmethod
    def from_roll(cls, roll: int) -> "CardinalDirection":
        """Return the direction for a die value between 1 and 6."""
        for direction in cls:
            if direction.roll == roll:
                return direction
        raise ValueError(f"No cardinal direction for roll {roll}")
