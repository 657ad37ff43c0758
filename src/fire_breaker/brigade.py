"""Fire brigade units and their per-turn action budget."""

from typing import Optional, Set

from .constants import ACTION_POINTS, FIELD_SEPARATOR, TANK_CAPACITY
from .errors import ErrorKind, RuleViolation
from .position import Coordinate


class FireBrigade:
    """
    A mobile fire fighting unit owned by one player.

    The identifier is the owner's tag followed by a sequence number, e.g. "A0".
    Brigades compare and sort by identifier.
    """

    def __init__(self, identifier: str):
        self.identifier = identifier
        self.tank_level = TANK_CAPACITY
        self.action_points = ACTION_POINTS
        self.performed_action = False
        self.extinguished_this_turn: Set[Coordinate] = set()
        self.caught_by_fire = False
        self.position: Optional[Coordinate] = None

    def require_action_points(self) -> None:
        if self.action_points == 0:
            raise RuleViolation(ErrorKind.NO_ACTION_POINTS)

    def refill(self) -> None:
        """
        Fill the tank completely, spending one action point.

        Raises:
            RuleViolation: TANK_FULL if nothing is missing,
                NO_ACTION_POINTS if the budget is used up
        """
        if self.tank_level == TANK_CAPACITY:
            raise RuleViolation(ErrorKind.TANK_FULL)
        self.require_action_points()
        self.tank_level = TANK_CAPACITY
        self.action_points -= 1
        self.performed_action = True

    def validate_extinguish(self, target: Coordinate) -> None:
        if target in self.extinguished_this_turn:
            raise RuleViolation(ErrorKind.ALREADY_EXTINGUISHED_HERE)
        if self.tank_level == 0:
            raise RuleViolation(ErrorKind.TANK_EMPTY)

    def apply_extinguish(self, target: Coordinate) -> None:
        self.tank_level -= 1
        self.extinguished_this_turn.add(target)
        self.action_points -= 1
        self.performed_action = True

    def validate_move(self) -> None:
        """A move is only allowed before any other action of this turn."""
        self.require_action_points()
        if self.performed_action:
            raise RuleViolation(ErrorKind.ALREADY_ACTED)

    def spend_move(self) -> None:
        # Moving does not count as a performed action, a second move stays legal
        self.action_points -= 1

    def reset_for_new_turn(self) -> None:
        self.extinguished_this_turn.clear()
        self.performed_action = False
        self.action_points = ACTION_POINTS

    def __eq__(self, other) -> bool:
        if not isinstance(other, FireBrigade):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __lt__(self, other: "FireBrigade") -> bool:
        return self.identifier < other.identifier

    def __repr__(self) -> str:
        return f"FireBrigade({self.identifier!r})"

    def __str__(self) -> str:
        row, col = (self.position.row, self.position.col) if self.position else ("-", "-")
        return FIELD_SEPARATOR.join(
            str(part) for part in (self.identifier, self.tank_level, self.action_points, row, col)
        )
