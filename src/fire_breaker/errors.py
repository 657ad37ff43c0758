"""Failure kinds raised by the game engine."""

from enum import Enum, auto


class ErrorKind(Enum):
    """Player-facing rule violations."""
    OUT_OF_BOUNDS = auto()
    NOT_ADJACENT = auto()
    SAME_POSITION = auto()
    INVALID_DESTINATION = auto()
    UNREACHABLE = auto()
    CELL_BURNING = auto()
    CELL_IS_LAKE = auto()
    CELL_IS_STATION = auto()
    ALREADY_WET = auto()
    TANK_FULL = auto()
    TANK_EMPTY = auto()
    NO_ACTION_POINTS = auto()
    ALREADY_ACTED = auto()
    ALREADY_EXTINGUISHED_HERE = auto()
    NO_REFILL_SOURCE = auto()
    INSUFFICIENT_REPUTATION = auto()
    BRIGADE_NOT_FOUND = auto()
    GAME_OVER = auto()
    MUST_ROLL_FIRE_FIRST = auto()
    ROLL_NOT_ALLOWED = auto()


ERROR_MESSAGES = {
    ErrorKind.OUT_OF_BOUNDS: "The Position which was entered is invalid",
    ErrorKind.NOT_ADJACENT: "The position is not next to your fire station",
    ErrorKind.SAME_POSITION: "Points cannot be equal",
    ErrorKind.INVALID_DESTINATION: "Destination is not valid",
    ErrorKind.UNREACHABLE: "Points are not reachable",
    ErrorKind.CELL_BURNING: "The ground is burning",
    ErrorKind.CELL_IS_LAKE: "Lakes are not possible to extinguish",
    ErrorKind.CELL_IS_STATION: "You cant extinguish fire stations",
    ErrorKind.ALREADY_WET: "The forest is already wet",
    ErrorKind.TANK_FULL: "Tank is already full",
    ErrorKind.TANK_EMPTY: "The tank is empty you need to refill",
    ErrorKind.NO_ACTION_POINTS: "Not enough action points to perform this task",
    ErrorKind.ALREADY_ACTED: "This fire brigade has already performed an action",
    ErrorKind.ALREADY_EXTINGUISHED_HERE: "The position was already extinguished",
    ErrorKind.NO_REFILL_SOURCE: "There is no refill station next to you",
    ErrorKind.INSUFFICIENT_REPUTATION: "Your reputation points are not high enough to perform this action",
    ErrorKind.BRIGADE_NOT_FOUND: "The fire brigade does not exist",
    ErrorKind.GAME_OVER: "The game is over only show board is allowed",
    ErrorKind.MUST_ROLL_FIRE_FIRST: "The first player needs to roll before continuing",
    ErrorKind.ROLL_NOT_ALLOWED: "Its too early to be crushed by fire",
}


class RuleViolation(Exception):
    """A command broke a game rule. Nothing was changed."""

    def __init__(self, kind: ErrorKind):
        super().__init__(ERROR_MESSAGES[kind])
        self.kind = kind


class InvariantViolation(RuntimeError):
    """The engine was driven in a way correct sequencing never allows."""


class BoardFormatError(ValueError):
    """The textual board description could not be decoded."""
