"""
Fire Breaker game engine.

Rule engine of a turn based fire fighting game: four players command fire
brigades on a grid of forest, lakes and fire stations while the fire
spreads after every round.
"""

from .board import ExtinguishResult, GameBoard
from .board_loader import load_board, parse_board
from .brigade import FireBrigade
from .cell import FieldKind, FieldSpec, FireStation, Forest, ForestCondition, GameField, Lake
from .errors import BoardFormatError, ErrorKind, ERROR_MESSAGES, InvariantViolation, RuleViolation
from .game import GameHandler
from .player import Player, PlayerManagement, RoundPhase
from .position import CardinalDirection, Coordinate

__version__ = "0.1.0"

__all__ = [
    "BoardFormatError",
    "CardinalDirection",
    "Coordinate",
    "ERROR_MESSAGES",
    "ErrorKind",
    "ExtinguishResult",
    "FieldKind",
    "FieldSpec",
    "FireBrigade",
    "FireStation",
    "Forest",
    "ForestCondition",
    "GameBoard",
    "GameField",
    "GameHandler",
    "InvariantViolation",
    "Lake",
    "Player",
    "PlayerManagement",
    "RoundPhase",
    "RuleViolation",
    "load_board",
    "parse_board",
]
