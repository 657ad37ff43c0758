"""Game handler: one method per player command."""

import logging
from typing import Optional

from .board import GameBoard
from .constants import PLAYERS_HAVE_LOST, PLAYERS_HAVE_WON, VALID_COMMAND
from .errors import ErrorKind, RuleViolation
from .player import PlayerManagement
from .position import CardinalDirection, Coordinate

logger = logging.getLogger(__name__)


class GameHandler:
    """
    Runs a game session on one board.

    Every command validates the game phase, then the board and the brigade
    before anything is changed, so a rejected command leaves the game as it
    was. Results are the strings shown to the players.
    """

    def __init__(self, board: GameBoard):
        self.board = board
        self.players = PlayerManagement(board.rows, board.cols)
        self._place_initial_brigades()

    def _place_initial_brigades(self) -> None:
        for _ in self.players.players:
            placement = self.players.next_initial_placement()
            self.board.place_brigade(placement.brigade, placement.target, placement.base)

    def reset(self) -> str:
        """Start over from the initial board with fresh players."""
        self.board.reset_to_initial()
        self.players = PlayerManagement(self.board.rows, self.board.cols)
        self._place_initial_brigades()
        logger.info("Game reset")
        return VALID_COMMAND

    def turn(self) -> str:
        round_complete, name = self.players.advance_turn()
        if round_complete:
            logger.debug("Fire roll is due")
        return name

    def fire_to_roll(self, direction: Optional[CardinalDirection]) -> str:
        self.players.begin_fire_roll()
        if self.board.roll_fire(direction):
            self.players.end_game()
            logger.info("No fire brigade is left, the players have lost")
            return PLAYERS_HAVE_LOST
        return self.players.fire_roll_turn()

    def buy_fire_engine(self, position: Coordinate) -> str:
        """
        Buy a brigade for the current player and place it next to its station.

        Returns:
            The reputation the player has left
        """
        self.players.require_idle()
        brigade = self.players.create_brigade_for_current()
        if not self.board.place_brigade(brigade, position, self.players.current_player.base):
            # Only forest sections hold brigades, a brigade that cannot stand anywhere is not sold
            raise RuleViolation(ErrorKind.INVALID_DESTINATION)
        self.players.add_brigade_to_current(brigade)
        logger.debug(f"Player {self.players.current_player.name} bought {brigade.identifier}")
        return str(self.players.current_player.reputation)

    def refill(self, identifier: str) -> str:
        """
        Refill the tank of a brigade next to a lake or a fire station.

        Returns:
            The action points the brigade has left
        """
        self.players.require_idle()
        brigade = self.players.find_brigade(identifier)
        brigade.require_action_points()
        if not self.board.has_refill_source(brigade):
            raise RuleViolation(ErrorKind.NO_REFILL_SOURCE)
        brigade.refill()
        return str(brigade.action_points)

    def extinguish(self, identifier: str, target: Coordinate) -> str:
        """
        Extinguish a field next to a brigade.

        Returns:
            "win" if no fire is left, otherwise the new condition glyph and
            the action points the brigade has left
        """
        self.players.require_idle()
        brigade = self.players.find_brigade(identifier)
        brigade.require_action_points()
        brigade.validate_extinguish(target)
        result = self.board.extinguish(brigade, target)
        if result.board_cleared:
            self.players.end_game()
            logger.info("Every fire is extinguished, the players have won")
            return PLAYERS_HAVE_WON
        if result.gained_reputation:
            self.players.current_player.increase_reputation()
        brigade.apply_extinguish(target)
        return f"{result.condition.value},{brigade.action_points}"

    def move(self, identifier: str, destination: Coordinate) -> str:
        self.players.require_idle()
        brigade = self.players.find_brigade(identifier)
        brigade.validate_move()
        self.board.move_brigade(brigade, destination)
        brigade.spend_move()
        return VALID_COMMAND

    def show_board(self) -> str:
        return self.board.render()

    def show_field(self, position: Coordinate) -> str:
        return self.board.show_field(position)

    def show_player(self) -> str:
        self.players.require_running()
        return str(self.players.current_player)
