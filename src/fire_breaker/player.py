"""Players, the reputation economy and the turn order."""

import logging
from enum import Enum, auto
from typing import Dict, List, NamedTuple, Set, Tuple

from .brigade import FireBrigade
from .constants import (
    AMOUNT_OF_PLAYERS,
    BRIGADE_COST,
    FIELD_SEPARATOR,
    PLAYER_TAGS,
    STARTING_REPUTATION,
    VALID_COMMAND,
)
from .errors import ErrorKind, InvariantViolation, RuleViolation
from .position import Coordinate

logger = logging.getLogger(__name__)


class Player:
    """One of the four players, owning a fire station in a corner."""

    def __init__(self, name: str, base: Coordinate):
        self.name = name
        self.base = base
        self.reputation = STARTING_REPUTATION
        self.brigades: Dict[str, FireBrigade] = {}
        self.brigades_created = 0

    @property
    def is_alive(self) -> bool:
        return any(not brigade.caught_by_fire for brigade in self.brigades.values())

    def first_brigade_position(self) -> Coordinate:
        """The forest section diagonally next to the station, towards the board centre."""
        row = 1 if self.base.row == 0 else self.base.row - 1
        col = 1 if self.base.col == 0 else self.base.col - 1
        return Coordinate(row, col)

    def create_brigade(self) -> FireBrigade:
        """
        Create the next brigade of this player without adding it yet.

        Raises:
            RuleViolation: INSUFFICIENT_REPUTATION if it cannot be paid
        """
        if self.reputation < BRIGADE_COST:
            raise RuleViolation(ErrorKind.INSUFFICIENT_REPUTATION)
        return self.new_brigade()

    def new_brigade(self) -> FireBrigade:
        return FireBrigade(f"{self.name}{self.brigades_created}")

    def add_brigade(self, brigade: FireBrigade, paid: bool = True) -> None:
        if paid:
            self.reputation -= BRIGADE_COST
        self.brigades_created += 1
        self.brigades[brigade.identifier] = brigade

    def find_brigade(self, identifier: str) -> FireBrigade:
        brigade = self.brigades.get(identifier)
        if brigade is None:
            raise RuleViolation(ErrorKind.BRIGADE_NOT_FOUND)
        return brigade

    def increase_reputation(self) -> None:
        self.reputation += 1

    def reset_brigades(self) -> None:
        for brigade in self.brigades.values():
            brigade.reset_for_new_turn()

    def remove_caught_brigades(self) -> List[str]:
        caught = sorted(i for i, brigade in self.brigades.items() if brigade.caught_by_fire)
        for identifier in caught:
            del self.brigades[identifier]
        return caught

    def __str__(self) -> str:
        lines = [f"{self.name}{FIELD_SEPARATOR}{self.reputation}"]
        lines.extend(str(self.brigades[identifier]) for identifier in sorted(self.brigades))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Player({self.name!r}, reputation={self.reputation})"


class RoundPhase(Enum):
    IDLE = auto()
    AWAITING_FIRE_ROLL = auto()
    GAME_OVER = auto()


class InitialPlacement(NamedTuple):
    brigade: FireBrigade
    target: Coordinate
    base: Coordinate


class PlayerManagement:
    """
    Turn manager for the four players.

    Players take turns in the fixed cycle A, B, C, D skipping eliminated
    ones. After every alive player had a turn the round is complete and
    the fire has to be rolled before anything else happens.
    """

    def __init__(self, rows: int, cols: int):
        """
        Create the players with their stations in the board corners.

        Args:
            rows: Number of rows of the board
            cols: Number of columns of the board
        """
        bases = {
            "A": Coordinate(0, 0),
            "B": Coordinate(rows - 1, cols - 1),
            "C": Coordinate(rows - 1, 0),
            "D": Coordinate(0, cols - 1),
        }
        self.players: List[Player] = [Player(tag, bases[tag]) for tag in PLAYER_TAGS]
        self._successors: Dict[str, Player] = {
            player.name: self.players[(index + 1) % len(self.players)]
            for index, player in enumerate(self.players)
        }
        self.start_player = self.players[0]
        self.current_player = self.start_player
        self.counter_per_round = 1
        self.phase = RoundPhase.IDLE
        self.dead_players: Set[str] = set()
        self._initialized_players = 0

    def player(self, name: str) -> Player:
        for player in self.players:
            if player.name == name:
                return player
        raise KeyError(name)

    def successor(self, player: Player) -> Player:
        return self._successors[player.name]

    def alive_players(self) -> List[Player]:
        return [player for player in self.players if player.is_alive]

    def next_alive_player(self, player: Player) -> Player:
        candidate = player
        for _ in range(len(self.players)):
            candidate = self.successor(candidate)
            if candidate.is_alive:
                return candidate
        raise InvariantViolation("No player is left alive to take the turn")

    def require_running(self) -> None:
        if self.phase is RoundPhase.GAME_OVER:
            raise RuleViolation(ErrorKind.GAME_OVER)

    def require_idle(self) -> None:
        """Reject player actions once the game ended or while a fire roll is due."""
        self.require_running()
        if self.phase is RoundPhase.AWAITING_FIRE_ROLL:
            raise RuleViolation(ErrorKind.MUST_ROLL_FIRE_FIRST)

    def end_game(self) -> None:
        self.phase = RoundPhase.GAME_OVER
        logger.info("Game over")

    def advance_turn(self) -> Tuple[bool, str]:
        """
        End the turn of the current player.

        Returns:
            (round_complete, name of the player whose turn starts). A
            complete round makes a fire roll due.
        """
        self.require_idle()
        self.current_player.reset_brigades()
        if self.counter_per_round == len(self.alive_players()):
            self.start_player = self.next_alive_player(self.start_player)
            self.current_player = self.start_player
            self.counter_per_round = 1
            self.phase = RoundPhase.AWAITING_FIRE_ROLL
            logger.info(f"Round complete, next round starts with {self.current_player.name}")
            return True, self.current_player.name
        self.counter_per_round += 1
        self.current_player = self.next_alive_player(self.current_player)
        logger.debug(f"Turn passes to {self.current_player.name}")
        return False, self.current_player.name

    def begin_fire_roll(self) -> None:
        """
        Accept a fire roll, which is only allowed right after a round.

        Raises:
            RuleViolation: GAME_OVER or ROLL_NOT_ALLOWED
        """
        self.require_running()
        if self.phase is not RoundPhase.AWAITING_FIRE_ROLL:
            raise RuleViolation(ErrorKind.ROLL_NOT_ALLOWED)
        self.phase = RoundPhase.IDLE

    def fire_roll_turn(self) -> str:
        """
        Book the brigades caught by the fire and eliminate players.

        Returns:
            The name of the player the turn passes to if the current player
            was eliminated, the current player's name if another player was
            eliminated, otherwise "OK"
        """
        someone_died = self._update_players()
        if not self.current_player.is_alive:
            self.current_player = self.next_alive_player(self.current_player)
            return self.current_player.name
        if someone_died:
            return self.current_player.name
        return VALID_COMMAND

    def _update_players(self) -> bool:
        someone_died = False
        for player in self.players:
            caught = player.remove_caught_brigades()
            if caught:
                logger.debug(f"Player {player.name} lost brigades {', '.join(caught)}")
            if not player.is_alive and player.name not in self.dead_players:
                self.dead_players.add(player.name)
                someone_died = True
                logger.info(f"Player {player.name} was eliminated")
        return someone_died

    def create_brigade_for_current(self) -> FireBrigade:
        return self.current_player.create_brigade()

    def add_brigade_to_current(self, brigade: FireBrigade) -> None:
        self.current_player.add_brigade(brigade)

    def find_brigade(self, identifier: str) -> FireBrigade:
        return self.current_player.find_brigade(identifier)

    def next_initial_placement(self) -> InitialPlacement:
        """
        Hand out the free starting brigade of the next player.

        Raises:
            InvariantViolation: when called more often than there are players
        """
        if self._initialized_players >= AMOUNT_OF_PLAYERS:
            raise InvariantViolation("Every player already received a starting brigade")
        player = self.players[self._initialized_players]
        brigade = player.new_brigade()
        player.add_brigade(brigade, paid=False)
        self._initialized_players += 1
        return InitialPlacement(brigade, player.first_brigade_position(), player.base)
