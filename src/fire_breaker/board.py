"""Game board engine: placement, movement, extinguishing and fire spread."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

import numpy as np
from mesa import Model
from mesa.space import SingleGrid

from .brigade import FireBrigade
from .cell import FieldKind, FieldSpec, FireStation, Forest, ForestCondition, GameField, Lake
from .constants import FIELD_SEPARATOR, MOVE_DISTANCE
from .errors import ErrorKind, RuleViolation
from .position import CardinalDirection, Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtinguishResult:
    """Outcome of one successful extinguish."""

    condition: ForestCondition
    gained_reputation: bool
    board_cleared: bool


class GameBoard(Model):
    """Rectangular board of lakes, fire stations and forest sections."""

    def __init__(self, layout: np.ndarray):
        """
        Initialize the board.

        Args:
            layout: 2D object matrix of FieldSpec, indexed [row, col].
                A read-only copy is kept to reset the board later.
        """
        super().__init__()
        self.rows, self.cols = layout.shape
        self._initial_layout = layout.copy()
        self._initial_layout.setflags(write=False)
        self.brigades: Dict[str, FireBrigade] = {}
        self._build_grid(self._initial_layout)

    def _build_grid(self, layout: np.ndarray) -> None:
        self.grid = SingleGrid(self.rows, self.cols, torus=False)
        for _, (row, col) in self.grid.coord_iter():
            field = self._create_field(layout[row, col])
            self.grid.place_agent(field, (row, col))

    def _create_field(self, spec: FieldSpec) -> GameField:
        if spec.kind is FieldKind.LAKE:
            return Lake(self)
        if spec.kind is FieldKind.STATION:
            return FireStation(self, spec.value)
        return Forest(self, ForestCondition(spec.value))

    def reset_to_initial(self) -> None:
        """Rebuild every field from the layout the board was created with."""
        for field in list(self.agents):
            self.grid.remove_agent(field)
            field.remove()
        self.brigades.clear()
        self._build_grid(self._initial_layout)
        logger.info(f"Board reset to its initial {self.rows}x{self.cols} layout")

    def field_at(self, position: Coordinate) -> GameField:
        return self.grid[position.row][position.col]

    def forest_at(self, position: Coordinate) -> Optional[Forest]:
        field = self.field_at(position)
        return field if isinstance(field, Forest) else None

    def forests(self) -> List[Forest]:
        return [field for field in self.agents if isinstance(field, Forest)]

    def _adjacent_fields(self, position: Coordinate, moore: bool = True) -> List[GameField]:
        """Fields around a position, diagonals included when moore is set."""
        return self.grid.get_neighbors((position.row, position.col), moore=moore, include_center=False)

    def _adjacent_positions(self, position: Coordinate, moore: bool = True) -> List[Coordinate]:
        return [Coordinate(*field.pos) for field in self._adjacent_fields(position, moore=moore)]

    def place_brigade(self, brigade: FireBrigade, target: Coordinate, base: Coordinate) -> bool:
        """
        Put a brigade next to a fire station.

        Args:
            brigade: The new brigade
            target: Where it should stand
            base: The owner's fire station

        Returns:
            True if the brigade now stands on the board. Only forest
            sections hold brigades, any other target leaves the board as is.

        Raises:
            RuleViolation: OUT_OF_BOUNDS, NOT_ADJACENT or CELL_BURNING
        """
        target.check(self.rows, self.cols)
        if target != base and target not in self._adjacent_positions(base):
            raise RuleViolation(ErrorKind.NOT_ADJACENT)
        forest = self.forest_at(target)
        if forest is None:
            return False
        forest.add_occupant(brigade.identifier)
        brigade.position = target
        self.brigades[brigade.identifier] = brigade
        logger.debug(f"Placed {brigade.identifier} at {target}")
        return True

    def move_brigade(self, brigade: FireBrigade, destination: Coordinate) -> None:
        """
        Move a brigade at most two forest sections away.

        The way may only lead straight through forest without a big fire.

        Raises:
            RuleViolation: OUT_OF_BOUNDS, SAME_POSITION, INVALID_DESTINATION or UNREACHABLE
        """
        destination.check(self.rows, self.cols)
        start = brigade.position
        if start == destination:
            raise RuleViolation(ErrorKind.SAME_POSITION)
        target = self.forest_at(destination)
        if target is None or target.is_burning:
            raise RuleViolation(ErrorKind.INVALID_DESTINATION)
        distance = self.path_length(start, destination)
        if distance is None or distance > MOVE_DISTANCE:
            raise RuleViolation(ErrorKind.UNREACHABLE)

        target.add_occupant(brigade.identifier)
        source = self.forest_at(start)
        if source is not None:
            source.remove_occupant(brigade.identifier)
        brigade.position = destination
        logger.debug(f"Moved {brigade.identifier} from {start} to {destination} in {distance} steps")

    def path_length(self, start: Coordinate, end: Coordinate) -> Optional[int]:
        """
        Breadth first search over forest sections without a big fire.

        Returns:
            Number of straight steps of the shortest way, None if there is none
        """
        queue = deque([start])
        distances = {start: 0}
        while queue:
            current = queue.popleft()
            if current == end:
                return distances[current]
            for neighbour in self._passable_neighbours(current):
                if neighbour not in distances:
                    distances[neighbour] = distances[current] + 1
                    queue.append(neighbour)
        return None

    def _passable_neighbours(self, position: Coordinate) -> List[Coordinate]:
        straight = sorted(self._adjacent_fields(position, moore=False), key=lambda field: field.pos)
        return [
            Coordinate(*field.pos)
            for field in straight
            if isinstance(field, Forest) and not field.is_severe_burning
        ]

    def extinguish(self, brigade: FireBrigade, target: Coordinate) -> ExtinguishResult:
        """
        Extinguish a field next to the brigade, diagonals included.

        Raises:
            RuleViolation: UNREACHABLE, CELL_IS_LAKE, CELL_IS_STATION or ALREADY_WET
        """
        if target not in self._adjacent_positions(brigade.position):
            raise RuleViolation(ErrorKind.UNREACHABLE)
        field = self.field_at(target)
        if isinstance(field, Lake):
            raise RuleViolation(ErrorKind.CELL_IS_LAKE)
        if isinstance(field, FireStation):
            raise RuleViolation(ErrorKind.CELL_IS_STATION)

        gained_reputation = field.extinguish_fire()
        logger.debug(f"{brigade.identifier} extinguished {target}, now {field.condition.name}")
        return ExtinguishResult(field.condition, gained_reputation, self.is_cleared())

    def has_refill_source(self, brigade: FireBrigade) -> bool:
        """True if a lake or a fire station is next to the brigade, diagonals included."""
        return any(
            isinstance(field, (Lake, FireStation)) for field in self._adjacent_fields(brigade.position)
        )

    def roll_fire(self, direction: Optional[CardinalDirection]) -> bool:
        """
        Spread the fire after a round.

        Every forest next to a big fire in the rolled direction and every
        small fire grow by one step. Brigades on a section turning into a
        big fire are caught.

        Returns:
            True if afterwards no brigade is left on the board
        """
        if direction is None or direction is CardinalDirection.NONE:
            return False
        to_increase = self._positions_to_increase(direction)
        for position in to_increase:
            for identifier in self.forest_at(position).increase_fire():
                caught = self.brigades.pop(identifier)
                caught.caught_by_fire = True
                logger.debug(f"{identifier} was caught by fire at {position}")
        logger.info(f"Fire rolled {direction.name}, {len(to_increase)} forest sections increased")
        return self.is_lost()

    def _positions_to_increase(self, direction: CardinalDirection) -> Set[Coordinate]:
        severe: List[Coordinate] = []
        to_increase: Set[Coordinate] = set()
        for field, (row, col) in self.grid.coord_iter():
            if not isinstance(field, Forest):
                continue
            if field.is_severe_burning:
                severe.append(Coordinate(row, col))
            elif field.has_small_fire:
                # Small fires grow whatever direction was rolled
                to_increase.add(Coordinate(row, col))
        for position in severe:
            for neighbour in position.neighbours(self.rows, self.cols, direction=direction):
                if self.forest_at(neighbour) is not None:
                    to_increase.add(neighbour)
        return to_increase

    def is_cleared(self) -> bool:
        return not any(forest.is_burning for forest in self.forests())

    def is_lost(self) -> bool:
        return not any(forest.occupants for forest in self.forests())

    def show_field(self, position: Coordinate) -> str:
        position.check(self.rows, self.cols)
        return str(self.field_at(position))

    def render(self) -> str:
        lines = []
        for row in range(self.rows):
            symbols = [self.grid[row][col].board_symbol() for col in range(self.cols)]
            lines.append(FIELD_SEPARATOR.join(symbols))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
