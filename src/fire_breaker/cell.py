"""Board field agents: lakes, fire stations and forest sections."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Set

from mesa import Agent

from .constants import FIELD_SEPARATOR, LAKE_SYMBOL, NOT_BURNING
from .errors import ErrorKind, RuleViolation


class ForestCondition(Enum):
    """Fire intensity of a forest section, valued by its glyph."""
    DRY = "d"
    WET = "w"
    SMALL_FIRE = "+"
    BIG_FIRE = "*"

    @property
    def is_burning(self) -> bool:
        return self in (ForestCondition.SMALL_FIRE, ForestCondition.BIG_FIRE)

    def increase_fire(self) -> "ForestCondition":
        return _INCREASE[self]

    def extinguish_fire(self) -> "ForestCondition":
        """
        Return the condition after one extinguish.

        Raises:
            RuleViolation: ALREADY_WET for a wet section
        """
        if self is ForestCondition.WET:
            raise RuleViolation(ErrorKind.ALREADY_WET)
        return _EXTINGUISH[self]


_INCREASE = {
    ForestCondition.DRY: ForestCondition.SMALL_FIRE,
    ForestCondition.WET: ForestCondition.DRY,
    ForestCondition.SMALL_FIRE: ForestCondition.BIG_FIRE,
    ForestCondition.BIG_FIRE: ForestCondition.BIG_FIRE,
}

_EXTINGUISH = {
    ForestCondition.DRY: ForestCondition.WET,
    ForestCondition.SMALL_FIRE: ForestCondition.WET,
    ForestCondition.BIG_FIRE: ForestCondition.SMALL_FIRE,
}


class FieldKind(Enum):
    LAKE = "lake"
    STATION = "station"
    FOREST = "forest"


@dataclass(frozen=True)
class FieldSpec:
    """
    Immutable description of one field of the initial board.

    `value` is the owner tag for stations and the condition glyph for forests.
    """

    kind: FieldKind
    value: str = ""

    @classmethod
    def lake(cls) -> "FieldSpec":
        return cls(FieldKind.LAKE, LAKE_SYMBOL)

    @classmethod
    def station(cls, owner: str) -> "FieldSpec":
        return cls(FieldKind.STATION, owner)

    @classmethod
    def forest(cls, condition: ForestCondition = ForestCondition.DRY) -> "FieldSpec":
        return cls(FieldKind.FOREST, condition.value)


class GameField(Agent):
    """Agent occupying one cell of the board grid."""

    def __init__(self, model):
        super().__init__(model)

    def board_symbol(self) -> str:
        """Single character used by the board overview."""
        return NOT_BURNING


class Lake(GameField):
    def __str__(self) -> str:
        return LAKE_SYMBOL


class FireStation(GameField):
    """Base of one player, new brigades are placed next to it."""

    def __init__(self, model, owner: str):
        super().__init__(model)
        self.owner = owner

    def __str__(self) -> str:
        return self.owner


class Forest(GameField):
    """
    Burnable section of the board.

    The section keeps the identifiers of the fire brigades standing on it.
    The board keeps the brigades themselves and updates both sides.
    """

    def __init__(self, model, condition: ForestCondition = ForestCondition.DRY):
        """
        Initialize a forest section.

        Args:
            model: The GameBoard this section belongs to
            condition: Initial fire intensity
        """
        super().__init__(model)
        self.condition = condition
        self.occupants: Set[str] = set()

    @property
    def is_burning(self) -> bool:
        return self.condition.is_burning

    @property
    def is_severe_burning(self) -> bool:
        return self.condition is ForestCondition.BIG_FIRE

    @property
    def has_small_fire(self) -> bool:
        return self.condition is ForestCondition.SMALL_FIRE

    def add_occupant(self, identifier: str) -> None:
        if self.is_burning:
            raise RuleViolation(ErrorKind.CELL_BURNING)
        self.occupants.add(identifier)

    def remove_occupant(self, identifier: str) -> None:
        self.occupants.discard(identifier)

    def extinguish_fire(self) -> bool:
        """
        Extinguish this section once.

        Returns:
            True if a fire was fought, which earns a reputation point.
            Wetting a dry section earns nothing.
        """
        was_dry = self.condition is ForestCondition.DRY
        self.condition = self.condition.extinguish_fire()
        return not was_dry

    def increase_fire(self) -> List[str]:
        """
        Let the fire grow by one step.

        Returns:
            Identifiers of the brigades caught by a big fire, in sorted order.
            They are no longer occupants afterwards.
        """
        self.condition = self.condition.increase_fire()
        if not self.is_severe_burning:
            return []
        evicted = sorted(self.occupants)
        self.occupants.clear()
        return evicted

    def board_symbol(self) -> str:
        if self.is_burning:
            return self.condition.value
        return NOT_BURNING

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join([self.condition.value, *sorted(self.occupants)])
