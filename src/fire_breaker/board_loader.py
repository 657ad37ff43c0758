"""Decoding of the textual board description into a field matrix.

The description is a single comma separated string:

    rows,cols,f(0,0),f(0,1),...,f(rows-1,cols-1)

Fire stations sit in the corners, lakes in the middle of each border and
the starting brigades diagonally next to their stations. Every other
field is a forest section given by its condition glyph.
"""

import logging
import re
from typing import Dict, Tuple

import numpy as np

from .board import GameBoard
from .cell import FieldSpec, ForestCondition
from .constants import FIELD_SEPARATOR, LAKE_SYMBOL, MINIMUM_BOARD_SIZE
from .errors import BoardFormatError

logger = logging.getLogger(__name__)

_ODD_INTEGER = re.compile(r"[0-9]*[13579]")
_FOREST_GLYPHS = {condition.value for condition in ForestCondition}


def _parse_size(value: str) -> int:
    if not _ODD_INTEGER.fullmatch(value):
        raise BoardFormatError(f"Board size must be an odd integer, got {value!r}")
    size = int(value)
    if size < MINIMUM_BOARD_SIZE:
        raise BoardFormatError("The entered board is too small")
    return size


def _fixed_fields(rows: int, cols: int) -> Dict[Tuple[int, int], str]:
    """Fields every board has at the same place, stations taking precedence."""
    fixed: Dict[Tuple[int, int], str] = {}
    brigades = {
        (1, 1): "A0",
        (1, cols - 2): "D0",
        (rows - 2, 1): "C0",
        (rows - 2, cols - 2): "B0",
    }
    lakes = {
        (0, cols // 2): LAKE_SYMBOL,
        (rows - 1, cols // 2): LAKE_SYMBOL,
        (rows // 2, 0): LAKE_SYMBOL,
        (rows // 2, cols - 1): LAKE_SYMBOL,
    }
    stations = {
        (0, 0): "A",
        (rows - 1, cols - 1): "B",
        (rows - 1, 0): "C",
        (0, cols - 1): "D",
    }
    for layer in (brigades, lakes, stations):
        fixed.update(layer)
    return fixed


def parse_board(text: str) -> np.ndarray:
    """
    Decode a board description.

    Args:
        text: The comma separated description

    Returns:
        Object matrix of shape (rows, cols) holding a FieldSpec per field

    Raises:
        BoardFormatError: if the description does not describe a valid board
    """
    tokens = text.strip().split(FIELD_SEPARATOR)
    if len(tokens) < 2:
        raise BoardFormatError("The board description does not match the expected format")
    rows, cols = _parse_size(tokens[0]), _parse_size(tokens[1])
    fields = tokens[2:]
    if len(fields) != rows * cols:
        raise BoardFormatError(f"Expected {rows * cols} fields, got {len(fields)}")

    fixed = _fixed_fields(rows, cols)
    layout = np.empty((rows, cols), dtype=object)
    for index, token in enumerate(fields):
        row, col = divmod(index, cols)
        expected = fixed.get((row, col))
        if expected is not None and token != expected:
            raise BoardFormatError(f"Expected {expected!r} at {row},{col}, got {token!r}")
        if expected is None and token not in _FOREST_GLYPHS:
            raise BoardFormatError(f"Expected a forest section at {row},{col}, got {token!r}")
        layout[row, col] = _field_spec(token)

    glyphs = {spec.value for spec in layout.flat}
    if not {ForestCondition.SMALL_FIRE.value, ForestCondition.BIG_FIRE.value} <= glyphs:
        raise BoardFormatError("There must be at least one small and one big fire")
    logger.debug(f"Parsed {rows}x{cols} board")
    return layout


def _field_spec(token: str) -> FieldSpec:
    if token == LAKE_SYMBOL:
        return FieldSpec.lake()
    if len(token) == 1 and token.isupper():
        return FieldSpec.station(token)
    if token in _FOREST_GLYPHS:
        return FieldSpec.forest(ForestCondition(token))
    # Starting brigades stand on dry forest, they are placed by the game
    return FieldSpec.forest()


def load_board(text: str) -> GameBoard:
    return GameBoard(parse_board(text))
