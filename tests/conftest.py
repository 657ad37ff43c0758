import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `fire_breaker.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


STANDARD_BOARD = (
    "5,5,"
    "A,d,L,d,D,"
    "d,A0,d,D0,d,"
    "L,d,*,d,L,"
    "d,C0,+,B0,d,"
    "C,d,L,d,B"
)


@pytest.fixture
def board_text():
    """A valid 5x5 board with a big fire in the centre and a small fire below it."""
    return STANDARD_BOARD


@pytest.fixture
def board(board_text):
    from fire_breaker.board_loader import load_board

    return load_board(board_text)


@pytest.fixture
def layout_from_rows():
    """Build a FieldSpec matrix from rows of space separated tokens, e.g. "A d L d D"."""
    from fire_breaker.cell import FieldSpec, ForestCondition

    glyphs = {condition.value for condition in ForestCondition}

    def spec(token):
        if token == "L":
            return FieldSpec.lake()
        if token in ("A", "B", "C", "D"):
            return FieldSpec.station(token)
        if token in glyphs:
            return FieldSpec.forest(ForestCondition(token))
        return FieldSpec.forest()

    def build(*rows):
        tokens = [row.split() for row in rows]
        layout = np.empty((len(tokens), len(tokens[0])), dtype=object)
        for r, row in enumerate(tokens):
            for c, token in enumerate(row):
                layout[r, c] = spec(token)
        return layout

    return build
