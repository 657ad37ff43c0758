#!/usr/bin/env python3
"""Play the fire breaker game on the console."""

import argparse
import logging
import re
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_breaker.board_loader import load_board
from fire_breaker.errors import BoardFormatError, RuleViolation
from fire_breaker.game import GameHandler
from fire_breaker.position import CardinalDirection, Coordinate

ERROR_PREFIX = "Error, "
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

COMMANDS = {
    "move": re.compile(r"move ([A-D][0-9]+),([0-9]+),([0-9]+)"),
    "extinguish": re.compile(r"extinguish ([A-D][0-9]+),([0-9]+),([0-9]+)"),
    "refill": re.compile(r"refill ([A-D][0-9]+)"),
    "buy-fire-engine": re.compile(r"buy-fire-engine ([0-9]+),([0-9]+)"),
    "fire-to-roll": re.compile(r"fire-to-roll ([1-6])"),
    "turn": re.compile(r"turn"),
    "reset": re.compile(r"reset"),
    "show-board": re.compile(r"show-board"),
    "show-field": re.compile(r"show-field ([0-9]+),([0-9]+)"),
    "show-player": re.compile(r"show-player"),
    "quit": re.compile(r"quit"),
}


def execute(game: GameHandler, name: str, args: tuple) -> str:
    """
    Run one parsed command against the game.

    Args:
        game: The running game session
        name: Command name
        args: Groups captured by the command's pattern

    Returns:
        The text to print
    """
    if name == "move":
        return game.move(args[0], Coordinate(int(args[1]), int(args[2])))
    if name == "extinguish":
        return game.extinguish(args[0], Coordinate(int(args[1]), int(args[2])))
    if name == "refill":
        return game.refill(args[0])
    if name == "buy-fire-engine":
        return game.buy_fire_engine(Coordinate(int(args[0]), int(args[1])))
    if name == "fire-to-roll":
        return game.fire_to_roll(CardinalDirection.from_roll(int(args[0])))
    if name == "turn":
        return game.turn()
    if name == "reset":
        return game.reset()
    if name == "show-board":
        return game.show_board()
    if name == "show-field":
        return game.show_field(Coordinate(int(args[0]), int(args[1])))
    return game.show_player()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("board", help="rows,cols followed by every field of the board")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level",
    )
    return parser


def main() -> int:
    """Run the interactive session until quit or end of input."""
    options = build_parser().parse_args()
    logging.basicConfig(level=options.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        game = GameHandler(load_board(options.board))
    except BoardFormatError as e:
        print(f"{ERROR_PREFIX}{e}", file=sys.stderr)
        return 1

    for line in sys.stdin:
        line = line.rstrip("\n")
        name = line.split(" ", 1)[0]
        pattern = COMMANDS.get(name)
        match = pattern.fullmatch(line) if pattern else None
        if match is None:
            print(f"{ERROR_PREFIX}Syntax of the command is not valid", file=sys.stderr)
            continue
        if name == "quit":
            break
        try:
            print(execute(game, name, match.groups()))
        except RuleViolation as e:
            print(f"{ERROR_PREFIX}{e}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
