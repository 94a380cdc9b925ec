"""Console front-end: draws the board and reads digit moves from a stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from gambit.core.enums import Color
from gambit.core.errors import ChessError
from gambit.core.position import Position
from gambit.core.types import Field
from gambit.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

_EMPTY_CELL = "."
_BORDER = "  -----------------"
_FILE_LABELS = "   1 2 3 4 5 6 7 8"

_QUIT = frozenset({"quit", "exit", "q"})

HELP_TEXT = (
    "Enter moves as four digits: start rank, start file, target rank, "
    "target file (e.g. 2545 plays e2-e4). Commands: undo, redo, quit."
)


def render_board(position: Position) -> str:
    """Text diagram, rank 8 on top, with 1-8 labels on every side."""
    board = position.board
    lines = ["", _FILE_LABELS, _BORDER]
    for rank in range(7, -1, -1):
        cells = []
        for file in range(8):
            piece = board.piece_at(Field(rank, file))
            cells.append(piece.symbol if piece.is_specified else _EMPTY_CELL)
        label = rank + 1
        lines.append(f"{label}| {' '.join(cells)}  |{label}")
    lines.extend([_BORDER, _FILE_LABELS])
    return "\n".join(lines)


def turn_prompt(color: Color) -> str:
    return f"{str(color).capitalize()} to move..."


def run(
    controller: GameController,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Play until the game ends, the input is exhausted, or the user quits."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    print(HELP_TEXT, file=stdout)
    while True:
        print(render_board(controller.position), file=stdout)

        if controller.is_game_over:
            print(controller.outcome, file=stdout)
            return 0
        print(turn_prompt(controller.side_to_move), file=stdout)

        line = stdin.readline()
        if not line:
            _LOGGER.debug("Input exhausted, leaving the game loop")
            return 0

        command = line.strip().lower()
        if command in _QUIT:
            return 0
        if command == "undo":
            if not controller.undo():
                print("Nothing to undo.", file=stdout)
            continue
        if command == "redo":
            if not controller.redo():
                print("Nothing to redo.", file=stdout)
            continue

        try:
            controller.submit_move(line)
        except ChessError as exc:
            print(f"Invalid move: {exc}", file=stdout)
