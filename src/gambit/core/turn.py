"""Single-turn pipeline: parse → snapshot → validate → execute."""

from __future__ import annotations

from gambit.core.legality import MoveValidator
from gambit.core.move import Move, parse_move_input
from gambit.core.position import Position


def perform_turn(text: str, position: Position) -> Position:
    """Play the move described by *text* and return the resulting position.

    Raises :class:`~gambit.core.errors.MoveInputError` for malformed text and
    :class:`~gambit.core.errors.IllegalMoveError` for rejected moves. *position*
    is left untouched either way; recording the result is the caller's job.
    """
    start, target = parse_move_input(text)
    move = Move.from_board(position.board, start, target)
    MoveValidator(position).validate(move)
    return position.execute_move(move)
