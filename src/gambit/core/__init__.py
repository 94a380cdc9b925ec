"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import STARTING_FEN, Rules, perform_turn, position_from_fen

    pos = position_from_fen(STARTING_FEN)
    pos = perform_turn("2545", pos)  # e2 to e4
    print(pos.fen, Rules.outcome(pos))
"""

from gambit.core.board import Board
from gambit.core.enums import (
    CastlingRights,
    Color,
    FenErrorKind,
    MoveErrorKind,
    MoveInputErrorKind,
    OutcomeKind,
    PieceType,
)
from gambit.core.errors import (
    ChessError,
    FenError,
    GameOverError,
    IllegalMoveError,
    InvariantViolation,
    MoveInputError,
)
from gambit.core.legality import MoveValidator
from gambit.core.move import Move, format_move_input, parse_move_input
from gambit.core.notation import (
    STARTING_FEN,
    board_to_placement,
    position_from_fen,
    position_to_fen,
)
from gambit.core.piece import EMPTY, Piece
from gambit.core.position import Position
from gambit.core.rules import Outcome, Rules
from gambit.core.turn import perform_turn
from gambit.core.types import Field, field_name, parse_field

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "FenErrorKind",
    "MoveErrorKind",
    "MoveInputErrorKind",
    "OutcomeKind",
    "PieceType",
    # Errors
    "ChessError",
    "FenError",
    "GameOverError",
    "IllegalMoveError",
    "InvariantViolation",
    "MoveInputError",
    # Types / helpers
    "Field",
    "field_name",
    "parse_field",
    # Domain objects
    "EMPTY",
    "Board",
    "Move",
    "MoveValidator",
    "Outcome",
    "Piece",
    "Position",
    "Rules",
    # Turn pipeline / notation
    "STARTING_FEN",
    "board_to_placement",
    "format_move_input",
    "parse_move_input",
    "perform_turn",
    "position_from_fen",
    "position_to_fen",
]
