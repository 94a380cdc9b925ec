"""Notation package: FEN parsing and serialization."""

from gambit.core.notation.fen import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_placement",
    "board_to_placement",
    "position_from_fen",
    "position_to_fen",
]
