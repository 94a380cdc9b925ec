"""Tests for perform_turn."""

import pytest

from gambit.core.enums import Color, MoveErrorKind, MoveInputErrorKind
from gambit.core.errors import ChessError, IllegalMoveError, MoveInputError
from gambit.core.notation import STARTING_FEN, position_from_fen
from gambit.core.turn import perform_turn


def test_plays_digit_move() -> None:
    pos = position_from_fen(STARTING_FEN)
    nxt = perform_turn("2545", pos)
    assert nxt.placement == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
    assert nxt.side_to_move == Color.BLACK
    assert pos.fen == STARTING_FEN


def test_castling_by_king_move() -> None:
    pos = position_from_fen(
        "r1bqk1nr/pppp1ppp/2n5/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"
    )
    nxt = perform_turn("1517\n", pos)
    assert nxt.placement.endswith("RNBQ1RK1")


def test_malformed_input() -> None:
    pos = position_from_fen(STARTING_FEN)
    with pytest.raises(MoveInputError) as info:
        perform_turn("e2e4", pos)
    assert info.value.kind == MoveInputErrorKind.NOT_A_DIGIT


def test_illegal_move_leaves_position() -> None:
    pos = position_from_fen(STARTING_FEN)
    with pytest.raises(IllegalMoveError) as info:
        perform_turn("7454", pos)
    assert info.value.kind == MoveErrorKind.WRONG_COLOR_SELECTED
    assert pos.fen == STARTING_FEN


def test_errors_share_a_base() -> None:
    pos = position_from_fen(STARTING_FEN)
    for text in ("99", "3344", "2454"):
        with pytest.raises(ChessError):
            perform_turn(text, pos)
