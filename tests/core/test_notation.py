"""Tests for FEN parsing and serialisation."""

import pytest

from gambit.core.enums import CastlingRights, Color, FenErrorKind, PieceType
from gambit.core.errors import FenError
from gambit.core.notation import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    position_from_fen,
    position_to_fen,
)
from gambit.core.piece import Piece
from gambit.core.types import Field

FENS = [
    STARTING_FEN,
    "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
    "r1bqk1nr/pppp1ppp/2n5/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4",
    "1Q6/8/8/8/3K4/8/p7/k7 b - - 0 1",
    "8/8/4kB1P/PP1p3R/6N1/8/1r6/2r3K1 w - - 0 1",
    "r3k2r/8/8/8/8/8/8/R3K2R w Kq - 12 40",
]


class TestFenParse:
    def test_starting_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant is None
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1
        assert pos.board.piece_at(Field(0, 4)) == Piece(Color.WHITE, PieceType.KING)
        assert pos.board.piece_at(Field(7, 3)) == Piece(Color.BLACK, PieceType.QUEEN)

    def test_rank_eight_is_index_seven(self) -> None:
        board = board_from_placement("k7/8/8/8/8/8/8/7K")
        assert board.piece_at(Field(7, 0)) == Piece(Color.BLACK, PieceType.KING)
        assert board.piece_at(Field(0, 7)) == Piece(Color.WHITE, PieceType.KING)

    def test_metadata_fields(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w Kq f6 3 17"
        )
        assert pos.en_passant == Field(5, 5)
        assert pos.castling == CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        assert pos.halfmove_clock == 3
        assert pos.fullmove_number == 17

    def test_black_to_move(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert pos.side_to_move == Color.BLACK
        assert pos.castling == CastlingRights.NONE

    def test_trailing_newline_is_tolerated(self) -> None:
        pos = position_from_fen(STARTING_FEN + "\n")
        assert pos.fen == STARTING_FEN

    @pytest.mark.parametrize("fen", FENS)
    def test_round_trip(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen

    @pytest.mark.parametrize("fen", FENS)
    def test_board_field_round_trip(self, fen: str) -> None:
        placement = fen.split(" ")[0]
        assert board_to_placement(board_from_placement(placement)) == placement


class TestFenErrors:
    @pytest.mark.parametrize(
        ("fen", "kind"),
        [
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0", FenErrorKind.WRONG_TOKEN_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 x", FenErrorKind.WRONG_TOKEN_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR  w KQkq - 0 1", FenErrorKind.WRONG_TOKEN_COUNT),
            ("rnbqkbnr/ppppxppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorKind.UNKNOWN_PIECE),
            ("rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorKind.UNKNOWN_PIECE),
            ("rnbqkbnr/ppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorKind.BAD_RANK_LENGTH),
            ("rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorKind.BAD_RANK_LENGTH),
            ("rnbqkbnr/pppppppp/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorKind.BAD_RANK_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorKind.BAD_RANK_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1", FenErrorKind.BAD_TURN),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR W KQkq - 0 1", FenErrorKind.BAD_TURN),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkx - 0 1", FenErrorKind.BAD_CASTLING),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KK - 0 1", FenErrorKind.BAD_CASTLING),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w QK - 0 1", FenErrorKind.BAD_CASTLING),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq i3 0 1", FenErrorKind.BAD_EN_PASSANT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e9 0 1", FenErrorKind.BAD_EN_PASSANT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e33 0 1", FenErrorKind.BAD_EN_PASSANT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - -1 1", FenErrorKind.BAD_HALFMOVE_CLOCK),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - a 1", FenErrorKind.BAD_HALFMOVE_CLOCK),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 one", FenErrorKind.BAD_FULLMOVE_NUMBER),
        ],
    )
    def test_error_kinds(self, fen: str, kind: FenErrorKind) -> None:
        with pytest.raises(FenError) as info:
            position_from_fen(fen)
        assert info.value.kind == kind

    def test_fen_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid FEN"):
            position_from_fen("")

    def test_all_sixteen_castling_tokens_accepted(self) -> None:
        tokens = ["-", "K", "Q", "k", "q", "KQ", "Kk", "Kq", "Qk", "Qq", "kq",
                  "KQk", "KQq", "Kkq", "Qkq", "KQkq"]
        for token in tokens:
            fen = f"r3k2r/8/8/8/8/8/8/R3K2R w {token} - 0 1"
            assert position_from_fen(fen).fen == fen
