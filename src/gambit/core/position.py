"""Position — complete game state (board + metadata) and move execution."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.move import Move
from gambit.core.notation.fen import board_to_placement, position_to_fen
from gambit.core.piece import Piece
from gambit.core.types import Field

_ROOK_CORNERS: dict[Field, CastlingRights] = {
    Field(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Field(0, 7): CastlingRights.WHITE_KINGSIDE,
    Field(7, 0): CastlingRights.BLACK_QUEENSIDE,
    Field(7, 7): CastlingRights.BLACK_KINGSIDE,
}


def castling_rook_fields(move: Move) -> tuple[Field, Field]:
    """Rook origin and destination for a castling *move*."""
    rank = move.start.rank
    if move.file_difference > 0:
        return Field(rank, 7), Field(rank, move.target.file - 1)
    return Field(rank, 0), Field(rank, move.target.file + 1)


def en_passant_victim(move: Move) -> Field:
    """Field of the pawn taken by an en-passant *move*."""
    return Field(move.target.rank - move.piece.color.forward, move.target.file)


def is_en_passant_capture(move: Move, en_passant: Field | None) -> bool:
    return (
        en_passant is not None
        and move.piece.piece_type == PieceType.PAWN
        and move.target == en_passant
        and move.file_difference != 0
    )


def apply_move_to_board(board: Board, move: Move, en_passant: Field | None) -> Piece:
    """Play *move* on *board* without any rule checks.

    Returns the captured piece (``EMPTY`` if nothing was taken).
    """
    board.remove(move.start)
    captured = board.place(move.piece, move.target)

    if move.is_castling:
        rook_from, rook_to = castling_rook_fields(move)
        board.place(board.remove(rook_from), rook_to)
    elif is_en_passant_capture(move, en_passant):
        captured = board.remove(en_passant_victim(move))

    return captured


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    A position is never modified once a move has been executed from it;
    :meth:`execute_move` always returns a fresh instance.
    """

    __slots__ = (
        "board",
        "placement",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Field | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.placement = board_to_placement(self.board)
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Move execution ───────────────────────────────────────────────────

    def execute_move(self, move: Move) -> Position:
        """Return the position reached by playing *move*.

        The move is assumed legal; see :class:`~gambit.core.legality.MoveValidator`.
        """
        nxt = self.copy()
        piece = move.piece
        captured = apply_move_to_board(nxt.board, move, self.en_passant)

        # Castling rights only ever shrink
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)
        for field in (move.start, move.target):
            if field in _ROOK_CORNERS:
                castling &= ~_ROOK_CORNERS[field]
        nxt.castling = castling

        if piece.piece_type == PieceType.PAWN and move.rank_distance == 2:
            nxt.en_passant = Field(
                (move.start.rank + move.target.rank) // 2, move.start.file
            )
        else:
            nxt.en_passant = None

        if piece.piece_type == PieceType.PAWN or not captured.is_empty:
            nxt.halfmove_clock = 0
        else:
            nxt.halfmove_clock = self.halfmove_clock + 1

        if self.side_to_move == Color.BLACK:
            nxt.fullmove_number = self.fullmove_number + 1

        nxt.side_to_move = self.side_to_move.opposite
        nxt.placement = board_to_placement(nxt.board)
        return nxt

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy; the board is duplicated."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    @property
    def fen(self) -> str:
        return position_to_fen(self)

    def __repr__(self) -> str:
        return f"Position({self.fen!r})"
