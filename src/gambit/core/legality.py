"""Move legality checking + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import CastlingRights, Color, MoveErrorKind, PieceType
from gambit.core.errors import IllegalMoveError
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.position import apply_move_to_board, castling_rook_fields
from gambit.core.types import Field, all_fields

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.position import Position


_KINGSIDE_FILE = 6
_QUEENSIDE_FILE = 2
_KING_HOME_FILE = 4


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _rook_rule(move: Move) -> bool:
    return (move.rank_difference == 0) != (move.file_difference == 0)


def _bishop_rule(move: Move) -> bool:
    return move.rank_distance == move.file_distance != 0


def _knight_rule(move: Move) -> bool:
    return {move.rank_distance, move.file_distance} == {1, 2}


def fields_between(start: Field, target: Field) -> list[Field]:
    """Fields strictly between *start* and *target* on a straight or diagonal line."""
    dr = _sign(target.rank - start.rank)
    df = _sign(target.file - start.file)
    fields: list[Field] = []
    rank, file = start.rank + dr, start.file + df
    while (rank, file) != (target.rank, target.file):
        fields.append(Field(rank, file))
        rank += dr
        file += df
    return fields


class MoveValidator:
    """Validates candidate moves against a :class:`Position`.

    The checks run in a fixed order and stop at the first failure, so the
    error kind reported for a move is deterministic. The position is only
    read; hypothetical moves are played on a copied board.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def validate(self, move: Move) -> None:
        """Raise :class:`IllegalMoveError` unless *move* is legal."""
        piece = move.piece
        if not piece.is_specified:
            raise IllegalMoveError(MoveErrorKind.NO_PIECE_SELECTED)
        if piece.color != self._pos.side_to_move:
            raise IllegalMoveError(MoveErrorKind.WRONG_COLOR_SELECTED)

        self._check_reachable(move)

        if self._board.color_at(move.target) == piece.color:
            raise IllegalMoveError(MoveErrorKind.OWN_PIECE_ON_TARGET)
        if not self.is_path_clear(move):
            raise IllegalMoveError(MoveErrorKind.NO_PATH_TO_TARGET)

        self._check_king_safety(move)

        if move.is_castling:
            opponent = piece.color.opposite
            passed = [move.start, *fields_between(move.start, move.target)]
            if any(self.is_square_attacked(f, opponent) for f in passed):
                raise IllegalMoveError(MoveErrorKind.CASTLING_THROUGH_CHECK)

    def is_legal(self, move: Move) -> bool:
        try:
            self.validate(move)
        except IllegalMoveError:
            return False
        return True

    def legal_moves_from(self, start: Field) -> list[Move]:
        """All legal moves of the piece standing on *start*."""
        moves = (Move.from_board(self._board, start, target) for target in all_fields())
        return [move for move in moves if self.is_legal(move)]

    # -- Geometry -----------------------------------------------------------

    def is_path_clear(self, move: Move) -> bool:
        """Sliders need empty intermediate fields; castling needs an empty
        corridor between king and rook. Everything else passes."""
        if move.piece.piece_type.is_slider:
            between = fields_between(move.start, move.target)
        elif move.is_castling:
            rook_from, _ = castling_rook_fields(move)
            between = fields_between(move.start, rook_from)
        else:
            return True
        return not any(self._board.has_piece(f) for f in between)

    def _check_reachable(self, move: Move) -> None:
        ptype = move.piece.piece_type
        if ptype == PieceType.ROOK:
            ok = _rook_rule(move)
        elif ptype == PieceType.BISHOP:
            ok = _bishop_rule(move)
        elif ptype == PieceType.QUEEN:
            ok = _rook_rule(move) or _bishop_rule(move)
        elif ptype == PieceType.KNIGHT:
            ok = _knight_rule(move)
        elif ptype == PieceType.KING:
            if move.distance == 1:
                return
            self._check_castling_available(move)
            return
        elif ptype == PieceType.PAWN:
            ok = self._pawn_can_reach(move)
        else:
            ok = False
        if not ok:
            raise IllegalMoveError(MoveErrorKind.PIECE_CANT_REACH_TARGET)

    def _check_castling_available(self, move: Move) -> None:
        color = move.piece.color
        home = color.home_rank
        if (
            move.start != Field(home, _KING_HOME_FILE)
            or move.target.rank != home
            or move.target.file not in (_KINGSIDE_FILE, _QUEENSIDE_FILE)
        ):
            raise IllegalMoveError(MoveErrorKind.PIECE_CANT_REACH_TARGET)

        if move.target.file == _KINGSIDE_FILE:
            right = CastlingRights.kingside(color)
        else:
            right = CastlingRights.queenside(color)
        rook_from, _ = castling_rook_fields(move)
        if not (
            self._pos.castling & right
            and self._board.piece_at(rook_from) == Piece(color, PieceType.ROOK)
        ):
            raise IllegalMoveError(MoveErrorKind.CASTLING_NOT_AVAILABLE)

    def _pawn_can_reach(self, move: Move) -> bool:
        color = move.piece.color
        forward = color.forward
        board = self._board

        if move.file_difference == 0:
            if move.rank_difference == forward:
                return not board.has_piece(move.target)
            if move.rank_difference == 2 * forward:
                start_rank = color.home_rank + forward
                skipped = Field(move.start.rank + forward, move.start.file)
                return (
                    move.start.rank == start_rank
                    and not board.has_piece(skipped)
                    and not board.has_piece(move.target)
                )
            return False

        if move.file_distance == 1 and move.rank_difference == forward:
            return (
                board.color_at(move.target) == color.opposite
                or move.target == self._pos.en_passant
            )
        return False

    # -- Check detection ----------------------------------------------------

    def _check_king_safety(self, move: Move) -> None:
        color = move.piece.color
        board = self._board.copy()
        apply_move_to_board(board, move, self._pos.en_passant)
        if not _king_attacked(board, color):
            return

        if move.piece.piece_type == PieceType.KING:
            raise IllegalMoveError(MoveErrorKind.MOVING_INTO_CHECK)
        if self.is_in_check(color):
            raise IllegalMoveError(MoveErrorKind.NOT_MOVING_OUT_OF_CHECK)
        raise IllegalMoveError(MoveErrorKind.PIECE_IS_PINNED)

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return _king_attacked(self._board, color)

    def is_square_attacked(self, field: Field, by_color: Color) -> bool:
        """Is *field* attacked by any piece of *by_color*?"""
        return square_attacked(self._board, field, by_color)


# -- Attack primitive (board level) -----------------------------------------


def _attacks(board: Board, start: Field, target: Field) -> bool:
    piece = board.piece_at(start)
    move = Move(piece, start, target)
    ptype = piece.piece_type

    if ptype == PieceType.PAWN:
        return move.file_distance == 1 and move.rank_difference == piece.color.forward
    if ptype == PieceType.KNIGHT:
        return _knight_rule(move)
    if ptype == PieceType.KING:
        return move.distance == 1
    if ptype == PieceType.ROOK:
        ok = _rook_rule(move)
    elif ptype == PieceType.BISHOP:
        ok = _bishop_rule(move)
    elif ptype == PieceType.QUEEN:
        ok = _rook_rule(move) or _bishop_rule(move)
    else:
        return False
    return ok and not any(board.has_piece(f) for f in fields_between(start, target))


def square_attacked(board: Board, field: Field, by_color: Color) -> bool:
    """Whether any piece of *by_color* on *board* attacks *field*.

    Ownership of *field* and the safety of the attacker's own king do not
    matter.
    """
    return any(
        _attacks(board, start, field)
        for start in board.fields_of(by_color)
        if start != field
    )


def _king_attacked(board: Board, color: Color) -> bool:
    king = board.find_king(color)
    if king is None:
        return False
    return square_attacked(board, king, color.opposite)
