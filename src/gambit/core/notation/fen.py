"""FEN parsing and serialization."""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, FenErrorKind
from gambit.core.errors import FenError
from gambit.core.piece import PIECE_CHARS, Piece
from gambit.core.types import Field, field_name, parse_field

if TYPE_CHECKING:
    from gambit.core.position import Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# "-" plus the 15 ordered non-empty subsets of "KQkq"
_CASTLING_TOKENS: frozenset[str] = frozenset(
    ["-"]
    + [
        "".join(combo)
        for size in range(1, 5)
        for combo in combinations(_CASTLING_CHARS, size)
    ]
)

_EMPTY_RUN_DIGITS = "12345678"


def _parse_clock(token: str, kind: FenErrorKind) -> int:
    if not (token.isascii() and token.isdigit()):
        raise FenError(kind, token)
    return int(token)


def board_from_placement(placement: str) -> Board:
    """Decode the FEN piece-placement field."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(FenErrorKind.BAD_RANK_COUNT, placement)

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _EMPTY_RUN_DIGITS:
                file += int(ch)
            elif ch in PIECE_CHARS:
                if file < 8:
                    board.place(Piece.from_char(ch), Field(rank, file))
                file += 1
            else:
                raise FenError(FenErrorKind.UNKNOWN_PIECE, repr(ch))
        if file != 8:
            raise FenError(FenErrorKind.BAD_RANK_LENGTH, rank_text)
    return board


def board_to_placement(board: Board) -> str:
    """Encode *board* as the FEN piece-placement field (rank 8 first)."""
    rows: list[str] = []
    for rank in reversed(list(board.ranks())):
        empty = 0
        row = ""
        for piece in rank:
            if piece.is_empty:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Exactly six space-separated fields are required; any violation raises
    :class:`FenError` with a kind naming the faulty field.
    """
    from gambit.core.position import Position

    parts = fen.strip().split(" ")
    if len(parts) != 6:
        raise FenError(FenErrorKind.WRONG_TOKEN_COUNT, f"{len(parts)} fields in {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    # 1. Piece placement
    board = board_from_placement(placement)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(FenErrorKind.BAD_TURN, side_part)

    # 3. Castling
    if castling_part not in _CASTLING_TOKENS:
        raise FenError(FenErrorKind.BAD_CASTLING, castling_part)
    castling = CastlingRights.NONE
    for ch in castling_part.strip("-"):
        castling |= _CASTLING_CHARS[ch]

    # 4. En passant
    ep: Field | None = None
    if ep_part != "-":
        try:
            ep = parse_field(ep_part)
        except ValueError:
            raise FenError(FenErrorKind.BAD_EN_PASSANT, ep_part) from None

    # 5–6. Clocks
    halfmove = _parse_clock(half_part, FenErrorKind.BAD_HALFMOVE_CLOCK)
    fullmove = _parse_clock(full_part, FenErrorKind.BAD_FULLMOVE_NUMBER)

    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    ep_str = field_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{pos.placement} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
