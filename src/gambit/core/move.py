"""Move value object and the digit move notation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gambit.core.enums import MoveInputErrorKind, PieceType
from gambit.core.errors import MoveInputError
from gambit.core.piece import Piece
from gambit.core.types import Field

if TYPE_CHECKING:
    from gambit.core.board import Board

_DIGITS = "0123456789"


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable candidate transition.

    ``piece`` is a snapshot of the start field taken when the move is
    built; execution never re-reads it from the board.
    """

    piece: Piece
    start: Field
    target: Field

    @classmethod
    def from_board(cls, board: Board, start: Field, target: Field) -> Move:
        return cls(board.piece_at(start), start, target)

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def rank_difference(self) -> int:
        return self.target.rank - self.start.rank

    @property
    def file_difference(self) -> int:
        return self.target.file - self.start.file

    @property
    def rank_distance(self) -> int:
        return abs(self.rank_difference)

    @property
    def file_distance(self) -> int:
        return abs(self.file_difference)

    @property
    def distance(self) -> int:
        """Chebyshev distance between start and target."""
        return max(self.rank_distance, self.file_distance)

    @property
    def is_castling(self) -> bool:
        return self.piece.piece_type == PieceType.KING and self.file_distance >= 2

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return format_move_input(self.start, self.target)


def parse_move_input(text: str) -> tuple[Field, Field]:
    """Parse ``RFrf`` digit notation into ``(start, target)``.

    Each digit is 1-based; ``"1232"`` is rank 1 file 2 → rank 3 file 2,
    i.e. b1 to b3. Trailing newlines and carriage returns are ignored.
    """
    chars = text.rstrip("\r\n")
    if len(chars) != 4:
        raise MoveInputError(MoveInputErrorKind.WRONG_LENGTH, text)
    values: list[int] = []
    for ch in chars:
        if ch not in _DIGITS:
            raise MoveInputError(MoveInputErrorKind.NOT_A_DIGIT, text)
        value = _DIGITS.index(ch)
        if not 1 <= value <= 8:
            raise MoveInputError(MoveInputErrorKind.OUT_OF_RANGE, text)
        values.append(value - 1)
    return Field(values[0], values[1]), Field(values[2], values[3])


def format_move_input(start: Field, target: Field) -> str:
    """Inverse of :func:`parse_move_input`."""
    return f"{start.rank + 1}{start.file + 1}{target.rank + 1}{target.file + 1}"
