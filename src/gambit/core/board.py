"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from gambit.core.enums import Color, PieceType
from gambit.core.errors import InvariantViolation
from gambit.core.piece import EMPTY, Piece
from gambit.core.types import Field

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid indexed ``[rank][file]``.

    Every cell always holds a :class:`Piece`; emptiness is the ``EMPTY``
    sentinel. No bounds checking is done: callers pass 0..7 coordinates.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Sequence[Sequence[Piece]] | None = None) -> None:
        if grid is None:
            self._grid: list[list[Piece]] = [[EMPTY] * 8 for _ in range(8)]
        else:
            self._grid = [list(rank) for rank in grid]
        self._check_dimensions()

    def _check_dimensions(self) -> None:
        if len(self._grid) != 8 or any(len(rank) != 8 for rank in self._grid):
            raise InvariantViolation("Board must have 8 ranks of 8 files")

    # -- Element access -----------------------------------------------------

    def has_piece(self, field: Field) -> bool:
        return not self._grid[field.rank][field.file].is_empty

    def piece_at(self, field: Field) -> Piece:
        return self._grid[field.rank][field.file]

    def color_at(self, field: Field) -> Color:
        return self._grid[field.rank][field.file].color

    def type_at(self, field: Field) -> PieceType:
        return self._grid[field.rank][field.file].piece_type

    def remove(self, field: Field) -> Piece:
        """Empty *field* and return what stood there."""
        piece = self._grid[field.rank][field.file]
        self._grid[field.rank][field.file] = EMPTY
        return piece

    def place(self, piece: Piece, field: Field) -> Piece:
        """Put *piece* on *field* and return the displaced piece."""
        displaced = self._grid[field.rank][field.file]
        self._grid[field.rank][field.file] = piece
        return displaced

    # -- Query helpers ------------------------------------------------------

    def ranks(self) -> Iterator[tuple[Piece, ...]]:
        """Ranks from index 0 (White's back rank) to 7."""
        for rank in self._grid:
            yield tuple(rank)

    def fields_of(self, color: Color) -> list[Field]:
        """Fields occupied by *color*, a1 first."""
        return [
            Field(rank, file)
            for rank in range(8)
            for file in range(8)
            if self._grid[rank][file].color == color
        ]

    def find_king(self, color: Color) -> Field | None:
        """Field of *color*'s king, or ``None`` if it is not on the board."""
        king = Piece(color, PieceType.KING)
        for rank in range(8):
            for file in range(8):
                if self._grid[rank][file] == king:
                    return Field(rank, file)
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        return Board(self._grid)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, pt in enumerate(_BACK_RANK):
            b.place(Piece(Color.WHITE, pt), Field(0, file))
            b.place(Piece(Color.WHITE, PieceType.PAWN), Field(1, file))
            b.place(Piece(Color.BLACK, PieceType.PAWN), Field(6, file))
            b.place(Piece(Color.BLACK, pt), Field(7, file))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = " ".join(str(p) for p in self._grid[rank])
            rows.append(f"{rank + 1} {row}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
