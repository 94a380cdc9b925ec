"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color. ``NONE`` marks the colour of an empty square."""

    WHITE = 0
    BLACK = 1
    NONE = 2

    @property
    def opposite(self) -> Color:
        if self is Color.NONE:
            return Color.NONE
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank step of this side's pawns."""
        return 1 if self is Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Rank index of this side's back rank."""
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types. ``NONE`` marks an empty square."""

    NONE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def is_slider(self) -> bool:
        return self in (PieceType.ROOK, PieceType.BISHOP, PieceType.QUEEN)


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH

    @classmethod
    def kingside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KINGSIDE if color == Color.WHITE else cls.BLACK_KINGSIDE

    @classmethod
    def queenside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_QUEENSIDE if color == Color.WHITE else cls.BLACK_QUEENSIDE


class OutcomeKind(IntEnum):
    """State of a game as seen from the side to move."""

    IN_PROGRESS = 0
    CHECKMATE = 1
    STALEMATE = 2


# ── Error kinds ──────────────────────────────────────────────────────────────


class MoveInputErrorKind(IntEnum):
    """Why a move string could not be parsed."""

    WRONG_LENGTH = auto()
    NOT_A_DIGIT = auto()
    OUT_OF_RANGE = auto()


class MoveErrorKind(IntEnum):
    """Legality failures, in the order the checks run."""

    NO_PIECE_SELECTED = auto()
    WRONG_COLOR_SELECTED = auto()
    PIECE_CANT_REACH_TARGET = auto()
    CASTLING_NOT_AVAILABLE = auto()
    OWN_PIECE_ON_TARGET = auto()
    NO_PATH_TO_TARGET = auto()
    PIECE_IS_PINNED = auto()
    MOVING_INTO_CHECK = auto()
    NOT_MOVING_OUT_OF_CHECK = auto()
    CASTLING_THROUGH_CHECK = auto()


class FenErrorKind(IntEnum):
    """Ways a FEN string can be malformed."""

    WRONG_TOKEN_COUNT = auto()
    UNKNOWN_PIECE = auto()
    BAD_RANK_LENGTH = auto()
    BAD_RANK_COUNT = auto()
    BAD_TURN = auto()
    BAD_CASTLING = auto()
    BAD_EN_PASSANT = auto()
    BAD_HALFMOVE_CLOCK = auto()
    BAD_FULLMOVE_NUMBER = auto()
