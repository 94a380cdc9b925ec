"""Exception taxonomy for the rules engine.

Every recoverable failure carries a ``kind`` so callers can branch on it
without parsing messages.
"""

from __future__ import annotations

from gambit.core.enums import FenErrorKind, MoveErrorKind, MoveInputErrorKind

_MOVE_MESSAGES: dict[MoveErrorKind, str] = {
    MoveErrorKind.NO_PIECE_SELECTED: "There is no piece on the start field.",
    MoveErrorKind.WRONG_COLOR_SELECTED: "That piece belongs to the other side.",
    MoveErrorKind.PIECE_CANT_REACH_TARGET: "The piece cannot move to that field.",
    MoveErrorKind.CASTLING_NOT_AVAILABLE: "Castling on that side is not available.",
    MoveErrorKind.OWN_PIECE_ON_TARGET: "The target field holds one of your own pieces.",
    MoveErrorKind.NO_PATH_TO_TARGET: "Another piece is in the way.",
    MoveErrorKind.PIECE_IS_PINNED: "The piece is pinned to its king.",
    MoveErrorKind.MOVING_INTO_CHECK: "The king would move into check.",
    MoveErrorKind.NOT_MOVING_OUT_OF_CHECK: "The move does not resolve the check.",
    MoveErrorKind.CASTLING_THROUGH_CHECK: "The king cannot castle through an attacked field.",
}

_INPUT_MESSAGES: dict[MoveInputErrorKind, str] = {
    MoveInputErrorKind.WRONG_LENGTH: "A move needs exactly four digits.",
    MoveInputErrorKind.NOT_A_DIGIT: "A move may only contain digits.",
    MoveInputErrorKind.OUT_OF_RANGE: "Every digit of a move must be between 1 and 8.",
}


class ChessError(Exception):
    """Base class for recoverable engine errors."""


class MoveInputError(ChessError, ValueError):
    """Move text that is not in ``RFrf`` digit notation."""

    def __init__(self, kind: MoveInputErrorKind, text: str = "") -> None:
        self.kind = kind
        self.text = text
        super().__init__(_INPUT_MESSAGES[kind])


class IllegalMoveError(ChessError):
    """A well-formed move rejected by the rules."""

    def __init__(self, kind: MoveErrorKind) -> None:
        self.kind = kind
        super().__init__(_MOVE_MESSAGES[kind])


class FenError(ChessError, ValueError):
    """Malformed FEN text."""

    def __init__(self, kind: FenErrorKind, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"Invalid FEN ({kind.name.lower()}): {detail}")


class GameOverError(ChessError):
    """A move was submitted after the game was decided."""


class InvariantViolation(RuntimeError):
    """Internal structure is broken. Indicates a programming defect."""
