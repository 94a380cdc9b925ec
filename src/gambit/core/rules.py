"""High-level chess rules: checkmate and stalemate detection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gambit.core.enums import Color, OutcomeKind
from gambit.core.legality import MoveValidator
from gambit.core.move import Move
from gambit.core.types import all_fields

if TYPE_CHECKING:
    from gambit.core.position import Position


@dataclass(frozen=True, slots=True)
class Outcome:
    """Game status for the side to move. ``loser`` is set only for checkmate."""

    kind: OutcomeKind
    loser: Color | None = None

    @classmethod
    def in_progress(cls) -> Outcome:
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def stalemate(cls) -> Outcome:
        return cls(OutcomeKind.STALEMATE)

    @classmethod
    def checkmate(cls, loser: Color) -> Outcome:
        return cls(OutcomeKind.CHECKMATE, loser)

    @property
    def is_over(self) -> bool:
        return self.kind != OutcomeKind.IN_PROGRESS

    @property
    def winner(self) -> Color | None:
        return self.loser.opposite if self.loser is not None else None

    def __str__(self) -> str:
        if self.kind == OutcomeKind.CHECKMATE:
            return f"Checkmate, {self.winner} won!"
        if self.kind == OutcomeKind.STALEMATE:
            return "Stalemate!"
        return "In progress"


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def iter_legal_moves(position: Position) -> Iterator[Move]:
        """Brute force: every own piece against every field of the board."""
        validator = MoveValidator(position)
        board = position.board
        targets = all_fields()
        for start in board.fields_of(position.side_to_move):
            for target in targets:
                move = Move.from_board(board, start, target)
                if validator.is_legal(move):
                    yield move

    @staticmethod
    def legal_moves(position: Position) -> list[Move]:
        return list(Rules.iter_legal_moves(position))

    @staticmethod
    def has_legal_move(position: Position) -> bool:
        return next(Rules.iter_legal_moves(position), None) is not None

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return MoveValidator(position).is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.outcome(position).kind == OutcomeKind.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.outcome(position).kind == OutcomeKind.STALEMATE

    @staticmethod
    def outcome(position: Position) -> Outcome:
        """Determine whether the game goes on, or how it ended."""
        if Rules.has_legal_move(position):
            return Outcome.in_progress()
        if Rules.is_in_check(position):
            return Outcome.checkmate(position.side_to_move)
        return Outcome.stalemate()
