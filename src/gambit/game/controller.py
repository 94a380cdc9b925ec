"""GameController — owns the history and is the only writer of game state.

Front-ends (console, Qt) hold a controller, read its accessors and call
:meth:`GameController.submit_move`. Listeners subscribe through simple
callback lists.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color
from gambit.core.errors import ChessError, GameOverError
from gambit.core.notation import STARTING_FEN, position_from_fen
from gambit.core.position import Position
from gambit.core.rules import Outcome, Rules
from gambit.core.turn import perform_turn
from gambit.core.types import Field
from gambit.game.history import GameHistory

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[str, Position], None]  # move text, new position
RejectedCallback = Callable[[str, ChessError], None]
GameOverCallback = Callable[[Outcome], None]
HistoryCallback = Callable[[Position], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_history_changed: list[HistoryCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs one game: validates input, keeps history, notifies listeners.

    All writes go through a re-entrant lock so positions handed to readers
    are always complete snapshots.
    """

    __slots__ = ("_history", "_outcome", "_lock", "events")

    def __init__(self, fen: str | None = None) -> None:
        self._lock = threading.RLock()
        self.events = GameEvents()
        self._history = GameHistory(position_from_fen(fen or STARTING_FEN))
        self._outcome = Rules.outcome(self._history.current)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def history(self) -> GameHistory:
        return self._history

    @property
    def position(self) -> Position:
        return self._history.current

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def placement(self) -> str:
        return self.position.placement

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def castling(self) -> CastlingRights:
        return self.position.castling

    @property
    def en_passant(self) -> Field | None:
        return self.position.en_passant

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_over

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Start over from *fen* (default: the standard start position)."""
        start = position_from_fen(fen or STARTING_FEN)
        with self._lock:
            self._history = GameHistory(start)
            self._outcome = Rules.outcome(start)
        _LOGGER.info("New game from %s", start.fen)
        self._emit_history_changed()

    def submit_move(self, text: str) -> Position:
        """Play *text* (``RFrf`` digits) for the side to move.

        Raises :class:`GameOverError` once the game is decided, otherwise the
        parse / legality errors of :func:`perform_turn`. A rejected move
        leaves the history untouched.
        """
        with self._lock:
            if self._outcome.is_over:
                error = GameOverError(f"The game is over: {self._outcome}")
                self._emit_rejected(text, error)
                raise error
            try:
                position = perform_turn(text, self._history.current)
            except ChessError as exc:
                _LOGGER.info("Rejected move %r: %s", text.strip(), exc)
                self._emit_rejected(text, exc)
                raise
            self._history.push(position)
            self._outcome = Rules.outcome(position)

        _LOGGER.debug("Accepted move %r -> %s", text.strip(), position.fen)
        for cb in self.events.on_move:
            cb(text.strip(), position)
        self._emit_history_changed()
        if self._outcome.is_over:
            _LOGGER.info("Game over: %s", self._outcome)
            for cb in self.events.on_game_over:
                cb(self._outcome)
        return position

    def undo(self) -> bool:
        with self._lock:
            if not self._history.undo():
                return False
            self._outcome = Rules.outcome(self._history.current)
        self._emit_history_changed()
        return True

    def redo(self) -> bool:
        with self._lock:
            if not self._history.redo():
                return False
            self._outcome = Rules.outcome(self._history.current)
        self._emit_history_changed()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_rejected(self, text: str, error: ChessError) -> None:
        for cb in self.events.on_rejected:
            cb(text, error)

    def _emit_history_changed(self) -> None:
        position = self.position
        for cb in self.events.on_history_changed:
            cb(position)
