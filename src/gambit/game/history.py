"""Move history as two stacks of immutable position snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gambit.core.position import Position


class GameHistory:
    """Past/future stacks of positions.

    The top of ``past`` is the current position. Pushing a new position
    discards the future; undo and redo only move snapshots between the two
    stacks and never modify them.
    """

    __slots__ = ("_past", "_future")

    def __init__(self, initial: Position) -> None:
        self._past: list[Position] = [initial]
        self._future: list[Position] = []

    @property
    def current(self) -> Position:
        return self._past[-1]

    @property
    def initial(self) -> Position:
        return self._past[0]

    @property
    def can_undo(self) -> bool:
        return len(self._past) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def push(self, position: Position) -> None:
        self._past.append(position)
        self._future.clear()

    def undo(self) -> bool:
        """Step back one position. Returns ``False`` at the start of the game."""
        if not self.can_undo:
            return False
        self._future.append(self._past.pop())
        return True

    def redo(self) -> bool:
        """Step forward again. Returns ``False`` if nothing was undone."""
        if not self._future:
            return False
        self._past.append(self._future.pop())
        return True

    def positions(self) -> list[Position]:
        """Positions from the start of the game up to the current one."""
        return list(self._past)

    def __len__(self) -> int:
        return len(self._past)
