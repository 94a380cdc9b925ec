"""MainWindow — board, status line and back/forward navigation."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QWidget

from gambit.cli import turn_prompt
from gambit.core.errors import ChessError
from gambit.core.position import Position
from gambit.game.controller import GameController
from gambit.ui.board_widget import BoardWidget


class MainWindow(QMainWindow):
    """Top-level window. Holds a controller handle and only calls its methods."""

    def __init__(self, controller: GameController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self.setWindowTitle("gambit")

        self._board_widget = BoardWidget(self)
        self.setCentralWidget(self._board_widget)
        self._status = QLabel(self)
        self.statusBar().addPermanentWidget(self._status, 1)

        self._back_action = QAction("Back", self)
        self._back_action.setShortcut(QKeySequence("Left"))
        self._back_action.triggered.connect(self._on_back)
        self._forward_action = QAction("Forward", self)
        self._forward_action.setShortcut(QKeySequence("Right"))
        self._forward_action.triggered.connect(self._on_forward)
        self.addAction(self._back_action)
        self.addAction(self._forward_action)

        self._board_widget.move_entered.connect(self._on_move_entered)
        controller.events.on_history_changed.append(self._on_history_changed)
        self._on_history_changed(controller.position)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def status_text(self) -> str:
        return self._status.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_entered(self, text: str) -> None:
        try:
            self._controller.submit_move(text)
        except ChessError as exc:
            self.statusBar().showMessage(str(exc), 3000)

    def _on_back(self) -> None:
        self._controller.undo()

    def _on_forward(self) -> None:
        self._controller.redo()

    def _on_history_changed(self, position: Position) -> None:
        self._board_widget.set_board(position.board)
        outcome = self._controller.outcome
        if outcome.is_over:
            self._status.setText(str(outcome))
        else:
            self._status.setText(turn_prompt(position.side_to_move))
        self._back_action.setEnabled(self._controller.history.can_undo)
        self._forward_action.setEnabled(self._controller.history.can_redo)
