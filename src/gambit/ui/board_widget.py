"""BoardWidget — paints the board and turns two clicks into a move string."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move import format_move_input
from gambit.core.piece import Piece
from gambit.core.types import Field
from gambit.ui.theme import BoardTheme


class BoardWidget(QWidget):
    """Read-only board renderer with click-to-move input.

    The widget never judges legality: it emits the move text and lets the
    controller decide.

    Signals:
        move_entered(str): ``RFrf`` digits for the picked start and target.
    """

    move_entered = pyqtSignal(str)

    _GLYPH_RATIO = 0.72

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._selected: Field | None = None

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        self._board = board
        self._selected = None
        self.update()

    @property
    def selected_field(self) -> Field | None:
        return self._selected

    def tile_size(self) -> float:
        return min(self.width(), self.height()) / 8

    def field_at(self, point: QPointF) -> Field | None:
        """Board field under a widget-local point, rank 8 drawn on top."""
        tile = self.tile_size()
        if tile <= 0 or point.x() < 0 or point.y() < 0:
            return None
        col = int(point.x() // tile)
        row = int(point.y() // tile)
        if col > 7 or row > 7:
            return None
        return Field(7 - row, col)

    def field_rect(self, field: Field) -> QRectF:
        tile = self.tile_size()
        return QRectF(field.file * tile, (7 - field.rank) * tile, tile, tile)

    def click_field(self, field: Field) -> None:
        """First click picks a piece, second click picks the target."""
        if self._board is None:
            return
        if self._selected is None:
            if self._board.has_piece(field):
                self._selected = field
                self.update()
            return
        start, self._selected = self._selected, None
        self.update()
        if field != start:
            self.move_entered.emit(format_move_input(start, field))

    # ── Qt events ────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        field = self.field_at(event.position())
        if field is not None:
            self.click_field(field)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self._paint_squares(painter)
            if self._board is not None:
                self._paint_pieces(painter, self._board)
        finally:
            painter.end()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _paint_squares(self, painter: QPainter) -> None:
        theme = self._theme
        painter.setPen(Qt.PenStyle.NoPen)
        for rank in range(8):
            for file in range(8):
                field = Field(rank, file)
                # a1 is a dark square
                color = theme.dark_square if (rank + file) % 2 == 0 else theme.light_square
                painter.fillRect(self.field_rect(field), color)
        if self._selected is not None:
            painter.fillRect(self.field_rect(self._selected), theme.selected)

    def _paint_pieces(self, painter: QPainter, board: Board) -> None:
        font = QFont()
        font.setPixelSize(max(int(self.tile_size() * self._GLYPH_RATIO), 1))
        painter.setFont(font)
        for rank in range(8):
            for file in range(8):
                field = Field(rank, file)
                piece = board.piece_at(field)
                if not piece.is_specified:
                    continue
                color = (
                    self._theme.white_piece
                    if piece.color == Color.WHITE
                    else self._theme.black_piece
                )
                painter.setPen(QPen(color))
                # Filled glyphs for both sides, told apart by pen colour
                glyph = Piece(Color.BLACK, piece.piece_type).symbol
                painter.drawText(
                    self.field_rect(field), Qt.AlignmentFlag.AlignCenter, glyph
                )
