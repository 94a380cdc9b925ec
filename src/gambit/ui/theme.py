"""Visual theme constants for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # field picked as move origin
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(255, 255, 0, 100),  # yellow transparent
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )
