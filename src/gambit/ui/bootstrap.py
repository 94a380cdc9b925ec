"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gambit.game.controller import GameController

_LOGGER = logging.getLogger(__name__)


def run_application(controller: GameController, argv: list[str] | None = None) -> int:
    """Create and run the Qt application around *controller*."""
    from PyQt6.QtWidgets import QApplication

    from gambit.ui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("gambit")
    app.setStyle("Fusion")

    window = MainWindow(controller)
    window.resize(640, 680)
    window.show()
    _LOGGER.info("Board window opened at %s", controller.position.fen)

    return app.exec()
