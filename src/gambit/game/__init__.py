"""Game management layer — history and controller.

Quick start::

    from gambit.game import GameController

    ctrl = GameController()
    ctrl.submit_move("2545")
    ctrl.undo()
"""

from gambit.game.controller import GameController, GameEvents
from gambit.game.history import GameHistory

__all__ = [
    "GameController",
    "GameEvents",
    "GameHistory",
]
