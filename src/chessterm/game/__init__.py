"""Game management layer: controller and turn state machine.

Quick start::

    from chessterm.core import Color
    from chessterm.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    result = ctrl.try_move(Color.WHITE, "e2", "e4")
    result.applied, result.status  # True, GameStatus.PLAYING
"""

from chessterm.game.controller import GameController, GameEvents
from chessterm.game.interfaces import (
    ConclusionReason,
    GamePhase,
    IGameController,
    RejectReason,
)
from chessterm.game.state import CaptureTally, Conclusion, GameState, MoveResult

__all__ = [
    # Interfaces / enums
    "ConclusionReason",
    "GamePhase",
    "IGameController",
    "RejectReason",
    # Concrete
    "CaptureTally",
    "Conclusion",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveResult",
]
