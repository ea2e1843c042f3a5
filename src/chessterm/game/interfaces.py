"""Abstract interfaces and enums for the game layer.

The terminal front-end depends on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessterm.core.enums import Color, GameStatus

if TYPE_CHECKING:
    from chessterm.core.board import Board
    from chessterm.core.types import Square
    from chessterm.game.state import CaptureTally, Conclusion, MoveResult


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    IN_PROGRESS = auto()
    CONCLUDED = auto()


class ConclusionReason(IntEnum):
    CHECKMATE = auto()
    STALEMATE = auto()


class RejectReason(IntEnum):
    """Why a proposed move was not applied. The board is never changed."""

    FORMAT_ERROR = auto()
    WRONG_COLOR = auto()
    ILLEGAL_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self, fen: str | None = None, side_to_move: Color | None = None
    ) -> Board:
        """Set up a new game and return its board."""

    @abstractmethod
    def try_move(self, color: Color, src: str, dst: str) -> MoveResult:
        """Attempt *src* → *dst* on behalf of *color*."""

    @abstractmethod
    def query_state(self, color: Color) -> GameStatus:
        """Current status of *color*. Never mutates the board."""

    @abstractmethod
    def snapshot(self) -> Board:
        """A consistent copy of the board, safe to read from any thread."""

    @abstractmethod
    def legal_destinations(self, src: Square) -> list[Square]:
        """Safe destinations for the piece on *src*."""

    @property
    @abstractmethod
    def side_to_move(self) -> Color: ...

    @property
    @abstractmethod
    def captures(self) -> CaptureTally: ...

    @property
    @abstractmethod
    def conclusion(self) -> Conclusion | None: ...

    @property
    @abstractmethod
    def fullmove_number(self) -> int:
        """Move number shown to the players, starting at 1."""
