"""GameController: executes moves and drives the turn state machine.

Coordinates: Board, MoveGenerator, Rules, GameState.
Emits events via simple callbacks so the terminal / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessterm.core.board import Board
from chessterm.core.enums import Color, GameStatus
from chessterm.core.errors import (
    FormatError,
    IllegalPositionError,
    InvariantViolation,
)
from chessterm.core.move import Move
from chessterm.core.move_generator import MoveGenerator
from chessterm.core.notation import parse_fen
from chessterm.core.rules import Rules
from chessterm.core.types import Square, square_name
from chessterm.game.interfaces import IGameController, RejectReason
from chessterm.game.state import CaptureTally, Conclusion, GameState, MoveResult

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, MoveResult], None]
GameOverCallback = Callable[[Conclusion], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates and applies moves, alternates turns, notifies listeners.

    Thread-safety: every public call holds the board lock, so a reader
    using :meth:`snapshot` from another thread never observes a move that
    is only being simulated.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def captures(self) -> CaptureTally:
        return self._state.captures

    @property
    def conclusion(self) -> Conclusion | None:
        return self._state.conclusion

    @property
    def fullmove_number(self) -> int:
        return self._state.fullmove_display

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self, fen: str | None = None, side_to_move: Color | None = None
    ) -> Board:
        if fen is None:
            board, side = Board.initial(), Color.WHITE
        else:
            board, side = parse_fen(fen)
        side = side if side_to_move is None else side_to_move
        status = self._classify_setup(board, side)

        self._state = GameState(board=board, side_to_move=side)
        _LOGGER.debug("New game, %s to move", side)

        # A custom position may already be decided.
        if status.is_terminal:
            conclusion = self._state.conclude(status, side.opposite)
            _LOGGER.info("Game over before the first move: %s", conclusion)
        return board

    def try_move(self, color: Color, src: str, dst: str) -> MoveResult:
        state = self._state
        if state.is_game_over:
            return MoveResult.rejected(
                RejectReason.GAME_OVER, detail=str(state.conclusion)
            )

        try:
            move = Move.parse(src, dst)
        except FormatError as exc:
            _LOGGER.debug("Rejected %r -> %r: %s", src, dst, exc)
            return MoveResult.rejected(RejectReason.FORMAT_ERROR, detail=str(exc))

        board = state.board
        conclusion: Conclusion | None = None
        with board.lock:
            piece = board[move.from_sq]
            if piece is None or piece.color != color:
                _LOGGER.debug("Rejected %s for %s: wrong color", move, color)
                return MoveResult.rejected(
                    RejectReason.WRONG_COLOR,
                    move,
                    f"{square_name(move.from_sq)} does not hold a {color} piece",
                )

            if not MoveGenerator(board).is_safe_move(move.from_sq, move.to_sq):
                _LOGGER.debug("Rejected %s for %s: illegal", move, color)
                return MoveResult.rejected(RejectReason.ILLEGAL_MOVE, move)

            # Classify first so a fault leaves the game untouched.
            with board.simulate_move(move.from_sq, move.to_sq):
                status = Rules.game_status(board, color.opposite)

            captured = board.move_piece(move.from_sq, move.to_sq)
            if captured is not None:
                state.captures.record(color, captured.piece_type)
            state.ply_count += 1
            state.side_to_move = color.opposite
            if status.is_terminal:
                conclusion = state.conclude(status, color)

        _LOGGER.debug("Applied %s for %s -> %s", move, color, status.name)
        result = MoveResult(move=move, status=status, captured=captured)
        self._emit_move(move, result)

        if conclusion is not None:
            _LOGGER.info("Game over: %s", conclusion)
            self._emit_game_over(conclusion)
        return result

    def submit_move(self, src: str, dst: str) -> MoveResult:
        """:meth:`try_move` on behalf of the side to move."""
        return self.try_move(self._state.side_to_move, src, dst)

    def query_state(self, color: Color) -> GameStatus:
        with self.board.lock:
            return Rules.game_status(self.board, color)

    def snapshot(self) -> Board:
        return self.board.copy()

    def legal_destinations(self, src: Square) -> list[Square]:
        """Safe destinations for the piece on *src* (for move hints)."""
        with self.board.lock:
            return MoveGenerator(self.board).legal_destinations(src)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(move, result)

    def _emit_game_over(self, conclusion: Conclusion) -> None:
        for cb in self.events.on_game_over:
            cb(conclusion)

    @staticmethod
    def _classify_setup(board: Board, side: Color) -> GameStatus:
        """Status of *side* in a fresh position, refusing unplayable setups."""
        try:
            for color in (Color.WHITE, Color.BLACK):
                board.king_square(color)
        except InvariantViolation as exc:
            raise IllegalPositionError(str(exc)) from exc
        if Rules.is_in_check(board, side.opposite):
            raise IllegalPositionError(
                f"{side.opposite} is in check with {side} to move"
            )
        return Rules.game_status(board, side)
