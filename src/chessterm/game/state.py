"""Game state machine: phase, conclusion, side to move and capture tally."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from chessterm.core.board import Board
from chessterm.core.enums import Color, GameStatus, PieceType
from chessterm.core.move import Move
from chessterm.core.piece import Piece
from chessterm.game.interfaces import ConclusionReason, GamePhase, RejectReason


@dataclass(frozen=True, slots=True)
class Conclusion:
    """Why the game ended. ``winner`` is ``None`` for a stalemate."""

    reason: ConclusionReason
    winner: Color | None = None

    def __str__(self) -> str:
        if self.reason == ConclusionReason.CHECKMATE:
            return f"CHECKMATE! {self.winner} wins"
        return "STALEMATE"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of one move attempt.

    Exactly one of ``status`` (applied) and ``rejection`` is set.
    """

    move: Move | None = None
    status: GameStatus | None = None
    rejection: RejectReason | None = None
    captured: Piece | None = None
    detail: str = ""

    @property
    def applied(self) -> bool:
        return self.rejection is None

    @classmethod
    def rejected(
        cls, reason: RejectReason, move: Move | None = None, detail: str = ""
    ) -> MoveResult:
        return cls(move=move, rejection=reason, detail=detail)


@dataclass
class CaptureTally:
    """Pieces each side has taken. Display only; never decremented."""

    by_color: dict[Color, Counter[PieceType]] = field(
        default_factory=lambda: {Color.WHITE: Counter(), Color.BLACK: Counter()}
    )

    def record(self, captor: Color, piece_type: PieceType) -> None:
        self.by_color[captor][piece_type] += 1

    def count(self, captor: Color, piece_type: PieceType) -> int:
        return self.by_color[captor][piece_type]

    def total(self, captor: Color) -> int:
        return sum(self.by_color[captor].values())


@dataclass
class GameState:
    """Owns the board and the turn FSM (``IN_PROGRESS`` → ``CONCLUDED``).

    This is a pure data and logic class with no threading or I/O.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    phase: GamePhase = GamePhase.IN_PROGRESS
    conclusion: Conclusion | None = None
    captures: CaptureTally = field(default_factory=CaptureTally)
    ply_count: int = 0

    def conclude(self, status: GameStatus, mover: Color) -> Conclusion:
        """Move to ``CONCLUDED`` after *mover* produced a terminal *status*."""
        if status == GameStatus.CHECKMATE:
            conclusion = Conclusion(ConclusionReason.CHECKMATE, winner=mover)
        elif status == GameStatus.STALEMATE:
            conclusion = Conclusion(ConclusionReason.STALEMATE)
        else:
            raise ValueError(f"{status.name} does not end the game")
        self.phase = GamePhase.CONCLUDED
        self.conclusion = conclusion
        return conclusion

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.CONCLUDED

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1
