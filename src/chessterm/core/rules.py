"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessterm.core.enums import Color, GameStatus
from chessterm.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessterm.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.game_status(board, color) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return Rules.game_status(board, color) == GameStatus.STALEMATE

    @staticmethod
    def game_status(board: Board, color: Color) -> GameStatus:
        """Classify *color*'s situation. Read-only; the board is unchanged."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(color)
        has_moves = gen.has_legal_move(color)

        if in_check and not has_moves:
            return GameStatus.CHECKMATE
        if in_check:
            return GameStatus.CHECK
        if not has_moves:
            return GameStatus.STALEMATE
        return GameStatus.PLAYING
