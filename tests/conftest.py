"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessterm.core.board import Board
from chessterm.core.enums import Color
from chessterm.game.controller import GameController
from chessterm.game.state import MoveResult

# 1.f3 e5 2.g4 Qh4#
FOOLS_MATE: tuple[tuple[str, str], ...] = (
    ("f2", "f3"),
    ("e7", "e5"),
    ("g2", "g4"),
    ("d8", "h4"),
)


@pytest.fixture
def board() -> Board:
    return Board.initial()


@pytest.fixture
def ctrl() -> GameController:
    controller = GameController()
    controller.new_game()
    return controller


@pytest.fixture
def play(ctrl: GameController) -> Callable[..., list[MoveResult]]:
    """Play ``(src, dst)`` pairs alternately, starting with white."""

    def _play(*moves: tuple[str, str]) -> list[MoveResult]:
        results: list[MoveResult] = []
        color = Color.WHITE
        for src, dst in moves:
            results.append(ctrl.try_move(color, src, dst))
            color = color.opposite
        return results

    return _play
