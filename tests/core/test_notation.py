"""Tests for FEN placement parsing."""

import pytest

from chessterm.core.board import Board
from chessterm.core.enums import Color, PieceType
from chessterm.core.errors import FormatError
from chessterm.core.notation import (
    STARTING_FEN,
    board_from_placement,
    board_to_fen,
    parse_fen,
)
from chessterm.core.piece import Piece
from chessterm.core.types import E1, E4, E8, H8


class TestFenParsing:
    def test_starting_board(self) -> None:
        board, side = parse_fen(STARTING_FEN)
        assert board == Board.initial()
        assert side == Color.WHITE

    def test_black_to_move(self) -> None:
        _, side = parse_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert side == Color.BLACK

    def test_placement_only_defaults_to_white(self) -> None:
        _, side = parse_fen("4k3/8/8/8/8/8/8/4K3")
        assert side == Color.WHITE

    def test_first_field_is_rank_eight(self) -> None:
        board = board_from_placement("7k/8/8/8/4P3/8/8/4K3")
        assert board[H8] == Piece(Color.BLACK, PieceType.KING)
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] is None

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w",
            "9/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "4x3/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/8 x",
        ],
    )
    def test_malformed(self, fen: str) -> None:
        with pytest.raises(FormatError):
            parse_fen(fen)


class TestFenSerialisation:
    def test_starting_board(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_FEN

    def test_side_to_move(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/4K3")
        assert board_to_fen(board, Color.BLACK) == "4k3/8/8/8/8/8/8/4K3 b - - 0 1"
