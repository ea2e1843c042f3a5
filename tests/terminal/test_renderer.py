"""Tests for board and capture rendering."""

from chessterm.core.board import Board
from chessterm.core.enums import Color, PieceType
from chessterm.core.piece import Piece
from chessterm.core.types import E2, E3, E4
from chessterm.game.state import CaptureTally
from chessterm.terminal.renderer import render_board, render_captures, render_cell

START_PLAIN = (
    "8 r n b q k b n r \n"
    "7 p p p p p p p p \n"
    "6 . . . . . . . . \n"
    "5 . . . . . . . . \n"
    "4 . . . . . . . . \n"
    "3 . . . . . . . . \n"
    "2 P P P P P P P P \n"
    "1 R N B Q K B N R \n"
    "  a b c d e f g h \n"
)


class TestRenderCell:
    def test_plain(self) -> None:
        assert render_cell(None, use_color=False) == ". "
        assert render_cell(Piece(Color.BLACK, PieceType.QUEEN), use_color=False) == "q "
        assert render_cell(None, target=True, use_color=False) == "* "

    def test_colored_pieces(self) -> None:
        white = render_cell(Piece(Color.WHITE, PieceType.KING))
        black = render_cell(Piece(Color.BLACK, PieceType.KING))
        assert white.startswith("\033[1;37mK")
        assert black.startswith("\033[1;34mK")
        assert white.endswith("\033[0m ")

    def test_colored_target(self) -> None:
        assert render_cell(None, target=True) == "\033[92m*\033[0m "
        assert render_cell(None) == ". "


class TestRenderBoard:
    def test_plain_start(self, board: Board) -> None:
        assert render_board(board, use_color=False) == START_PLAIN

    def test_hidden_selection_is_blank(self, board: Board) -> None:
        text = render_board(board, selected=E2, hide_selected=True, use_color=False)
        assert "2 P P P P   P P P \n" in text

    def test_selection_visible_when_not_hidden(self, board: Board) -> None:
        text = render_board(board, selected=E2, use_color=False)
        assert text == START_PLAIN

    def test_targets(self, board: Board) -> None:
        text = render_board(board, targets=[E3, E4], use_color=False)
        assert "4 . . . . * . . . \n" in text
        assert "3 . . . . * . . . \n" in text

    def test_colored_board_uses_ansi(self, board: Board) -> None:
        text = render_board(board)
        assert "\033[1;37m" in text
        assert "\033[1;34m" in text
        assert text.endswith("  a b c d e f g h \n")


class TestRenderCaptures:
    def test_empty(self) -> None:
        assert render_captures(CaptureTally()) == "white: -\nblack: -\n"

    def test_ordered_by_value(self) -> None:
        tally = CaptureTally()
        tally.record(Color.WHITE, PieceType.PAWN)
        tally.record(Color.WHITE, PieceType.PAWN)
        tally.record(Color.WHITE, PieceType.QUEEN)
        tally.record(Color.BLACK, PieceType.KNIGHT)
        assert render_captures(tally) == "white: Qx1 Px2\nblack: Nx1\n"
