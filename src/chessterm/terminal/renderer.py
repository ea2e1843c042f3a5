"""ANSI rendering of the board and capture tally.

Every function returns a string so a whole frame is written in one call.
"""

from __future__ import annotations

from collections.abc import Collection

from chessterm.core.board import Board
from chessterm.core.enums import Color, PieceType
from chessterm.core.piece import Piece
from chessterm.core.types import Square
from chessterm.game.state import CaptureTally

CURSOR_HOME = "\033[H"
CLEAR_SCREEN = "\033[H\033[2J"

_RESET = "\033[0m"
_PIECE_COLORS: dict[Color, str] = {
    Color.WHITE: "\033[1;37m",
    Color.BLACK: "\033[1;34m",
}
_TARGET = "\033[92m"


def render_cell(
    piece: Piece | None, *, target: bool = False, use_color: bool = True
) -> str:
    """Two characters for one square: the symbol and a trailing space.

    Without color, black pieces are lowercase and move hints are ``*``.
    """
    if piece is None:
        symbol = "*" if target else "."
    elif use_color:
        symbol = piece.letter
    else:
        symbol = str(piece)

    if not use_color:
        return f"{symbol} "
    if target:
        return f"{_TARGET}{symbol}{_RESET} "
    if piece is None:
        return ". "
    return f"{_PIECE_COLORS[piece.color]}{symbol}{_RESET} "


def render_board(
    board: Board,
    *,
    selected: Square | None = None,
    hide_selected: bool = False,
    targets: Collection[Square] = (),
    use_color: bool = True,
) -> str:
    """Render *board* rank 8 first, with rank labels and a file footer.

    With *hide_selected* the *selected* square is drawn blank, which is how
    the selection flickers.
    """
    lines: list[str] = []
    for row in range(8):
        cells = [f"{8 - row} "]
        for col in range(8):
            sq = (row, col)
            if sq == selected and hide_selected:
                cells.append("  ")
            else:
                cells.append(
                    render_cell(board[sq], target=sq in targets, use_color=use_color)
                )
        lines.append("".join(cells))
    lines.append("  a b c d e f g h ")
    return "\n".join(lines) + "\n"


_TALLY_ORDER: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


def render_captures(tally: CaptureTally) -> str:
    """One line per side listing what it has captured, e.g. ``white: Qx1 Px2``."""
    lines: list[str] = []
    for captor in (Color.WHITE, Color.BLACK):
        parts = [
            f"{Piece(captor.opposite, pt).letter}x{tally.count(captor, pt)}"
            for pt in _TALLY_ORDER
            if tally.count(captor, pt)
        ]
        lines.append(f"{captor}: {' '.join(parts) if parts else '-'}")
    return "\n".join(lines) + "\n"
