"""FEN piece-placement parsing and serialisation.

Only the placement and side-to-move fields are meaningful here; castling,
en passant and clock fields are accepted and ignored.
"""

from __future__ import annotations

from chessterm.core.board import Board
from chessterm.core.enums import Color
from chessterm.core.errors import FormatError
from chessterm.core.piece import Piece

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"


def parse_fen(fen: str) -> tuple[Board, Color]:
    """Parse a FEN string into a board and the side to move.

    The side-to-move field is optional and defaults to white.
    """
    parts = fen.split()
    if not parts:
        raise FormatError("Empty FEN")
    board = board_from_placement(parts[0])

    if len(parts) == 1 or parts[1] == "w":
        side = Color.WHITE
    elif parts[1] == "b":
        side = Color.BLACK
    else:
        raise FormatError(f"Invalid FEN side-to-move field: {parts[1]!r}")
    return board, side


def board_from_placement(placement: str) -> Board:
    """Parse the first FEN field, e.g. ``"7k/8/5KQ1/8/8/8/8/8"``."""
    rows = placement.split("/")
    if len(rows) != 8:
        raise FormatError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise FormatError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise FormatError(f"Invalid FEN rank width: {placement!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise FormatError(f"Invalid FEN rank width: {placement!r}")
        if col != 8:
            raise FormatError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_fen(board: Board, side_to_move: Color = Color.WHITE) -> str:
    """Serialise *board* to FEN with empty castling/en-passant fields."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    side = "w" if side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side} - - 0 1"
