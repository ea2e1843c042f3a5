"""Per-piece movement shapes, ignoring whether the mover's king stays safe."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessterm.core.enums import PieceType
from chessterm.core.types import Square

if TYPE_CHECKING:
    from chessterm.core.board import Board
    from chessterm.core.piece import Piece


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, src: Square, dst: Square) -> bool:
    """Whether every square strictly between *src* and *dst* is empty.

    *src* and *dst* must share a row, a column or a diagonal.
    """
    step_row = _sign(dst[0] - src[0])
    step_col = _sign(dst[1] - src[1])
    row, col = src[0] + step_row, src[1] + step_col
    while (row, col) != dst:
        if board[(row, col)] is not None:
            return False
        row += step_row
        col += step_col
    return True


def _pawn_shape(board: Board, piece: Piece, src: Square, dst: Square) -> bool:
    forward = piece.color.pawn_direction
    d_row = dst[0] - src[0]
    d_col = dst[1] - src[1]
    target = board[dst]

    if d_col == 0:
        if d_row == forward:
            return target is None
        if d_row == 2 * forward and src[0] == piece.color.pawn_home_row:
            between = (src[0] + forward, src[1])
            return target is None and board[between] is None
        return False

    # Diagonal steps only capture.
    if abs(d_col) == 1 and d_row == forward:
        return target is not None and target.color != piece.color
    return False


def is_valid_geometry(board: Board, src: Square, dst: Square) -> bool:
    """Does the piece on *src* move in a shape that reaches *dst*?

    Empty sources, friendly captures and null moves are never valid.
    Sliding pieces must have a clear path. Check-safety is not considered.
    """
    piece = board[src]
    if piece is None or src == dst:
        return False

    target = board[dst]
    if target is not None and target.color == piece.color:
        return False

    d_row = abs(dst[0] - src[0])
    d_col = abs(dst[1] - src[1])
    ptype = piece.piece_type

    if ptype == PieceType.PAWN:
        return _pawn_shape(board, piece, src, dst)
    if ptype == PieceType.KNIGHT:
        return (d_row, d_col) in ((1, 2), (2, 1))
    if ptype == PieceType.KING:
        return d_row <= 1 and d_col <= 1

    straight = d_row == 0 or d_col == 0
    diagonal = d_row == d_col
    if ptype == PieceType.ROOK:
        shape_ok = straight
    elif ptype == PieceType.BISHOP:
        shape_ok = diagonal
    else:
        shape_ok = straight or diagonal
    return shape_ok and is_path_clear(board, src, dst)
