"""Attack detection, self-check filtering and legal move enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessterm.core.enums import Color, PieceType
from chessterm.core.geometry import is_valid_geometry
from chessterm.core.move import Move
from chessterm.core.types import Square, all_squares, is_on_board

if TYPE_CHECKING:
    from chessterm.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_ROOK_LIKE = (PieceType.ROOK, PieceType.QUEEN)
_BISHOP_LIKE = (PieceType.BISHOP, PieceType.QUEEN)


def _offset_squares(sq: Square, offsets: tuple[tuple[int, int], ...]) -> list[Square]:
    row, col = sq
    return [
        (row + dr, col + dc) for dr, dc in offsets if is_on_board(row + dr, col + dc)
    ]


class MoveGenerator:
    """Answers legality questions about a :class:`Board`.

    :meth:`is_safe_move` mutates the board through
    :meth:`Board.simulate_move` but always restores it before returning.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Could any piece of *by_color* move to *sq* on its next move?

        Whose turn it is and the attacker's own king safety are ignored.
        """
        board = self._board

        for from_sq in _offset_squares(sq, KNIGHT_OFFSETS):
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.KNIGHT
            ):
                return True

        if self._ray_attacked(sq, by_color, ROOK_DIRS, _ROOK_LIKE):
            return True
        if self._ray_attacked(sq, by_color, BISHOP_DIRS, _BISHOP_LIKE):
            return True

        # A pawn of by_color captures one row further along its forward
        # direction, so it attacks sq from one row behind.
        row, col = sq
        pawn_row = row - by_color.pawn_direction
        for pawn_col in (col - 1, col + 1):
            if not is_on_board(pawn_row, pawn_col):
                continue
            piece = board[(pawn_row, pawn_col)]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.PAWN
            ):
                return True

        for from_sq in _offset_squares(sq, KING_OFFSETS):
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.KING
            ):
                return True

        return False

    def _ray_attacked(
        self,
        sq: Square,
        by_color: Color,
        directions: tuple[tuple[int, int], ...],
        attackers: tuple[PieceType, ...],
    ) -> bool:
        board = self._board
        for dr, dc in directions:
            row, col = sq[0] + dr, sq[1] + dc
            while is_on_board(row, col):
                piece = board[(row, col)]
                if piece is not None:
                    if piece.color == by_color and piece.piece_type in attackers:
                        return True
                    break
                row += dr
                col += dc
        return False

    # -- Self-check filtering -----------------------------------------------

    def is_safe_move(self, src: Square, dst: Square) -> bool:
        """Is *src* → *dst* geometrically valid and king-safe for the mover?"""
        board = self._board
        if not is_valid_geometry(board, src, dst):
            return False

        piece = board[src]
        assert piece is not None
        with board.simulate_move(src, dst):
            king_sq = board.king_square(piece.color)
            return not self.is_square_attacked(king_sq, piece.color.opposite)

    # -- Enumeration --------------------------------------------------------

    def has_legal_move(self, color: Color) -> bool:
        """Does *color* have at least one safe move? Stops at the first."""
        for src in self._board.occupied_squares(color):
            for dst in all_squares():
                if self.is_safe_move(src, dst):
                    return True
        return False

    def legal_destinations(self, src: Square) -> list[Square]:
        """Every square the piece on *src* may safely move to."""
        if self._board[src] is None:
            return []
        return [dst for dst in all_squares() if self.is_safe_move(src, dst)]

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All safe moves for *color*."""
        return [
            Move(src, dst)
            for src in self._board.occupied_squares(color)
            for dst in self.legal_destinations(src)
        ]
