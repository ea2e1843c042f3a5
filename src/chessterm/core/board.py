"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from chessterm.core.enums import Color, PieceType
from chessterm.core.errors import InvariantViolation
from chessterm.core.piece import Piece
from chessterm.core.types import Square, all_squares, square_name

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of ``Piece | None``.

    Row 0 is rank 8 and column 0 is file a. The board enforces no legality:
    :meth:`move_piece` trusts its caller.

    Every mutation and every :meth:`copy` runs under a re-entrant lock so a
    reader on another thread (e.g. a repaint loop) can take a consistent
    snapshot while the rule engine is simulating a move.
    """

    __slots__ = ("_grid", "_lock")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        self._lock = threading.RLock()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        with self._lock:
            self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # -- Query helpers ------------------------------------------------------

    def occupied_squares(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, a8 first."""
        return [
            sq
            for sq in all_squares()
            if (piece := self[sq]) is not None and piece.color == color
        ]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq in all_squares() if self[sq] == target]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise InvariantViolation(f"No {color.name} king on board")
        if len(kings) > 1:
            names = ", ".join(square_name(sq) for sq in kings)
            raise InvariantViolation(f"More than one {color.name} king: {names}")
        return kings[0]

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, src: Square, dst: Square) -> Piece | None:
        """Move the piece on *src* onto *dst* and clear *src*.

        Returns whatever occupied *dst* before the move.
        """
        with self._lock:
            captured = self[dst]
            self[dst] = self[src]
            self[src] = None
        return captured

    @contextmanager
    def simulate_move(self, src: Square, dst: Square) -> Iterator[Piece | None]:
        """Apply *src* → *dst* for the duration of the ``with`` block.

        Both cells are restored on every exit path. The lock is held for the
        whole window, so :meth:`copy` on another thread never sees the
        half-applied move.
        """
        with self._lock:
            saved_src = self[src]
            saved_dst = self[dst]
            try:
                yield self.move_piece(src, dst)
            finally:
                self[src] = saved_src
                self[dst] = saved_dst

    def copy(self) -> Board:
        b = Board()
        with self._lock:
            b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        with self._lock:
            self._grid = [[None] * 8 for _ in range(8)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
