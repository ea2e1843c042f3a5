"""Square type alias and coordinate helpers.

Board layout (row-major, as printed on screen):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

so ``a8 = (0, 0)``, ``h8 = (0, 7)``, ``a1 = (7, 0)`` and ``e2 = (6, 4)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from chessterm.core.errors import FormatError

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

_FILES = "abcdefgh"
_RANKS = "12345678"


def make_square(row: int, col: int) -> Square:
    return (row, col)


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def all_squares() -> Iterator[Square]:
    """All 64 squares, a8 first."""
    for row in range(8):
        for col in range(8):
            yield (row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return _FILES[col] + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise FormatError(f"Invalid square name: {name!r}")
    return make_square(8 - int(name[1]), ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, col) for col in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, col) for col in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, col) for col in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, col) for col in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, col) for col in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, col) for col in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, col) for col in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, col) for col in range(8))
