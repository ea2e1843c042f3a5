"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessterm.core.enums import Color, PieceType
from chessterm.core.errors import FormatError

# Board letter per type; FEN writes black pieces in lowercase.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_BY_CHAR: dict[str, tuple[Color, PieceType]] = {
    **{letter: (Color.WHITE, pt) for pt, letter in _LETTERS.items()},
    **{letter.lower(): (Color.BLACK, pt) for pt, letter in _LETTERS.items()},
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored chess piece. An empty square is ``None``, never a piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character: ``N`` for a white knight, ``n`` for a black one."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        try:
            color, piece_type = _BY_CHAR[char]
        except KeyError:
            raise FormatError(f"Invalid piece character: {char!r}") from None
        return cls(color, piece_type)

    @property
    def letter(self) -> str:
        """Uppercase letter drawn on the colored terminal board."""
        return _LETTERS[self.piece_type]
