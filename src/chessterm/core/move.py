"""Move value object (coordinate-pair representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessterm.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable source/destination pair. Not retained after execution."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @classmethod
    def parse(cls, src: str, dst: str) -> Move:
        """Build a move from two square names, e.g. ``Move.parse("e2", "e4")``."""
        return cls(parse_square(src), parse_square(dst))
