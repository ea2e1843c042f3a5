"""Exception hierarchy for the rule engine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`chessterm`."""


class FormatError(ChessError, ValueError):
    """Malformed coordinate or FEN text. Recoverable: ask again."""


class InvariantViolation(ChessError, RuntimeError):
    """The board is in a state the rules cannot reason about.

    Raised when a color does not have exactly one king while a legality or
    attack query runs. This is a data-integrity fault, never a game result.
    """


class IllegalPositionError(ChessError, ValueError):
    """A custom setup the game cannot start from.

    Each color needs exactly one king, and the side that just moved may not
    be left in check.
    """
