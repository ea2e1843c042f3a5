"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessterm.core import Board, Color, Rules, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    gen.is_safe_move(parse_square("e2"), parse_square("e4"))  # True
    Rules.game_status(board, Color.BLACK)  # GameStatus.PLAYING
"""

from chessterm.core.board import Board
from chessterm.core.enums import Color, GameStatus, PieceType
from chessterm.core.errors import (
    ChessError,
    FormatError,
    IllegalPositionError,
    InvariantViolation,
)
from chessterm.core.geometry import is_valid_geometry
from chessterm.core.move import Move
from chessterm.core.move_generator import MoveGenerator
from chessterm.core.notation import (
    STARTING_FEN,
    board_from_placement,
    board_to_fen,
    parse_fen,
)
from chessterm.core.piece import Piece
from chessterm.core.rules import Rules
from chessterm.core.types import (
    Square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Errors
    "ChessError",
    "FormatError",
    "IllegalPositionError",
    "InvariantViolation",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "is_valid_geometry",
    # Notation
    "STARTING_FEN",
    "board_from_placement",
    "board_to_fen",
    "parse_fen",
]
