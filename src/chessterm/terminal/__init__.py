"""Terminal front-end: ANSI rendering, selection flicker, prompt loop."""

from chessterm.terminal.flicker import Flicker
from chessterm.terminal.renderer import render_board, render_captures
from chessterm.terminal.session import TerminalSession
from chessterm.terminal.settings import TerminalSettings

__all__ = [
    "Flicker",
    "TerminalSession",
    "TerminalSettings",
    "render_board",
    "render_captures",
]
