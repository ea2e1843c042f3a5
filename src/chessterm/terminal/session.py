"""Interactive terminal game loop.

Owns prompting, cancellation and printing outcomes. Every rule decision is
delegated to the :class:`IGameController`.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import TextIO

from chessterm.core.enums import Color, GameStatus
from chessterm.core.errors import FormatError
from chessterm.core.types import Square, parse_square
from chessterm.game.interfaces import IGameController, RejectReason
from chessterm.game.state import Conclusion, MoveResult
from chessterm.terminal.flicker import Flicker
from chessterm.terminal.renderer import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    render_board,
    render_captures,
)
from chessterm.terminal.settings import TerminalSettings

_LOGGER = logging.getLogger(__name__)

_REJECT_MESSAGES: dict[RejectReason, str] = {
    RejectReason.FORMAT_ERROR: "Invalid format.",
    RejectReason.WRONG_COLOR: "That is not your piece!",
    RejectReason.ILLEGAL_MOVE: "Illegal Move!",
    RejectReason.GAME_OVER: "The game is over.",
}


class _Cancelled(Exception):
    """The player typed the cancel token."""


class TerminalSession:
    """Alternates turns on a terminal until the game concludes or input ends."""

    __slots__ = ("_ctrl", "_settings", "_in", "_out", "_write_lock", "_message")

    def __init__(
        self,
        controller: IGameController,
        settings: TerminalSettings | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._ctrl = controller
        self._settings = settings or TerminalSettings()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._write_lock = threading.Lock()
        self._message = ""

    # ── Public API ───────────────────────────────────────────────────────

    def run(self) -> Conclusion | None:
        """Play until checkmate/stalemate. Returns ``None`` on end of input."""
        if self._settings.clear_screen:
            self._write(CLEAR_SCREEN)
        try:
            while self._ctrl.conclusion is None:
                self.play_turn(self._ctrl.side_to_move)
        except EOFError:
            _LOGGER.debug("Input closed, leaving game loop")
            self._write("\n")
            return None

        conclusion = self._ctrl.conclusion
        self._write(self._frame() + f"\n{conclusion}\n")
        return conclusion

    def play_turn(self, color: Color) -> MoveResult | None:
        """Prompt *color* for one move. ``None`` if the selection was cancelled."""
        number = self._ctrl.fullmove_number
        self._write(self._frame() + f"\n{number}. {color} to move. Piece to move: ")
        try:
            src_text, src_sq = self._read_square()
        except _Cancelled:
            self._message = ""
            return None

        targets = self._hint_targets(color, src_sq)
        cancel = self._settings.cancel_token
        prompt = f"\n{number}. {color} to move. Move to ({cancel} to cancel): "
        try:
            dst_text = self._read_destination(src_sq, targets, prompt)
        except _Cancelled:
            self._message = "Selection cancelled."
            return None

        result = self._ctrl.try_move(color, src_text, dst_text)
        self._message = self._describe(result)
        return result

    # ── Input ────────────────────────────────────────────────────────────

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        text = line.strip()
        if text == self._settings.cancel_token:
            raise _Cancelled
        return text

    def _read_square(self) -> tuple[str, Square]:
        """Read until a well-formed square name arrives."""
        while True:
            text = self._read_line()
            try:
                return text, parse_square(text)
            except FormatError:
                self._write("Invalid format. Try again: ")

    def _read_destination(
        self, selected: Square, targets: list[Square], prompt: str
    ) -> str:
        settings = self._settings
        if not settings.flicker_enabled:
            self._write(self._frame(selected, targets=targets) + prompt)
            return self._read_square()[0]

        def frame(hide: bool) -> str:
            body = self._frame(selected, hide_selected=hide, targets=targets)
            return CURSOR_HOME + body + prompt

        with Flicker(frame, self._write, settings.flicker_interval):
            return self._read_square()[0]

    # ── Output ───────────────────────────────────────────────────────────

    def _write(self, text: str) -> None:
        with self._write_lock:
            self._out.write(text)
            self._out.flush()

    def _frame(
        self,
        selected: Square | None = None,
        *,
        hide_selected: bool = False,
        targets: list[Square] | None = None,
    ) -> str:
        settings = self._settings
        board = self._ctrl.snapshot()
        text = render_board(
            board,
            selected=selected,
            hide_selected=hide_selected,
            targets=targets or (),
            use_color=settings.use_color,
        )
        if settings.show_captures:
            text += "\n" + render_captures(self._ctrl.captures)
        if self._message:
            text += f"\n{self._message}\n"
        return text

    def _describe(self, result: MoveResult) -> str:
        if result.rejection is not None:
            return _REJECT_MESSAGES[result.rejection]
        if result.status == GameStatus.CHECK:
            return f"{result.move} - CHECK"
        return f"{result.move}"

    def _hint_targets(self, color: Color, src: Square) -> list[Square]:
        if not self._settings.show_hints:
            return []
        piece = self._ctrl.snapshot()[src]
        if piece is None or piece.color != color:
            return []
        return self._ctrl.legal_destinations(src)
