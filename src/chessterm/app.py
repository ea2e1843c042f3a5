"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessterm.core.errors import FormatError, IllegalPositionError
from chessterm.game.controller import GameController
from chessterm.terminal.session import TerminalSession
from chessterm.terminal.settings import TerminalSettings

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessterm", description="Two-player chess in the terminal."
    )
    parser.add_argument(
        "--fen", help="start from a FEN position instead of the standard one"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="plain text board, no ANSI colors"
    )
    parser.add_argument(
        "--no-hints",
        action="store_true",
        help="do not highlight legal destinations of the selected piece",
    )
    parser.add_argument(
        "--no-flicker", action="store_true", help="do not blink the selected piece"
    )
    parser.add_argument(
        "--flicker-interval",
        type=float,
        default=TerminalSettings.flicker_interval,
        help="seconds between flicker frames (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level for stderr (default: %(default)s)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> TerminalSettings:
    return TerminalSettings(
        use_color=not args.no_color,
        show_hints=not args.no_hints,
        flicker_enabled=not args.no_flicker,
        flicker_interval=args.flicker_interval,
    )


def main(argv: list[str] | None = None) -> int:
    """Launch a terminal game. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    ctrl = GameController()
    try:
        ctrl.new_game(fen=args.fen)
    except (FormatError, IllegalPositionError) as exc:
        _LOGGER.error("Cannot start game: %s", exc)
        return 2

    session = TerminalSession(ctrl, settings_from_args(args))
    try:
        session.run()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
