"""Terminal front-end settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TerminalSettings:
    """All user-configurable settings."""

    # Board
    use_color: bool = True
    show_hints: bool = True  # highlight legal destinations of the selection
    show_captures: bool = True

    # Selection flicker
    flicker_enabled: bool = True
    flicker_interval: float = 0.4  # seconds per frame

    # Input
    cancel_token: str = "x"
    clear_screen: bool = True
