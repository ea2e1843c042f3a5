"""Background repaint loop that blinks the selected square."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

_LOGGER = logging.getLogger(__name__)


class Flicker:
    """Repaints a frame every *interval* seconds, alternating ``hide``.

    *render* receives the current ``hide`` flag and returns a full frame;
    *write* puts it on the terminal. The renderer must only read board
    snapshots, never the live board.

    Usable as a context manager::

        with Flicker(render, write):
            dst = read_line()
    """

    __slots__ = ("_render", "_write", "_interval", "_stop_event", "_thread", "frames")

    def __init__(
        self,
        render: Callable[[bool], str],
        write: Callable[[str], None],
        interval: float = 0.4,
    ) -> None:
        self._render = render
        self._write = write
        self._interval = interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.frames = 0

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="chessterm-flicker", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop repainting and wait for the last frame to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        hide = False
        while not self._stop_event.is_set():
            try:
                self._write(self._render(hide))
            except Exception:
                _LOGGER.exception("Flicker frame failed; stopping repaint loop")
                return
            self.frames += 1
            hide = not hide
            self._stop_event.wait(self._interval)

    def __enter__(self) -> Flicker:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
