"""Coloured status lines and a terminal spinner."""

from __future__ import annotations

import os
import sys
import threading

import click

_CLEAR_LINE = "\r\x1b[2K"


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a red warning line."""
    mark = "!" if _no_emoji() else "⚠️ "
    click.echo(f"{click.style(mark, fg='red')} {click.style(message, fg='red')}")


def success(message: str) -> None:
    """Print a green success line."""
    mark = "✓" if _no_emoji() else "✅"
    click.echo(f"{click.style(mark, fg='green')} {click.style(message, fg='green')}")


class Spinner:
    """A spinner ticking on its own thread; it draws nothing unless the stream is a terminal."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str = "", stream=None, interval: float = 0.1):
        self.message = message
        self._stream = sys.stderr if stream is None else stream
        self._interval = interval
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._drawn = False
        self._frame = 0
        self._thread: threading.Thread | None = None
        if self._stream.isatty():
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()

    @property
    def finished(self) -> bool:
        return self._stopped.is_set()

    def _draw(self) -> None:
        with self._lock:
            if self._stopped.is_set():
                return
            frame = self._FRAMES[self._frame % len(self._FRAMES)]
            self._frame += 1
            self._stream.write(f"{_CLEAR_LINE}{frame} {self.message}")
            self._stream.flush()
            self._drawn = True

    def _tick(self) -> None:
        self._draw()
        while not self._stopped.wait(self._interval):
            self._draw()

    def set_message(self, message: str) -> None:
        """Change the text beside the spinner, redrawing it at once when it is shown."""
        with self._lock:
            self.message = message
        if self._thread is not None:
            self._draw()

    def finish_and_clear(self) -> None:
        """Stop ticking and wipe the spinner line. Calling it again does nothing."""
        with self._lock:
            if self._stopped.is_set():
                return
            self._stopped.set()
        if self._thread is not None:
            self._thread.join()
        if self._drawn:
            self._stream.write(_CLEAR_LINE)
            self._stream.flush()

    def __enter__(self) -> Spinner:
        return self

    def __exit__(self, *exc_info) -> None:
        self.finish_and_clear()