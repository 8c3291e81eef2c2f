"""Process-wide logger used for user-facing output.

The logger is a singleton: the first successful call to :func:`init` sets
the output streams, and later calls are ignored until :func:`reset`.
Until then every logging function does nothing.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Any, TextIO

_RED = "31"

_lock = threading.Lock()
_instance: _Logger | None = None


def _paint(text: str, code: str, stream: TextIO) -> str:
    """Wrap text in an ANSI colour when the stream is an interactive terminal."""
    if os.environ.get("NO_COLOR"):
        return text
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


@dataclass
class _Logger:
    out: TextIO
    err_out: TextIO
    silent: bool = False

    def write(self, text: str) -> None:
        if self.silent:
            return
        self.out.write(text)

    def write_error(self, text: str) -> None:
        self.err_out.write(text)


def init(out: TextIO | None, err_out: TextIO | None, silent: bool = False) -> None:
    """Initialise the logger with standard and error streams.

    Nothing happens if either stream is missing or the logger is already
    initialised. When ``silent`` is true, informational output is dropped
    while errors are still written.
    """
    global _instance
    if out is None or err_out is None:
        return
    with _lock:
        if _instance is None:
            _instance = _Logger(out=out, err_out=err_out, silent=silent)


def reset() -> None:
    """Remove the current logger instance."""
    global _instance
    with _lock:
        _instance = None


def set_silent(silent: bool) -> None:
    """Switch silent mode on or off for the current logger, if any."""
    if _instance is not None:
        _instance.silent = silent


def infof(fmt: str, *args: Any) -> None:
    """Log an informational message built with printf-style formatting."""
    if _instance is None:
        return
    _instance.write(_format(fmt, args))


def infoln(a: Any) -> None:
    """Log an informational value followed by a newline."""
    if _instance is None:
        return
    _instance.write(f"{a}\n")


def errorf(fmt: str, *args: Any) -> None:
    """Log an error message built with printf-style formatting."""
    if _instance is None:
        return
    label = _paint("ERROR", _RED, _instance.err_out)
    _instance.write_error(f"{label}: {_format(fmt, args)}")


def errorln(a: Any) -> None:
    """Log an error value followed by a newline."""
    if _instance is None:
        return
    label = _paint("ERROR", _RED, _instance.err_out)
    _instance.write_error(f"{label}: {a}\n")