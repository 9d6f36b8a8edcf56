"""Coloured console output and simple console input."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Any, TextIO

from nodekit.iterators import join

__all__ = [
    "Color",
    "Console",
    "log",
    "err",
    "warning",
    "success",
    "error",
    "done",
    "info",
]


class Color(IntEnum):
    """Console colours; combine a colour with ``BOLD`` for the bright variant."""

    BLACK = 0x00
    WHITE = 0x01
    GREEN = 0x02
    RED = 0x03
    BLUE = 0x04
    CYAN = 0x05
    YELLOW = 0x06
    MAGENTA = 0x07
    BOLD = 0x10


_ANSI_OFFSET = {
    Color.BLACK: 0,
    Color.RED: 1,
    Color.GREEN: 2,
    Color.YELLOW: 3,
    Color.BLUE: 4,
    Color.MAGENTA: 5,
    Color.CYAN: 6,
    Color.WHITE: 7,
}

_RESET = "\x1b[0m"


def _color_code(color: int, base: int, bright: int) -> int:
    value = int(color)
    if value < 0 or value > 0x1F:
        raise ValueError(f"unknown color: {color!r}")
    intense = bool(value & Color.BOLD)
    value &= 0x0F
    try:
        offset = _ANSI_OFFSET[Color(value)]
    except (ValueError, KeyError):
        raise ValueError(f"unknown color: {color!r}") from None
    return (bright if intense else base) + offset


class Console:
    """Writes to the given streams; styles apply to the next write only.

    Streams left as None are looked up on ``sys`` at the time of writing.
    """

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self._stdin = stdin
        self._codes: list[int] = []

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def _errs(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def foreground(self, color: int) -> None:
        """Set the text colour for the next write."""
        self._codes.append(_color_code(color, 30, 90))

    def background(self, color: int) -> None:
        """Set the background colour for the next write."""
        self._codes.append(_color_code(color, 40, 100))

    def inverse(self) -> None:
        """Swap text and background colours for the next write."""
        self._codes.append(7)

    def underscore(self) -> None:
        """Underline the next write."""
        self._codes.append(4)

    def reset(self) -> None:
        """Drop any pending style."""
        self._codes.clear()

    def gotoxy(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` and row ``y``, counted from zero."""
        self._out.write(f"\x1b[{y + 1};{x + 1}H")
        self._out.flush()

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self._out.write("\x1b[2J\x1b[H")
        self._out.flush()

    def _write(self, stream: TextIO, text: str) -> int:
        codes, self._codes = self._codes, []
        if codes:
            stream.write(f"\x1b[{';'.join(map(str, codes))}m{text}{_RESET}")
        else:
            stream.write(text)
        stream.flush()
        return len(text)

    def pout(self, *args: Any) -> int:
        """Write the arguments joined by spaces; returns the text length."""
        return self._write(self._out, join(" ", *args))

    def log(self, *args: Any) -> int:
        """Write the arguments joined by spaces, then a newline."""
        return self.pout(*args, "\n")

    def err(self, *args: Any) -> int:
        """Write the arguments joined by spaces, then a newline, to stderr."""
        return self._write(self._errs, join(" ", *args, "\n"))

    def scan(self) -> str:
        """Read one line of input without its line ending."""
        return self._in.readline().rstrip("\r\n")

    def wait(self) -> str:
        """Read a single character of input."""
        return self._in.read(1)

    def _tagged(self, color: Color, label: str, args: tuple[Any, ...]) -> int:
        self.foreground(color | Color.BOLD)
        self.pout(label)
        return self.log(*args)

    def warning(self, *args: Any) -> int:
        """Log with a yellow ``WARNING:`` prefix."""
        return self._tagged(Color.YELLOW, "WARNING: ", args)

    def success(self, *args: Any) -> int:
        """Log with a green ``SUCCESS:`` prefix."""
        return self._tagged(Color.GREEN, "SUCCESS: ", args)

    def error(self, *args: Any) -> int:
        """Log with a red ``ERROR:`` prefix."""
        return self._tagged(Color.RED, "ERROR: ", args)

    def done(self, *args: Any) -> int:
        """Log with a green ``DONE:`` prefix."""
        return self._tagged(Color.GREEN, "DONE: ", args)

    def info(self, *args: Any) -> int:
        """Log with a cyan ``INFO:`` prefix."""
        return self._tagged(Color.CYAN, "INFO: ", args)


_default = Console()


def log(*args: Any) -> int:
    """Log to standard output."""
    return _default.log(*args)


def err(*args: Any) -> int:
    """Log to standard error."""
    return _default.err(*args)


def warning(*args: Any) -> int:
    """Log a warning to standard output."""
    return _default.warning(*args)


def success(*args: Any) -> int:
    """Log a success message to standard output."""
    return _default.success(*args)


def error(*args: Any) -> int:
    """Log an error message to standard output."""
    return _default.error(*args)


def done(*args: Any) -> int:
    """Log a completion message to standard output."""
    return _default.done(*args)


def info(*args: Any) -> int:
    """Log an informational message to standard output."""
    return _default.info(*args)