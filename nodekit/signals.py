"""Process signal events and helpers to raise or ignore signals."""

from __future__ import annotations

import atexit
import signal
from collections.abc import Callable
from typing import Any

from nodekit.console import Color, Console
from nodekit.event import Event

__all__ = [
    "on_sigfpe",
    "on_sigsegv",
    "on_sigill",
    "on_sigint",
    "on_sigterm",
    "on_sigabrt",
    "on_sigerr",
    "on_sigexit",
    "start",
    "ignore",
    "unignore",
    "emit",
]

on_sigfpe = Event()
on_sigsegv = Event()
on_sigill = Event()
on_sigint = Event()
on_sigterm = Event()
on_sigabrt = Event()
on_sigerr = Event()
on_sigexit = Event()

_HANDLED = (
    ("SIGFPE", on_sigfpe, "Floating Point Exception"),
    ("SIGSEGV", on_sigsegv, "Segmentation Violation"),
    ("SIGILL", on_sigill, "Illegal Instruction"),
    ("SIGTERM", on_sigterm, "Process Terminated"),
    ("SIGINT", on_sigint, "Signal Interrupt"),
    ("SIGABRT", on_sigabrt, "Process Abort"),
)

_console = Console()
_exit_registered = False


def _make_handler(name: str, event: Event, message: str) -> Callable[[int, Any], None]:
    def handle(signum: int, frame: Any) -> None:
        event.emit(signum)
        on_sigerr.emit()
        _console.foreground(Color.RED | Color.BOLD)
        _console.pout(f"{name}: ")
        _console.log(message)
        on_sigexit.emit()

    return handle


def _emit_exit() -> None:
    on_sigexit.emit()


def start() -> None:
    """Route process signals to the events above and report them on stdout."""
    global _exit_registered
    for name, event, message in _HANDLED:
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        signal.signal(signum, _make_handler(name, event, message))
    if not _exit_registered:
        atexit.register(_emit_exit)
        _exit_registered = True
    pipe = getattr(signal, "SIGPIPE", None)
    if pipe is not None:
        signal.signal(pipe, signal.SIG_IGN)


def ignore(signum: int) -> None:
    """Ignore the signal."""
    signal.signal(signum, signal.SIG_IGN)


def unignore(signum: int) -> None:
    """Restore the default action for the signal."""
    signal.signal(signum, signal.SIG_DFL)


def emit(signum: int) -> None:
    """Send the signal to the current process."""
    signal.raise_signal(signum)