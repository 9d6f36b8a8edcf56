"""A small event emitter with persistent and one-shot listeners."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ["Event"]


class _Listener:
    """A registered callback; the object itself serves as the handle."""

    __slots__ = ("func", "once", "active")

    def __init__(self, func: Callable[..., Any], once: bool) -> None:
        self.func = func
        self.once = once
        self.active = True


class Event:
    """Keeps an ordered list of listeners and calls them on ``emit``."""

    def __init__(self) -> None:
        self._listeners: list[_Listener] = []
        self._state = 1

    def __call__(self, func: Callable[..., Any] | None) -> _Listener | None:
        return self.on(func)

    def _add(self, func: Callable[..., Any] | None, once: bool) -> _Listener | None:
        if func is None:
            return None
        listener = _Listener(func, once)
        self._listeners.append(listener)
        return listener

    def on(self, func: Callable[..., Any] | None) -> _Listener | None:
        """Register ``func`` for every emit; returns a handle for ``off``."""
        return self._add(func, once=False)

    def once(self, func: Callable[..., Any] | None) -> _Listener | None:
        """Register ``func`` for the next emit only; returns a handle for ``off``."""
        return self._add(func, once=True)

    def off(self, handle: _Listener | None) -> None:
        """Remove the listener behind ``handle``; unknown handles are ignored."""
        for i, listener in enumerate(self._listeners):
            if listener is handle:
                listener.active = False
                del self._listeners[i]
                return

    def emit(self, *args: Any) -> None:
        """Call every listener in order with ``args`` unless paused."""
        if self.is_paused():
            return
        for listener in list(self._listeners):
            if not self._listeners:
                break
            if not listener.active:
                continue
            listener.func(*args)
            if listener.once:
                self.off(listener)

    def empty(self) -> bool:
        """True when no listener is registered."""
        return not self._listeners

    def size(self) -> int:
        """Number of registered listeners."""
        return len(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def clear(self) -> None:
        """Remove every listener."""
        for listener in self._listeners:
            listener.active = False
        self._listeners.clear()

    def is_paused(self) -> bool:
        """True after ``stop`` or ``skip`` until ``resume``."""
        return self._state <= 0

    def resume(self) -> None:
        """Let emits reach the listeners again."""
        self._state = 1

    def stop(self) -> None:
        """Pause delivery of emits."""
        self._state = 0

    def skip(self) -> None:
        """Pause delivery of emits, marking the pause as a skip."""
        self._state = -1