"""A set of named fields that notify listeners when they change."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from nodekit.event import Event

__all__ = ["Observer"]


class Observer:
    """Holds named values; ``set`` calls listeners with the old and new value."""

    def __init__(
        self, fields: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None
    ) -> None:
        self._values: dict[str, Any] = {}
        self._events: dict[str, Event] = {}
        if fields is None:
            return
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        for name, value in pairs:
            self._values.setdefault(name, value)

    def _require(self, name: str) -> None:
        if name not in self._values:
            raise KeyError(f"field not found: {name}")

    def set(self, name: str, value: Any) -> None:
        """Notify listeners of ``name`` with (old, new), then store ``value``."""
        self._require(name)
        old = self._values[name]
        event = self._events.get(name)
        if event is not None:
            event.emit(old, value)
        self._values[name] = value

    def get(self, name: str) -> Any:
        """Return the value of ``name``."""
        self._require(name)
        return self._values[name]

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def _listen(
        self, name: str, func: Callable[[Any, Any], Any] | None, once: bool
    ) -> Any:
        if name not in self._values or func is None:
            return None
        event = self._events.setdefault(name, Event())
        return event.once(func) if once else event.on(func)

    def on(self, name: str, func: Callable[[Any, Any], Any] | None) -> Any:
        """Call ``func(old, new)`` on every change of ``name``; None if unknown."""
        return self._listen(name, func, once=False)

    def once(self, name: str, func: Callable[[Any, Any], Any] | None) -> Any:
        """Call ``func(old, new)`` on the next change of ``name`` only."""
        return self._listen(name, func, once=True)

    def off(self, handle: Any) -> None:
        """Remove the listener behind ``handle``."""
        for event in self._events.values():
            event.off(handle)

    def clear(self) -> None:
        """Drop every field and listener."""
        self._values.clear()
        for event in self._events.values():
            event.clear()
        self._events.clear()

    def empty(self) -> bool:
        """True when there are no fields."""
        return not self._values

    def size(self) -> int:
        """Number of fields."""
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values