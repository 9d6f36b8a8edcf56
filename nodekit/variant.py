"""A value restricted to a fixed list of types."""

from __future__ import annotations

from typing import Any

__all__ = ["Variant"]

_UNSET = object()


class Variant:
    """Holds one value whose exact type must be one of ``types``.

    ``index`` is the position of the held value's type in ``types``,
    or -1 while nothing is held.
    """

    def __init__(self, types: tuple[type, ...], value: Any = _UNSET) -> None:
        self._types = tuple(types)
        self._value: Any = None
        self._index = -1
        if value is not _UNSET:
            self.set(value)

    def _type_index(self, value: Any) -> int:
        kind = type(value)
        for i, allowed in enumerate(self._types):
            if kind is allowed:
                return i
        raise TypeError("invalid data type")

    def set(self, value: Any) -> None:
        """Store ``value``; raises TypeError if its type is not allowed."""
        index = self._type_index(value)
        self._index = index
        self._value = value

    def get(self) -> Any:
        """Return the held value, or None when empty."""
        return self._value

    @property
    def index(self) -> int:
        """Position of the held value's type, -1 when empty."""
        return self._index

    @property
    def types(self) -> tuple[type, ...]:
        """The allowed types."""
        return self._types

    def has_value(self) -> bool:
        """True once a value has been stored."""
        return self._index >= 0

    def __repr__(self) -> str:
        return f"Variant(index={self._index}, value={self._value!r})"