"""A value-or-error holder."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

__all__ = ["Expected", "ExpectedError"]

T = TypeVar("T")


class ExpectedError(Exception):
    """Raised when the requested side of an Expected is absent."""


class Expected(Generic[T]):
    """Holds either a value (``ok`` true) or an error (``ok`` false)."""

    def __init__(self, value: Any, ok: bool = True) -> None:
        self._ok = bool(ok)
        self._data = value

    def has_value(self) -> bool:
        """True when this holds a value rather than an error."""
        return self._ok

    def value(self) -> T:
        """Return the value, or raise ExpectedError."""
        if not self._ok or self._data is None:
            raise ExpectedError("expected does not have a value")
        return self._data

    def error(self) -> Any:
        """Return the error, or raise ExpectedError."""
        if self._ok or self._data is None:
            raise ExpectedError("expected does not have a value")
        return self._data

    def __bool__(self) -> bool:
        return self._ok

    def __repr__(self) -> str:
        side = "value" if self._ok else "error"
        return f"Expected({side}={self._data!r})"