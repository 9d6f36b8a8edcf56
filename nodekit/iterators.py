"""Helpers that apply a predicate or reducer over positional arguments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from nodekit.strings import to_string

__all__ = ["count", "reduce", "get", "every", "some", "none", "join"]


def count(func: Callable[[Any], Any], *args: Any) -> int:
    """Count the arguments for which ``func`` is true."""
    return sum(1 for arg in args if func(arg))


def reduce(func: Callable[[Any, Any], Any], first: Any, *args: Any) -> Any:
    """Fold the remaining arguments into ``first`` with ``func``."""
    out = first
    for arg in args:
        out = func(out, arg)
    return out


def get(index: int, *args: Any) -> Any:
    """Return the argument at ``index``, the last one if past the end, or None."""
    if index < 0 or not args:
        return None
    return args[min(index, len(args) - 1)]


def every(func: Callable[[Any], Any], *args: Any) -> bool:
    """True when ``func`` holds for every argument; False with no arguments."""
    if not args:
        return False
    return all(func(arg) for arg in args)


def some(func: Callable[[Any], Any], *args: Any) -> bool:
    """True when ``func`` holds for at least one argument."""
    return any(func(arg) for arg in args)


def none(func: Callable[[Any], Any], *args: Any) -> bool:
    """True when ``func`` holds for no argument; False with no arguments."""
    if not args:
        return False
    return not any(func(arg) for arg in args)


def join(separator: str, *args: Any) -> str:
    """Render each argument as text and join them with ``separator``."""
    return separator.join(to_string(arg) for arg in args)