"""Limits on the number of open files."""

from __future__ import annotations

try:
    import resource
except ImportError:  # pragma: no cover - platforms without resource limits
    resource = None  # type: ignore[assignment]

__all__ = [
    "set_hard_fileno",
    "set_soft_fileno",
    "get_hard_fileno",
    "get_soft_fileno",
    "fileno_count",
    "fileno_ready",
]

_count = 0
_fallback = {"soft": 512, "hard": 512}


def _check(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"invalid file limit: {value!r}")


def _infinite(value: int) -> bool:
    return resource is not None and value == resource.RLIM_INFINITY


def get_soft_fileno() -> int:
    """The current limit on open files."""
    if resource is None:
        return _fallback["soft"]
    return resource.getrlimit(resource.RLIMIT_NOFILE)[0]


def get_hard_fileno() -> int:
    """The ceiling up to which the open-file limit may be raised."""
    if resource is None:
        return _fallback["hard"]
    return resource.getrlimit(resource.RLIMIT_NOFILE)[1]


def set_soft_fileno(value: int) -> int:
    """Set the limit on open files; returns the new limit."""
    _check(value)
    if resource is None:
        _fallback["soft"] = _fallback["hard"] = value
        return value
    _, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    resource.setrlimit(resource.RLIMIT_NOFILE, (value, hard))
    return value


def set_hard_fileno(value: int) -> int:
    """Set the ceiling on open files, lowering the limit if needed."""
    _check(value)
    if resource is None:
        _fallback["soft"] = _fallback["hard"] = value
        return value
    soft, _ = resource.getrlimit(resource.RLIMIT_NOFILE)
    new_soft = value if _infinite(soft) else min(soft, value)
    resource.setrlimit(resource.RLIMIT_NOFILE, (new_soft, value))
    return value


def _track_open() -> None:
    global _count
    _count += 1


def _track_close() -> None:
    global _count
    _count = max(0, _count - 1)


def fileno_count() -> int:
    """Number of files tracked as open by this package."""
    return _count


def fileno_ready() -> bool:
    """True when another file may be opened under the current limit."""
    soft = get_soft_fileno()
    return _infinite(soft) or _count < soft