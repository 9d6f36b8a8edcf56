"""Environment variables of the current process and .env-style file loading."""

from __future__ import annotations

import os
import re

__all__ = [
    "set_env",
    "get_env",
    "remove_env",
    "init",
    "is_child",
    "is_parent",
    "home",
    "shell",
]

_LINE_RE = re.compile(r'^([^ =]+)[= "]+([^\n#"]+)')


def set_env(name: str, value: str) -> None:
    """Set an environment variable."""
    os.environ[name] = value


def get_env(name: str) -> str:
    """Return an environment variable, or empty text when it is unset."""
    return os.environ.get(name, "")


def remove_env(name: str) -> None:
    """Unset an environment variable; unknown names are ignored."""
    os.environ.pop(name, None)


def init(path: str | os.PathLike[str]) -> int:
    """Load ``NAME=value`` lines from a file; returns how many were set.

    Raises OSError when the file cannot be read.
    """
    loaded = 0
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            match = _LINE_RE.match(line)
            if match is None:
                continue
            set_env(match.group(1), match.group(2))
            loaded += 1
    return loaded


def is_child() -> bool:
    """True when this process was started as a child worker."""
    return bool(get_env("CHILD"))


def is_parent() -> bool:
    """True when this process was not started as a child worker."""
    return not get_env("CHILD")


def home() -> str:
    """The user's home directory as given by the environment."""
    return get_env("USERPROFILE" if os.name == "nt" else "HOME")


def shell() -> str:
    """The user's command shell as given by the environment."""
    return get_env("COMSPEC" if os.name == "nt" else "SHELL")