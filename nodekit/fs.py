"""File system helpers built on ``File``."""

from __future__ import annotations

import os
import shutil

from nodekit.file import CHUNK_SIZE, File, FileError

__all__ = [
    "std_input",
    "std_output",
    "std_error",
    "readable",
    "writable",
    "file_modification_time",
    "file_access_time",
    "file_creation_time",
    "read_file",
    "copy_file",
    "rename_file",
    "move_file",
    "remove_file",
    "exists_file",
    "create_file",
    "file_size",
    "write_file",
    "append_file",
    "rename_folder",
    "move_folder",
    "create_folder",
    "remove_folder",
    "exists_folder",
    "read_folder",
    "folder_size",
    "is_folder",
    "is_file",
    "copy_folder",
]


def _require_path(path: str) -> None:
    if not path:
        raise ValueError("path must not be empty")


def std_input(chunk_size: int = CHUNK_SIZE) -> File:
    """A File reading standard input."""
    return File(0, "r", chunk_size)


def std_output(chunk_size: int = CHUNK_SIZE) -> File:
    """A File writing standard output."""
    return File(1, "w", chunk_size)


def std_error(chunk_size: int = CHUNK_SIZE) -> File:
    """A File writing standard error."""
    return File(2, "w", chunk_size)


def readable(path: str, chunk_size: int = CHUNK_SIZE) -> File:
    """Open an existing file for reading."""
    return File(path, "r", chunk_size)


def writable(path: str, chunk_size: int = CHUNK_SIZE) -> File:
    """Create or truncate a file for writing."""
    return File(path, "w", chunk_size)


def _stat(path: str, what: str) -> os.stat_result:
    try:
        return os.stat(path)
    except OSError as exc:
        raise FileError(f"Failed to get file {what} properties") from exc


def file_modification_time(path: str) -> int:
    """Unix time of the last modification."""
    return int(_stat(path, "last modification time").st_mtime)


def file_access_time(path: str) -> int:
    """Unix time of the last access."""
    return int(_stat(path, "last access time").st_atime)


def file_creation_time(path: str) -> int:
    """Unix time of creation, or of the last status change where unknown."""
    info = _stat(path, "creation time")
    return int(getattr(info, "st_birthtime", info.st_ctime))


def read_file(path: str) -> bytes:
    """Return the whole content of a file; empty for an empty path."""
    if not path:
        return b""
    chunks = []
    with File(path, "r") as handle:
        while True:
            chunk = handle.read()
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def copy_file(src: str, dst: str) -> None:
    """Copy a file's content to ``dst``, replacing it."""
    _require_path(src)
    _require_path(dst)
    try:
        shutil.copyfile(src, dst)
    except OSError as exc:
        raise FileError(str(exc)) from exc


def rename_file(old: str, new: str) -> None:
    """Rename or move a file or folder."""
    _require_path(old)
    _require_path(new)
    try:
        os.rename(old, new)
    except OSError as exc:
        raise FileError(str(exc)) from exc


def move_file(old: str, new: str) -> None:
    """Move a file."""
    rename_file(old, new)


def remove_file(path: str) -> None:
    """Delete a file."""
    _require_path(path)
    try:
        os.remove(path)
    except OSError as exc:
        raise FileError(str(exc)) from exc


def exists_file(path: str) -> bool:
    """True when ``path`` is an existing regular file."""
    return bool(path) and os.path.isfile(path)


def create_file(path: str) -> bool:
    """Create the file if missing, keeping any content; False on failure."""
    _require_path(path)
    try:
        File(path, "w+").close()
    except FileError:
        return False
    return True


def file_size(path: str) -> int:
    """Size of a file in bytes, 0 when it cannot be read."""
    try:
        with File(path, "r") as handle:
            return handle.size()
    except (FileError, OSError):
        return 0


def write_file(path: str, data: bytes | str) -> int:
    """Replace a file's content; returns the bytes written."""
    with File(path, "w") as handle:
        return handle.write(data)


def append_file(path: str, data: bytes | str) -> int:
    """Append to a file, creating it if needed; returns the bytes written."""
    with File(path, "a") as handle:
        return handle.write(data)


def rename_folder(old: str, new: str) -> None:
    """Rename a folder."""
    rename_file(old, new)


def move_folder(old: str, new: str) -> None:
    """Move a folder."""
    rename_file(old, new)


def create_folder(path: str, mode: int = 0o777) -> None:
    """Create a folder."""
    _require_path(path)
    try:
        os.mkdir(path, mode)
    except OSError as exc:
        raise FileError(str(exc)) from exc


def remove_folder(path: str) -> None:
    """Remove an empty folder."""
    _require_path(path)
    try:
        os.rmdir(path)
    except OSError as exc:
        raise FileError(str(exc)) from exc


def exists_folder(path: str) -> bool:
    """True when ``path`` is an existing folder."""
    return bool(path) and os.path.isdir(path)


def read_folder(path: str) -> list[str]:
    """Names in a folder, sorted; empty when it cannot be listed."""
    if not path:
        return []
    try:
        names = os.listdir(path)
    except OSError:
        return []
    return sorted(name for name in names if name not in (".", ".."))


def folder_size(path: str) -> int:
    """Number of entries in a folder."""
    return len(read_folder(path))


def is_folder(path: str) -> bool:
    """True when ``path`` is a folder."""
    return exists_folder(path)


def is_file(path: str) -> bool:
    """True when ``path`` is a regular file."""
    return exists_file(path)


def copy_folder(src: str, dst: str) -> None:
    """Copy a folder and everything in it to a new folder ``dst``."""
    _require_path(src)
    _require_path(dst)
    try:
        shutil.copytree(src, dst)
    except (OSError, shutil.Error) as exc:
        raise FileError(str(exc)) from exc