"""A file handle with chunked, line and delimiter reads and pause/resume state."""

from __future__ import annotations

import os
from collections.abc import Iterator
from enum import IntFlag
from typing import Any

from nodekit.event import Event

__all__ = ["File", "FileError", "CHUNK_SIZE"]

CHUNK_SIZE = 65536

_BINARY = getattr(os, "O_BINARY", 0)

# mode -> (os.open flags, readable, writable)
_MODES: dict[str, tuple[int, bool, bool]] = {
    "r": (os.O_RDONLY, True, False),
    "w": (os.O_WRONLY | os.O_CREAT | os.O_TRUNC, False, True),
    "a": (os.O_WRONLY | os.O_CREAT | os.O_APPEND, False, True),
    "r+": (os.O_RDWR, True, True),
    "w+": (os.O_RDWR | os.O_CREAT, True, True),
    "a+": (os.O_WRONLY | os.O_APPEND, False, True),
}
_DEFAULT_MODE = (os.O_RDWR, True, True)


class FileError(OSError):
    """Raised when a file cannot be opened or an I/O operation fails."""


class _State(IntFlag):
    UNKNOWN = 0
    OPEN = 1
    CLOSE = 2
    KILL = 4
    REUSE = 8


_DISABLE = _State.CLOSE | _State.KILL | _State.REUSE


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class File:
    """An open file read and written as bytes.

    ``path`` may be a path or an existing file descriptor; a descriptor
    handed in is never closed by this object. Modes are ``r``, ``w``,
    ``a``, ``r+``, ``w+`` (read/write, created if missing, not truncated)
    and ``a+`` (append to an existing file); anything else opens an
    existing file for reading and writing.

    Reading past the end marks the file as at EOF, after which it counts
    as closed until it is reset or repositioned.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | int,
        mode: str = "r",
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        flags, self._readable, self._writable = _MODES.get(mode, _DEFAULT_MODE)
        self.mode = mode
        self.on_resume = Event()
        self.on_stop = Event()
        self.on_drain = Event()
        self.on_close = Event()
        self.on_error = Event()
        self._state = _State.OPEN
        self._feof = 1
        self._offset = 0
        self._borrow = b""
        self._range: tuple[int, int] = (0, 0)
        self._range_end: int | None = None
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

        if isinstance(path, int):
            if path < 0:
                raise FileError("such file or directory does not exist")
            self._fd: int | None = path
            self._owns = False
            return
        try:
            self._fd = os.open(os.fspath(path), flags | _BINARY, 0o666)
        except OSError as exc:
            raise FileError("such file or directory does not exist") from exc
        self._owns = True

    # state -----------------------------------------------------------------

    def _has(self, flag: _State) -> bool:
        return bool(self._state & flag)

    def _set_state(self, value: _State) -> None:
        if self._has(_State.KILL):
            return
        self._state = value

    def is_feof(self) -> bool:
        """True once a read has reached the end or failed."""
        return self._feof <= 0

    def is_closed(self) -> bool:
        """True when stopped, closed, freed or at EOF."""
        return self._has(_DISABLE) or self.is_feof() or self._fd is None

    def is_available(self) -> bool:
        """True while reads and writes can proceed."""
        return not self.is_closed()

    def resume(self) -> None:
        """Reopen a stopped file for reading and writing."""
        if self._has(_State.OPEN):
            return
        self._set_state(_State.OPEN)
        self.on_resume.emit()

    def stop(self) -> None:
        """Pause the file; it counts as closed until ``resume``."""
        if self._has(_State.REUSE):
            return
        self._set_state(_State.REUSE)
        self.on_stop.emit()

    def reset(self) -> None:
        """Resume and go back to the start of the file."""
        if self._has(_State.KILL):
            return
        self.resume()
        self.seek(0)

    def close(self) -> None:
        """Mark the file closed and release it."""
        if self._has(_State.KILL):
            return
        if not self._has(_State.CLOSE):
            self._set_state(_State.CLOSE)
            self.on_drain.emit()
        self.free()

    def free(self) -> None:
        """Release the descriptor and drop listeners; ``on_close`` fires once."""
        if self._has(_State.KILL):
            return
        if not self._has(_State.CLOSE):
            self.on_drain.emit()
        if self._fd is not None and self._owns:
            try:
                os.close(self._fd)
            except OSError:
                pass
        self._fd = None
        self._state |= _State.KILL
        self._borrow = b""
        self.on_resume.clear()
        self.on_stop.clear()
        self.on_drain.clear()
        self.on_error.clear()
        self.on_close.emit()

    # position --------------------------------------------------------------

    def _require_fd(self) -> int:
        if self._fd is None:
            raise FileError("file has been released")
        return self._fd

    def seek(self, offset: int) -> int:
        """Move to ``offset`` from the start; clears EOF and pending data."""
        fd = self._require_fd()
        if offset < 0:
            raise ValueError("offset must not be negative")
        try:
            os.lseek(fd, offset, os.SEEK_SET)
        except OSError as exc:
            raise FileError(str(exc)) from exc
        self._offset = offset
        self._borrow = b""
        self._feof = 1
        return offset

    def tell(self) -> int:
        """The current read/write position."""
        return self._offset - len(self._borrow)

    def size(self) -> int:
        """Size of the file in bytes."""
        fd = self._require_fd()
        return os.fstat(fd).st_size

    def set_range(self, start: int, stop: int) -> None:
        """Limit reads to bytes ``start`` up to ``stop`` (exclusive).

        A ``stop`` not past ``start`` removes the upper limit.
        """
        if start < 0 or stop < 0:
            raise ValueError("range bounds must not be negative")
        self._range = (start, stop)
        self._range_end = stop if stop > start else None
        self.seek(start)

    @property
    def range(self) -> tuple[int, int]:
        """The range last given to ``set_range``."""
        return self._range

    @property
    def fd(self) -> int | None:
        """The descriptor, or None once released."""
        return self._fd

    # I/O -------------------------------------------------------------------

    def _raw_read(self, size: int) -> bytes:
        if self.is_closed() or size <= 0:
            return b""
        if self._range_end is not None:
            remaining = self._range_end - self._offset
            if remaining <= 0:
                self._feof = 0
                return b""
            size = min(size, remaining)
        try:
            chunk = os.read(self._require_fd(), size)
        except OSError as exc:
            self._feof = -1
            self.on_error.emit(exc)
            raise FileError(str(exc)) from exc
        self._feof = len(chunk)
        self._offset += len(chunk)
        return chunk

    def read(self, size: int | None = None) -> bytes:
        """Read up to ``size`` bytes (the chunk size by default); b"" at EOF."""
        if size is None:
            size = self.chunk_size
        if size <= 0:
            return b""
        if self._borrow:
            out, self._borrow = self._borrow[:size], self._borrow[size:]
            return out
        return self._raw_read(size)

    def read_until(self, delimiter: bytes | str) -> bytes:
        """Read through the next ``delimiter``, which is kept in the result.

        At EOF the remaining data is returned without a delimiter.
        """
        delim = _as_bytes(delimiter)
        if not delim:
            raise ValueError("delimiter must not be empty")
        buf, self._borrow = self._borrow, b""
        searched = 0
        while True:
            idx = buf.find(delim, searched)
            if idx >= 0:
                end = idx + len(delim)
                self._borrow = buf[end:]
                return buf[:end]
            searched = max(0, len(buf) - len(delim) + 1)
            chunk = self._raw_read(self.chunk_size)
            if not chunk:
                return buf
            buf += chunk

    def read_line(self) -> bytes:
        """Read through the next newline."""
        return self.read_until(b"\n")

    def read_char(self) -> bytes:
        """Read a single byte; b"" at EOF."""
        return self.read(1)

    def write(self, data: bytes | bytearray | str) -> int:
        """Write all of ``data`` (text is UTF-8 encoded); returns bytes written.

        Nothing is written while the file is closed.
        """
        payload = _as_bytes(data)
        if not payload or self.is_closed():
            return 0
        fd = self._require_fd()
        view = memoryview(payload)
        written = 0
        while written < len(payload):
            try:
                count = os.write(fd, view[written:])
            except OSError as exc:
                self._feof = -1
                self.on_error.emit(exc)
                raise FileError(str(exc)) from exc
            if count <= 0:
                break
            written += count
        self._offset += written
        return written

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if not line:
                return
            yield line

    def __enter__(self) -> File:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"File(fd={self._fd}, mode={self.mode!r}, closed={self.is_closed()})"