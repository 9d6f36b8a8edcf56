"""Path string manipulation: normalising, splitting, parsing and MIME types."""

from __future__ import annotations

import re
from dataclasses import dataclass

from nodekit.iterators import join as _join_args
from nodekit.strings import to_string

__all__ = [
    "PathInfo",
    "MIMETYPES",
    "normalize",
    "is_absolute",
    "extname",
    "mimetype",
    "dirname",
    "basename",
    "format_path",
    "parse",
    "relative",
    "push",
    "unshift",
    "pop",
    "shift",
    "split",
    "join",
]

_SEP = "/"
_ROOT = "./"
_ABS_ROOT = "/"

_SPLIT_RE = re.compile(r"/+|\\+")
_SEGMENT_RE = re.compile(r"[^/]+")
_EXT_RE = re.compile(r"\.(\w+)$", re.ASCII)

MIMETYPES: dict[str, str] = {
    "txt": "text/plain",
    "text": "text/plain",
    "otf": "font/otf",
    "ttf": "font/ttf",
    "woff": "font/woff",
    "woff2": "font/woff2",
    "oga": "audio/ogg",
    "aac": "audio/aac",
    "wav": "audio/wav",
    "mp3": "audio/mpeg",
    "opus": "audio/opus",
    "weba": "audio/webm",
    "ogv": "video/ogg",
    "mp4": "video/mp4",
    "ts": "video/mp2t",
    "webm": "video/webm",
    "mpeg": "video/mpeg",
    "avi": "video/x-msvideo",
    "c": "text/X-C",
    "css": "text/css",
    "csv": "text/csv",
    "html": "text/html",
    "scss": "text/scss",
    "cpp": "text/X-CPP",
    "ics": "text/calendar",
    "js": "text/javascript",
    "xml": "application/xhtml+xml",
    "bmp": "image/bmp",
    "gif": "image/gif",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "ico": "image/vnd.microsoft.icon",
    "url": "application/x-www-form-urlencoded",
    "zip": "application/zip",
    "gz": "application/gzip",
    ".h": "application/x-.h",
    "json": "application/json",
    "wasm": "application/wasm",
    "tar": "application/x-tar",
    "rar": "application/vnd.rar",
    "7z": "application/x-7z-compressed",
    "m3u8": "application/vnd.apple.mpegurl",
    "exe": "application/vnd.microsoft.portable-executable",
    "pdf": "application/pdf",
    "doc": "application/msword",
    "vsd": "application/vnd.visio",
    "xls": "application/vnd.ms-excel",
    "ppt": "application/vnd.ms-powerpoint",
    "swf": "application/x-shockwave-fla.h",
    "ods": "application/vnd.oasis.opendocument.spreadsheet",
    "odp": "application/vnd.oasis.opendocument.presentation",
    "odt": "application/vnd.oasis.opendocument.presentation",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}


@dataclass
class PathInfo:
    """The pieces of a path as produced by ``parse``."""

    type: str = ""
    path: str = ""
    root: str = ""
    base: str = ""
    name: str = ""
    dir: str = ""
    ext: str = ""


def normalize(path: str) -> str:
    """Collapse separators and resolve ``..`` segments."""
    parts = _SPLIT_RE.split(path)
    lead = 0
    for part in parts:
        if part != "..":
            break
        lead += 1
    out = parts[:lead]
    for part in parts[lead:]:
        if part == ".." and out:
            out.pop()
        else:
            out.append(part)
    return _SEP.join(out)


def is_absolute(path: str) -> bool:
    """True when the path starts at the root."""
    return path.startswith(_ABS_ROOT)


def extname(path: str) -> str:
    """Return the extension without its dot, or empty text."""
    match = _EXT_RE.search(path)
    return match.group(1) if match else ""


def _mime_for(ext: str) -> str:
    if not ext:
        return ""
    if ext not in MIMETYPES:
        return f"aplication/{ext}"
    return MIMETYPES[ext]


def mimetype(path: str | PathInfo) -> str:
    """Return the MIME type for a path or a parsed ``PathInfo``."""
    if isinstance(path, PathInfo):
        return _mime_for(path.ext)
    return _mime_for(extname(path))


def dirname(path: str) -> str:
    """Return the path without its last segment."""
    parts = _SPLIT_RE.split(path)
    if parts:
        parts.pop()
    return _SEP.join(parts)


def basename(path: str, suffix: str | None = None) -> str:
    """Return the last segment; ``suffix`` is a pattern removed from it once."""
    segments = _SEGMENT_RE.findall(path)
    if not segments:
        return ""
    last = segments[-1]
    if suffix is None:
        return last
    return re.sub(suffix, "", last, count=1)


def format_path(info: PathInfo) -> str:
    """Build a path from its pieces; ``info.path`` wins when set."""
    if info.path:
        return info.path
    out = info.root or _ROOT
    out += info.dir
    if info.base:
        out += info.base
    else:
        if info.name:
            out += info.name + "."
        out += info.ext
    return out


def parse(path: str) -> PathInfo:
    """Split a path into root, directory, base name, name, extension and type."""
    ext = extname(path)
    return PathInfo(
        type=mimetype(path),
        path=path,
        root=_ABS_ROOT if is_absolute(path) else _ROOT,
        base=basename(path),
        name=basename(path, r"\." + ext),
        dir=dirname(path),
        ext=ext,
    )


def split(path: str) -> list[str]:
    """Return the segments of the normalised path."""
    return _SPLIT_RE.split(normalize(path))


def relative(path_a: str, path_b: str) -> str:
    """Return the path that leads from ``path_a`` to ``path_b``."""
    parts_a = split(path_a)
    parts_b = split(path_b)
    common = 0
    for x, y in zip(parts_a, parts_b):
        if x != y:
            break
        common += 1
    return _SEP.join([".."] * (len(parts_a) - common) + parts_b[common:])


def push(path: str, part: str) -> str:
    """Append a segment to the path."""
    parts = split(path)
    parts.append(part)
    return normalize(_SEP.join(parts))


def unshift(path: str, part: str) -> str:
    """Prepend a segment to the path."""
    parts = split(path)
    parts.insert(0, part)
    return normalize(_SEP.join(parts))


def pop(path: str) -> str:
    """Drop the last segment of the normalised path."""
    parts = split(path)
    if parts:
        parts.pop()
    return _SEP.join(parts)


def shift(path: str) -> str:
    """Drop the first segment of the normalised path."""
    parts = split(path)
    if parts:
        parts.pop(0)
    return _SEP.join(parts)


def join(*args: object) -> str:
    """Join segments into a normalised path.

    A single list or tuple is joined as it is, without normalising.
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return _SEP.join(to_string(part) for part in args[0])
    return normalize(_join_args(_SEP, *args))