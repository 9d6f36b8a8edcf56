"""Slicing, searching, comparison and case conversion on text."""

from __future__ import annotations

from typing import AnyStr

from nodekit.strings import is_alnum, is_alpha, to_lower, to_upper

__all__ = [
    "slice_text",
    "splice_text",
    "find",
    "compare",
    "to_capital_case",
    "to_slugify",
    "to_lower_case",
    "to_upper_case",
    "xor",
]


def _slice_range(size: int, start: int, stop: int) -> tuple[int, int] | None:
    """Return the inclusive bounds selected by ``start`` and ``stop``, or None."""
    if size == 0 or start == stop:
        return None
    last = size - 1
    if stop > 0:
        stop -= 1
    if start < 0:
        start += size
    if start < 0 or start > last:
        return None
    if stop < 0:
        stop += last
    if stop < 0 or stop > last:
        stop = last
    if stop < start:
        return None
    return start, stop


def slice_text(text: AnyStr, start: int, stop: int | None = None) -> AnyStr:
    """Return the part of ``text`` from ``start`` up to ``stop`` (exclusive).

    Negative positions count from the end. An empty selection gives empty text.
    """
    if stop is None:
        stop = len(text)
    bounds = _slice_range(len(text), start, stop)
    if bounds is None:
        return text[:0]
    first, last = bounds
    return text[first : last + 1]


def splice_text(
    text: AnyStr, start: int, count: int, value: AnyStr | None = None
) -> tuple[AnyStr, AnyStr]:
    """Remove ``count`` characters at ``start`` and insert ``value`` there.

    Returns the new text and the removed part. A negative ``start`` is taken
    relative to the last character.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    empty = text[:0]
    if value is None:
        value = empty
    size = len(text)
    if size == 0 or count == 0:
        return text, empty
    last = size - 1
    if start < 0:
        start += last
    if start < 0 or start > last:
        return text, empty
    end = min(start + count - 1, last)
    removed = text[start : end + 1]
    return text[:start] + value + text[end + 1 :], removed


def find(text: AnyStr, sub: AnyStr, offset: int = 0) -> tuple[int, int] | None:
    """Locate ``sub`` at or after ``offset``; return (start, end) or None."""
    if not text or not sub or offset < 0:
        return None
    pos = text.find(sub, min(offset, len(text)))
    if pos < 0:
        return None
    return pos, pos + len(sub)


def compare(a: AnyStr, b: AnyStr) -> int:
    """Order by length first, then by content; returns -1, 0 or 1."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return (a > b) - (a < b)


def to_capital_case(text: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest."""
    out = []
    at_word_start = True
    for c in text:
        if is_alpha(c) and at_word_start:
            out.append(to_upper(c))
            at_word_start = False
            continue
        if not is_alpha(c):
            at_word_start = True
        out.append(to_lower(c))
    return "".join(out)


def to_slugify(text: str) -> str:
    """Keep only letters and digits, lower-cased."""
    return "".join(to_lower(c) for c in text if is_alnum(c))


def to_lower_case(text: str) -> str:
    """Lower-case every ASCII letter."""
    return "".join(to_lower(c) for c in text)


def to_upper_case(text: str) -> str:
    """Upper-case every ASCII letter."""
    return "".join(to_upper(c) for c in text)


def xor(a: AnyStr, b: AnyStr) -> AnyStr:
    """XOR ``a`` with ``b`` character by character; ``b`` must be at least as long."""
    if len(b) < len(a):
        raise ValueError("key is shorter than the data")
    if isinstance(a, (bytes, bytearray)):
        return bytes(x ^ y for x, y in zip(a, b))
    return "".join(chr(ord(x) ^ ord(y)) for x, y in zip(a, b))