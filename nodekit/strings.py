"""Character classification and conversions between text and numbers."""

from __future__ import annotations

import re

__all__ = [
    "is_hex",
    "is_space",
    "is_alpha",
    "is_graph",
    "is_lower",
    "is_upper",
    "is_digit",
    "is_print",
    "is_contr",
    "is_null",
    "is_ascii",
    "is_alnum",
    "is_punct",
    "char_code",
    "to_upper",
    "to_lower",
    "to_int",
    "to_uint",
    "to_float",
    "to_bool",
    "to_char",
    "to_string",
]

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _code(c: str | int) -> int:
    """Return the code of a single character given as a str or an int."""
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def is_hex(c: str | int) -> bool:
    """True for 0-9, A-F and a-f."""
    n = _code(c)
    return 48 <= n <= 57 or 65 <= n <= 70 or 97 <= n <= 102


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, carriage return, form feed and vertical tab."""
    return _code(c) in (32, 9, 10, 13, 12, 11)


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    n = _code(c)
    return 65 <= n <= 90 or 97 <= n <= 122


def is_graph(c: str | int) -> bool:
    """True for visible ASCII characters."""
    return 33 <= _code(c) <= 126


def is_lower(c: str | int) -> bool:
    """True for a-z."""
    return 97 <= _code(c) <= 122


def is_upper(c: str | int) -> bool:
    """True for A-Z."""
    return 65 <= _code(c) <= 90


def is_digit(c: str | int) -> bool:
    """True for 0-9."""
    return 48 <= _code(c) <= 57


def is_print(c: str | int) -> bool:
    """True for codes 32 through 127."""
    return 32 <= _code(c) <= 127


def is_contr(c: str | int) -> bool:
    """True for control characters (below 32, and 127)."""
    n = _code(c)
    return n < 32 or n == 127


def is_null(c: str | int) -> bool:
    """True for the NUL character."""
    return _code(c) == 0


def is_ascii(c: str | int) -> bool:
    """True for codes up to 127."""
    return _code(c) <= 127


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_punct(c: str | int) -> bool:
    """True for printable characters that are neither space nor alphanumeric."""
    return is_print(c) and not is_space(c) and not is_alnum(c)


def char_code(c: str | int) -> int:
    """Return the numeric code of a character."""
    return _code(c)


def to_upper(c: str | int) -> str:
    """Upper-case an ASCII letter; other characters are returned unchanged."""
    n = _code(c)
    return chr(n - 32) if is_lower(n) else chr(n)


def to_lower(c: str | int) -> str:
    """Lower-case an ASCII letter; other characters are returned unchanged."""
    n = _code(c)
    return chr(n + 32) if is_upper(n) else chr(n)


def _wrap(value: int, bits: int, signed: bool) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _leading_int(text: str) -> int | None:
    if not text:
        return None
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else None


def to_int(text: str) -> int:
    """Read a leading signed 32-bit integer; 0 when there is none."""
    value = _leading_int(text)
    return 0 if value is None else _wrap(value, 32, True)


def to_uint(text: str) -> int:
    """Read a leading unsigned 32-bit integer; negative input wraps around."""
    value = _leading_int(text)
    return 0 if value is None else _wrap(value, 32, False)


def to_float(text: str) -> float:
    """Read a leading floating point number; 0.0 when there is none."""
    if not text:
        return 0.0
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def to_bool(text: str) -> bool:
    """Read a leading integer and report whether it is non-zero."""
    return to_int(text) != 0


def to_char(text: str) -> str:
    """Return the first character of the text, or NUL for empty text."""
    return text[0] if text else "\0"


def to_string(value: object) -> str:
    """Render a value as text the way the formatting routines do."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if isinstance(value, bool):
        return "%d" % int(value)
    if isinstance(value, int):
        return "%d" % value
    if isinstance(value, float):
        return "%f" % value
    return str(value)