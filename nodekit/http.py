"""HTTP/1.x message heads: status texts, parsing, formatting and a simple fetch."""

from __future__ import annotations

import re
import socket
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit

from nodekit.file import File
from nodekit.text import to_capital_case

__all__ = [
    "HttpMessage",
    "FetchOptions",
    "STATUS_TEXTS",
    "status_text",
    "parse_head",
    "format_request_head",
    "format_response_head",
    "format_fetch",
    "fetch",
]

STATUS_TEXTS: dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    103: "Early Hints",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    226: "IM Used",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a Teapot",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    509: "Bandwidth Limit Exceeded",
    510: "Not Extended",
    511: "Network Authentication Required",
}

_START_RE = re.compile(r"^([^ ]+) ([^ ]+) ([^\r]+)")
_STATUS_RE = re.compile(r"^\d+")
_PATH_RE = re.compile(r"^[^?#]+")
_SEARCH_RE = re.compile(r"\?[^#]+")
_HASH_RE = re.compile(r"#\w+")

_RECV_SIZE = 65536


def status_text(status: int) -> str:
    """The reason phrase for a status code; ValueError for unknown codes."""
    try:
        return STATUS_TEXTS[status]
    except KeyError:
        raise ValueError(f"Status {status} Not Found") from None


@dataclass
class HttpMessage:
    """The head of a request or response, plus any body that was read."""

    status: int = 200
    version: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)
    protocol: str = ""
    search: str = ""
    method: str = ""
    path: str = ""
    hash: str = ""
    url: str = ""
    body: bytes = b""


@dataclass
class FetchOptions:
    """What to send in a request made by ``fetch``."""

    url: str = ""
    method: str = "GET"
    version: str = "HTTP/1.0"
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)
    body: bytes | str = b""
    file: File | None = None
    timeout: int = 0


def _first_match(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def parse_head(data: bytes | str) -> HttpMessage:
    """Parse a request or response head (start line and header lines).

    Header names are normalised to capital case; header parsing stops at
    the first line without ``": "``. ValueError for empty input.
    """
    text = data.decode("latin-1") if isinstance(data, (bytes, bytearray)) else data
    if not text:
        raise ValueError("empty message head")
    lines = text.split("\n")
    start = lines[0].rstrip("\r")
    message = HttpMessage(protocol="HTTP")

    for line in lines[1:]:
        line = line.rstrip("\r")
        name, sep, value = line.partition(": ")
        if not sep:
            break
        message.headers[to_capital_case(name)] = value

    match = _START_RE.match(start)
    if match is None:
        return message
    first, second, third = match.groups()
    if _STATUS_RE.match(second) is None:
        host = message.headers.get("Host", "localhost")
        message.url = f"http://{host}{second}"
        message.path = _first_match(_PATH_RE, second)
        message.search = _first_match(_SEARCH_RE, second)
        message.hash = _first_match(_HASH_RE, second)
        message.query = dict(parse_qsl(message.search[1:], keep_blank_values=True))
        message.version = third
        message.method = first
    else:
        message.version = first
        message.status = int(_STATUS_RE.match(second).group(0))  # type: ignore[union-attr]
    return message


def _header_lines(headers: dict[str, Any]) -> str:
    return "".join(f"{to_capital_case(name)}: {value}\r\n" for name, value in headers.items())


def format_request_head(
    method: str, path: str, version: str, headers: dict[str, Any]
) -> str:
    """The request line and headers, ending with the blank line."""
    return f"{method} {path} {version}\r\n{_header_lines(headers)}\r\n"


def format_response_head(version: str, status: int, headers: dict[str, Any]) -> str:
    """The status line and headers, ending with the blank line."""
    return f"{version} {status} {status_text(status)}\r\n{_header_lines(headers)}\r\n"


def _payload(options: FetchOptions) -> bytes | None:
    if options.file is not None and options.file.is_available():
        chunks = []
        while True:
            chunk = options.file.read()
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
    body = options.body.encode("utf-8") if isinstance(options.body, str) else bytes(options.body)
    return body or None


def format_fetch(options: FetchOptions, path: str) -> bytes:
    """The full request for ``options`` sent to ``path``.

    A file that is still open takes precedence over ``body``; a payload
    gets a Content-Length header. HEAD requests never carry a payload.
    """
    head = f"{options.method} {path} {options.version}\r\n{_header_lines(options.headers)}"
    if options.method == "HEAD":
        return (head + "\r\n").encode("utf-8")
    payload = _payload(options)
    if payload is None:
        return (head + "\r\n").encode("utf-8")
    head += f"Content-Length: {len(payload)}\r\n\r\n"
    return head.encode("utf-8") + payload


def fetch(options: FetchOptions) -> HttpMessage:
    """Send the request over plain TCP and return the response with its body.

    ValueError for an invalid URL, ConnectionError when the server closes
    before a full response head arrives; socket errors propagate.
    """
    try:
        uri = urlsplit(options.url)
        port = uri.port
    except ValueError:
        raise ValueError("invalid URL") from None
    if not uri.scheme or not uri.hostname:
        raise ValueError("invalid URL")
    if uri.scheme not in ("http", "ws"):
        raise ValueError(f"unsupported scheme: {uri.scheme}")

    search = f"?{uri.query}" if uri.query else ""
    if options.query:
        search = "?" + urlencode(options.query)
    fragment = f"#{uri.fragment}" if uri.fragment else ""
    target = (uri.path or "/") + search + fragment

    headers = dict(options.headers)
    headers["Connection"] = "close"
    headers["Host"] = uri.hostname
    request = FetchOptions(
        url=options.url,
        method=options.method,
        version=options.version,
        headers=headers,
        query=options.query,
        body=options.body,
        file=options.file,
        timeout=options.timeout,
    )
    timeout = options.timeout / 1000 if options.timeout > 0 else None

    with socket.create_connection((uri.hostname, port or 80), timeout=timeout) as sock:
        sock.sendall(format_fetch(request, target))
        buffer = b""
        while b"\r\n\r\n" not in buffer:
            chunk = sock.recv(_RECV_SIZE)
            if not chunk:
                raise ConnectionError("Could not connect to server")
            buffer += chunk
        head, _, rest = buffer.partition(b"\r\n\r\n")
        message = parse_head(head + b"\r\n\r\n")
        body = [rest]
        if options.method != "HEAD":
            while True:
                chunk = sock.recv(_RECV_SIZE)
                if not chunk:
                    break
                body.append(chunk)
        message.body = b"".join(body)
    return message