"""Address checks and host name resolution."""

from __future__ import annotations

import re
import socket
from urllib.parse import urlsplit

__all__ = [
    "is_ipv4",
    "is_ipv6",
    "is_ip",
    "lookup_ipv4",
    "lookup_ipv6",
    "lookup",
    "get_hostname",
]

_IPV6_RE = re.compile(r"([0-9a-fA-F]+:)+[0-9a-fA-F]+")
_IPV4_RE = re.compile(r"([0-9]+\.)+[0-9]+")

_IPV4_NAMES = {
    "broadcast": "255.255.255.255",
    "localhost": "127.0.0.1",
    "global": "0.0.0.0",
    "loopback": "1.1.1.1",
}
_IPV6_NAMES = {
    "broadcast": "::2",
    "localhost": "::1",
    "global": "::0",
    "loopback": "::3",
}


def is_ipv4(address: str) -> bool:
    """True when the text contains a dotted IPv4-like address."""
    return _IPV4_RE.search(address) is not None


def is_ipv6(address: str) -> bool:
    """True when the text contains a colon-separated IPv6-like address."""
    return _IPV6_RE.search(address) is not None


def is_ip(address: str) -> bool:
    """True when the text looks like an IPv4 or IPv6 address."""
    if not address:
        return False
    return is_ipv4(address) or is_ipv6(address)


def _host_of(host: str) -> str:
    if "://" in host:
        return urlsplit(host).hostname or host
    return host


def _resolve(host: str, family: int) -> str | None:
    try:
        infos = socket.getaddrinfo(
            _host_of(host), None, socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
        )
    except (socket.gaierror, UnicodeError):
        return None
    found = [info[4][0] for info in infos if info[0] == family]
    return found[-1] if found else None


def lookup_ipv4(host: str) -> str | None:
    """Resolve a host or URL to an IPv4 address; None when it cannot be."""
    for name, address in _IPV4_NAMES.items():
        if host in (name, address):
            return address
    return _resolve(host, socket.AF_INET)


def lookup_ipv6(host: str) -> str | None:
    """Resolve a host or URL to an IPv6 address; None when it cannot be."""
    for name, address in _IPV6_NAMES.items():
        if host in (name, address):
            return address
    return _resolve(host, socket.AF_INET6)


def lookup(host: str) -> str | None:
    """Resolve a host or URL to an IPv4 address."""
    return lookup_ipv4(host)


def get_hostname() -> str:
    """The local address used to reach outside hosts."""
    target = lookup_ipv4("loopback")
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
        sock.connect((target, 80))
        return sock.getsockname()[0]