import socket

import pytest

from nodekit import dns


@pytest.mark.parametrize(
    "text, expected",
    [("1.2.3.4", True), ("localhost", False), ("10.0", True), ("abc", False)],
)
def test_is_ipv4(text, expected):
    assert dns.is_ipv4(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("fe80:1", True), ("2001:db8::1", True), ("hello", False)],
)
def test_is_ipv6(text, expected):
    assert dns.is_ipv6(text) is expected


@pytest.mark.parametrize(
    "name, address",
    [
        ("broadcast", "255.255.255.255"),
        ("localhost", "127.0.0.1"),
        ("global", "0.0.0.0"),
        ("loopback", "1.1.1.1"),
    ],
)
def test_ipv4_named_hosts(name, address):
    assert dns.lookup_ipv4(name) == address
    assert dns.lookup_ipv4(address) == address
    assert dns.lookup(name) == address


@pytest.mark.parametrize(
    "name, address",
    [("broadcast", "::2"), ("localhost", "::1"), ("global", "::0"), ("loopback", "::3")],
)
def test_ipv6_named_hosts(name, address):
    assert dns.lookup_ipv6(name) == address


def test_numeric_hosts_resolve_to_themselves():
    assert dns.lookup_ipv4("10.0.0.5") == "10.0.0.5"
    assert dns.lookup_ipv6("2001:db8::1") == "2001:db8::1"


def test_url_is_reduced_to_its_host():
    assert dns.lookup("http://10.1.2.3:8080/path") == "10.1.2.3"


def test_unresolvable_host_gives_none(monkeypatch):
    def fail(*args, **kwargs):
        raise socket.gaierror("no such host")

    monkeypatch.setattr(socket, "getaddrinfo", fail)
    assert dns.lookup_ipv4("unknown.example.com") is None
    assert dns.lookup_ipv6("unknown.example.com") is None


def test_get_hostname_reports_local_address(monkeypatch):
    connected = []

    class FakeSocket:
        def __init__(self, *args, **kwargs):
            pass

        def __enter__(self):
            return self

        def __exit__(self, *args):
            return None

        def connect(self, address):
            connected.append(address)

        def getsockname(self):
            return ("192.0.2.10", 5000)

    monkeypatch.setattr(socket, "socket", FakeSocket)
    assert dns.get_hostname() == "192.0.2.10"
    assert connected[0][0] == "1.1.1.1"