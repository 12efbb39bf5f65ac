"""Tests: address parsing and matching helpers in utils.network."""

import argparse
import socket

import pytest

import hamember.utils.network as network
from hamember.utils.network import (
    SocketAddress,
    address_arg,
    addresses_match,
    is_local_host,
    parse_address,
    resolve_host,
    try_parse_address,
)
from tests.fakes import local_ips, static_resolver

pytestmark = [pytest.mark.core]


def test_parse_address_ipv4_and_hostname():
    a = parse_address("127.0.0.1:8020")
    assert a.host == "127.0.0.1" and a.port == 8020 and a.format() == "127.0.0.1:8020"
    b = parse_address(" example.com:443 ")
    assert b == SocketAddress("example.com", 443) and str(b) == "example.com:443"


def test_parse_address_ipv6():
    a = parse_address("[::1]:8020")
    assert a.host == "::1" and a.port == 8020
    assert a.format() == "[::1]:8020"


def test_parse_address_wildcard():
    assert parse_address("0.0.0.0:8020").is_wildcard
    assert not parse_address("10.0.0.1:8020").is_wildcard


@pytest.mark.parametrize(
    "value", ["bad host:80", "host", "host:abc", "host:70000", "[::1]8020", ""]
)
def test_parse_address_invalid(value):
    with pytest.raises(ValueError):
        parse_address(value)


def test_address_arg_raises_argparse_error():
    with pytest.raises(argparse.ArgumentTypeError):
        address_arg("nope")
    assert address_arg("h:1") == SocketAddress("h", 1)


def test_try_parse_address():
    assert try_parse_address(None) is None
    assert try_parse_address("garbage") is None
    assert try_parse_address("h:1") == SocketAddress("h", 1)


def test_resolve_host_numeric_skips_lookup(monkeypatch):
    def _boom(*a, **k):
        raise AssertionError("lookup not expected")

    monkeypatch.setattr(network.socket, "getaddrinfo", _boom)
    assert resolve_host("10.0.0.1") == frozenset({"10.0.0.1"})


def test_resolve_host_uses_getaddrinfo(monkeypatch):
    infos = [
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.7", 0)),
        (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("fe80::1", 0, 0, 0)),
    ]
    monkeypatch.setattr(network.socket, "getaddrinfo", lambda *a, **k: infos)
    assert resolve_host("node7") == frozenset({"10.0.0.7", "fe80::1"})


def test_resolve_host_failure_falls_back_to_name(monkeypatch):
    def _fail(*a, **k):
        raise socket.gaierror("no such host")

    monkeypatch.setattr(network.socket, "getaddrinfo", _fail)
    assert resolve_host("ghost") == frozenset({"ghost"})


def test_addresses_match():
    resolve = static_resolver({"a": ["10.0.0.1"], "b": ["10.0.0.1", "10.0.0.9"]})
    assert addresses_match(SocketAddress("a", 1), SocketAddress("b", 1), resolve)
    assert not addresses_match(SocketAddress("a", 1), SocketAddress("b", 2), resolve)
    assert not addresses_match(SocketAddress("a", 1), SocketAddress("c", 1), resolve)
    # wildcards only equal themselves
    assert not addresses_match(
        SocketAddress("0.0.0.0", 1), SocketAddress("c", 1), resolve
    )
    assert not addresses_match(
        SocketAddress("a", 1), SocketAddress("0.0.0.0", 1), resolve
    )
    assert addresses_match(
        SocketAddress("0.0.0.0", 1), SocketAddress("0.0.0.0", 1), resolve
    )


def test_is_local_host():
    resolve = static_resolver({"me": ["10.0.0.5"], "them": ["10.0.0.6"]})
    is_local = local_ips("10.0.0.5")
    assert is_local_host("me", resolve, is_local)
    assert not is_local_host("them", resolve, is_local)
    assert is_local_host("0.0.0.0", resolve, is_local)


def test_is_local_ip_loopback_and_foreign():
    assert network.is_local_ip("127.0.0.1")
    assert network.is_local_ip("0.0.0.0")
    assert not network.is_local_ip("not-an-ip")
    # TEST-NET-1, never assigned to a real interface
    assert not network.is_local_ip("192.0.2.123")
