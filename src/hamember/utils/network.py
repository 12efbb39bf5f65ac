"""Network address utilities for hamember.

Nothing here opens a connection. Host names are resolved through
``getaddrinfo`` and local ownership of an IP is checked by binding an
ephemeral socket to it.
"""

import argparse
import ipaddress
import re
import socket
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional

from hamember.utils.logger import logger


# RFC 1035
HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*$"
)

WILDCARD_HOSTS = frozenset({"0.0.0.0", "::", "*"})

HostResolver = Callable[[str], FrozenSet[str]]


@dataclass(frozen=True, slots=True)
class SocketAddress:
    """Represents a network endpoint (host:port)."""

    host: str
    port: int

    def format(self) -> str:
        """Format address as 'host:port' string, bracketing IPv6 hosts.

        Returns:
            Formatted address string
        """
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    @property
    def is_wildcard(self) -> bool:
        return self.host in WILDCARD_HOSTS

    def __str__(self) -> str:
        return self.format()


def parse_address(value: str) -> SocketAddress:
    """Parse a host:port string into SocketAddress.

    Args:
        value: String in format 'host:port' (e.g., '192.168.1.1:8020') or
            '[ipv6]:port' (e.g., '[::1]:8020')

    Returns:
        SocketAddress instance

    Raises:
        ValueError: If the value is invalid
    """
    text = value.strip()
    if text.startswith("["):
        end = text.find("]")
        if end < 0 or not text[end + 1 :].startswith(":"):
            raise ValueError(f"Invalid host:port '{value}': malformed IPv6 literal")
        host, port_str = text[1:end], text[end + 2 :]
    else:
        if ":" not in text:
            raise ValueError(f"Invalid host:port '{value}': missing port")
        host, port_str = text.rsplit(":", 1)

    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"Invalid host:port '{value}': invalid port number")
    if not (0 <= port <= 65535):
        raise ValueError(f"Invalid host:port '{value}': port out of range")

    if host not in WILDCARD_HOSTS:
        try:
            ipaddress.ip_address(host)
        except ValueError:
            # not an IP → check hostname
            if not HOSTNAME_RE.match(host):
                raise ValueError(f"Invalid host:port '{value}': invalid hostname")

    return SocketAddress(host, port)


def address_arg(value: str) -> SocketAddress:
    """argparse ``type=`` adapter for :func:`parse_address`."""
    try:
        return parse_address(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def resolve_host(host: str) -> FrozenSet[str]:
    """Resolve a host name to the set of its IP addresses.

    Numeric hosts are returned as-is without a lookup. A name that cannot be
    resolved maps to itself so that literal comparison still works.
    """
    try:
        return frozenset({str(ipaddress.ip_address(host))})
    except ValueError:
        pass

    try:
        infos = socket.getaddrinfo(host, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as e:
        logger.warning("Could not resolve host %s: %s", host, e)
        return frozenset({host})
    return frozenset(str(info[4][0]) for info in infos)


def addresses_match(
    configured: SocketAddress,
    target: SocketAddress,
    resolve: HostResolver = resolve_host,
) -> bool:
    """Return True if two addresses denote the same endpoint.

    Ports must be equal and the hosts must be equal or resolve to
    overlapping IP sets. A wildcard host only equals the same wildcard.
    """
    if configured.port != target.port:
        return False
    if configured.host == target.host:
        return True
    return not resolve(configured.host).isdisjoint(resolve(target.host))


def _is_bindable(ip: str) -> bool:
    addr = ipaddress.ip_address(ip)
    family = socket.AF_INET6 if addr.version == 6 else socket.AF_INET
    try:
        with socket.socket(family, socket.SOCK_STREAM) as s:
            s.bind((ip, 0))
        return True
    except OSError:
        return False


def is_local_ip(ip: str) -> bool:
    """Return True if ``ip`` is a wildcard, a loopback or an address of this host."""
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return False
    if addr.is_loopback or addr.is_unspecified:
        return True
    return _is_bindable(ip)


def is_local_host(
    host: str,
    resolve: HostResolver = resolve_host,
    is_local: Callable[[str], bool] = is_local_ip,
) -> bool:
    """Return True if any IP the host name resolves to belongs to this machine."""
    if host in WILDCARD_HOSTS:
        return True
    return any(is_local(ip) for ip in resolve(host))


def try_parse_address(value: Optional[str]) -> Optional[SocketAddress]:
    """Parse an address, logging and returning None when it is malformed."""
    if value is None:
        return None
    try:
        return parse_address(value)
    except ValueError as e:
        logger.warning("Ignoring malformed address %r: %s", value, e)
        return None
