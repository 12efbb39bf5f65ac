"""Name resolution fakes; tests never hit DNS."""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, Iterable


def static_resolver(table: Dict[str, Iterable[str]]) -> Callable[[str], FrozenSet[str]]:
    """Resolve names from ``table``; unknown names resolve to themselves."""

    def _resolve(host: str) -> FrozenSet[str]:
        return frozenset(table.get(host, (host,)))

    return _resolve


def local_ips(*ips: str) -> Callable[[str], bool]:
    """is_local predicate that owns exactly ``ips``."""
    owned = frozenset(ips)
    return lambda ip: ip in owned
