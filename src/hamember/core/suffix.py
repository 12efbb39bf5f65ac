"""Default member enumeration and suffix-keyed address matching."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, List, Optional, Sequence, Tuple

from hamember.core.configuration import Configuration
from hamember.core.errors import AmbiguousAddressMatch
from hamember.core.interfaces import KeySuffixMatcher, MemberEnumerator, SuffixMatch
from hamember.core.keys import KeyScheme
from hamember.utils.logger import logger
from hamember.utils.network import (
    HostResolver,
    SocketAddress,
    addresses_match,
    is_local_host,
    is_local_ip,
    resolve_host,
    try_parse_address,
)


def as_configuration(config: Mapping) -> Configuration:
    if isinstance(config, Configuration):
        return config
    return Configuration.from_mapping(config)


def configured_group_ids(conf: Configuration, scheme: KeyScheme) -> List[str]:
    """Group ids to search: the explicit local group, else every configured group."""
    explicit = conf.get_trimmed(scheme.group_id_key)
    if explicit is not None:
        return [explicit]
    return conf.get_trimmed_strings(scheme.groups_key)


class ConfiguredMemberEnumerator(MemberEnumerator):
    """Reads member ids from ``<prefix>.members[.<groupId>]``."""

    def __init__(self, scheme: Optional[KeyScheme] = None):
        self.scheme = scheme or KeyScheme()

    def list_member_ids(
        self, config: Mapping, group_id: Optional[str] = None
    ) -> List[str]:
        conf = as_configuration(config)
        if group_id is not None:
            return conf.get_trimmed_strings(self.scheme.members_key_for(group_id))

        group_ids = configured_group_ids(conf, self.scheme)
        if not group_ids:
            return conf.get_trimmed_strings(self.scheme.members_key)

        # Several groups and no explicit local group: any configured member
        # means redundancy is in use somewhere in the file.
        out: List[str] = []
        for gid in group_ids:
            for mid in conf.get_trimmed_strings(self.scheme.members_key_for(gid)):
                if mid not in out:
                    out.append(mid)
        return out


class SuffixKeyMatcher(KeySuffixMatcher):
    """Matches ``<family>[.<groupId>][.<memberId>]`` addresses against a target.

    Host names are resolved with ``host_resolver`` and local ownership of an
    IP is decided by ``is_local``; both are injectable so that callers can
    plug in their own networking stack.
    """

    def __init__(
        self,
        scheme: Optional[KeyScheme] = None,
        host_resolver: HostResolver = resolve_host,
        is_local: Callable[[str], bool] = is_local_ip,
    ):
        self.scheme = scheme or KeyScheme()
        self._resolve = host_resolver
        self._is_local = is_local

    def resolve_suffixes(
        self,
        config: Mapping,
        base_key: str,
        target_address: Optional[SocketAddress],
        extra_keys: Sequence[str] = (),
        local: bool = False,
    ) -> Optional[SuffixMatch]:
        conf = as_configuration(config)
        for family in (base_key, *extra_keys):
            match = self._match_family(conf, family, target_address, local)
            if match is not None:
                return match
        return None

    def _match_family(
        self,
        conf: Configuration,
        family: str,
        target: Optional[SocketAddress],
        local: bool,
    ) -> Optional[SuffixMatch]:
        matches: List[Tuple[str, SuffixMatch]] = []
        for gid in configured_group_ids(conf, self.scheme) or [None]:
            member_ids = conf.get_trimmed_strings(self.scheme.members_key_for(gid))
            for mid in member_ids or [None]:
                key = self.scheme.address_key(family, gid, mid)
                addr = try_parse_address(conf.get_trimmed(key))
                if addr is None:
                    continue
                match = SuffixMatch(gid, mid)
                if match.found and self._matches(addr, target, local):
                    logger.debug("Address %s of %s matches %s", addr, key, target)
                    matches.append((key, match))

        if len(matches) > 1:
            keys = ", ".join(k for k, _ in matches)
            what = "the local node's address" if target is None else str(target)
            raise AmbiguousAddressMatch(
                f"Configuration has multiple addresses that match {what}: {keys}. "
                f"Please set {self.scheme.group_id_key} and "
                f"{self.scheme.instance_id_key} explicitly.",
                key=family,
                matches=[m for _, m in matches],
            )
        return matches[0][1] if matches else None

    def _matches(
        self, addr: SocketAddress, target: Optional[SocketAddress], local: bool
    ) -> bool:
        if target is None:
            return self._is_local_host(addr)
        # A process bound to all interfaces owns every local address on its port
        if local and target.is_wildcard:
            return addr.port == target.port and self._is_local_host(addr)
        return addresses_match(addr, target, resolve=self._resolve)

    def _is_local_host(self, addr: SocketAddress) -> bool:
        return is_local_host(addr.host, resolve=self._resolve, is_local=self._is_local)
