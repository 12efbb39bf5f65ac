"""Resolution of this process's member id within a redundant group.

Every instance of the group runs from the same configuration file. An
instance learns its own member id by, in order:

1. reading the explicit ``<prefix>.instance.id`` override,
2. finding that no redundant group is configured (standalone, no id),
3. matching its local address against ``<prefix>.rpc-address.<memberId>``.

If a group is configured but no address matches, startup must not continue
and :class:`ConfigurationMismatch` is raised.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional, Sequence

from hamember.core.errors import ConfigurationMismatch
from hamember.core.interfaces import KeySuffixMatcher, MemberEnumerator
from hamember.core.keys import KeyScheme
from hamember.core.suffix import (
    ConfiguredMemberEnumerator,
    SuffixKeyMatcher,
    as_configuration,
)
from hamember.utils.logger import logger
from hamember.utils.network import SocketAddress


class IdentityResolver:
    """Stateless member id resolution over an explicitly passed configuration.

    Instances hold only their collaborators and may be shared freely between
    threads and tasks.
    """

    def __init__(
        self,
        scheme: Optional[KeyScheme] = None,
        enumerator: Optional[MemberEnumerator] = None,
        matcher: Optional[KeySuffixMatcher] = None,
    ):
        self.scheme = scheme or KeyScheme()
        self.enumerator = enumerator or ConfiguredMemberEnumerator(self.scheme)
        self.matcher = matcher or SuffixKeyMatcher(self.scheme)

    def is_multi_instance_enabled(self, config: Mapping) -> bool:
        """Return True if at least one member id is configured."""
        member_ids = self.enumerator.list_member_ids(config)
        return member_ids is not None and len(member_ids) > 0

    def resolve_local_member_id(
        self, config: Mapping, local_address: Optional[SocketAddress] = None
    ) -> Optional[str]:
        """Get the member id of this process.

        Args:
            config: Group configuration
            local_address: Address this process binds; None matches any
                address that belongs to this host

        Returns:
            The member id, or None when no redundant group is configured

        Raises:
            ConfigurationMismatch: If a group is configured but no configured
                address matches the local address
        """
        conf = as_configuration(config)
        # blank counts as unset, otherwise the value is returned verbatim
        member_id = conf.get(self.scheme.instance_id_key)
        if conf.get_trimmed(self.scheme.instance_id_key) is not None:
            logger.debug(
                "Using member id %r from %s", member_id, self.scheme.instance_id_key
            )
            return member_id

        if not self.is_multi_instance_enabled(conf):
            logger.debug("No redundant group configured; running standalone")
            return None

        key = self.scheme.rpc_address_key
        match = self.matcher.resolve_suffixes(conf, key, local_address, local=True)
        if match is None or match.member_id is None:
            msg = (
                f"Configuration {key} must be suffixed with member id "
                f"for multi-instance configuration."
            )
            if local_address is not None:
                msg += f" No entry matches local address {local_address}."
            logger.error(msg)
            raise ConfigurationMismatch(msg, key=key)

        logger.info("Resolved local member id %s", match.member_id)
        return match.member_id

    def resolve_member_id_for_address(
        self,
        config: Mapping,
        target_address: SocketAddress,
        extra_keys: Sequence[str] = (),
    ) -> Optional[str]:
        """Get the member id configured for ``target_address``.

        ``<prefix>.rpc-address`` is searched first, then each family in
        ``extra_keys``. Returns None when no redundant group is configured or
        nothing matches.
        """
        conf = as_configuration(config)
        # Configuration with a single instance and no member ids
        if not self.is_multi_instance_enabled(conf):
            return None

        match = self.matcher.resolve_suffixes(
            conf, self.scheme.rpc_address_key, target_address, tuple(extra_keys)
        )
        if match is None:
            logger.debug("No member configured for address %s", target_address)
            return None
        return match.member_id


_default = IdentityResolver()


def is_multi_instance_enabled(config: Mapping) -> bool:
    return _default.is_multi_instance_enabled(config)


def resolve_local_member_id(
    config: Mapping, local_address: Optional[SocketAddress] = None
) -> Optional[str]:
    return _default.resolve_local_member_id(config, local_address)


def resolve_member_id_for_address(
    config: Mapping, target_address: SocketAddress, extra_keys: Sequence[str] = ()
) -> Optional[str]:
    return _default.resolve_member_id_for_address(config, target_address, extra_keys)
