"""Configuration key naming for redundant groups.

Every key family is a base key that gets parameterized by appending ids:

    ha.rpc-address.nn1              (member nn1, no groups configured)
    ha.rpc-address.cluster-a.nn1    (member nn1 of group cluster-a)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_PREFIX = "ha"


def add_key_suffixes(key: str, *suffixes: Optional[str]) -> str:
    """Append the non-empty suffixes to ``key``, separated by '.'."""
    parts = [key] + [s for s in suffixes if s]
    return ".".join(parts)


@dataclass(frozen=True, slots=True)
class KeyScheme:
    """Names of the configuration keys consumed for one key prefix."""

    prefix: str = DEFAULT_PREFIX

    def _key(self, name: str) -> str:
        return f"{self.prefix}.{name}"

    @property
    def instance_id_key(self) -> str:
        """Explicit override for the local member id."""
        return self._key("instance.id")

    @property
    def group_id_key(self) -> str:
        """Explicit override for the local group id."""
        return self._key("group.id")

    @property
    def groups_key(self) -> str:
        return self._key("groups")

    @property
    def members_key(self) -> str:
        return self._key("members")

    @property
    def rpc_address_key(self) -> str:
        return self._key("rpc-address")

    @property
    def service_rpc_address_key(self) -> str:
        return self._key("service-rpc-address")

    @property
    def admin_address_key(self) -> str:
        return self._key("admin-address")

    @property
    def extra_address_keys(self) -> Tuple[str, ...]:
        """Address families besides rpc-address, in search order."""
        return (self.service_rpc_address_key, self.admin_address_key)

    def members_key_for(self, group_id: Optional[str]) -> str:
        return add_key_suffixes(self.members_key, group_id)

    def address_key(
        self, family: str, group_id: Optional[str], member_id: Optional[str]
    ) -> str:
        return add_key_suffixes(family, group_id, member_id)
