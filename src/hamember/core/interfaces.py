from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Collection, Optional, Sequence

from hamember.utils.network import SocketAddress


@dataclass(frozen=True, slots=True)
class SuffixMatch:
    """Group and member suffixes of the configuration key whose address matched."""

    group_id: Optional[str]
    member_id: Optional[str]

    @property
    def found(self) -> bool:
        return self.group_id is not None or self.member_id is not None


class MemberEnumerator(ABC):
    """Lists the member ids configured for the redundant group."""

    @abstractmethod
    def list_member_ids(self, config: Mapping) -> Collection[str]:
        """
        Returns the configured member ids; empty when no group is configured.
        """
        pass


class KeySuffixMatcher(ABC):
    """Finds the suffixed configuration entry whose address equals a target."""

    @abstractmethod
    def resolve_suffixes(
        self,
        config: Mapping,
        base_key: str,
        target_address: Optional[SocketAddress],
        extra_keys: Sequence[str] = (),
        local: bool = False,
    ) -> Optional[SuffixMatch]:
        """
        Searches ``base_key`` and then each of ``extra_keys`` for an address
        matching ``target_address``. A target of None means "any address
        that belongs to this host". With ``local`` set the target is this
        process's own bind address, so a wildcard host stands for the
        addresses of this host. Returns None when nothing matched.
        """
        pass
