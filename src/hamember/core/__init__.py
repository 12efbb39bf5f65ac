"""Member id resolution for redundant groups.

- configuration: immutable key/value store and file loaders
- keys: suffix-keyed configuration naming
- suffix: default member enumeration and address matching
- resolver: IdentityResolver and module-level shortcuts
"""

from hamember.core.configuration import Configuration, load_config
from hamember.core.errors import (
    AmbiguousAddressMatch,
    ConfigFileError,
    ConfigurationMismatch,
    HAMemberError,
)
from hamember.core.interfaces import KeySuffixMatcher, MemberEnumerator, SuffixMatch
from hamember.core.keys import KeyScheme, add_key_suffixes
from hamember.core.resolver import (
    IdentityResolver,
    is_multi_instance_enabled,
    resolve_local_member_id,
    resolve_member_id_for_address,
)
from hamember.core.suffix import ConfiguredMemberEnumerator, SuffixKeyMatcher

__all__ = [
    "AmbiguousAddressMatch",
    "ConfigFileError",
    "Configuration",
    "ConfigurationMismatch",
    "ConfiguredMemberEnumerator",
    "HAMemberError",
    "IdentityResolver",
    "KeyScheme",
    "KeySuffixMatcher",
    "MemberEnumerator",
    "SuffixKeyMatcher",
    "SuffixMatch",
    "add_key_suffixes",
    "is_multi_instance_enabled",
    "load_config",
    "resolve_local_member_id",
    "resolve_member_id_for_address",
]
