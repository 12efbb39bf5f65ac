"""Member enumeration / suffix matching fakes."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from hamember.core.interfaces import KeySuffixMatcher, MemberEnumerator, SuffixMatch


class FakeEnumerator(MemberEnumerator):
    """Returns a fixed list of member ids and counts calls."""

    def __init__(self, member_ids: Optional[Sequence[str]] = None):
        self.member_ids = list(member_ids or [])
        self.calls = 0

    def list_member_ids(self, config) -> List[str]:
        self.calls += 1
        return list(self.member_ids)


class FakeMatcher(KeySuffixMatcher):
    """Returns a canned SuffixMatch (or raises) and records every call."""

    def __init__(
        self,
        result: Optional[SuffixMatch] = None,
        exc: Optional[Exception] = None,
    ):
        self.result = result
        self.exc = exc
        self.calls: List[dict[str, Any]] = []

    def resolve_suffixes(
        self, config, base_key, target_address, extra_keys=(), local=False
    ):
        self.calls.append(
            {
                "base_key": base_key,
                "target": target_address,
                "extra_keys": tuple(extra_keys),
                "local": local,
            }
        )
        if self.exc is not None:
            raise self.exc
        return self.result
