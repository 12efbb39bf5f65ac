"""Shared test fakes package.

Keep fakes small, documented, and focused on test needs only.

Import convenience:
    from tests.fakes import FakeEnumerator, FakeMatcher, static_resolver
"""

from .collaborators import FakeEnumerator, FakeMatcher
from .network import static_resolver, local_ips

__all__ = [name for name in globals().keys() if name.startswith("Fake")] + [
    "static_resolver",
    "local_ips",
]
