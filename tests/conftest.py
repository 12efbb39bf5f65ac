"""Shared test fixtures and helpers to reduce duplication."""

import pytest

from hamember.core.configuration import Configuration


@pytest.fixture
def ha_config():
    """Two-member group: nn1 on host1:8020, nn2 on host2:8020.

    Usage:
      conf = ha_config()                       # the base layout
      conf = ha_config({"ha.instance.id": "x"})  # with overrides
    """

    def _make(extra=None, drop=()):
        data = {
            "ha.members": "nn1,nn2",
            "ha.rpc-address.nn1": "host1:8020",
            "ha.rpc-address.nn2": "host2:8020",
        }
        data.update(extra or {})
        for key in drop:
            data.pop(key, None)
        return Configuration(data)

    return _make


@pytest.fixture
def hosts():
    """Static name table used with SuffixKeyMatcher(host_resolver=...)."""
    return {
        "host1": ["10.0.0.1"],
        "host2": ["10.0.0.2"],
        "host3": ["10.0.0.3"],
        "host2-alias": ["10.0.0.2"],
    }


@pytest.fixture
def write_config(tmp_path):
    """Write a config file under tmp_path and return its path."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
