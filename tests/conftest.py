"""Pytest configuration and shared fixtures for dnsimple-client tests."""

import pytest

from dnsimple_client import DNSimpleClient
from dnsimple_client.testing import StubFetcher


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Remove settings that would leak from the developer's environment."""
    import os

    test_prefixes = ("TEST_", "DNSIMPLE_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def fetcher():
    return StubFetcher()


@pytest.fixture
def client(fetcher):
    return DNSimpleClient(access_token="test-token", fetcher=fetcher)
