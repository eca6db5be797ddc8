"""Test configuration and fixtures for the entire test suite."""

from collections.abc import Iterator

import pytest

from coingecko.client import CoinGeckoClient

from tests.helpers import HOST, FakeApi


@pytest.fixture
def api() -> FakeApi:
    """Mock API answering 200 {} unless reconfigured."""
    return FakeApi()


@pytest.fixture
def client(api: FakeApi) -> Iterator[CoinGeckoClient]:
    """Client without an API key, wired to the mock API."""
    with CoinGeckoClient.for_host(HOST, transport=api.transport()) as client:
        yield client


@pytest.fixture
def keyed_client(api: FakeApi) -> Iterator[CoinGeckoClient]:
    """Client with API key 'abc', wired to the mock API."""
    with CoinGeckoClient.with_key(HOST, "abc", transport=api.transport()) as client:
        yield client
