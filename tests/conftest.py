"""
Pytest configuration for the Sanity binding tests.

Every client is wired to an in-process FakeSanityService, so no request
ever leaves the process.
"""

import pytest
import requests

from sanity_ycsb import SanityClient
from sanity_ycsb.testing import FakeSanityService


BASE_PROPERTIES = {
    "sanity.project": "abc123",
    "sanity.dataset": "bench",
    "sanity.api.version": "v2021-06-07",
    "sanity.api.auth_token": "secret-token",
}


@pytest.fixture
def service():
    """Fake Sanity API with an empty dataset."""
    return FakeSanityService()


@pytest.fixture
def make_client(service):
    """Factory for initialized clients bound to the fake service."""
    clients = []

    def _make(**overrides):
        properties = {**BASE_PROPERTIES, **overrides}
        session = service.mount(requests.Session())
        client = SanityClient(properties, session=session)
        client.init()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.cleanup()


@pytest.fixture
def client(make_client):
    """Initialized client with the default test properties."""
    return make_client()
