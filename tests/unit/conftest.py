"""Pytest configuration and shared fixtures for unit tests."""

import json
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import parse_qs, urlparse

import pytest
import responses
from marvelfetch import ClientConfig, Credentials, MarvelClient

from tests.unit.fixtures import API_PREFIX, envelope, make_records


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(public_key="public-key", private_key="private-key")


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_prefix=API_PREFIX, page_size=100, backoff_factor=0)


@pytest.fixture
def client(credentials, config):
    with MarvelClient(credentials, config) as client:
        yield client


@pytest.fixture
def mocked_responses():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


# =============================================================================
# Simulated Server
# =============================================================================


@pytest.fixture
def paged_server(mocked_responses) -> Callable[..., List[Dict[str, Any]]]:
    """Register a server that slices ``total`` synthetic records by offset/limit.

    Returns a function ``(url, total) -> records`` that installs the callback
    and hands back the records the server will serve.
    """

    def install(url: str, total: int, records: Optional[List[Dict[str, Any]]] = None):
        served = records if records is not None else make_records(total)

        def callback(request):
            params = parse_qs(urlparse(request.url).query)
            offset = int(params["offset"][0])
            limit = int(params["limit"][0])
            body = envelope(total, served[offset : offset + limit])
            return 200, {}, json.dumps(body)

        mocked_responses.add_callback(
            responses.GET, url, callback=callback, content_type="application/json"
        )
        return served

    return install
