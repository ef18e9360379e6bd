"""
Pytest configuration and fixtures for http-dump tests.
"""

import json

import pytest
import responses as responses_lib

from http_dump.core.client import DumpClient
from http_dump.core.config import ClientConfig
from http_dump.core.logging.config import LoggingConfig
from http_dump.core.logging.filters import clear_correlation_id

PEOPLE_URL = "http://swapi.co/api/people/"


@pytest.fixture
def people_url():
    """Endpoint used by the scripts."""
    return PEOPLE_URL


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def quiet_config():
    """Client config without logging."""
    return ClientConfig()


@pytest.fixture
def client(quiet_config):
    """DumpClient instance for testing."""
    client = DumpClient(config=quiet_config)
    yield client
    client.close()


@pytest.fixture
def logging_config_with_file(tmp_path):
    """
    LoggingConfig writing JSON lines to a temporary file.

    Console output is disabled so stderr stays empty.
    """
    return LoggingConfig(
        level="DEBUG",
        format="json",
        console=False,
        file_path=str(tmp_path / "http_dump.log"),
    )


@pytest.fixture(autouse=True)
def _reset_correlation_id():
    yield
    clear_correlation_id()


def echo_callback(request):
    """
    Transport stub that echoes back what it received.

    Returns method, the request headers and the body as JSON.
    """
    body = request.body
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    payload = {
        "method": request.method,
        "url": request.url,
        "headers": dict(request.headers),
        "body": body,
    }
    return 200, {"X-Echo": "1"}, json.dumps(payload)


@pytest.fixture
def echo_transport(mock_responses):
    """Register the echo stub for GET and POST on the people endpoint."""
    for method in (responses_lib.GET, responses_lib.POST):
        mock_responses.add_callback(
            method,
            PEOPLE_URL,
            callback=echo_callback,
            content_type="application/json",
        )
    return mock_responses
