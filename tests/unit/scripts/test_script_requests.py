"""
Tests for request construction in the scripts.

DumpClient.execute is patched, so no transport is involved.
"""

import io
from unittest.mock import patch

import pytest

from http_dump.core.client import DumpClient
from http_dump.core.config import ClientConfig
from http_dump.scripts import PEOPLE_URL, default_config, get_people, get_people_headers, post_person


@pytest.fixture
def captured():
    """Patch DumpClient.execute and collect the RequestSpec objects it receives."""
    requests_seen = []

    def fake_execute(self, request):
        requests_seen.append(request)
        return "ok"

    with patch.object(DumpClient, "execute", autospec=True, side_effect=fake_execute):
        yield requests_seen


def run(module):
    stream = io.StringIO()
    code = module.main(stream=stream, config=ClientConfig())
    return code, stream.getvalue()


class TestGetPeople:

    def test_request(self, captured):
        code, output = run(get_people)

        [request] = captured
        assert code == 0
        assert request.method == "GET"
        assert request.url == PEOPLE_URL
        assert dict(request.headers) == {}
        assert request.body is None
        assert request.include_headers is False
        assert output == 'string(2) "ok"\n'


class TestGetPeopleHeaders:

    def test_request(self, captured):
        code, output = run(get_people_headers)

        [request] = captured
        assert code == 0
        assert request.method == "GET"
        assert request.url == PEOPLE_URL
        assert list(request.headers.items()) == [
            ("Content-Type", "application/json"),
            ("Accept", "text/html"),
        ]
        assert request.body is None
        assert request.include_headers is True
        assert output == '<pre>string(2) "ok"\n'


class TestPostPerson:

    def test_request(self, captured):
        code, output = run(post_person)

        [request] = captured
        assert code == 0
        assert request.method == "POST"
        assert request.url == PEOPLE_URL
        assert request.body == '{"name":"John","surname":"Doe"}'
        assert list(request.headers.items()) == [
            ("Content-Type", "application/json"),
            ("Accept", "application/json"),
        ]
        assert request.include_headers is False
        assert output == 'string(2) "ok"\n'

    def test_fields_constant(self):
        assert post_person.FIELDS == {"name": "John", "surname": "Doe"}


class TestDefaultConfig:

    def test_logs_warnings_only(self):
        config = default_config()

        assert config.logging is not None
        assert config.logging.level == "WARNING"
        assert config.logging.file_path is None

    def test_keeps_curl_defaults(self):
        config = default_config()

        assert config.timeout is None
        assert config.allow_redirects is False
        assert config.raise_on_error is False
