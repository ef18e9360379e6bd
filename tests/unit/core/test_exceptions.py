"""
Tests for exception hierarchy and requests exception classification.
"""

import pytest
import requests

from http_dump.core.exceptions import (
    ConfigurationError,
    ConnectionError,
    DNSError,
    HTTPDumpException,
    ProxyError,
    SSLError,
    TimeoutError,
    TransportError,
    classify_requests_exception,
)

URL = "http://swapi.co/api/people/"


class TestHierarchy:

    def test_transport_errors_share_base(self):
        for exc_class in (TimeoutError, ConnectionError, DNSError, ProxyError, SSLError):
            assert issubclass(exc_class, TransportError)
            assert issubclass(exc_class, HTTPDumpException)

    def test_configuration_error_is_not_transport(self):
        assert not issubclass(ConfigurationError, TransportError)

    def test_transport_error_message_includes_url(self):
        error = TransportError("Connection error", URL)

        assert str(error) == f"Connection error (url: {URL})"
        assert error.url == URL
        assert error.message == str(error)

    def test_timeout_message_includes_type(self):
        error = TimeoutError("Request timeout", URL, timeout_type="read")
        assert "(read timeout)" in str(error)

    def test_base_rejects_unknown_arguments(self):
        with pytest.raises(TypeError):
            HTTPDumpException("boom", url=URL)


class TestClassifyRequestsException:

    def test_connect_timeout(self):
        exc = requests.exceptions.ConnectTimeout("timed out")
        error = classify_requests_exception(exc, URL)

        assert isinstance(error, TimeoutError)
        assert error.timeout_type == "connect"
        assert error.cause is exc

    def test_read_timeout(self):
        error = classify_requests_exception(requests.exceptions.ReadTimeout(), URL)

        assert isinstance(error, TimeoutError)
        assert error.timeout_type == "read"

    def test_proxy_error(self):
        error = classify_requests_exception(requests.exceptions.ProxyError("bad proxy"), URL)
        assert isinstance(error, ProxyError)

    def test_ssl_error(self):
        error = classify_requests_exception(requests.exceptions.SSLError("cert"), URL)
        assert isinstance(error, SSLError)

    def test_dns_failure(self):
        exc = requests.exceptions.ConnectionError(
            "Failed to establish a new connection: [Errno -2] Name or service not known"
        )
        error = classify_requests_exception(exc, URL)

        assert isinstance(error, DNSError)
        assert error.url == URL

    def test_connection_refused(self):
        exc = requests.exceptions.ConnectionError("[Errno 111] Connection refused")
        error = classify_requests_exception(exc, URL)

        assert type(error) is ConnectionError

    def test_generic_request_exception(self):
        error = classify_requests_exception(requests.exceptions.InvalidURL("bad"), URL)

        assert type(error) is TransportError
        assert "Request failed" in str(error)

    def test_unknown_exception_wrapped(self):
        error = classify_requests_exception(ValueError("boom"), URL)

        assert type(error) is HTTPDumpException
        assert str(error) == "boom"
