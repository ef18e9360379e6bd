"""Core http-dump модули."""

from .config import TimeoutConfig, ClientConfig
from .request import RequestSpec, parse_header_lines, encode_fields, decode_fields
from .client import DumpClient, TransferInfo
from .raw import status_line, render_headers, render_raw
from .exceptions import (
    HTTPDumpException,
    TransportError,
    TimeoutError,
    ConnectionError,
    DNSError,
    ProxyError,
    SSLError,
    ConfigurationError,
    classify_requests_exception,
)

__all__ = [
    'TimeoutConfig',
    'ClientConfig',
    'RequestSpec',
    'parse_header_lines',
    'encode_fields',
    'decode_fields',
    'DumpClient',
    'TransferInfo',
    'status_line',
    'render_headers',
    'render_raw',
    'HTTPDumpException',
    'TransportError',
    'TimeoutError',
    'ConnectionError',
    'DNSError',
    'ProxyError',
    'SSLError',
    'ConfigurationError',
    'classify_requests_exception',
]
