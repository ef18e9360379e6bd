"""http-dump - issue a single HTTP request and dump the raw response."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .core.client import DumpClient, TransferInfo
from .core.config import ClientConfig, TimeoutConfig
from .core.request import RequestSpec, encode_fields, decode_fields, parse_header_lines
from .core.exceptions import (
    HTTPDumpException,
    TransportError,
    TimeoutError,
    ConnectionError,
    DNSError,
    ProxyError,
    SSLError,
    ConfigurationError,
)
from .core.logging import LoggingConfig
from .utils.dump import dump, var_dump

# Users can configure logging themselves using logging.getLogger('http_dump')
logging.getLogger('http_dump').addHandler(logging.NullHandler())

try:
    __version__ = version("http-dump")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__license__ = "MIT"

__all__ = [
    # Core
    "DumpClient",
    "TransferInfo",
    "RequestSpec",
    "encode_fields",
    "decode_fields",
    "parse_header_lines",

    # Config
    "ClientConfig",
    "TimeoutConfig",
    "LoggingConfig",

    # Exceptions
    "HTTPDumpException",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "DNSError",
    "ProxyError",
    "SSLError",
    "ConfigurationError",

    # Output
    "dump",
    "var_dump",
]
