"""
Logging system for http-dump.

Console output goes to stderr: stdout is reserved for the raw dump.

Example:
    >>> from http_dump.core.logging import DumpLogger, LoggingConfig
    >>>
    >>> config = LoggingConfig(level="DEBUG", format="colored")
    >>> logger = DumpLogger(config)
    >>> logger.info("Request started", method="GET", url="http://swapi.co/api/people/")
"""

from .config import LoggingConfig, LEVELS, FORMATS
from .logger import DumpLogger
from .formatters import JSONFormatter, TextFormatter, ColoredFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LEVELS",
    "FORMATS",
    # Logger
    "DumpLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "ColoredFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
