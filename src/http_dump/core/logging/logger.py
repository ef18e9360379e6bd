"""
Logger used by DumpClient.

Wraps a stdlib logger, attaches configured handlers and masks sensitive
values in structured fields.
"""

import logging
from typing import Optional, Any, List

from .config import LoggingConfig
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .handlers import create_console_handler, create_file_handler
from ...utils.sanitizer import mask_sensitive_data


class DumpLogger:
    """
    Structured logger.

    Keyword arguments of every log call become record fields
    (after masking), e.g. `logger.info("Request completed", status_code=200)`.

    Each instance owns the handlers it adds: closing one DumpLogger leaves
    handlers of other instances on the same logger name untouched.

    Example:
        >>> logger = DumpLogger(LoggingConfig(level="DEBUG"))
        >>> logger.debug("Request started", method="GET", url="http://swapi.co/api/people/")
        >>> logger.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "http_dump"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False
        self._handlers: List[logging.Handler] = []

        level = self.config.levelno

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        filters: List[logging.Filter] = []
        if self.config.correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(self.config.extra_fields))

        formatter = get_formatter(self.config.format)

        if self.config.console:
            self._handlers.append(
                create_console_handler(level=level, formatter=formatter, filters=filters)
            )

        if self.config.file_path:
            self._handlers.append(
                create_file_handler(
                    file_path=self.config.file_path,
                    level=level,
                    formatter=formatter,
                    max_bytes=self.config.max_bytes,
                    backup_count=self.config.backup_count,
                    filters=filters
                )
            )

        for handler in self._handlers:
            self._logger.addHandler(handler)

    @property
    def handlers(self) -> List[logging.Handler]:
        """Handlers added by this instance and not yet closed."""
        return list(self._handlers)

    def _log(self, level: int, message: str, fields: dict) -> None:
        self._logger.log(level, message, extra=mask_sensitive_data(fields))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR with the current traceback. Call from an except block."""
        self._logger.exception(message, extra=mask_sensitive_data(kwargs))

    def close(self) -> None:
        """
        Flush and close the handlers this instance added.

        Idempotent: repeated calls do nothing.
        """
        if self._closed:
            return
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.flush()
            handler.close()
        self._handlers.clear()
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
