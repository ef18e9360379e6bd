"""
Settings for the client logger.

Console output always goes to stderr; a file is written only when
file_path is set.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FORMATS = ("json", "text", "colored")


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Level name, case-insensitive ("warning" == "WARNING")
        format: json, text or colored
        console: Log to stderr
        file_path: Rotating log file; None disables file output
        max_bytes: Rotate the file at this size
        backup_count: Rotated files to keep
        correlation_id: Tag records with the id of the request being sent
        extra_fields: Static fields added to every record

    Example:
        >>> LoggingConfig(level="warning", correlation_id=False)
        >>> LoggingConfig(format="json", console=False, file_path="/tmp/http_dump.log")
    """

    level: str = "INFO"
    format: str = "text"
    console: bool = True
    file_path: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5
    correlation_id: bool = True
    extra_fields: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        level = str(self.level).upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {self.level}. Available: {', '.join(LEVELS)}")
        log_format = str(self.format).lower()
        if log_format not in FORMATS:
            raise ValueError(f"Unknown log format: {self.format}. Available: {', '.join(FORMATS)}")
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must be non-negative")

        object.__setattr__(self, "level", level)
        object.__setattr__(self, "format", log_format)
        object.__setattr__(self, "extra_fields", dict(self.extra_fields))

    @property
    def levelno(self) -> int:
        """Numeric level for the stdlib logging module."""
        return getattr(logging, self.level)
