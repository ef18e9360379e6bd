"""
Standalone request-and-dump scripts.

Each module sends one request to the people collection and dumps what came
back to stdout. Run as `python -m http_dump.scripts.<name>` or through the
console entry points.
"""

from ..core.config import ClientConfig
from ..core.logging import LoggingConfig

PEOPLE_URL = "http://swapi.co/api/people/"


def default_config() -> ClientConfig:
    """Client config of the scripts: curl defaults, transport errors logged to stderr."""
    return ClientConfig(
        logging=LoggingConfig(level="WARNING", correlation_id=False)
    )
