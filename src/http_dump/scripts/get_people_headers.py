"""
GET the people collection with custom headers.

Response status line and headers are captured together with the body,
and the dump is wrapped for viewing in a browser.
"""

import sys
from typing import Optional, TextIO

from . import PEOPLE_URL, default_config
from ..core.client import DumpClient
from ..core.config import ClientConfig
from ..core.request import RequestSpec
from ..utils.dump import dump

HEADERS = [
    "Content-Type: application/json",
    "Accept: text/html",
]


def main(stream: Optional[TextIO] = None, config: Optional[ClientConfig] = None) -> int:
    request = RequestSpec.get(PEOPLE_URL, headers=HEADERS, include_headers=True)

    with DumpClient(config or default_config()) as client:
        result = client.execute(request)

    dump(result, stream=stream, preformatted=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
