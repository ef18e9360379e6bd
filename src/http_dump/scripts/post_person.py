"""
POST a person to the people collection.

Content type is JSON, so the fields go out JSON-encoded rather than
form-encoded.
"""

import sys
from typing import Optional, TextIO

from . import PEOPLE_URL, default_config
from ..core.client import DumpClient
from ..core.config import ClientConfig
from ..core.request import RequestSpec
from ..utils.dump import dump

FIELDS = {"name": "John", "surname": "Doe"}

HEADERS = [
    "Content-Type: application/json",
    "Accept: application/json",
]


def main(stream: Optional[TextIO] = None, config: Optional[ClientConfig] = None) -> int:
    request = RequestSpec.post(PEOPLE_URL, FIELDS, headers=HEADERS)

    with DumpClient(config or default_config()) as client:
        result = client.execute(request)

    dump(result, stream=stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())
