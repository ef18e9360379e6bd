"""GET the people collection and dump the response body."""

import sys
from typing import Optional, TextIO

from . import PEOPLE_URL, default_config
from ..core.client import DumpClient
from ..core.config import ClientConfig
from ..core.request import RequestSpec
from ..utils.dump import dump


def main(stream: Optional[TextIO] = None, config: Optional[ClientConfig] = None) -> int:
    request = RequestSpec.get(PEOPLE_URL)

    with DumpClient(config or default_config()) as client:
        result = client.execute(request)

    dump(result, stream=stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())
