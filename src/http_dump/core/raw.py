"""
Raw capture of a requests.Response.

Rebuilds the text a client would have received on the wire: optionally the
status line and headers, then the body bytes. The body is decoded as UTF-8
with surrogateescape, so the captured text encodes back to exactly the
received bytes whatever charset the server declared (or didn't).
"""

from typing import Iterable, Tuple

import requests

_HTTP_VERSIONS = {
    9: "HTTP/0.9",
    10: "HTTP/1.0",
    11: "HTTP/1.1",
    20: "HTTP/2",
}

CRLF = "\r\n"
BODY_ENCODING = "utf-8"
BODY_ERRORS = "surrogateescape"


def status_line(response: requests.Response) -> str:
    """
    Build the status line of a response.

    Example:
        >>> status_line(response)
        'HTTP/1.1 200 OK'
    """
    version = getattr(response.raw, "version", None)
    protocol = _HTTP_VERSIONS.get(version, "HTTP/1.1")
    line = f"{protocol} {response.status_code}"
    if response.reason:
        line += f" {response.reason}"
    return line


def header_items(response: requests.Response) -> Iterable[Tuple[str, str]]:
    """
    Response headers as received, one pair per header line.

    requests folds repeated headers (Set-Cookie) into one comma-joined value;
    the urllib3 headers on response.raw keep them apart.
    """
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers:
        iteritems = getattr(raw_headers, "iteritems", None)
        return list(iteritems() if iteritems is not None else raw_headers.items())
    return list(response.headers.items())


def render_headers(response: requests.Response) -> str:
    """Status line and header lines, terminated by an empty line."""
    lines = [status_line(response)]
    lines.extend(f"{name}: {value}" for name, value in header_items(response))
    return CRLF.join(lines) + CRLF + CRLF


def decode_body(content: bytes) -> str:
    """Body bytes as text that round-trips to the same bytes."""
    return content.decode(BODY_ENCODING, errors=BODY_ERRORS)


def render_raw(response: requests.Response, include_headers: bool = False) -> str:
    """
    Captured text of a response.

    Args:
        response: Response to capture
        include_headers: Prepend status line and headers

    Returns:
        Body text, or headers block followed by body text
    """
    body = decode_body(response.content or b"")
    if include_headers:
        return render_headers(response) + body
    return body
