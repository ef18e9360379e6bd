"""
Raw dump of values for ad-hoc inspection.

Produces the classic var_dump() text layout, with nested containers
indented by two spaces:

    >>> print(var_dump("ok"), end="")
    string(2) "ok"
    >>> print(var_dump(False), end="")
    bool(false)
    >>> print(var_dump({"name": "John"}), end="")
    array(1) {
      ["name"]=>
      string(4) "John"
    }
"""

import sys
from typing import Any, List, Mapping, Optional, TextIO

PREFORMATTED_TAG = "<pre>"

_INDENT = "  "


def _scalar(value: Any) -> Optional[str]:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return f"bool({'true' if value else 'false'})"
    if isinstance(value, int):
        return f"int({value})"
    if isinstance(value, float):
        return f"float({value!r})"
    if isinstance(value, str):
        # Length is in bytes, like the wire
        return f'string({len(value.encode("utf-8", errors="surrogateescape"))}) "{value}"'
    if isinstance(value, (bytes, bytearray)):
        return f'string({len(value)}) "{bytes(value).decode("utf-8", errors="surrogateescape")}"'
    return None


def _key(key: Any) -> str:
    if isinstance(key, int) and not isinstance(key, bool):
        return f"[{key}]"
    return f'["{key}"]'


def _lines(value: Any, depth: int) -> List[str]:
    pad = _INDENT * depth

    scalar = _scalar(value)
    if scalar is not None:
        return [pad + scalar]

    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(enumerate(value))
    else:
        return [f"{pad}object({type(value).__name__}) ({value!r})"]

    lines = [f"{pad}array({len(items)}) {{"]
    for key, item in items:
        lines.append(f"{pad}{_INDENT}{_key(key)}=>")
        lines.extend(_lines(item, depth + 1))
    lines.append(pad + "}")
    return lines


def var_dump(value: Any) -> str:
    """Debug representation of `value`, newline-terminated."""
    return "\n".join(_lines(value, 0)) + "\n"


def dump(value: Any, stream: Optional[TextIO] = None, preformatted: bool = False) -> None:
    """
    Write var_dump(value) to a stream.

    Text streams backed by a binary buffer (sys.stdout) get the bytes
    directly, so body bytes that are not valid UTF-8 go out unchanged.

    Args:
        value: Anything; typically the captured text or False
        stream: Output stream (default: sys.stdout)
        preformatted: Emit the <pre> tag first, for viewing in a browser
    """
    out = stream if stream is not None else sys.stdout
    text = var_dump(value)
    if preformatted:
        text = PREFORMATTED_TAG + text

    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text)
        out.flush()
        return

    out.flush()
    buffer.write(text.encode("utf-8", errors="surrogateescape"))
    buffer.flush()
