"""String helpers."""

from __future__ import annotations

from typing import TypeVar

_Text = TypeVar("_Text", str, bytearray)


def chomp(s: _Text) -> _Text:
    """Drop a single trailing newline.

    A ``bytearray`` is trimmed in place and returned; a ``str`` is
    returned trimmed. Anything without a trailing newline is returned as is.
    """
    if isinstance(s, bytearray):
        if s.endswith(b"\n"):
            del s[-1]
        return s
    if s.endswith("\n"):
        return s[:-1]
    return s
