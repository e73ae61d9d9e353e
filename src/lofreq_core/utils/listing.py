"""Directory listing with substring filtering."""

from __future__ import annotations

import logging
import os
import threading

from lofreq_core.utils.compare import str_key
from lofreq_core.utils.errors import AllocationFailure, IOFailure

DIR_SEP = "/"

# Self and parent entries, which readdir yields but os.scandir drops.
SPECIAL_ENTRIES: tuple[str, ...] = (".", "..")

# Serializes all directory enumerations in the process.
_LISTING_LOCK = threading.Lock()


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def ls_dir(path: str, pattern: str | None = None, sort_lexi: bool = False) -> list[str]:
    """List the entries of a directory as ``path + "/" + name`` strings.

    The special ``.`` and ``..`` entries are included like any other entry;
    callers filter them if needed.

    Parameters
    ----------
    path
        Directory to enumerate.
    pattern
        Keep only entries whose name contains this substring; None keeps all.
    sort_lexi
        If True, sort the result by code point; otherwise the OS order is kept.

    Returns
    -------
    list[str]
        Fully qualified paths of the matching entries.

    Raises
    ------
    IOFailure
        If the directory cannot be opened or read.
    AllocationFailure
        If the result cannot be built.
    """
    matches: list[str] = []
    with _LISTING_LOCK:
        try:
            with os.scandir(path) as it:
                names = [*SPECIAL_ENTRIES, *(entry.name for entry in it)]
        except OSError as e:
            _logger().error("Couldn't open path %s", path)
            raise IOFailure(f"Couldn't open path {path}", path=path) from e

    try:
        for name in names:
            if pattern is not None and pattern not in name:
                continue
            matches.append(f"{path}{DIR_SEP}{name}")
    except MemoryError as e:
        _logger().error("Failed to allocate directory listing for %s", path)
        raise AllocationFailure(f"Failed to build listing for {path}") from e

    if sort_lexi:
        matches.sort(key=str_key)
    return matches
