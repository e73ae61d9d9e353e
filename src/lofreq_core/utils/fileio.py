"""File probing and whole-file reading."""

from __future__ import annotations

import logging
import os
import stat

from lofreq_core.config import DEFAULT_CONFIG, UtilsConfig
from lofreq_core.log import fatal
from lofreq_core.utils.errors import AllocationFailure, AllocationOverflow, CountOverflow, IOFailure

_CHUNK_SIZE = 1 << 16


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True only if ``path`` exists and is a directory.

    Any stat failure, permission problems included, yields False.
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(st.st_mode)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` passes an existence check under the effective permissions."""
    try:
        return os.access(path, os.F_OK)
    except ValueError:
        return False


def load_to_memory(path: str | os.PathLike[str], *, cfg: UtilsConfig | None = None) -> bytes:
    """Read a whole file into memory.

    Parameters
    ----------
    path
        File to read (opened in binary mode).
    cfg
        Limits used for the allocation size check.

    Returns
    -------
    bytes
        The exact file content.

    Raises
    ------
    IOFailure
        If the file cannot be opened or sized, or fewer bytes than its
        size could be read.
    AllocationOverflow
        If the file is too large to hold in one buffer.
    AllocationFailure
        If memory for the content cannot be obtained.
    """
    cfg = cfg or DEFAULT_CONFIG
    try:
        f = open(path, "rb")
    except OSError as e:
        raise IOFailure(f"Failed to open file: {path}", path=os.fsdecode(path)) from e

    with f:
        try:
            size = f.seek(0, os.SEEK_END)
            f.seek(0, os.SEEK_SET)
        except OSError as e:
            raise IOFailure(f"Failed to determine size of file: {path}", path=os.fsdecode(path)) from e

        if size + 1 > cfg.size_limit:
            raise AllocationOverflow(f"File too large to load ({size} bytes): {path}")

        try:
            data = f.read(size)
        except MemoryError as e:
            raise AllocationFailure(f"Failed to allocate {size} bytes for file: {path}") from e
        except OSError as e:
            raise IOFailure(f"Failed to read file: {path}", path=os.fsdecode(path)) from e

    if len(data) != size:
        raise IOFailure(f"Short read on {path}: got {len(data)} of {size} bytes", path=os.fsdecode(path))
    return data


def count_lines(path: str | os.PathLike[str], *, cfg: UtilsConfig | None = None) -> int:
    """Count ``\\n`` bytes in a file.

    A final line without a trailing newline is not counted. The file is read
    in binary mode so no newline translation takes place.

    Raises
    ------
    IOFailure
        If the file cannot be opened or read.
    SystemExit
        If the count would exceed ``cfg.line_count_limit``; the
        `CountOverflow` is attached as the cause.
    """
    cfg = cfg or DEFAULT_CONFIG
    limit = cfg.line_count_limit
    count = 0
    try:
        with open(path, "rb") as f:
            while chunk := f.read(_CHUNK_SIZE):
                newlines = chunk.count(b"\n")
                if newlines > limit - count:
                    fatal(
                        "count overflow!",
                        CountOverflow(f"Line count of {path} exceeds {limit}"),
                    )
                count += newlines
    except OSError as e:
        raise IOFailure(f"Failed to count lines in file: {path}", path=os.fsdecode(path)) from e
    _logger().debug("Counted %d lines in %s", count, path)
    return count
