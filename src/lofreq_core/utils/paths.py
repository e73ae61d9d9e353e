"""Path joining, canonicalization and symlink-chain resolution."""

from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
import stat
from dataclasses import dataclass
from functools import cache

from lofreq_core.config import DEFAULT_CONFIG, UtilsConfig
from lofreq_core.utils.errors import AllocationOverflow, IOFailure, NotFound

DIR_SEP = "/"


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkTarget:
    """Target of a symbolic link as read by `readlink_malloc`.

    Attributes
    ----------
    target
        The link's target, exactly as stored in the link.
    capacity
        Size in bytes of the buffer that held the complete target.
    """

    target: str
    capacity: int


def _canonicalize(path: str) -> str:
    try:
        return os.path.realpath(path, strict=True)
    except FileNotFoundError as e:
        raise NotFound(f"No such file or directory: {path}", path=path) from e
    except OSError as e:
        raise IOFailure(f"Failed to canonicalize {path}: {e.strerror or e}", path=path) from e


def join_paths(base: str, component: str) -> str:
    """Join ``component`` onto ``base`` and canonicalize the result.

    ``.``, ``..`` and symlinks are resolved against the live filesystem, so
    the joined path has to exist.

    Parameters
    ----------
    base
        Leading path.
    component
        Path appended after a separator.

    Returns
    -------
    str
        Canonical absolute path.

    Raises
    ------
    NotFound
        If the joined path does not exist.
    IOFailure
        On any other OS error during canonicalization.
    """
    return _canonicalize(f"{base}{DIR_SEP}{component}")


@cache
def _libc() -> ctypes.CDLL:
    libc = ctypes.CDLL(ctypes.util.find_library("c"), use_errno=True)
    libc.readlink.argtypes = [ctypes.c_char_p, ctypes.c_char_p, ctypes.c_size_t]
    libc.readlink.restype = ctypes.c_ssize_t
    return libc


def readlink_malloc(path: str | os.PathLike[str], *, cfg: UtilsConfig | None = None) -> LinkTarget:
    """Read a symlink target whose length is not known in advance.

    Starts with a ``cfg.link_buffer_size`` byte buffer and doubles it until
    readlink(2) returns fewer bytes than the buffer holds, which proves the
    target was not truncated.

    Raises
    ------
    IOFailure
        If readlink(2) fails, e.g. because ``path`` is not a symlink.
    AllocationOverflow
        If the buffer would grow beyond ``cfg.size_limit``.
    """
    cfg = cfg or DEFAULT_CONFIG
    encoded = os.fsencode(path)
    size = cfg.link_buffer_size
    while True:
        buffer = ctypes.create_string_buffer(size)
        nchars = _libc().readlink(encoded, buffer, size)
        if nchars < 0:
            err = ctypes.get_errno()
            raise IOFailure(
                f"readlink() failed on {os.fsdecode(path)}: {os.strerror(err)}", path=os.fsdecode(path)
            ) from OSError(err, os.strerror(err), os.fsdecode(path))
        if nchars < size:
            return LinkTarget(target=os.fsdecode(buffer.raw[:nchars]), capacity=size)
        if size * 2 > cfg.size_limit:
            raise AllocationOverflow(f"Link target of {os.fsdecode(path)} exceeds {cfg.size_limit} bytes")
        size *= 2


def resolved_path(path: str | os.PathLike[str], *, cfg: UtilsConfig | None = None) -> str:
    """Follow a chain of symlinks and return the canonical path of the final file.

    A relative link target is resolved against the directory that contains
    the link. That directory is tracked as a string, so the process working
    directory is never changed and concurrent callers need no locking.

    Parameters
    ----------
    path
        Path to resolve; may be relative to the current working directory.
    cfg
        Limits for reading link targets.

    Returns
    -------
    str
        Canonical path of the first non-link in the chain.

    Raises
    ------
    IOFailure
        If an lstat or readlink call fails, or canonicalization hits an OS
        error such as a link loop.
    NotFound
        If a link target does not exist.
    """
    candidate = os.fspath(path)
    while True:
        try:
            st = os.lstat(candidate)
        except OSError as e:
            _logger().error("lstat() failed on %s", candidate)
            raise IOFailure(f"lstat() failed on {candidate}", path=candidate) from e

        if not stat.S_ISLNK(st.st_mode):
            break

        try:
            link = readlink_malloc(candidate, cfg=cfg)
        except IOFailure:
            _logger().error("readlink() failed on %s", candidate)
            raise

        link_dir = os.path.dirname(candidate)
        try:
            candidate = _canonicalize(os.path.join(link_dir, link.target))
        except (NotFound, IOFailure):
            _logger().error("realpath failed on %s (link in %s)", link.target, link_dir or ".")
            raise
        _logger().debug("Followed link to %s", candidate)

    return _canonicalize(candidate)
