"""Array, statistics and filesystem primitives."""

from __future__ import annotations

from lofreq_core.utils.compare import argmax, dbl_cmp, dbl_key, int_cmp, int_key, median, str_cmp, str_key
from lofreq_core.utils.errors import (
    AllocationFailure,
    AllocationOverflow,
    CountOverflow,
    IOFailure,
    NotFound,
    Overflow,
    UtilsError,
)
from lofreq_core.utils.fileio import count_lines, file_exists, is_dir, load_to_memory
from lofreq_core.utils.listing import ls_dir
from lofreq_core.utils.paths import LinkTarget, join_paths, readlink_malloc, resolved_path
from lofreq_core.utils.strings import chomp
from lofreq_core.utils.varray import GrowableArray

__all__ = [
    "AllocationFailure",
    "AllocationOverflow",
    "CountOverflow",
    "GrowableArray",
    "IOFailure",
    "LinkTarget",
    "NotFound",
    "Overflow",
    "UtilsError",
    "argmax",
    "chomp",
    "count_lines",
    "dbl_cmp",
    "dbl_key",
    "file_exists",
    "int_cmp",
    "int_key",
    "is_dir",
    "join_paths",
    "load_to_memory",
    "ls_dir",
    "median",
    "readlink_malloc",
    "resolved_path",
    "str_cmp",
    "str_key",
]
