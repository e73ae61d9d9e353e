"""Comparators and small statistics helpers.

Comparators follow the three-way convention (-1, 0, 1) so they can drive
both `functools.cmp_to_key` sorts and `GrowableArray.sort`.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from functools import cmp_to_key

DBL_EPSILON = sys.float_info.epsilon


def int_cmp(a: int, b: int) -> int:
    """Compare two integers in ascending order."""
    return -1 if a < b else 1 if a > b else 0


def dbl_cmp(a: float, b: float) -> int:
    """Compare two doubles in ascending order.

    Values closer than machine epsilon (`DBL_EPSILON`) compare equal even
    when they are not bit-identical.
    """
    if abs(a - b) < DBL_EPSILON:
        return 0
    return -1 if a < b else 1 if a > b else 0


def str_cmp(a: str, b: str) -> int:
    """Compare two strings by code point."""
    return -1 if a < b else 1 if a > b else 0


int_key = cmp_to_key(int_cmp)
dbl_key = cmp_to_key(dbl_cmp)
str_key = cmp_to_key(str_cmp)


def argmax(values: Sequence[float]) -> int:
    """Return the index of the largest value.

    Ties resolve to the lowest index. An empty sequence yields 0.
    """
    maxidx = 0
    for i, value in enumerate(values):
        if value > values[maxidx]:
            maxidx = i
    return maxidx


def median(values: Sequence[float], *, strict: bool = False) -> float:
    """Return the median of ``values``.

    Parameters
    ----------
    values
        Input values; left unmodified.
    strict
        If True, an empty input raises instead of returning 0.0.

    Returns
    -------
    float
        Middle element for odd length, mean of the two middle elements
        for even length, 0.0 for an empty input.

    Raises
    ------
    ValueError
        If ``values`` is empty and ``strict`` is True.
    """
    size = len(values)
    if size == 0:
        if strict:
            raise ValueError("median of empty sequence")
        return 0.0
    sdata = sorted(values, key=dbl_key)
    mid = size // 2
    if size % 2 == 0:
        return (sdata[mid] + sdata[mid - 1]) / 2.0
    return float(sdata[mid])
