"""Typed growable array with explicit capacity accounting."""

from __future__ import annotations

import logging
from array import array
from collections.abc import Callable, Iterator
from functools import cmp_to_key

from lofreq_core.config import DEFAULT_CONFIG, UtilsConfig
from lofreq_core.utils.errors import AllocationFailure, AllocationOverflow

# Numeric typecodes only; new slots are zero-filled.
NUMERIC_TYPECODES = frozenset("bBhHiIlLqQfd")


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class GrowableArray:
    """Append-only array backed by an `array.array` buffer.

    ``capacity`` is the number of allocated slots and ``length`` the number
    populated; ``length <= capacity`` always holds. With a growth increment
    of 1 or less the first allocation holds one element and every further
    growth doubles the capacity; otherwise capacity grows by the increment.

    Parameters
    ----------
    typecode
        `array` typecode of the elements (numeric types only).
    growth_increment
        Growth policy; defaults to ``cfg.growth_increment``.
    cfg
        Limits used for the overflow check.
    """

    def __init__(
        self,
        typecode: str = "i",
        growth_increment: int | None = None,
        *,
        cfg: UtilsConfig | None = None,
    ) -> None:
        if typecode not in NUMERIC_TYPECODES:
            raise ValueError(f"Unsupported typecode: {typecode!r}")
        cfg = cfg or DEFAULT_CONFIG
        if growth_increment is None:
            growth_increment = cfg.growth_increment
        if growth_increment < 0:
            raise ValueError(f"growth_increment must be >= 0, got {growth_increment}")
        self._typecode = typecode
        self._growth_increment = growth_increment
        self._size_limit = cfg.size_limit
        self._data: array = array(typecode)
        self._length = 0

    @property
    def typecode(self) -> str:
        return self._typecode

    @property
    def growth_increment(self) -> int:
        return self._growth_increment

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._data)

    def append(self, value: int | float) -> None:
        """Append one element, growing the buffer when it is full.

        Raises
        ------
        AllocationOverflow
            If the grown buffer would exceed the configured size limit.
        AllocationFailure
            If memory for the grown buffer cannot be obtained.
        """
        if self._length == self.capacity:
            self._grow()
        self._data[self._length] = value
        self._length += 1

    def _grow(self) -> None:
        old = self.capacity
        if self._growth_increment <= 1:
            new = 1 if old == 0 else old * 2
        else:
            new = old + self._growth_increment

        if new * self._data.itemsize > self._size_limit:
            raise AllocationOverflow(
                f"Cannot grow array from {old} to {new} elements: exceeds {self._size_limit} bytes"
            )
        try:
            self._data.extend(array(self._typecode, bytes((new - old) * self._data.itemsize)))
        except MemoryError as e:
            raise AllocationFailure(f"Failed to grow array to {new} elements") from e
        _logger().debug("Grew array capacity %d -> %d", old, new)

    def free(self) -> None:
        """Release the buffer and return to the empty state. Safe to repeat."""
        self._data = array(self._typecode)
        self._length = 0

    def sort(self, cmp: Callable[[int | float, int | float], int] | None = None) -> None:
        """Sort the populated elements in place, optionally with a three-way comparator."""
        values = self.tolist()
        values.sort(key=cmp_to_key(cmp) if cmp is not None else None)
        self._data[: self._length] = array(self._typecode, values)

    def tolist(self) -> list[int | float]:
        return self._data[: self._length].tolist()

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> int | float:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("GrowableArray index out of range")
        return self._data[index]

    def __iter__(self) -> Iterator[int | float]:
        for i in range(self._length):
            yield self._data[i]

    def __repr__(self) -> str:
        return (
            f"GrowableArray(typecode={self._typecode!r}, length={self._length}, "
            f"capacity={self.capacity}, values={self.tolist()!r})"
        )
