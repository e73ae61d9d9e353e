"""Error taxonomy for the utility layer."""

from __future__ import annotations


class UtilsError(Exception):
    """Base class for all utility-layer failures."""


class AllocationFailure(UtilsError):
    """Memory could not be obtained while growing or building a result."""


class Overflow(UtilsError):
    """A size or counter computation would leave its representable range."""


class AllocationOverflow(Overflow):
    """A capacity increase would exceed the platform size limit."""


class CountOverflow(Overflow):
    """A line counter would exceed the signed long maximum."""


class IOFailure(UtilsError):
    """An open, stat, read, readlink or listing call failed.

    Attributes
    ----------
    path
        Path the failing call operated on, if known.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotFound(UtilsError):
    """A path to canonicalize does not exist on disk."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
