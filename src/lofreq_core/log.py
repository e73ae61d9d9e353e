"""Logging setup and fatal-error reporting."""

from __future__ import annotations

import logging
from typing import NoReturn

PACKAGE_LOGGER = "lofreq_core"


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a minimal console logger for lofreq_core.

    Opt-in only; library modules never call ``logging.basicConfig()``.

    Parameters
    ----------
    level
        Level set on the package logger.

    Notes
    -----
    The handler is only attached if neither the root logger nor the
    package logger already has handlers.
    """
    root = logging.getLogger()
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)

    if root.handlers or pkg_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False


def fatal(message: str, cause: BaseException) -> NoReturn:
    """Report an unrecoverable error and terminate.

    Logs ``message`` at CRITICAL level and raises ``SystemExit(1)`` with
    ``cause`` attached as ``__cause__``.
    """
    logging.getLogger(PACKAGE_LOGGER).critical("%s", message)
    raise SystemExit(1) from cause


__all__ = ["configure_logging", "fatal", "PACKAGE_LOGGER"]
