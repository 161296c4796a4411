"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from eta.config import get_log_level

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str | None = None) -> None:
    """Configure process-level logging once per level.

    The level defaults to ETA_LOG_LEVEL. Library modules log through the
    "eta" namespace, which stays disabled until this is called.
    """
    global _CONFIGURED_LEVEL
    level = (level or get_log_level()).upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("eta")

    _CONFIGURED_LEVEL = level
