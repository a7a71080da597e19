from __future__ import annotations

import sys

from loguru import logger

from .config import LOG_LEVEL

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "{message}"
)


def setup_logging(level: str | None = None) -> None:
    """Route engine logs to a single stderr sink at ``level``."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or LOG_LEVEL).upper(),
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
