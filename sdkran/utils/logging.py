"""Logging setup for sdkran.

Diagnostics go to stderr through the stdlib logging module so that stdout
carries only the version report.
"""

import logging
import os
import sys
from typing import Optional, Union

from .constants import LOG_LEVEL_ENV_VAR

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = logging.WARNING

# stderr handler installed by setup_logging(), if any
_handler: Optional[logging.Handler] = None


def resolve_level(level: Optional[Union[str, int]] = None) -> int:
    """Turn a level name or number into a logging level.

    Falls back to SDKRAN_LOG_LEVEL, then WARNING. Unknown names resolve
    to WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "")
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if isinstance(resolved, int):
        return resolved
    return DEFAULT_LEVEL


def setup_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Configure the ``sdkran`` package logger.

    Safe to call more than once; the stderr handler is only added the first
    time.

    Args:
        level: Level name or number. Defaults to SDKRAN_LOG_LEVEL or WARNING.

    Returns:
        The configured package logger
    """
    global _handler

    logger = logging.getLogger("sdkran")
    logger.setLevel(resolve_level(level))

    if _handler is None or _handler not in logger.handlers:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)

    return logger
