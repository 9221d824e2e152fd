# contractfn/logging/logger.py
"""
Unified logging setup for contractfn.

All modules use:
    from contractfn.logging.logger import get_logger
    logger = get_logger(__name__)

Log namespaces follow module paths, so applications can tune
"contractfn" as a whole or a single module.
"""

import logging
import sys
from typing import Union

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

_ROOT_LOGGER = "contractfn"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> logging.Logger:
    """
    Attach a stream handler to the "contractfn" logger.

    A library never configures the root logger. Calling this more than once
    only updates the level; handlers are not duplicated.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(_ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here. Configuration happens in configure_logging().
    """
    return logging.getLogger(name)
