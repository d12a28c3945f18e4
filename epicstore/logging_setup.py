"""Logging setup for applications embedding epicstore.

Library modules only create loggers; handlers are attached here, once.
"""

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "epicstore"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[Union[str, int]] = None) -> int:
    """Attach a console handler to the epicstore logger.

    Args:
        level: Level name or number. Defaults to the configured
               EPICSTORE_LOG_LEVEL.

    Returns:
        The numeric level in effect
    """
    if level is None:
        from epicstore.config import get_settings
        level = get_settings().log_level

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if getattr(h, "_epicstore", False)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._epicstore = True
        logger.addHandler(handler)
    handler.setLevel(level)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return level
