# byteme/common/logging.py
from __future__ import annotations

import logging

from byteme.common.settings import get_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "byteme", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger. If the host application has not configured
    logging yet, install a basicConfig once so messages are not lost.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=get_settings().log_level, format=_FORMAT)
    if level is not None:
        logger.setLevel(level)
    return logger
