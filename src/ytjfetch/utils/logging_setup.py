"""Utility to provide a shared logger configuration for the project."""

from __future__ import annotations

import logging
import sys
from typing import Final

_LOGGER_NAME: Final = "ytjfetch"


def setup_logger(level: int | None = None) -> logging.Logger:
    """Return the shared ytjfetch logger configured for console output.

    Without *level* an already configured level is kept (INFO on first use).
    """

    logger = logging.getLogger(_LOGGER_NAME)
    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    logger.propagate = False

    if not any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(message)s",
            "%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
