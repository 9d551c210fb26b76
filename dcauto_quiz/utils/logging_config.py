"""Logging setup shared by the desktop window and the browser API."""

from __future__ import annotations

import logging
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# The browser page polls /state every second; one access line per poll drowns the log.
_NOISY_LOGGERS = ("uvicorn.access",)


def configure_logging(level: int = logging.INFO) -> Logger:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return logging.getLogger("dcauto_quiz")
