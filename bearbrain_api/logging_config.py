"""Logging setup for the API process."""

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "bearbrain"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger("bearbrain_api")
    logger.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def excerpt(text: str, limit: int = 200) -> str:
    """Shorten text for log lines."""
    text = str(text).replace("\n", " ")
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
