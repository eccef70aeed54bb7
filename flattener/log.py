from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "flattener"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``flattener`` namespace."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just adjust the level.
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
