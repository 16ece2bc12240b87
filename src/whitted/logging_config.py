"""Logging setup for the renderer and its command-line tools."""

import logging

from src.whitted.config import LOG_FORMAT

# Console handler installed on each configured logger, keyed by logger name
_handlers: dict[str, logging.Handler] = {}


def setup_logging(level: str = "INFO", name: str = "src.whitted") -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this more than once replaces the handler instead of stacking
    duplicates. Handlers added by other code are left alone.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        name: Logger to configure; defaults to the package root.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    previous = _handlers.pop(name, None)
    if previous is not None:
        logger.removeHandler(previous)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    _handlers[name] = console_handler

    return logger
