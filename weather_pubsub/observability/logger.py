"""Structured logging for sensor events (subscribe, change, notify)."""

import logging
import sys

DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

_level = DEFAULT_LEVEL


def set_level(level: int | str) -> None:
    """Set the level applied to every weather_pubsub logger, including existing ones."""
    global _level
    _level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    logging.getLogger("weather_pubsub").setLevel(_level)
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if name.startswith("weather_pubsub.") and isinstance(logger, logging.Logger):
            logger.setLevel(_level)


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a configured logger for observability."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level if level is None else level)
    return logger
