"""Logging setup for the engine's loggers."""

import logging

from ibd_nutrition.config import Settings

ENGINE_LOGGER = "ibd_nutrition"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def resolve_level(settings: Settings) -> int:
    """Return the numeric level for settings; debug mode always wins."""
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach one stream handler to the engine logger and apply the level.

    Calling it again only updates the level.
    """
    resolved = settings or Settings()
    logger = logging.getLogger(ENGINE_LOGGER)
    logger.setLevel(resolve_level(resolved))
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
