"""Tests for logging configuration."""

import logging

from ibd_nutrition.app_logging import ENGINE_LOGGER, configure_logging, resolve_level
from ibd_nutrition.config import Settings


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(ENGINE_LOGGER)
    logger.handlers.clear()

    configure_logging(Settings(environment="test"))
    first_count = len(logger.handlers)

    configure_logging(Settings(environment="test", debug=True))
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG
    logger.handlers.clear()
    logger.propagate = True


def test_resolve_level_reads_log_level() -> None:
    assert resolve_level(Settings(log_level="warning")) == logging.WARNING
    assert resolve_level(Settings(log_level="nonsense")) == logging.INFO
    assert resolve_level(Settings(log_level="error", debug=True)) == logging.DEBUG
