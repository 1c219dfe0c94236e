"""Tests for logging configuration."""

import logging

from diet_tracker.app_logging import configure_logging


def test_configure_logging_adds_single_handler() -> None:
    logger = logging.getLogger("diet_tracker")
    logger.handlers.clear()

    configure_logging()
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_service_loggers_inherit_package_level() -> None:
    configure_logging("warning")

    assert not logging.getLogger("diet_tracker.services.meals").isEnabledFor(
        logging.INFO
    )
    configure_logging()
