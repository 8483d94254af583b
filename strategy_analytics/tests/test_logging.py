"""Tests for logging configuration."""

import logging

import pytest

from strategy_analytics.utils.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Leave the package logger unconfigured for other test modules."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestLoggingConfig:
    """Test suite for setup_logging and get_logger."""

    def test_setup_sets_level_and_single_handler(self):
        logger = setup_logging(log_level="debug")
        setup_logging(log_level="DEBUG")

        assert logger.name == "strategy_analytics"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "analytics.log"
        logger = setup_logging(log_level="INFO", log_file=str(log_file))

        get_logger("payoff").info("Sweeping %d prices", 101)
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "Sweeping 101 prices" in log_file.read_text()

    def test_get_logger_names(self):
        assert get_logger().name == "strategy_analytics"
        assert get_logger("payoff").name == "strategy_analytics.payoff"

    def test_get_logger_accepts_module_name(self):
        logger = get_logger("strategy_analytics.analytics.payoff")
        assert logger.name == "strategy_analytics.analytics.payoff"

    def test_numeric_level(self):
        logger = setup_logging(log_level=logging.WARNING)
        assert logger.level == logging.WARNING

    def test_rerun_replaces_file_handler(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "first.log"))
        logger = setup_logging()

        assert len(logger.handlers) == 1
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
