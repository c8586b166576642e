import logging

from hashtable import config


def test_testing_mode_selects_null_logging():
    assert config.IS_TESTING
    assert config.LOGGING is config.TEST_LOGGING


def test_defaults():
    assert config.DEFAULT_CAPACITY == 16
    assert config.DEFAULT_LOAD_FACTOR == 0.75


def test_configure_logging_returns_named_logger():
    logger = config.configure_logging(config.TEST_LOGGING)

    assert logger.name == config.LOGGER_NAME
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.propagate is False
