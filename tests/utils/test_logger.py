import logging

from utils.logger import LOG_FORMAT, get_logger


def test_get_logger_installs_single_handler():
    logger = get_logger("tests.pricing_logger")
    again = get_logger("tests.pricing_logger")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_get_logger_level_override():
    logger = get_logger("tests.pricing_logger_debug", level="DEBUG")
    assert logger.level == logging.DEBUG


def test_get_logger_format():
    handler = get_logger("tests.pricing_logger_format").handlers[0]
    assert handler.formatter._fmt == LOG_FORMAT
    assert "%(name)s" in LOG_FORMAT
