"""
Console logging for the pricing engine modules and demos.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str | None = None, level: str | int = logging.INFO) -> logging.Logger:
    """
    Named logger writing to the console, root logger when name is None.

    A console handler is attached only the first time a name is seen, so
    repeated calls never duplicate output. The level is applied on every call;
    pass ``PricingConfig.log_level`` to follow configuration.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_console_handler())
    logger.setLevel(level)
    return logger
