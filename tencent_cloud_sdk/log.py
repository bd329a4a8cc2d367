"""
Logging setup shared by the client and helpers.

One stdout handler lives on the ``tencent_cloud_sdk`` logger; module
loggers propagate to it, so changing the package level affects them all.
"""
import logging
import os
import sys

PACKAGE_LOGGER = 'tencent_cloud_sdk'


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to the package logger if not provided)

    Returns:
        Configured logger instance
    """
    package = _package_logger()
    if not name or name == PACKAGE_LOGGER:
        return package
    return logging.getLogger(name)


def set_level(level: str):
    """Set the level for every logger in the package, e.g. ``"DEBUG"``."""
    _package_logger().setLevel(level.upper())
