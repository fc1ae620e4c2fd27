"""
Logging Package
Structured logging for the bridge
"""
from twigbridge.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

ROOT_LOGGER_NAME = 'twigbridge'


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module-based names (containing '.') like 'twigbridge.view.finder' are
    returned as-is so they inherit the handlers LoggingServiceProvider puts
    on the package logger. Bare names and None fold into the package logger.

    Example:
        from twigbridge.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Resolved view", extra={'view': 'welcome'})
    """
    if name is None or '.' not in name:
        name = ROOT_LOGGER_NAME

    return logging.getLogger(name)
