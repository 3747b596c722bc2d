"""
Logging Package
Structured logging for the view layer

Library modules only emit records through getLogger(); handlers are
attached by LoggerConfig.setup_logger() (the console does this).
"""
from laraview.logging.logger_config import LoggerConfig, JSONFormatter
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

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

ROOT_LOGGER_NAME = 'laraview'


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Names outside the 'laraview' namespace are nested under it so that
    a single LoggerConfig.setup_logger() call configures every record
    the package emits.

    Example:
        from laraview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Compiled view")
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
