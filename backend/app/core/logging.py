"""
Logging configuration for the application.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from app.core.config import get_config, get_log_path

APP_LOGGER_NAME = "assessment_app"

_logger: Optional[logging.Logger] = None


def setup_logging() -> logging.Logger:
    """
    Configure the application logger once: rotating file handler plus stdout.

    Repeated calls return the already configured logger.
    """
    global _logger

    if _logger is not None:
        return _logger

    log_config = get_config().logging
    level = getattr(logging, log_config.level.upper(), logging.INFO)
    formatter = logging.Formatter(log_config.format)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    file_handler = RotatingFileHandler(
        get_log_path(),
        maxBytes=log_config.max_size * 1024 * 1024,
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )
    console_handler = logging.StreamHandler(sys.stdout)
    for handler in (file_handler, console_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _logger = logger
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the application logger, or a named child of it.

    Child loggers ("assessment_app.pipeline") share the parent's handlers.
    """
    logger = _logger if _logger is not None else setup_logging()
    if name:
        return logger.getChild(name)
    return logger
