"""
Core module initialization.
"""

from app.core.config import get_config, load_config
from app.core.database import get_db, init_db, drop_db, Base
from app.core.exceptions import DocumentExistsError, UpstreamError, ValidationError
from app.core.logging import get_logger, setup_logging
from app.core.result import Result, ResultStatus, capture_errors

__all__ = [
    "get_config",
    "load_config",
    "get_db",
    "init_db",
    "drop_db",
    "Base",
    "DocumentExistsError",
    "UpstreamError",
    "ValidationError",
    "get_logger",
    "setup_logging",
    "Result",
    "ResultStatus",
    "capture_errors",
]
