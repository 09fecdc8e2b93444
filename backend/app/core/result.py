"""
Tagged result type returned by service entry points.

Services never return a bare None to mean "not found" and never let a
ValidationError or UpstreamError escape to the API layer; callers switch on
Result.status instead.
"""

import functools
import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from app.core.exceptions import UpstreamError, ValidationError
from app.core.logging import get_logger

logger = get_logger()

T = TypeVar("T")


class ResultStatus(str, Enum):
    """Outcome of a service call."""

    OK = "ok"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class Result(Generic[T]):
    status: ResultStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(ResultStatus.OK, value=value)

    @classmethod
    def not_found(cls, reason: str) -> "Result[T]":
        return cls(ResultStatus.NOT_FOUND, reason=reason)

    @classmethod
    def invalid(cls, reason: str) -> "Result[T]":
        return cls(ResultStatus.VALIDATION_ERROR, reason=reason)

    @classmethod
    def upstream(cls, reason: str) -> "Result[T]":
        return cls(ResultStatus.UPSTREAM_ERROR, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def is_not_found(self) -> bool:
        return self.status is ResultStatus.NOT_FOUND


def capture_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Convert ValidationError / UpstreamError raised by a service method into
    Result.invalid / Result.upstream. Works for sync and async methods.
    """

    def _to_result(exc: Exception) -> Result:
        if isinstance(exc, ValidationError):
            logger.info("%s rejected input: %s", func.__qualname__, exc)
            return Result.invalid(str(exc))
        logger.error("%s failed upstream: %s", func.__qualname__, exc, exc_info=exc)
        return Result.upstream(str(exc))

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (ValidationError, UpstreamError) as e:
                return _to_result(e)

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ValidationError, UpstreamError) as e:
            return _to_result(e)

    return wrapper
