"""
Maps service results onto HTTP responses.
"""

from typing import List, TypeVar, Union

from fastapi import HTTPException, Response

from app.core.result import Result, ResultStatus

T = TypeVar("T")

_ERROR_STATUS = {
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.VALIDATION_ERROR: 400,
    ResultStatus.UPSTREAM_ERROR: 500,
}


def unwrap(result: Result[T]) -> T:
    """Return the value of an ok result; raise HTTPException otherwise."""
    if result.is_ok:
        return result.value
    raise HTTPException(status_code=_ERROR_STATUS[result.status], detail=result.reason)


def list_or_no_content(result: Result[List[T]]) -> Union[List[T], Response]:
    """Ok with items -> the list (200); ok and empty -> 204."""
    items = unwrap(result)
    if not items:
        return Response(status_code=204)
    return items
