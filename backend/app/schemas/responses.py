"""
Small response bodies that are not records themselves.
"""

from typing import List

from pydantic import BaseModel


class GeneratedIdResponse(BaseModel):
    """A freshly generated document id."""

    id: str
    collection: str


class StudentBatchResponse(BaseModel):
    """Ids of students that could not be added; empty when all succeeded."""

    failed: List[str]
