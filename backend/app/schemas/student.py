"""
Pydantic schema for students enrolled in a course.
"""

from typing import Optional

from app.schemas.base import CamelModel


class Student(CamelModel):
    """A student under courses/{course_id}/students."""

    id: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    name: Optional[str] = None
