"""
Pydantic schema for courses.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class Course(CamelModel):
    """Course metadata; `subject` is what the grading prompt names."""

    id: Optional[str] = None
    faculty: Optional[str] = None
    department: Optional[str] = None
    degree: Optional[str] = None
    subject: Optional[str] = Field(None, description="Subject name, e.g. 'Fundamentals of Programming'")
    subject_code: Optional[str] = None
    modality: Optional[str] = None
    teacher_id: Optional[str] = None
    academic_period: Optional[str] = Field(None, description="e.g. 'Oct24-Feb25'")
    academic_level: Optional[int] = None
    created_at: Optional[datetime] = None
