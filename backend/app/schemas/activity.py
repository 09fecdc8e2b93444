"""
Pydantic schema for activities (gradable assignments).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class Activity(CamelModel):
    """
    A gradable assignment owned by a teacher and a course.

    assessment_rubric must be non-blank before any grading run.
    """

    id: Optional[str] = Field(None, description="Activity ID")
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    teacher_id: Optional[str] = None
    course_id: Optional[str] = None
    type_activity: Optional[str] = Field(None, description="Activity type, e.g. 'project'")
    learning_component: Optional[str] = None
    academic_level: Optional[str] = None
    unit_theme: Optional[str] = None
    expected_learning_outcomes: Optional[str] = None
    didactic_strategies: Optional[str] = Field(None, description="Assignment statement given to students")
    assessment_rubric: Optional[str] = Field(None, description="Teacher-authored rubric text")
    solution: Optional[str] = None
    last_update: Optional[datetime] = None
