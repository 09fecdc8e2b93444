"""
Pydantic schemas for per-student assessments and their grading branches.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from app.schemas.base import CamelModel


class AssessmentStatus(str, Enum):
    """Descriptive status tag; the grading pipeline never changes it."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    MISSING = "missing"


class GenerationRating(str, Enum):
    """Teacher's rating of a model generation."""

    GOOD = "good"
    BAD = "bad"


class ComponentGrade(CamelModel):
    """Feedback and grade for one rubric component."""

    content: Optional[str] = None
    grade: Optional[float] = None
    max_grade: Optional[float] = None


class AIAssessment(CamelModel):
    """First-pass automated grading."""

    ai_generation: Optional[str] = Field(None, description="Raw model output")
    generation_rating: Optional[GenerationRating] = None
    global_grade: Optional[float] = None
    components_grades: Dict[str, ComponentGrade] = Field(
        default_factory=dict, description="Rubric component name -> grade"
    )


class ReAssessment(AIAssessment):
    """Teacher-triggered re-grading; carries the comment that prompted it."""

    teacher_comment: Optional[str] = None


class Assessment(CamelModel):
    """
    Grading record of one student for one activity.

    Stored under activities/{activity_id}/assessments with id == student id.
    """

    id: Optional[str] = Field(None, description="Equal to the student's ID")
    submission: Optional[str] = None
    file_type: Optional[str] = Field(None, description="Submission file type, e.g. 'java'")
    status: Optional[AssessmentStatus] = None
    feedback: Optional[str] = Field(None, description="Teacher feedback")
    ai_assessment: Optional[AIAssessment] = None
    re_assessment: Optional[ReAssessment] = None
