"""
Schemas package initialization.
"""

from app.schemas.activity import Activity
from app.schemas.assessment import (
    AIAssessment,
    Assessment,
    AssessmentStatus,
    ComponentGrade,
    GenerationRating,
    ReAssessment,
)
from app.schemas.course import Course
from app.schemas.responses import GeneratedIdResponse, StudentBatchResponse
from app.schemas.student import Student
from app.schemas.user import User

__all__ = [
    "Activity",
    "AIAssessment",
    "Assessment",
    "AssessmentStatus",
    "ComponentGrade",
    "GenerationRating",
    "ReAssessment",
    "Course",
    "GeneratedIdResponse",
    "StudentBatchResponse",
    "Student",
    "User",
]
