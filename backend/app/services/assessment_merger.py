"""
Decides which students need grading and writes grading results into the
right branch of an assessment.
"""

from enum import Enum
from typing import Optional

from app.schemas import AIAssessment, Assessment, ReAssessment
from app.services.response_parser import ParsedGrading
from app.utils import is_blank


class GradingBranch(str, Enum):
    """Where a grading result is written."""

    AI_ASSESSMENT = "aiAssessment"
    RE_ASSESSMENT = "reAssessment"


def needs_generation(assessment: Assessment) -> bool:
    """
    False when there is nothing to grade (no submission) or when the AI
    branch already holds a generation. Makes batch runs idempotent per student.
    """
    if is_blank(assessment.submission):
        return False
    ai = assessment.ai_assessment
    return ai is None or not ai.ai_generation


def merge_grading(
    assessment: Assessment,
    generation: str,
    grading: ParsedGrading,
    branch: GradingBranch,
    teacher_comment: Optional[str] = None,
) -> Assessment:
    """
    Write a generation into one branch of `assessment`, in place.

    The other branch is not touched. An existing generation rating on the
    target branch is kept. Returns the same assessment object.
    """
    if branch is GradingBranch.AI_ASSESSMENT:
        target = assessment.ai_assessment or AIAssessment()
        assessment.ai_assessment = target
    else:
        target = assessment.re_assessment or ReAssessment()
        target.teacher_comment = teacher_comment
        assessment.re_assessment = target

    target.ai_generation = generation
    target.global_grade = grading.global_grade
    target.components_grades = dict(grading.components_grades)
    return assessment
