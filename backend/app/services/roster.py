"""
Roster resolution: everything a grading run needs to know about one activity.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.core.result import Result, capture_errors
from app.schemas import Activity, Assessment, Course, Student
from app.services.store_gateway import StoreGateway
from app.utils import is_blank, require_text

logger = get_logger()


@dataclass
class Roster:
    """Snapshot of an activity, its course, the students and their assessments."""

    activity: Activity
    course: Course
    students: List[Student] = field(default_factory=list)
    assessments: Dict[str, Assessment] = field(default_factory=dict)

    def assessment_for(self, student_id: str) -> Assessment:
        """Existing assessment for the student, or an empty one keyed by their id."""
        existing = self.assessments.get(student_id)
        if existing is not None:
            return existing
        return Assessment(id=student_id)


class RosterResolver:
    """Loads a consistent working set for an activity. Read-only."""

    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    @capture_errors
    def resolve(self, activity_id: str) -> Result[Roster]:
        """
        Resolve the roster of an activity.

        Returns:
            Result.ok(Roster); Result.not_found if the activity or its course
            is missing; Result.invalid for a blank id or a blank rubric.
        """
        require_text(activity_id, "Activity ID")

        activity = self.gateway.get_activity(activity_id)
        if activity is None:
            return Result.not_found(f"Activity {activity_id} not found")
        if is_blank(activity.assessment_rubric):
            raise ValidationError(f"Assessment rubric is required for activity ID: {activity_id}")

        course = self.gateway.get_course(activity.course_id)
        if course is None:
            return Result.not_found(f"Course {activity.course_id} of activity {activity_id} not found")

        students = self.gateway.list_students(activity.course_id)
        assessments = {a.id: a for a in self.gateway.list_assessments(activity_id)}
        logger.debug(
            "Resolved roster for activity %s: %d students, %d existing assessments",
            activity_id,
            len(students),
            len(assessments),
        )
        return Result.ok(Roster(activity, course, students, assessments))
