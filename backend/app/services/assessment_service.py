"""
Assessment records of an activity (activities/{activity_id}/assessments):
listing, bulk submission upload, lookup and teacher edits.
"""

from typing import List, Optional

from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.core.result import Result, capture_errors
from app.schemas import Assessment
from app.services.store_gateway import StoreGateway
from app.utils import require_text

logger = get_logger()


class AssessmentService:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    @capture_errors
    def list_by_activity(self, activity_id: str) -> Result[List[Assessment]]:
        require_text(activity_id, "Activity ID")
        if not self.gateway.activity_exists(activity_id):
            return Result.not_found(f"Activity {activity_id} not found")
        return Result.ok(self.gateway.list_assessments(activity_id))

    @capture_errors
    def add_submissions(
        self, activity_id: str, assessments: Optional[List[Assessment]]
    ) -> Result[List[Assessment]]:
        """Upsert one assessment per student; each record's id is the student id."""
        require_text(activity_id, "Activity ID")
        if not assessments:
            raise ValidationError("Assessments list cannot be null or empty")
        for assessment in assessments:
            require_text(assessment.id, "Assessment ID")
        if not self.gateway.activity_exists(activity_id):
            return Result.not_found(f"Activity {activity_id} not found")

        for assessment in assessments:
            self.gateway.save_assessment(activity_id, assessment.id, assessment)
        logger.info("Stored %d submissions for activity %s", len(assessments), activity_id)
        return Result.ok(assessments)

    @capture_errors
    def get_for_student(self, activity_id: str, student_id: str) -> Result[Assessment]:
        require_text(activity_id, "Activity ID")
        require_text(student_id, "Student ID")
        assessment = self.gateway.get_assessment(activity_id, student_id)
        if assessment is None:
            return Result.not_found(
                f"Assessment for student {student_id} in activity {activity_id} not found"
            )
        return Result.ok(assessment)

    @capture_errors
    def update(
        self, activity_id: str, student_id: str, assessment: Optional[Assessment]
    ) -> Result[Assessment]:
        """Replace an existing assessment; the body id must equal the student id."""
        require_text(activity_id, "Activity ID")
        require_text(student_id, "Student ID")
        if assessment is None:
            raise ValidationError("Assessment cannot be null")
        if assessment.id != student_id:
            raise ValidationError("Assessment ID mismatch with the student ID provided in the path")
        if self.gateway.get_assessment(activity_id, student_id) is None:
            return Result.not_found(
                f"Assessment for student {student_id} in activity {activity_id} not found"
            )
        self.gateway.save_assessment(activity_id, student_id, assessment)
        logger.info("Assessment of student %s in activity %s updated", student_id, activity_id)
        return Result.ok(assessment)
