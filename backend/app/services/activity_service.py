"""
Activity management: list, query, create, edit and delete activities.
"""

from typing import List, Optional

from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.core.result import Result, capture_errors
from app.schemas import Activity
from app.services.store_gateway import StoreGateway
from app.utils import require_text

logger = get_logger()


class ActivityService:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    @capture_errors
    def list(self) -> Result[List[Activity]]:
        return Result.ok(self.gateway.list_activities())

    @capture_errors
    def list_by_teacher(self, teacher_id: str) -> Result[List[Activity]]:
        return Result.ok(self.gateway.find_activities("teacherId", teacher_id))

    @capture_errors
    def list_by_course(self, course_id: str) -> Result[List[Activity]]:
        return Result.ok(self.gateway.find_activities("courseId", course_id))

    @capture_errors
    def get(self, activity_id: str) -> Result[Activity]:
        require_text(activity_id, "ID")
        activity = self.gateway.get_activity(activity_id)
        if activity is None:
            return Result.not_found(f"Activity {activity_id} not found")
        return Result.ok(activity)

    @capture_errors
    def last_updated(self, teacher_id: str) -> Result[Activity]:
        """Most recently updated activity of a teacher (by lastUpdate)."""
        require_text(teacher_id, "Teacher ID")
        activity = self.gateway.last_updated_activity(teacher_id)
        if activity is None:
            return Result.not_found(f"No activity found for teacher {teacher_id}")
        return Result.ok(activity)

    @capture_errors
    def generate_id(self) -> Result[str]:
        return Result.ok(self.gateway.generate_id())

    @capture_errors
    def add(self, activity: Optional[Activity]) -> Result[Activity]:
        if activity is None or not activity.id:
            raise ValidationError("Activity or Activity ID cannot be null")
        self.gateway.create_activity(activity)
        logger.info("Activity %s created", activity.id)
        return Result.ok(activity)

    @capture_errors
    def edit(self, activity_id: str, activity: Optional[Activity]) -> Result[Activity]:
        if activity is None or not activity_id:
            raise ValidationError("Activity or Activity ID cannot be null")
        if activity.id != activity_id:
            raise ValidationError("Activity ID mismatch with the ID provided in the path")
        if not self.gateway.activity_exists(activity_id):
            return Result.not_found(f"Activity {activity_id} not found")
        self.gateway.save_activity(activity)
        logger.info("Activity %s updated", activity_id)
        return Result.ok(activity)

    @capture_errors
    def delete(self, activity_id: str) -> Result[Activity]:
        """Delete an activity and return the record as it was."""
        require_text(activity_id, "ID")
        activity = self.gateway.get_activity(activity_id)
        if activity is None:
            return Result.not_found(f"Activity {activity_id} not found")
        self.gateway.delete_activity(activity_id)
        logger.info("Activity %s deleted", activity_id)
        return Result.ok(activity)
