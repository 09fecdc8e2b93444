"""
Course management.
"""

from typing import List, Optional

from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.core.result import Result, capture_errors
from app.schemas import Course
from app.services.store_gateway import StoreGateway
from app.utils import require_text

logger = get_logger()


class CourseService:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    @capture_errors
    def list(self) -> Result[List[Course]]:
        return Result.ok(self.gateway.list_courses())

    @capture_errors
    def list_by_teacher(self, teacher_id: str) -> Result[List[Course]]:
        return Result.ok(self.gateway.find_courses("teacherId", teacher_id))

    @capture_errors
    def get(self, course_id: str) -> Result[Course]:
        require_text(course_id, "ID")
        course = self.gateway.get_course(course_id)
        if course is None:
            return Result.not_found(f"Course {course_id} not found")
        return Result.ok(course)

    @capture_errors
    def generate_id(self) -> Result[str]:
        return Result.ok(self.gateway.generate_id())

    @capture_errors
    def add(self, course: Optional[Course]) -> Result[Course]:
        if course is None or not course.id:
            raise ValidationError("Course or Course ID cannot be null")
        self.gateway.create_course(course)
        logger.info("Course %s created", course.id)
        return Result.ok(course)

    @capture_errors
    def edit(self, course_id: str, course: Optional[Course]) -> Result[Course]:
        if course is None or not course_id:
            raise ValidationError("Course or Course ID cannot be null")
        if course.id != course_id:
            raise ValidationError("Course ID mismatch with the ID provided in the path")
        if not self.gateway.course_exists(course_id):
            return Result.not_found(f"Course {course_id} not found")
        self.gateway.save_course(course)
        logger.info("Course %s updated", course_id)
        return Result.ok(course)

    @capture_errors
    def delete(self, course_id: str) -> Result[Course]:
        require_text(course_id, "ID")
        course = self.gateway.get_course(course_id)
        if course is None:
            return Result.not_found(f"Course {course_id} not found")
        self.gateway.delete_course(course_id)
        logger.info("Course %s deleted", course_id)
        return Result.ok(course)
