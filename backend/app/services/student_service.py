"""
Student management within a course's roster (courses/{course_id}/students).
"""

from typing import List, Optional

from app.core.exceptions import DocumentExistsError, UpstreamError, ValidationError
from app.core.logging import get_logger
from app.core.result import Result, capture_errors
from app.schemas import Student
from app.services.store_gateway import StoreGateway
from app.utils import require_text

logger = get_logger()


class StudentService:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    def _course_missing(self, course_id: str) -> Optional[Result]:
        require_text(course_id, "Course ID")
        if not self.gateway.course_exists(course_id):
            return Result.not_found(f"Course {course_id} not found")
        return None

    @capture_errors
    def list_by_course(self, course_id: str) -> Result[List[Student]]:
        """Roster of a course; not-found only when the course itself is absent."""
        missing = self._course_missing(course_id)
        if missing:
            return missing
        return Result.ok(self.gateway.list_students(course_id))

    @capture_errors
    def add(self, course_id: str, student: Optional[Student]) -> Result[Student]:
        if student is None or not student.id:
            raise ValidationError("Student or Student ID cannot be null")
        missing = self._course_missing(course_id)
        if missing:
            return missing
        self.gateway.create_student(course_id, student)
        logger.info("Student %s added to course %s", student.id, course_id)
        return Result.ok(student)

    @capture_errors
    def add_students(self, course_id: str, students: Optional[List[Student]]) -> Result[List[str]]:
        """
        Create each student independently.

        Returns:
            Result.ok(ids that could not be created). An empty list means every
            student was added.
        """
        missing = self._course_missing(course_id)
        if missing:
            return missing
        if not students:
            raise ValidationError("Students list cannot be null or empty")

        failed: List[str] = []
        for student in students:
            if not student.id:
                failed.append("")
                continue
            try:
                self.gateway.create_student(course_id, student)
            except (DocumentExistsError, UpstreamError) as e:
                logger.warning("Could not add student %s to course %s: %s", student.id, course_id, e)
                failed.append(student.id)
        logger.info(
            "Added %d of %d students to course %s",
            len(students) - len(failed),
            len(students),
            course_id,
        )
        return Result.ok(failed)

    @capture_errors
    def edit(self, course_id: str, student: Optional[Student]) -> Result[Student]:
        if student is None or not student.id:
            raise ValidationError("Student or Student ID cannot be null")
        missing = self._course_missing(course_id)
        if missing:
            return missing
        if self.gateway.get_student(course_id, student.id) is None:
            return Result.not_found(f"Student {student.id} does not exist in course {course_id}")
        self.gateway.save_student(course_id, student)
        return Result.ok(student)

    @capture_errors
    def delete(self, course_id: str, student_id: str) -> Result[Student]:
        require_text(student_id, "Student ID")
        missing = self._course_missing(course_id)
        if missing:
            return missing
        student = self.gateway.get_student(course_id, student_id)
        if student is None:
            return Result.not_found(f"Student {student_id} does not exist in course {course_id}")
        self.gateway.delete_student(course_id, student_id)
        logger.info("Student %s removed from course %s", student_id, course_id)
        return Result.ok(student)
