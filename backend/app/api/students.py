"""
API routes for the students of a course.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_student_service
from app.api.responses import list_or_no_content, unwrap
from app.schemas import Student, StudentBatchResponse
from app.services import StudentService

router = APIRouter(prefix="/student", tags=["Students"])


@router.get("/course/{course_id}/list", response_model=List[Student])
def list_students(course_id: str, service: StudentService = Depends(get_student_service)):
    """List the students of a course; 204 when the course has none."""
    return list_or_no_content(service.list_by_course(course_id))


@router.post("/course/{course_id}/add-students", response_model=StudentBatchResponse)
def add_students(
    course_id: str,
    students: List[Student],
    service: StudentService = Depends(get_student_service),
):
    """Add many students; reports the ids that could not be added."""
    return StudentBatchResponse(failed=unwrap(service.add_students(course_id, students)))


@router.post("/course/{course_id}/add", response_model=Student)
def add_student(course_id: str, student: Student, service: StudentService = Depends(get_student_service)):
    return unwrap(service.add(course_id, student))


@router.put("/course/{course_id}/update", response_model=Student)
def edit_student(course_id: str, student: Student, service: StudentService = Depends(get_student_service)):
    return unwrap(service.edit(course_id, student))


@router.delete("/{student_id}/course/{course_id}/delete", response_model=Student)
def delete_student(
    student_id: str,
    course_id: str,
    service: StudentService = Depends(get_student_service),
):
    return unwrap(service.delete(course_id, student_id))
