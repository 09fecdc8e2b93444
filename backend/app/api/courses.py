"""
API routes for courses (CRUD).
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_course_service
from app.api.responses import list_or_no_content, unwrap
from app.schemas import Course, GeneratedIdResponse
from app.services import CourseService
from app.services.document_store import COURSES

router = APIRouter(prefix="/course", tags=["Courses"])


@router.get("/generateId", response_model=GeneratedIdResponse)
def generate_id(service: CourseService = Depends(get_course_service)):
    """Generate a new course ID."""
    return GeneratedIdResponse(id=unwrap(service.generate_id()), collection=COURSES)


@router.get("/list", response_model=List[Course])
def list_courses(service: CourseService = Depends(get_course_service)):
    return list_or_no_content(service.list())


@router.get("/teacher/{teacher_id}", response_model=List[Course])
def list_by_teacher(teacher_id: str, service: CourseService = Depends(get_course_service)):
    """List the courses of a teacher."""
    return list_or_no_content(service.list_by_teacher(teacher_id))


@router.get("/{course_id}", response_model=Course)
def get_course(course_id: str, service: CourseService = Depends(get_course_service)):
    return unwrap(service.get(course_id))


@router.post("/add", response_model=Course)
def add_course(course: Course, service: CourseService = Depends(get_course_service)):
    return unwrap(service.add(course))


@router.put("/{course_id}/update", response_model=Course)
def edit_course(course_id: str, course: Course, service: CourseService = Depends(get_course_service)):
    return unwrap(service.edit(course_id, course))


@router.delete("/{course_id}/delete", response_model=Course)
def delete_course(course_id: str, service: CourseService = Depends(get_course_service)):
    return unwrap(service.delete(course_id))
