"""
API routes package initialization.
"""

from fastapi import APIRouter

from app.api.activities import router as activities_router
from app.api.assessments import router as assessments_router
from app.api.courses import router as courses_router
from app.api.students import router as students_router
from app.api.users import router as users_router

# Routes are served at the root: /ai-assessment, /activity, /course, /student, /user
api_router = APIRouter()

api_router.include_router(assessments_router)
api_router.include_router(activities_router)
api_router.include_router(courses_router)
api_router.include_router(students_router)
api_router.include_router(users_router)

__all__ = ["api_router"]
