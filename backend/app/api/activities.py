"""
API routes for activities (CRUD).
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_activity_service
from app.api.responses import list_or_no_content, unwrap
from app.schemas import Activity, GeneratedIdResponse
from app.services import ActivityService
from app.services.document_store import ACTIVITIES

router = APIRouter(prefix="/activity", tags=["Activities"])


@router.get("/generateId", response_model=GeneratedIdResponse)
def generate_id(service: ActivityService = Depends(get_activity_service)):
    """Generate a new activity ID."""
    return GeneratedIdResponse(id=unwrap(service.generate_id()), collection=ACTIVITIES)


@router.get("/list", response_model=List[Activity])
def list_activities(service: ActivityService = Depends(get_activity_service)):
    """List all activities."""
    return list_or_no_content(service.list())


@router.get("/teacher/{teacher_id}", response_model=List[Activity])
def list_by_teacher(teacher_id: str, service: ActivityService = Depends(get_activity_service)):
    return list_or_no_content(service.list_by_teacher(teacher_id))


@router.get("/teacher/{teacher_id}/last-updated", response_model=Activity)
def last_updated(teacher_id: str, service: ActivityService = Depends(get_activity_service)):
    """Most recently updated activity of a teacher."""
    return unwrap(service.last_updated(teacher_id))


@router.get("/course/{course_id}", response_model=List[Activity])
def list_by_course(course_id: str, service: ActivityService = Depends(get_activity_service)):
    return list_or_no_content(service.list_by_course(course_id))


@router.get("/{activity_id}", response_model=Activity)
def get_activity(activity_id: str, service: ActivityService = Depends(get_activity_service)):
    """Get an activity by ID."""
    return unwrap(service.get(activity_id))


@router.post("/add", response_model=Activity)
def add_activity(activity: Activity, service: ActivityService = Depends(get_activity_service)):
    """Create an activity; its id must be set and unused."""
    return unwrap(service.add(activity))


@router.put("/{activity_id}/update", response_model=Activity)
def edit_activity(
    activity_id: str,
    activity: Activity,
    service: ActivityService = Depends(get_activity_service),
):
    return unwrap(service.edit(activity_id, activity))


@router.delete("/{activity_id}/delete", response_model=Activity)
def delete_activity(activity_id: str, service: ActivityService = Depends(get_activity_service)):
    """Delete an activity and return it."""
    return unwrap(service.delete(activity_id))
