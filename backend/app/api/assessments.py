"""
API routes for AI assessment: batch generation, re-assessment and
assessment records of an activity.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import get_assessment_pipeline, get_assessment_service
from app.api.responses import list_or_no_content, unwrap
from app.schemas import Assessment
from app.services import AssessmentPipeline, AssessmentService

router = APIRouter(prefix="/ai-assessment", tags=["AI Assessment"])


@router.get("/activity/{activity_id}/assess", response_model=List[Assessment])
async def generate_assessment_for_activity(
    activity_id: str,
    pipeline: AssessmentPipeline = Depends(get_assessment_pipeline),
):
    """Grade every pending submission of an activity; 204 when nothing was graded."""
    result = await pipeline.generate_assessment_for_activity(activity_id)
    return list_or_no_content(result)


@router.get("/activity/{activity_id}/list", response_model=List[Assessment])
def list_assessments(
    activity_id: str,
    service: AssessmentService = Depends(get_assessment_service),
):
    """List the assessments of an activity."""
    return list_or_no_content(service.list_by_activity(activity_id))


@router.post("/activity/{activity_id}/add-submissions", response_model=List[Assessment])
def add_submissions(
    activity_id: str,
    assessments: List[Assessment],
    service: AssessmentService = Depends(get_assessment_service),
):
    """Store student submissions (one assessment per student id)."""
    return list_or_no_content(service.add_submissions(activity_id, assessments))


@router.post(
    "/activity/{activity_id}/student/{student_id}/re-assessment",
    response_model=Assessment,
)
async def student_re_assessment(
    activity_id: str,
    student_id: str,
    request: Request,
    pipeline: AssessmentPipeline = Depends(get_assessment_pipeline),
):
    """Re-grade one student; the request body is the teacher's comment as plain text."""
    try:
        comment = (await request.body()).decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Comment must be UTF-8 text")
    result = await pipeline.student_re_assessment(activity_id, student_id, comment)
    return unwrap(result)


@router.get("/activity/{activity_id}/student/{student_id}", response_model=Assessment)
def get_assessment(
    activity_id: str,
    student_id: str,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Get one student's assessment."""
    return unwrap(service.get_for_student(activity_id, student_id))


@router.put("/activity/{activity_id}/student/{student_id}/update", response_model=Assessment)
def update_assessment(
    activity_id: str,
    student_id: str,
    assessment: Assessment,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Replace a student's assessment (feedback, status, ratings...)."""
    return unwrap(service.update(activity_id, student_id, assessment))
