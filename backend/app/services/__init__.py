"""
Services package initialization.
"""

from app.services.activity_service import ActivityService
from app.services.assessment_pipeline import AssessmentPipeline
from app.services.assessment_service import AssessmentService
from app.services.course_service import CourseService
from app.services.document_store import DocumentStore
from app.services.model_invoker import ModelInvoker
from app.services.roster import Roster, RosterResolver
from app.services.store_gateway import StoreGateway
from app.services.student_service import StudentService
from app.services.user_service import UserService

__all__ = [
    "ActivityService",
    "AssessmentPipeline",
    "AssessmentService",
    "CourseService",
    "DocumentStore",
    "ModelInvoker",
    "Roster",
    "RosterResolver",
    "StoreGateway",
    "StudentService",
    "UserService",
]
