"""
FastAPI dependencies wiring services to the request's database session and
the application-wide LLM provider.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import get_config
from app.core.database import get_db
from app.services import (
    ActivityService,
    AssessmentPipeline,
    AssessmentService,
    CourseService,
    DocumentStore,
    ModelInvoker,
    StoreGateway,
    StudentService,
    UserService,
)
from app.services.ai_providers import LLMProvider, get_llm_provider


def get_store_gateway(db: Session = Depends(get_db)) -> StoreGateway:
    return StoreGateway(DocumentStore(db))


def get_llm(request: Request) -> LLMProvider:
    """Provider created at startup (app.state.llm), or one built from config."""
    llm = getattr(request.app.state, "llm", None)
    if llm is None:
        llm = get_llm_provider()
    return llm


def get_model_invoker(llm: LLMProvider = Depends(get_llm)) -> ModelInvoker:
    return ModelInvoker(llm, get_config().ai)


def get_assessment_pipeline(
    gateway: StoreGateway = Depends(get_store_gateway),
    invoker: ModelInvoker = Depends(get_model_invoker),
) -> AssessmentPipeline:
    return AssessmentPipeline(gateway, invoker)


def get_assessment_service(gateway: StoreGateway = Depends(get_store_gateway)) -> AssessmentService:
    return AssessmentService(gateway)


def get_activity_service(gateway: StoreGateway = Depends(get_store_gateway)) -> ActivityService:
    return ActivityService(gateway)


def get_course_service(gateway: StoreGateway = Depends(get_store_gateway)) -> CourseService:
    return CourseService(gateway)


def get_student_service(gateway: StoreGateway = Depends(get_store_gateway)) -> StudentService:
    return StudentService(gateway)


def get_user_service(gateway: StoreGateway = Depends(get_store_gateway)) -> UserService:
    return UserService(gateway)
