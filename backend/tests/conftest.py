"""
Test configuration and fixtures
"""

import os
import sys
from datetime import datetime, timezone
from typing import List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.core.config import AIConfig
from app.core.database import drop_db, init_db
from app.schemas import Activity, Assessment, Course, Student
from app.services.document_store import DocumentStore
from app.services.model_invoker import ModelInvoker
from app.services.store_gateway import StoreGateway


class FakeLLM:
    """LLM provider double that records every call and replays canned responses."""

    def __init__(self, responses: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    async def complete(self, prompt, system_prompt=None, **kwargs):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, **kwargs})
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0] if self.responses else ""


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def document_store(db_session):
    return DocumentStore(db_session)


@pytest.fixture
def gateway(document_store):
    return StoreGateway(document_store)


@pytest.fixture
def ai_config():
    return AIConfig(provider="openai", model="gpt-4o", api_key="test_key")


@pytest.fixture
def graded_response():
    """Model output wrapped in "properties" envelopes, as the model tends to return it."""
    return (
        '{"properties":{"globalGrade":8.5,"componentsGrades":'
        '{"logic":{"properties":{"content":"ok","grade":8,"maxGrade":10}}}}}'
    )


@pytest.fixture
def fake_llm(graded_response):
    return FakeLLM([graded_response])


@pytest.fixture
def invoker(fake_llm, ai_config):
    return ModelInvoker(fake_llm, ai_config)


@pytest.fixture
def sample_course():
    return Course(
        id="C1",
        faculty="Engineering",
        department="Computer Science",
        subject="Programming I",
        teacher_id="T1",
        academic_period="2024-1",
        academic_level=1,
        created_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_activity():
    return Activity(
        id="A1",
        name="Loops",
        teacher_id="T1",
        course_id="C1",
        type_activity="assignment",
        unit_theme="Control flow",
        expected_learning_outcomes="Use loops to iterate over collections",
        didactic_strategies="Write a program that sums a list of numbers",
        assessment_rubric="R",
        last_update=datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def seeded_gateway(gateway, sample_course, sample_activity):
    """Activity A1 (rubric "R") in course C1 with students S1 and S2."""
    gateway.create_course(sample_course)
    gateway.create_activity(sample_activity)
    gateway.create_student("C1", Student(id="S1", name="Ana", email="ana@example.com"))
    gateway.create_student("C1", Student(id="S2", name="Luis", email="luis@example.com"))
    return gateway


@pytest.fixture
def with_submission(seeded_gateway):
    """S2 has submitted code for A1; S1 has nothing on file."""
    seeded_gateway.save_assessment("A1", "S2", Assessment(id="S2", submission="code...", file_type="java"))
    return seeded_gateway
