"""
Backend API Tests
"""

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_model_invoker
from app.core.database import get_db
from app.services.model_invoker import ModelInvoker
from main import app

from conftest import FakeLLM


@pytest.fixture
def llm(graded_response):
    return FakeLLM([graded_response])


@pytest.fixture
def client(db_session, llm, ai_config):
    """Test client bound to the in-memory store and a fake model."""

    # Override database dependency
    def get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = get_db_override
    app.dependency_overrides[get_model_invoker] = lambda: ModelInvoker(llm, ai_config)

    yield TestClient(app)

    app.dependency_overrides.clear()


class TestHealthEndpoint:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["status"] == "running"


class TestAssessmentEndpoints:
    def test_assess_returns_processed_assessments(self, client, with_submission, llm):
        response = client.get("/ai-assessment/activity/A1/assess")
        assert response.status_code == 200
        data = response.json()
        assert [a["id"] for a in data] == ["S2"]
        assert data[0]["aiAssessment"]["globalGrade"] == 8.5
        assert data[0]["aiAssessment"]["componentsGrades"]["logic"]["maxGrade"] == 10
        assert len(llm.calls) == 1

    def test_assess_nothing_to_grade_is_204(self, client, seeded_gateway):
        response = client.get("/ai-assessment/activity/A1/assess")
        assert response.status_code == 204

    def test_assess_unknown_activity_is_404(self, client):
        response = client.get("/ai-assessment/activity/A404/assess")
        assert response.status_code == 404
        assert "A404" in response.json()["detail"]

    def test_assess_missing_rubric_is_400(self, client, with_submission, sample_activity, llm):
        with_submission.save_activity(sample_activity.model_copy(update={"assessment_rubric": None}))
        response = client.get("/ai-assessment/activity/A1/assess")
        assert response.status_code == 400
        assert llm.calls == []

    def test_assess_model_failure_is_500_with_short_reason(self, client, with_submission, llm):
        llm.error = RuntimeError("invalid api key sk-secret")
        response = client.get("/ai-assessment/activity/A1/assess")
        assert response.status_code == 500
        assert response.json()["detail"] == "Model call failed: RuntimeError"

    def test_add_submissions_then_list(self, client, seeded_gateway):
        body = [
            {"id": "S1", "submission": "print('hi')", "fileType": "py", "status": "pending"},
            {"id": "S2", "submission": "print('bye')", "fileType": "py", "status": "pending"},
        ]
        response = client.post("/ai-assessment/activity/A1/add-submissions", json=body)
        assert response.status_code == 200

        listed = client.get("/ai-assessment/activity/A1/list")
        assert listed.status_code == 200
        assert [a["fileType"] for a in listed.json()] == ["py", "py"]

    def test_list_empty_is_204(self, client, seeded_gateway):
        assert client.get("/ai-assessment/activity/A1/list").status_code == 204

    def test_re_assessment_with_plain_text_body(self, client, with_submission, llm):
        response = client.post(
            "/ai-assessment/activity/A1/student/S2/re-assessment",
            content="Please re-check logic component",
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["reAssessment"]["teacherComment"] == "Please re-check logic component"
        assert data["reAssessment"]["globalGrade"] == 8.5
        assert data["aiAssessment"] is None

    def test_re_assessment_with_non_utf8_body_is_400(self, client, with_submission, llm):
        response = client.post(
            "/ai-assessment/activity/A1/student/S2/re-assessment",
            content=b"\xff\xfe bad",
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Comment must be UTF-8 text"
        assert llm.calls == []
        assert with_submission.get_assessment("A1", "S2").re_assessment is None

    def test_re_assessment_without_assessment_is_404(self, client, seeded_gateway, llm):
        response = client.post(
            "/ai-assessment/activity/A1/student/S2/re-assessment",
            content="Please re-check logic component",
        )
        assert response.status_code == 404
        assert llm.calls == []

    def test_get_and_update_student_assessment(self, client, with_submission):
        assert client.get("/ai-assessment/activity/A1/student/S2").json()["submission"] == "code..."
        assert client.get("/ai-assessment/activity/A1/student/S1").status_code == 404

        response = client.put(
            "/ai-assessment/activity/A1/student/S2/update",
            json={"id": "S2", "submission": "code...", "feedback": "Well done", "status": "reviewed"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "reviewed"

        mismatch = client.put("/ai-assessment/activity/A1/student/S2/update", json={"id": "S1"})
        assert mismatch.status_code == 400


class TestActivityEndpoints:
    def test_generate_id(self, client):
        data = client.get("/activity/generateId").json()
        assert data["collection"] == "activities"
        assert len(data["id"]) == 20

    def test_add_get_update_delete(self, client, sample_activity):
        body = sample_activity.model_dump(mode="json", by_alias=True)
        assert client.post("/activity/add", json=body).status_code == 200
        assert client.post("/activity/add", json=body).status_code == 400
        assert client.get("/activity/A1").json()["assessmentRubric"] == "R"
        assert client.get("/activity/teacher/T1/last-updated").json()["id"] == "A1"
        assert [a["id"] for a in client.get("/activity/course/C1").json()] == ["A1"]

        body["assessmentRubric"] = "Logic 0-10"
        assert client.put("/activity/A1/update", json=body).json()["assessmentRubric"] == "Logic 0-10"
        assert client.put("/activity/A2/update", json=body).status_code == 400

        assert client.delete("/activity/A1/delete").status_code == 200
        assert client.get("/activity/A1").status_code == 404

    def test_list_empty_is_204(self, client):
        assert client.get("/activity/list").status_code == 204
        assert client.get("/activity/teacher/T1").status_code == 204


class TestCourseAndStudentEndpoints:
    def test_course_crud(self, client, sample_course):
        body = sample_course.model_dump(mode="json", by_alias=True)
        assert client.post("/course/add", json=body).status_code == 200
        assert client.get("/course/C1").json()["subject"] == "Programming I"
        assert [c["id"] for c in client.get("/course/list").json()] == ["C1"]
        assert client.get("/course/generateId").json()["collection"] == "courses"
        assert client.delete("/course/C1/delete").status_code == 200
        assert client.get("/course/C1").status_code == 404

    def test_student_roster(self, client, seeded_gateway):
        response = client.post(
            "/student/course/C1/add-students",
            json=[{"id": "S2", "name": "dup"}, {"id": "S3", "name": "Eva"}],
        )
        assert response.status_code == 200
        assert response.json() == {"failed": ["S2"]}

        assert [s["id"] for s in client.get("/student/course/C1/list").json()] == ["S1", "S2", "S3"]
        assert client.post("/student/course/C1/add", json={"id": "S4"}).status_code == 200
        assert client.put("/student/course/C1/update", json={"id": "S4", "name": "Rita"}).json()["name"] == "Rita"
        assert client.delete("/student/S4/course/C1/delete").status_code == 200
        assert client.delete("/student/S4/course/C1/delete").status_code == 404

    def test_students_of_unknown_course_is_404(self, client):
        assert client.get("/student/course/C404/list").status_code == 404


class TestUserEndpoints:
    def test_user_crud(self, client):
        assert client.get("/user/list").status_code == 204

        body = {"id": "U1", "mail": "ana@utpl.edu.ec", "givenName": "Ana", "photoURL": "https://example.com/a.jpg"}
        created = client.post("/user/add", json=body)
        assert created.status_code == 201
        assert created.json()["photoURL"] == "https://example.com/a.jpg"
        assert client.post("/user/add", json=body).status_code == 400

        assert client.get("/user/U1").json()["givenName"] == "Ana"
        assert [u["id"] for u in client.get("/user/list").json()] == ["U1"]

        body["displayName"] = "Ana Paz"
        assert client.put("/user/U1/update", json=body).json()["displayName"] == "Ana Paz"
        assert client.put("/user/U2/update", json=body).status_code == 400

        assert client.delete("/user/U1/delete").status_code == 200
        missing = client.get("/user/U1")
        assert missing.status_code == 404
        assert missing.json()["detail"] == "User not found for ID: U1"
        assert client.delete("/user/U1/delete").status_code == 404
