"""
Typed access to activities, courses, students, assessments and users.

Wraps a DocumentStore and converts documents to records through the field
maps in app.schemas.mappings. Reads return None when a document is absent.
"""

from typing import List, Optional

from app.core.field_mapping import FieldMap
from app.schemas import Activity, Assessment, Course, Student, User
from app.schemas.mappings import (
    ACTIVITY_FIELDS,
    ASSESSMENT_FIELDS,
    COURSE_FIELDS,
    STUDENT_FIELDS,
    USER_FIELDS,
)
from app.services.document_store import (
    ACTIVITIES,
    COURSES,
    USERS,
    DocumentStore,
    StoredDocument,
    assessments_path,
    students_path,
)


def _decode(fields: FieldMap, doc: Optional[StoredDocument]):
    if doc is None:
        return None
    return fields.from_document(doc.data, doc_id=doc.doc_id)


class StoreGateway:
    """Record-level reads and writes over the hierarchical document store."""

    def __init__(self, documents: DocumentStore):
        self.documents = documents

    def generate_id(self) -> str:
        return self.documents.generate_id()

    # Activities

    def get_activity(self, activity_id: str) -> Optional[Activity]:
        return _decode(ACTIVITY_FIELDS, self.documents.get(ACTIVITIES, activity_id))

    def activity_exists(self, activity_id: str) -> bool:
        return self.documents.exists(ACTIVITIES, activity_id)

    def list_activities(self) -> List[Activity]:
        return [_decode(ACTIVITY_FIELDS, d) for d in self.documents.list(ACTIVITIES)]

    def find_activities(self, field_name: str, value: str) -> List[Activity]:
        docs = self.documents.where_equal(ACTIVITIES, field_name, value)
        return [_decode(ACTIVITY_FIELDS, d) for d in docs]

    def last_updated_activity(self, teacher_id: str) -> Optional[Activity]:
        docs = self.documents.query(
            ACTIVITIES,
            filters={"teacherId": teacher_id},
            order_by="lastUpdate",
            descending=True,
            limit=1,
        )
        return _decode(ACTIVITY_FIELDS, docs[0]) if docs else None

    def create_activity(self, activity: Activity) -> None:
        self.documents.create(ACTIVITIES, activity.id, ACTIVITY_FIELDS.to_document(activity))

    def save_activity(self, activity: Activity) -> None:
        self.documents.set(ACTIVITIES, activity.id, ACTIVITY_FIELDS.to_document(activity))

    def delete_activity(self, activity_id: str) -> bool:
        return self.documents.delete(ACTIVITIES, activity_id)

    # Courses

    def get_course(self, course_id: Optional[str]) -> Optional[Course]:
        if not course_id:
            return None
        return _decode(COURSE_FIELDS, self.documents.get(COURSES, course_id))

    def course_exists(self, course_id: str) -> bool:
        return self.documents.exists(COURSES, course_id)

    def list_courses(self) -> List[Course]:
        return [_decode(COURSE_FIELDS, d) for d in self.documents.list(COURSES)]

    def find_courses(self, field_name: str, value: str) -> List[Course]:
        docs = self.documents.where_equal(COURSES, field_name, value)
        return [_decode(COURSE_FIELDS, d) for d in docs]

    def create_course(self, course: Course) -> None:
        self.documents.create(COURSES, course.id, COURSE_FIELDS.to_document(course))

    def save_course(self, course: Course) -> None:
        self.documents.set(COURSES, course.id, COURSE_FIELDS.to_document(course))

    def delete_course(self, course_id: str) -> bool:
        return self.documents.delete(COURSES, course_id)

    # Students (courses/{course_id}/students)

    def list_students(self, course_id: str) -> List[Student]:
        """Roster ordered by student id."""
        return [_decode(STUDENT_FIELDS, d) for d in self.documents.list(students_path(course_id))]

    def get_student(self, course_id: str, student_id: str) -> Optional[Student]:
        return _decode(STUDENT_FIELDS, self.documents.get(students_path(course_id), student_id))

    def create_student(self, course_id: str, student: Student) -> None:
        self.documents.create(students_path(course_id), student.id, STUDENT_FIELDS.to_document(student))

    def save_student(self, course_id: str, student: Student) -> None:
        self.documents.set(students_path(course_id), student.id, STUDENT_FIELDS.to_document(student))

    def delete_student(self, course_id: str, student_id: str) -> bool:
        return self.documents.delete(students_path(course_id), student_id)

    # Assessments (activities/{activity_id}/assessments, id == student id)

    def list_assessments(self, activity_id: str) -> List[Assessment]:
        docs = self.documents.list(assessments_path(activity_id))
        return [_decode(ASSESSMENT_FIELDS, d) for d in docs]

    def get_assessment(self, activity_id: str, student_id: str) -> Optional[Assessment]:
        return _decode(ASSESSMENT_FIELDS, self.documents.get(assessments_path(activity_id), student_id))

    def save_assessment(self, activity_id: str, student_id: str, assessment: Assessment) -> None:
        self.documents.set(
            assessments_path(activity_id), student_id, ASSESSMENT_FIELDS.to_document(assessment)
        )

    # Users

    def list_users(self) -> List[User]:
        return [_decode(USER_FIELDS, d) for d in self.documents.list(USERS)]

    def get_user(self, user_id: str) -> Optional[User]:
        return _decode(USER_FIELDS, self.documents.get(USERS, user_id))

    def user_exists(self, user_id: str) -> bool:
        return self.documents.exists(USERS, user_id)

    def create_user(self, user: User) -> None:
        self.documents.create(USERS, user.id, USER_FIELDS.to_document(user))

    def save_user(self, user: User) -> None:
        self.documents.set(USERS, user.id, USER_FIELDS.to_document(user))

    def delete_user(self, user_id: str) -> bool:
        return self.documents.delete(USERS, user_id)
