"""
Document field maps for every stored entity.

Document field names are the camelCase names used by the stored documents;
attributes are the snake_case names on the pydantic records.
"""

from app.core.field_mapping import FieldKind, FieldMap, FieldSpec as F
from app.schemas.activity import Activity
from app.schemas.assessment import AIAssessment, Assessment, ComponentGrade, ReAssessment
from app.schemas.course import Course
from app.schemas.student import Student
from app.schemas.user import User

ACTIVITY_FIELDS = FieldMap(
    Activity,
    [
        F("id", "id"),
        F("name", "name"),
        F("createdAt", "created_at", FieldKind.DATETIME),
        F("teacherId", "teacher_id"),
        F("courseId", "course_id"),
        F("typeActivity", "type_activity"),
        F("learningComponent", "learning_component"),
        F("academicLevel", "academic_level"),
        F("unitTheme", "unit_theme"),
        F("expectedLearningOutcomes", "expected_learning_outcomes"),
        F("didacticStrategies", "didactic_strategies"),
        F("assessmentRubric", "assessment_rubric"),
        F("solution", "solution"),
        F("lastUpdate", "last_update", FieldKind.DATETIME),
    ],
)

COURSE_FIELDS = FieldMap(
    Course,
    [
        F("id", "id"),
        F("faculty", "faculty"),
        F("department", "department"),
        F("degree", "degree"),
        F("subject", "subject"),
        F("subjectCode", "subject_code"),
        F("modality", "modality"),
        F("teacherId", "teacher_id"),
        F("academicPeriod", "academic_period"),
        F("academicLevel", "academic_level"),
        F("createdAt", "created_at", FieldKind.DATETIME),
    ],
)

STUDENT_FIELDS = FieldMap(
    Student,
    [
        F("id", "id"),
        F("email", "email"),
        F("username", "username"),
        F("name", "name"),
    ],
)

USER_FIELDS = FieldMap(
    User,
    [
        F("id", "id"),
        F("mail", "mail"),
        F("givenName", "given_name"),
        F("familyName", "family_name"),
        F("displayName", "display_name"),
        F("photoURL", "photo_url"),
    ],
)

COMPONENT_GRADE_FIELDS = FieldMap(
    ComponentGrade,
    [
        F("content", "content"),
        F("grade", "grade"),
        F("maxGrade", "max_grade"),
    ],
)

AI_ASSESSMENT_FIELDS = FieldMap(
    AIAssessment,
    [
        F("aiGeneration", "ai_generation"),
        F("generationRating", "generation_rating"),
        F("globalGrade", "global_grade"),
        F("componentsGrades", "components_grades", FieldKind.MAPPING,
          default_factory=dict, nested=COMPONENT_GRADE_FIELDS),
    ],
)

RE_ASSESSMENT_FIELDS = FieldMap(
    ReAssessment,
    [
        F("aiGeneration", "ai_generation"),
        F("generationRating", "generation_rating"),
        F("teacherComment", "teacher_comment"),
        F("globalGrade", "global_grade"),
        F("componentsGrades", "components_grades", FieldKind.MAPPING,
          default_factory=dict, nested=COMPONENT_GRADE_FIELDS),
    ],
)

ASSESSMENT_FIELDS = FieldMap(
    Assessment,
    [
        F("id", "id"),
        F("submission", "submission"),
        F("fileType", "file_type"),
        F("status", "status"),
        F("feedback", "feedback"),
        F("aiAssessment", "ai_assessment", FieldKind.OBJECT, nested=AI_ASSESSMENT_FIELDS),
        F("reAssessment", "re_assessment", FieldKind.OBJECT, nested=RE_ASSESSMENT_FIELDS),
    ],
)
