"""
Tests for grading prompt construction.
"""

from app.schemas import Assessment
from app.services.ai_prompts import NOT_PROVIDED, RESPONSE_SCHEMA
from app.services.prompt_builder import build_assessment_prompt


def test_prompt_is_deterministic(sample_course, sample_activity):
    assessment = Assessment(id="S2", submission="code...")
    first = build_assessment_prompt(sample_course, sample_activity, assessment)
    second = build_assessment_prompt(sample_course, sample_activity, assessment.model_copy())
    assert first == second


def test_prompt_embeds_course_activity_and_submission(sample_course, sample_activity):
    prompt = build_assessment_prompt(sample_course, sample_activity, Assessment(id="S2", submission="code..."))
    for expected in [
        "Programming I",
        "Control flow",
        "Loops",
        "Use loops to iterate over collections",
        "Write a program that sums a list of numbers",
        "code...",
        "rubric: R.",
    ]:
        assert expected in prompt


def test_prompt_ends_with_schema_directive(sample_course, sample_activity):
    prompt = build_assessment_prompt(sample_course, sample_activity, Assessment(id="S2", submission="x"))
    assert prompt.endswith(RESPONSE_SCHEMA)
    assert '"componentsGrades"' in prompt
    assert '"globalGrade"' in prompt
    assert '"maxGrade"' in prompt


def test_re_assessment_comment_is_appended_last(sample_course, sample_activity):
    assessment = Assessment(id="S2", submission="x")
    base = build_assessment_prompt(sample_course, sample_activity, assessment)
    prompt = build_assessment_prompt(
        sample_course, sample_activity, assessment, re_assessment_comment="Please re-check logic component"
    )
    assert prompt.startswith(base)
    assert prompt.endswith("Please re-check logic component")


def test_blank_fields_render_placeholder(sample_course, sample_activity):
    activity = sample_activity.model_copy(update={"unit_theme": "  ", "didactic_strategies": None})
    prompt = build_assessment_prompt(sample_course, activity, Assessment(id="S2", submission="x"))
    assert prompt.count(NOT_PROVIDED) == 2


def test_braces_in_submission_are_kept_verbatim(sample_course, sample_activity):
    submission = "int main() { return {0}; }"
    prompt = build_assessment_prompt(sample_course, sample_activity, Assessment(id="S2", submission=submission))
    assert submission in prompt
