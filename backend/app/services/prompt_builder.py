"""
Builds the grading prompt for one student submission.

Output depends only on the inputs: the same course, activity and assessment
always render byte-identical text.
"""

from typing import Optional

from app.schemas import Activity, Assessment, Course
from app.services.ai_prompts import (
    ASSESSMENT_PROMPT,
    NOT_PROVIDED,
    REASSESSMENT_GUIDANCE,
    RESPONSE_SCHEMA,
    RESPONSE_SCHEMA_DIRECTIVE,
)


def _text(value: Optional[str]) -> str:
    return value if value is not None and value.strip() else NOT_PROVIDED


def build_assessment_prompt(
    course: Course,
    activity: Activity,
    assessment: Assessment,
    re_assessment_comment: Optional[str] = None,
) -> str:
    """
    Render the rubric-grounded instruction followed by the JSON schema directive.

    Args:
        course: Owning course (its subject is named in the prompt).
        activity: Activity with rubric and learning metadata.
        assessment: Current record; its submission is embedded verbatim.
        re_assessment_comment: Teacher guidance for a re-assessment, appended last.

    Returns:
        The full prompt text.
    """
    prompt = ASSESSMENT_PROMPT.format(
        subject=_text(course.subject),
        unit_theme=_text(activity.unit_theme),
        activity_name=_text(activity.name),
        learning_outcomes=_text(activity.expected_learning_outcomes),
        didactic_strategies=_text(activity.didactic_strategies),
        submission=_text(assessment.submission),
        rubric=_text(activity.assessment_rubric),
    )
    prompt += RESPONSE_SCHEMA_DIRECTIVE + RESPONSE_SCHEMA
    if re_assessment_comment:
        prompt += REASSESSMENT_GUIDANCE.format(comment=re_assessment_comment)
    return prompt
