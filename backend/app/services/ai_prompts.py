"""
Prompt templates for rubric-based assessment (constants only, no logic).

1. ASSESSMENT_PROMPT: grade one student submission against the activity rubric.
2. RESPONSE_SCHEMA_DIRECTIVE + RESPONSE_SCHEMA: the JSON shape the model must return.
   The schema is appended verbatim (never passed through str.format), so its
   braces need no escaping.
3. REASSESSMENT_GUIDANCE: appended for teacher-requested re-assessments.
"""

# Placeholders: {subject}, {unit_theme}, {activity_name}, {learning_outcomes},
# {didactic_strategies}, {submission}, {rubric}
ASSESSMENT_PROMPT = (
    "You are the teacher of the subject: {subject}, acting as the reviewer of assignments. "
    "Within the unit theme: {unit_theme}, the activity: {activity_name} is set, aiming at the "
    "following learning outcomes: {learning_outcomes}. "
    "The assignment statement is: {didactic_strategies}. "
    "The student's submission is: {submission}. "
    "Return the analysis of the student's submission based on the following rubric: {rubric}. "
    "Besides the analysis, include a grade that stays within the range specified by the rubric. "
    "Provide a specific analysis for every component of the rubric. "
    "Include clear and complete observations, with specific examples that support your evaluation. "
    "Give detailed recommendations, even for components done correctly, and justify the grade "
    "assigned within the range of the rubric. "
    "verbosity has 3 values: 'low' gives brief feedback with general observations; "
    "'medium' gives feedback with observations and key examples; "
    "'high' gives detailed feedback with complete observations and specific examples. "
)

RESPONSE_SCHEMA_DIRECTIVE = "The response must follow this structure:"

# Literal schema shown to the model. "item component of rubric evaluation"
# stands for each rubric component name.
RESPONSE_SCHEMA = """
{ "type": "json_object",
    "properties": {
        "componentsGrades": {
            "item component of rubric evaluation": {
                "type": "json_object",
                "properties": {
                    "content": {"type": "string", "verbosity": "medium", "feedbackType": "constructive"},
                    "grade": {"type": "number", "strictnessLevel": "lenient"},
                    "maxGrade": {"type": "number"}
                },
                "required": ["content", "grade", "maxGrade"],
                "additionalProperties": false
            }
        },
        "globalGrade": {"type": "number"}
    },
    "required": ["componentsGrades", "globalGrade"],
    "strictnessGradesLevel": "moderate",
    "additionalProperties": false }
"""

# Placeholder: {comment}
REASSESSMENT_GUIDANCE = (
    " Take into account these additional details when evaluating each component "
    "of the assessment rubric: {comment}"
)

SYSTEM_PROMPT = "You are a rigorous but constructive teacher. Output only valid JSON."

# Rendered for prompt fields the activity or course leaves empty
NOT_PROVIDED = "Not provided."
