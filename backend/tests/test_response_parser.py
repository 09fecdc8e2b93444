"""
Tests for tolerant parsing of model grading output.
"""

import pytest

from app.services.response_parser import parse_grading_response


def test_parses_properties_envelope(graded_response):
    parsed = parse_grading_response(graded_response)
    assert parsed.global_grade == 8.5
    logic = parsed.components_grades["logic"]
    assert logic.content == "ok"
    assert logic.grade == 8
    assert logic.max_grade == 10


def test_parses_flat_object():
    parsed = parse_grading_response(
        '{"globalGrade": 4, "componentsGrades": {"style": {"content": "c", "grade": 2, "maxGrade": 5}}}'
    )
    assert parsed.global_grade == 4.0
    assert parsed.components_grades["style"].max_grade == 5.0


def test_strips_markdown_fence():
    parsed = parse_grading_response('```json\n{"globalGrade": 3}\n```')
    assert parsed.global_grade == 3.0


def test_numeric_strings_accepted():
    parsed = parse_grading_response('{"globalGrade": "7.5", "componentsGrades": {"a": {"grade": "2"}}}')
    assert parsed.global_grade == 7.5
    assert parsed.components_grades["a"].grade == 2.0
    assert parsed.components_grades["a"].content is None


def test_grades_are_not_range_checked():
    parsed = parse_grading_response('{"globalGrade": 42, "componentsGrades": {"a": {"grade": 12, "maxGrade": 10}}}')
    assert parsed.global_grade == 42
    assert parsed.components_grades["a"].grade == 12


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "not json at all",
        "{broken",
        "[1, 2, 3]",
        '"just a string"',
        '{"unexpected": true}',
        '{"globalGrade": true, "componentsGrades": ["a"]}',
        '{"globalGrade": "NaN"}',
    ],
)
def test_malformed_input_yields_empty_result(text):
    parsed = parse_grading_response(text)
    assert parsed.global_grade is None
    assert parsed.components_grades == {}
    assert parsed.is_empty


def test_non_object_component_entries_skipped():
    parsed = parse_grading_response('{"globalGrade": 5, "componentsGrades": {"a": 3, "b": {"grade": 1}}}')
    assert list(parsed.components_grades) == ["b"]
