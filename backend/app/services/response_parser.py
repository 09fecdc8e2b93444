"""
Parses the model's JSON grading output.

Model output is not guaranteed to follow the requested schema, so this module
never raises: anything it cannot read comes back as an absent global grade
and/or an empty component map. Grades are passed through without checking
them against maxGrade.
"""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.core.logging import get_logger
from app.schemas import ComponentGrade
from app.utils import truncate_text

logger = get_logger()


@dataclass
class ParsedGrading:
    global_grade: Optional[float] = None
    components_grades: Dict[str, ComponentGrade] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.global_grade is None and not self.components_grades


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding ``` / ```json fence if the model added one."""
    text = text.strip()
    if text.startswith("```"):
        first = text.find("\n")
        if first != -1:
            text = text[first + 1 :]
        if text.endswith("```"):
            text = text[:-3].strip()
    return text


def _unwrap(node: Any) -> Any:
    """Step into a schema-style "properties" envelope when present."""
    if isinstance(node, dict) and isinstance(node.get("properties"), dict):
        return node["properties"]
    return node


def _to_float(value: Any) -> Optional[float]:
    """Finite number (or numeric string) as float; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _parse_components(node: Any) -> Dict[str, ComponentGrade]:
    if not isinstance(node, dict):
        return {}
    components: Dict[str, ComponentGrade] = {}
    for name, entry in node.items():
        data = _unwrap(entry)
        if not isinstance(data, dict):
            continue
        content = data.get("content")
        components[str(name)] = ComponentGrade(
            content=content if isinstance(content, str) else None,
            grade=_to_float(data.get("grade")),
            max_grade=_to_float(data.get("maxGrade")),
        )
    return components


def parse_grading_response(text: Optional[str]) -> ParsedGrading:
    """
    Extract globalGrade and componentsGrades from a completion.

    Accepts both {"globalGrade": ..., "componentsGrades": {...}} and the same
    content wrapped in {"properties": {...}}, at the root and per component.
    """
    if not text:
        return ParsedGrading()
    try:
        payload = json.loads(_strip_code_fence(text))
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(
            "Grading response is not valid JSON, grades left empty: %s (%s)", e, truncate_text(text)
        )
        return ParsedGrading()

    body = _unwrap(payload)
    if not isinstance(body, dict):
        logger.warning("Grading response is not a JSON object, grades left empty")
        return ParsedGrading()

    parsed = ParsedGrading(
        global_grade=_to_float(body.get("globalGrade")),
        components_grades=_parse_components(body.get("componentsGrades")),
    )
    if parsed.is_empty:
        logger.warning("Grading response did not match the expected schema")
    return parsed
