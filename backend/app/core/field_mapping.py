"""
Explicit, bidirectional mapping between stored document fields and pydantic
record attributes.

Each entity declares a FieldMap listing every attribute once, together with
the document field it is stored under and the default used when the document
lacks the field (or holds null). The map is checked against the model when it
is built, so a renamed attribute fails at import time instead of silently
reading as None.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Type

from pydantic import BaseModel

from app.core.datetime_utils import from_iso_datetime, to_iso_datetime


class FieldKind(str, Enum):
    """How a field's value is converted between document and record."""

    VALUE = "value"  # scalars and enums
    DATETIME = "datetime"  # ISO 8601 string <-> datetime
    OBJECT = "object"  # nested record
    MAPPING = "mapping"  # str -> nested record


@dataclass(frozen=True)
class FieldSpec:
    document: str
    attribute: str
    kind: FieldKind = FieldKind.VALUE
    default: Any = None
    default_factory: Optional[Callable[[], Any]] = None
    nested: Optional["FieldMap"] = None

    def make_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


class FieldMap:
    """Field table for one record type."""

    def __init__(self, model: Type[BaseModel], fields: Iterable[FieldSpec]):
        self.model = model
        self.fields = tuple(fields)
        self._validate()

    def _validate(self) -> None:
        name = self.model.__name__
        attributes = [f.attribute for f in self.fields]
        documents = [f.document for f in self.fields]
        for label, names in (("attribute", attributes), ("document field", documents)):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            if duplicates:
                raise ValueError(f"{name}: duplicate {label}(s) {duplicates}")

        model_fields = set(self.model.model_fields)
        unknown = sorted(set(attributes) - model_fields)
        if unknown:
            raise ValueError(f"{name}: unknown attribute(s) {unknown}")
        unmapped = sorted(model_fields - set(attributes))
        if unmapped:
            raise ValueError(f"{name}: unmapped attribute(s) {unmapped}")

        for spec in self.fields:
            needs_nested = spec.kind in (FieldKind.OBJECT, FieldKind.MAPPING)
            if needs_nested != (spec.nested is not None):
                raise ValueError(
                    f"{name}.{spec.attribute}: nested map must be set exactly for object/mapping fields"
                )

    @property
    def document_fields(self) -> tuple:
        return tuple(f.document for f in self.fields)

    def to_document(self, record: BaseModel) -> Dict[str, Any]:
        """Serialize a record into a plain JSON-compatible dict."""
        return {
            spec.document: self._dump(spec, getattr(record, spec.attribute))
            for spec in self.fields
        }

    def from_document(self, data: Optional[Dict[str, Any]], doc_id: Optional[str] = None) -> BaseModel:
        """
        Build a record from stored data. Missing or null fields take their
        declared default; an empty 'id' falls back to the document id.
        """
        data = data or {}
        values: Dict[str, Any] = {}
        for spec in self.fields:
            raw = data.get(spec.document)
            loaded = None if raw is None else self._load(spec, raw)
            values[spec.attribute] = spec.make_default() if loaded is None else loaded
        if doc_id is not None and "id" in values and not values["id"]:
            values["id"] = doc_id
        return self.model(**values)

    @staticmethod
    def _dump(spec: FieldSpec, value: Any) -> Any:
        if value is None:
            return None
        if spec.kind is FieldKind.DATETIME:
            return to_iso_datetime(value)
        if spec.kind is FieldKind.OBJECT:
            return spec.nested.to_document(value)
        if spec.kind is FieldKind.MAPPING:
            return {key: spec.nested.to_document(item) for key, item in value.items()}
        if isinstance(value, Enum):
            return value.value
        return value

    @staticmethod
    def _load(spec: FieldSpec, raw: Any) -> Any:
        if spec.kind is FieldKind.DATETIME:
            if isinstance(raw, datetime):
                return raw
            return from_iso_datetime(raw) if isinstance(raw, str) else None
        if spec.kind is FieldKind.OBJECT:
            return spec.nested.from_document(raw) if isinstance(raw, dict) else None
        if spec.kind is FieldKind.MAPPING:
            if not isinstance(raw, dict):
                return None
            return {
                str(key): spec.nested.from_document(item)
                for key, item in raw.items()
                if isinstance(item, dict)
            }
        return raw
