"""
Hierarchical document store backed by the SQLAlchemy `documents` table.

Collections are addressed by slash-separated paths, mirroring a document
database: "activities", "activities/{activity_id}/assessments", "courses",
"courses/{course_id}/students", "users". Reads return None for a missing document;
database failures surface as UpstreamError so callers can tell the two apart.
"""

import secrets
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DocumentExistsError, UpstreamError
from app.core.logging import get_logger
from app.models import Document

logger = get_logger()

ACTIVITIES = "activities"
COURSES = "courses"
USERS = "users"


def assessments_path(activity_id: str) -> str:
    return f"{ACTIVITIES}/{activity_id}/assessments"


def students_path(course_id: str) -> str:
    return f"{COURSES}/{course_id}/students"


def _json_equals(name: str, value: Any):
    """SQL condition: payload field `name` equals `value`."""
    element = Document.data[name]
    if value is None:
        return element.as_string().is_(None)
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, int):
        return element.as_integer() == value
    if isinstance(value, float):
        return element.as_float() == value
    return element.as_string() == str(value)


@dataclass
class StoredDocument:
    doc_id: str
    data: Dict[str, Any] = field(default_factory=dict)


class DocumentStore:
    """Document store operations over one database session."""

    def __init__(self, db: Session):
        self.db = db

    def generate_id(self) -> str:
        """Return a fresh random document id (20 url-safe characters)."""
        return secrets.token_urlsafe(15)

    def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        """Fetch one document, or None if it does not exist."""
        try:
            row = self._row(collection, doc_id)
        except SQLAlchemyError as e:
            raise UpstreamError(f"Failed to read {collection}/{doc_id}") from e
        if row is None:
            return None
        return StoredDocument(row.doc_id, dict(row.data or {}))

    def exists(self, collection: str, doc_id: str) -> bool:
        return self.get(collection, doc_id) is not None

    def list(self, collection: str) -> List[StoredDocument]:
        """All documents of a collection ordered by document id."""
        try:
            rows = (
                self.db.query(Document)
                .filter(Document.collection == collection)
                .order_by(Document.doc_id)
                .all()
            )
        except SQLAlchemyError as e:
            raise UpstreamError(f"Failed to list {collection}") from e
        return [StoredDocument(row.doc_id, dict(row.data or {})) for row in rows]

    def where_equal(self, collection: str, field_name: str, value: Any) -> List[StoredDocument]:
        """Documents whose `field_name` equals `value`."""
        return self.query(collection, filters={field_name: value})

    def query(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[StoredDocument]:
        """
        Equality-filtered, optionally ordered and limited query.

        Filters, ordering and the limit run in SQL on the JSON payload.
        Documents missing the order field sort last; ties break on doc id.
        """
        q = self.db.query(Document).filter(Document.collection == collection)
        for name, expected in (filters or {}).items():
            q = q.filter(_json_equals(name, expected))
        if order_by:
            key = Document.data[order_by].as_string()
            q = q.order_by(key.is_(None), key.desc() if descending else key.asc())
        q = q.order_by(Document.doc_id)
        if limit is not None:
            q = q.limit(limit)
        try:
            rows = q.all()
        except SQLAlchemyError as e:
            raise UpstreamError(f"Failed to query {collection}") from e
        return [StoredDocument(row.doc_id, dict(row.data or {})) for row in rows]

    def create(self, collection: str, doc_id: str, data: Dict[str, Any]) -> StoredDocument:
        """Insert a new document; raises DocumentExistsError if the id is taken."""
        if self.exists(collection, doc_id):
            raise DocumentExistsError(collection, doc_id)
        try:
            self.db.add(Document(collection=collection, doc_id=doc_id, data=dict(data)))
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DocumentExistsError(collection, doc_id) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise UpstreamError(f"Failed to create {collection}/{doc_id}") from e
        logger.debug("Created document %s/%s", collection, doc_id)
        return StoredDocument(doc_id, dict(data))

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> StoredDocument:
        """Create or fully replace a document."""
        try:
            row = self._row(collection, doc_id)
            if row is None:
                self.db.add(Document(collection=collection, doc_id=doc_id, data=dict(data)))
            else:
                # New dict instance so the JSON column is flagged dirty
                row.data = dict(data)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise UpstreamError(f"Failed to write {collection}/{doc_id}") from e
        logger.debug("Wrote document %s/%s", collection, doc_id)
        return StoredDocument(doc_id, dict(data))

    def delete(self, collection: str, doc_id: str) -> bool:
        """Delete a document. Returns False if it did not exist."""
        try:
            row = self._row(collection, doc_id)
            if row is None:
                return False
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise UpstreamError(f"Failed to delete {collection}/{doc_id}") from e
        logger.debug("Deleted document %s/%s", collection, doc_id)
        return True

    def _row(self, collection: str, doc_id: str) -> Optional[Document]:
        return (
            self.db.query(Document)
            .filter(Document.collection == collection, Document.doc_id == doc_id)
            .first()
        )
