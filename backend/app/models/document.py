"""
Document model: one row per stored document of the hierarchical store.
"""

from sqlalchemy import Column, Integer, String, JSON, UniqueConstraint

from app.core.database import Base
from app.core.datetime_utils import get_now_with_timezone


class Document(Base):
    """
    A schemaless document addressed by (collection path, document id).

    Collection paths nest like "activities/A1/assessments"; the document's
    own id is stored separately in doc_id. The payload lives in `data`.
    Timestamps use ISO 8601 with timezone offset.
    """

    __tablename__ = "documents"
    __table_args__ = (UniqueConstraint("collection", "doc_id", name="uq_documents_collection_doc"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String(512), nullable=False, index=True)
    doc_id = Column(String(255), nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(String, default=lambda: get_now_with_timezone().isoformat())
    updated_at = Column(
        String,
        default=lambda: get_now_with_timezone().isoformat(),
        onupdate=lambda: get_now_with_timezone().isoformat(),
    )

    def __repr__(self) -> str:
        return f"<Document(collection={self.collection!r}, doc_id={self.doc_id!r})>"
