"""
Database configuration and session management for the document store.
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import get_database_path

# Create SQLAlchemy base class for models
Base = declarative_base()

# Database engine (will be initialized on first use)
_engine = None
_SessionLocal = None


def get_engine():
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        database_url = f"sqlite:///{get_database_path()}"
        _engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False, "timeout": 30},
            echo=False,
        )
    return _engine


def get_session_local():
    """Get or create the session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session.

    Yields:
        Database session that will be closed after use.
    """
    SessionLocal = get_session_local()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(engine=None):
    """
    Create the documents table if it does not exist yet.

    Safe to call repeatedly; existing documents are left alone.
    """
    # Register models with Base before create_all
    from app.models import document  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())


def dispose_engine():
    """Close pooled connections. Called by the application on shutdown."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


def drop_db(engine=None):
    """
    Drop all database tables.
    Use with caution - only for testing purposes.
    """
    Base.metadata.drop_all(bind=engine or get_engine())
