"""
Initialize the document store: create the documents table.

Usage (from backend directory):
  python -m scripts.init_db

The application also runs this on startup; the script is for preparing a
fresh data directory ahead of time. Existing documents are never touched.
"""

from app.core.config import get_database_path
from app.core.database import init_db
from app.core.logging import get_logger, setup_logging

logger = get_logger()


def main():
    setup_logging()
    logger.info("Initializing document store at %s...", get_database_path())
    init_db()
    logger.info(
        "Document store ready. Run the application with: python -m uvicorn main:app --host 0.0.0.0 --port 8080"
    )


if __name__ == "__main__":
    main()
