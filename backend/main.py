"""
AI Assessment Service - Backend Application

FastAPI application entry point and composition root: the database engine and
the LLM provider are created here on startup and released on shutdown.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.config import get_config, get_database_path, get_log_path
from app.core.database import dispose_engine, init_db
from app.core.logging import get_logger, setup_logging
from app.services.ai_providers import get_llm_provider


# Record startup time globally
_startup_time = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Initializes resources on startup and cleans up on shutdown.
    """
    # Startup
    global _startup_time
    _startup_time = datetime.now(timezone.utc).isoformat()
    logger = setup_logging()
    config = get_config()
    logger.info("Starting AI Assessment Service...")
    logger.debug("Log level: %s, log file: %s", config.logging.level, get_log_path())

    init_db()
    logger.info("Document store ready: %s", get_database_path())

    app.state.llm = get_llm_provider(config.ai)
    logger.info("LLM provider ready: %s/%s", config.ai.provider, config.ai.model)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    app.state.llm = None
    dispose_engine()


# Create FastAPI application
app = FastAPI(
    title="AI Assessment Service",
    description="Rubric-based AI grading of student submissions",
    version="0.1.0",
    lifespan=lifespan,
)

# Request logging middleware (flow-wise: log each request and response)
@app.middleware("http")
async def log_requests(request, call_next):
    logger = get_logger()
    method = request.method
    path = request.url.path
    logger.debug("Request started: %s %s", method, path)
    response = await call_next(request)
    logger.debug("Request completed: %s %s -> %s", method, path, response.status_code)
    return response

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:4200",
        "http://localhost:5173",
        "http://127.0.0.1:4200",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "name": "AI Assessment Service",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint with startup time."""
    return {
        "status": "healthy",
        "startup_time": _startup_time,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        "main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
    )
