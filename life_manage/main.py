"""Main FastAPI application for the Life Manage backend."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import os

from life_manage import __version__
from life_manage.db.init import init_db
from life_manage.errors import LifeManageError, ValidationError
from life_manage.middleware.cors import add_cors_middleware
from life_manage.services.base import describe_validation_error

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Life Manage API",
    description="Organize imported chat conversations into projects, tasks and notes",
    version=__version__,
)

# Add CORS middleware
add_cors_middleware(app)


@app.exception_handler(LifeManageError)
async def life_manage_error_handler(request: Request, exc: LifeManageError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    error = ValidationError(describe_validation_error(exc) or "Invalid request")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.on_event("startup")
async def startup_event():
    """Initialize database tables on startup."""
    try:
        init_db()
        logger.info("Database tables initialized successfully")
    except Exception:
        logger.warning(
            "Database initialization failed; database operations may fail until DATABASE_URL is reachable",
            exc_info=True,
        )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Life Manage API",
        "title": "Life Manage API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


# Import and include routers
from life_manage.routers import (  # noqa: E402
    conversations_router,
    notes_router,
    projects_router,
    session_router,
    tasks_router,
    workflows_router,
)

app.include_router(session_router, prefix="/api")  # /api/session
app.include_router(projects_router, prefix="/api")  # /api/projects, /api/projects/{id}/notes
app.include_router(notes_router, prefix="/api")  # /api/notes/{id}
app.include_router(tasks_router, prefix="/api")  # /api/tasks
app.include_router(conversations_router, prefix="/api")  # /api/conversations, import
app.include_router(workflows_router, prefix="/api")  # /api/categorize, /api/dashboard, /api/sample-data

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "life_manage.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
