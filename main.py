import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.config import settings
from jobboard.core.database import Database
from jobboard.core.exceptions import AppError
from jobboard.core.logging_config import setup_logging
from jobboard.api.endpoints import auth, health, jobs, reviews, users

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": "Internal Server Error",
    "code": "INTERNAL_ERROR",
    "details": None,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    database: Database = app.state.database

    # Startup
    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    if settings.AUTO_CREATE_TABLES:
        database.create_all()
        logger.info("Database tables ready")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")
    database.dispose()


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code, "details": exc.details},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and path/query params are client errors (400)."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))

    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "code": "VALIDATION_ERROR", "details": details},
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def create_app(database: Optional[Database] = None, configure_logging: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: Storage handle to serve requests from (defaults to one
            built from settings.DATABASE_URL)
        configure_logging: Install the root log handler
    """
    if configure_logging:
        setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Job board API: accounts, job postings and reviews",
        lifespan=lifespan
    )
    app.state.database = database or Database(settings.DATABASE_URL, echo=settings.DB_ECHO)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_URL,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    for module in (auth, users, jobs, reviews, health):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """Root endpoint - API info"""
        return {
            "message": settings.PROJECT_NAME,
            "version": "1.0.0",
            "status": "healthy"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
