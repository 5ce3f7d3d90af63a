"""
Student Management API - Main Application

FastAPI backend with:
- MongoDB for students, enrollments, subjects and users
- Declarative request validation (pydantic)
- JWT bearer authentication

Run: uvicorn app.main:app --reload
  or: python -m app.main   (host/port from settings)
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo import MongoClient
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import AppError, AuthError
from app.core.logging import setup_logging
from app.db.mongodb import create_mongo_client, init_mongo_indexes, test_mongo_connection

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as JSON {message[, details]}."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Query/path/body-shape errors, same 400 shape as schema validation
        details = [
            {"field": str(err["loc"][-1]) if err.get("loc") else "request", "message": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation error", "details": details},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = "Route not found" if exc.status_code == 404 else exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[MongoClient] = None
) -> FastAPI:
    """
    Build the application around one Mongo client.

    Args:
        settings: defaults to get_settings()
        mongo_client: defaults to a MongoClient for settings.mongodb_uri;
            tests pass a mongomock client
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Student Management API",
        description="""
    CRUD API for a student-management domain.

    ## Features
    - **Authentication**: register, login, JWT bearer tokens
    - **Students**: create, list (paginated), get, update, delete
    - **Enrollments**: student-course enrollments, one per student per course
    - **Subjects**: course subjects
        """,
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc"
    )

    app.state.settings = settings
    app.state.mongo_client = mongo_client or create_mongo_client(settings)
    app.state.db = app.state.mongo_client[settings.mongodb_db]

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        """Create MongoDB indexes. A dead database is logged, not fatal."""
        logger.info("Starting Student Management API on %s:%s", settings.server_host, settings.server_port)
        try:
            init_mongo_indexes(app.state.db)
        except PyMongoError as e:
            logger.error("Unable to connect to MongoDB: %s", e)

    @app.on_event("shutdown")
    async def shutdown_event():
        app.state.mongo_client.close()
        logger.info("MongoDB connection closed")

    @app.get("/health", tags=["Health"])
    def health_check():
        return {
            "status": "healthy",
            "mongodb": "connected" if test_mongo_connection(app.state.db) else "disconnected"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.server_host, port=settings.server_port, reload=settings.debug)
