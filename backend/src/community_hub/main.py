"""Community Hub - FastAPI Application

This module creates and configures the FastAPI application.
"""

import traceback
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.faqs import router as faqs_router
from .api.health import router as health_router
from .api.issues import router as issues_router
from .api.plugins import router as plugins_router
from .api.tags import router as tags_router
from .core.config import get_settings_instance
from .core.database import close_db, init_db
from .core.exceptions import HubException
from .core.logging import get_logger, setup_logging
from .core.middleware import RequestIDMiddleware, StripAPITrailingSlashMiddleware, TimingMiddleware

logger = get_logger(__name__)


def generate_error_id() -> str:
    """Generate a unique error ID for tracking."""
    return f"ERR-{uuid.uuid4().hex[:8].upper()}"


def get_request_context(request: Request) -> dict[str, Any]:
    """Extract relevant context from request for error logging."""
    return {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else None,
        "request_id": getattr(request.state, "request_id", None),
    }


def format_validation_errors(exc: RequestValidationError) -> str:
    """Turn pydantic errors into one message naming every offending field.

    e.g. ``Invalid request: name: Field required; rating: Input should be less than or equal to 5``
    """
    problems = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        field = ".".join(loc) or "body"
        message = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        problems.append(f"{field}: {message}")
    return "Invalid request: " + "; ".join(problems)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging()
    settings = get_settings_instance()

    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Version: {settings.version}")
    logger.info(f"Environment: {'Development' if settings.debug else settings.environment}")

    await init_db()
    logger.info("Database initialized successfully")

    yield

    await close_db()
    logger.info(f"{settings.app_name} shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings_instance()
    app = FastAPI(
        title=settings.app_name,
        description="Community Hub API: plugins with tags, issues and FAQs",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
        redirect_slashes=False,  # Trailing slashes are normalized by middleware instead
    )

    setup_middleware(app)
    setup_exception_handlers(app)
    setup_routes(app)

    # Static front-end pages; mounted last so API routes take precedence
    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")
        logger.info("Serving static files", extra={"public_dir": str(public_dir)})

    logger.debug("FastAPI application created")
    return app


def setup_middleware(app: FastAPI) -> None:
    """Register request ID, timing, trailing-slash normalization and CORS middleware."""
    settings = get_settings_instance()

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(StripAPITrailingSlashMiddleware, api_prefix=settings.api_prefix)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers that render every failure as ``{"error": message}``.

    Server errors (5xx) are logged with a generated error id and the request
    context; client errors are logged as warnings.
    """
    settings = get_settings_instance()

    @app.exception_handler(HubException)
    async def hub_exception_handler(request: Request, exc: HubException):
        if exc.status_code >= 500:
            error_id = generate_error_id()
            logger.error(
                "Server error",
                extra={
                    "error_id": error_id,
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                    "details": exc.details,
                    "request_context": get_request_context(request),
                },
            )
        else:
            logger.warning(
                "Client error",
                extra={
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                    "request_context": get_request_context(request),
                },
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc)
        logger.warning(
            "Request validation failed",
            extra={"error_message": message, "request_context": get_request_context(request)},
        )
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error(
                "HTTP server error",
                extra={"status_code": exc.status_code, "request_context": get_request_context(request)},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None) or None,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        error_id = generate_error_id()
        logger.error(
            "Unhandled exception",
            extra={
                "error_id": error_id,
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
                "request_context": get_request_context(request),
            },
            exc_info=settings.debug,
        )
        content: dict[str, Any] = {"error": "Internal server error"}
        if settings.debug:
            content["error_id"] = error_id
            content["traceback"] = traceback.format_exception(exc)
        return JSONResponse(status_code=500, content=content)


def setup_routes(app: FastAPI) -> None:
    """Configure application routes."""
    settings = get_settings_instance()

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(plugins_router, prefix=settings.api_prefix)
    app.include_router(tags_router, prefix=settings.api_prefix)
    app.include_router(issues_router, prefix=settings.api_prefix)
    app.include_router(faqs_router, prefix=settings.api_prefix)


# Configure logging before the app exists; the lifespan call is a no-op afterwards
setup_logging()

# Create application instance
app = create_app()
