"""
HotelHub Backend: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the process-owned collaborators
       (Database, UploadSink), attaches them to app.state, and registers
       middleware, exception handlers, and routers.
Who:   uvicorn imports `hotelhub.main:app`; tests call create_app() directly.

Application Architecture:
    Middleware:  RequestContext → GZip → CORS
    Routes:      /hotel, /hotel/{slug}, /room, /hotel/{hotel_slug}/room[/{room_slug}], /health
    Errors:      ValidationError→400 {"error"} │ NotFound→404 {"message"} │ backend→500 {"error"}

Lifecycle:
    Startup:   logging, upload directory, optional schema creation
    Shutdown:  dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from hotelhub import __version__
from hotelhub.config import Settings, settings as default_settings
from hotelhub.database import Database
from hotelhub.exceptions import (
    DatabaseError,
    FileStorageError,
    HotelHubError,
    NotFoundError,
    ValidationError,
)
from hotelhub.middleware.request_context import RequestContextMiddleware, request_id_var
from hotelhub.routes import health, hotels, rooms
from hotelhub.services.upload_service import UploadSink

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout so container runtimes capture it.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # These log every request / statement at INFO; our own access log covers it
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging, upload directory, optional schema. Shutdown: dispose engine."""
    app_settings: Settings = app.state.settings
    database: Database = app.state.database
    upload_sink: UploadSink = app.state.upload_sink

    setup_logging(app_settings.log_level)
    logger.info("HotelHub Backend %s starting up...", __version__)

    upload_root = upload_sink.ensure_directory()
    logger.info("Upload directory: %s", upload_root)

    if app_settings.db_create_schema:
        await database.create_schema()
        logger.info("Database schema ensured (hotel, room)")

    logger.info(
        "Server ready at http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )

    yield

    logger.info("HotelHub Backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        ValidationError         → 400 {"error": message}
        RequestValidationError  → 400 {"error": summary of invalid fields}
        NotFoundError           → 404 {"message": message}
        DatabaseError           → 500 {"error": raw driver message}
        FileStorageError        → 500 {"error": raw OS message}
        HotelHubError (base)    → 500 {"error": message}
        Exception (fallback)    → 500 {"error": str(exc)}

    500 bodies carry the underlying error text unchanged.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        problems = [
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
            for err in exc.errors()
        ]
        message = "; ".join(problems) or "Invalid request"
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error(
            "[%s] File storage error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(HotelHubError)
    async def handle_app_error(request: Request, exc: HotelHubError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"error": str(exc)})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    upload_sink: Optional[UploadSink] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings:    Configuration; defaults to the environment-loaded settings
        database:    Database handle; built from settings when omitted
        upload_sink: Upload sink; built from settings.upload_dir when omitted

    The database engine connects lazily, so building the app performs no I/O.
    """
    app_settings = settings or default_settings

    app = FastAPI(
        title="HotelHub API",
        description="CRUD service for hotels and their rooms, with image uploads.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = database or Database.from_settings(app_settings)
    app.state.upload_sink = upload_sink or UploadSink(app_settings.upload_dir)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestContext → GZip → CORS
    origins = app_settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(hotels.router)
    app.include_router(rooms.router)
    app.include_router(health.router)

    return app


# uvicorn expects `hotelhub.main:app` to be importable
app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on the configured address."""
    import uvicorn

    uvicorn.run(
        "hotelhub.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )
