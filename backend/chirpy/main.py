"""
Chirpy Backend — FastAPI Application Factory
=============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn chirpy.main:app --port 8080`) and by tests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                       FastAPI App                        │
    │                                                          │
    │  Middleware:   AccessLog (request ID + access log)       │
    │                                                          │
    │  Routes:                                                 │
    │    GET  /api/healthz        POST /api/validate_chirp     │
    │    GET  /admin/metrics      POST /api/users              │
    │    GET  /api/metrics        POST /admin/reset            │
    │                                                          │
    │  Mounts:                                                 │
    │    /app    → HitCounterMiddleware → StaticFiles          │
    │    /assets → StaticFiles (when the directory exists)     │
    │                                                          │
    │  Exception Handlers:                                     │
    │    Malformed/Rejected → 400 │ Forbidden → 403 │ DB → 500 │
    └──────────────────────────────────────────────────────────┘

State:
    One ApiContext (hit counter + platform) per app, on app.state.api_context.
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy import __version__
from chirpy.config import Settings, settings
from chirpy.context import ApiContext
from chirpy.database import dispose_engine
from chirpy.exceptions import (
    INVALID_BODY_MESSAGE,
    ChirpyError,
    DomainRejectionError,
    ForbiddenError,
    MalformedRequestError,
    PersistenceError,
)
from chirpy.middleware.logging import AccessLogMiddleware
from chirpy.middleware.metrics import HitCounterMiddleware
from chirpy.middleware.request_id import RequestIDLogFilter
from chirpy.routes import admin, chirps, health, users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure root logging for the whole application.

    Every line carries the request ID (see RequestIDLogFilter); lines
    logged outside a request show "-".
    Called once from the lifespan, before anything else logs.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # chirpy.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report the effective configuration.
    Shutdown: dispose the database engine (close pooled connections).
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    logger.info("Chirpy backend %s starting up...", __version__)
    logger.info("Platform: %s", app_settings.platform)
    logger.info("Serving files from %s", Path(app_settings.filepath_root).resolve())
    if app_settings.platform != "dev":
        logger.info("POST /admin/reset is disabled (PLATFORM != dev)")
    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)

    yield

    logger.info("Chirpy backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and `{"error": ...}` bodies.

    Handler hierarchy:
        RequestValidationError  → 400 (parameters FastAPI validates itself)
        MalformedRequestError   → 400 (undecodable JSON or wrong shape)
        DomainRejectionError    → 400 (chirp too long)
        ForbiddenError          → 403 (platform gate)
        PersistenceError        → 500 (storage failure)
        ChirpyError (base)      → its status_code
        HTTPException           → its status (404/405 from routing)
        Exception (fallback)    → 500

    Context dicts and stack traces are logged, never returned.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request body: %d error(s)", len(exc.errors()))
        return _error_response(400, INVALID_BODY_MESSAGE)

    @app.exception_handler(MalformedRequestError)
    async def handle_malformed_request(request: Request, exc: MalformedRequestError):
        logger.warning("Malformed request: %s | Context: %s", exc.message, exc.context)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(DomainRejectionError)
    async def handle_domain_rejection(request: Request, exc: DomainRejectionError):
        logger.warning("Rejected: %s | Context: %s", exc.message, exc.context)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        logger.warning("Forbidden %s %s | Context: %s", request.method, request.url.path, exc.context)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError):
        logger.error("Persistence error: %s | Context: %s", exc.message, exc.context)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(ChirpyError)
    async def handle_chirpy_error(request: Request, exc: ChirpyError):
        logger.error("%s: %s", type(exc).__name__, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Covers serialization failures too: nothing is silently dropped."""
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return _error_response(500, "Internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use instead of the module singleton.
                      Tests pass their own to pick PLATFORM and FILEPATH_ROOT.

    Returns:
        A FastAPI instance with a fresh ApiContext (hit counter at zero).
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Chirpy API",
        description="Chirp validation, user registration, and static-file metrics.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.api_context = ApiContext(platform=app_settings.platform)

    # ── Register Middleware ───────────────────────────────────────────────
    app.add_middleware(AccessLogMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(admin.router)
    app.include_router(chirps.router)
    app.include_router(users.router)

    # ── Static Files ──────────────────────────────────────────────────────
    # Only /app is counted; /assets serves the same tree's assets uncounted
    root = Path(app_settings.filepath_root)
    app.mount(
        "/app",
        HitCounterMiddleware(
            StaticFiles(directory=root, html=True),
            hit_counter=app.state.api_context.hit_counter,
        ),
        name="app",
    )
    if (root / "assets").is_dir():
        app.mount("/assets", StaticFiles(directory=root / "assets"), name="assets")

    return app


# uvicorn expects `chirpy.main:app` to be importable
app = create_app()
