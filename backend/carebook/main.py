"""
CareBook Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes store creation, middleware registration, route mounting,
       error formatting and lifecycle logging in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own freshly built stores.
Who:   Called by uvicorn (carebook.main:app), by the OpenAPI exporter and
       by the test suite (one app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐         │
    │  │ Req ID   │→│ Logging │→│ GZip │→│ CORS │         │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  /patients  /providers  /appointments  /health      │
    │  /openapi.json (3.0.3)  /docs  /redoc               │
    │                                                     │
    │  Exception Handlers:                                │
    │  CareBookError→4xx │ bad body→400 │ other→500       │
    │                                                     │
    │  app.state.registry: stores + services              │
    └─────────────────────────────────────────────────────┘

Every error response has the body {"message": str, "code": str}.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from carebook import __version__
from carebook.config import Settings, settings
from carebook.docs import install_openapi_30
from carebook.exceptions import CareBookError, InvalidInputError
from carebook.middleware.logging import RequestLoggingMiddleware
from carebook.middleware.request_id import RequestIDMiddleware, request_id_var
from carebook.registry import build_registry
from carebook.routes import appointments, health, patients, providers

logger = logging.getLogger(__name__)

API_TITLE = "CareBook Scheduling API"
API_DESCRIPTION = (
    "A sample API demonstrating scheduling and patient management: "
    "patients, healthcare providers and the appointments that link them. "
    "Data is held in memory and resets when the server restarts."
)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: 2025-06-15T10:00:00 [INFO] carebook.access: GET /patients 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report what the stores hold.
    Shutdown: log it. In-memory data is discarded with the process.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    registry = app.state.registry
    logger.info("=" * 60)
    logger.info("%s %s starting up...", API_TITLE, __version__)
    logger.info(
        "Stores ready: %d patients, %d providers, %d appointments",
        len(registry.patients.store),
        len(registry.providers.store),
        len(registry.appointments.store),
    )
    logger.info(
        "API docs: http://%s:%d/docs", app_settings.backend_host, app_settings.backend_port
    )
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down; in-memory records discarded.", API_TITLE)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP responses.

    Handler hierarchy:
        CareBookError           → exc.status_code, {"message", "code"}
        RequestValidationError  → 400 INVALID_INPUT (FastAPI would send 422)
        Exception (fallback)    → 500 INTERNAL_ERROR, stack trace logged only
    """

    @app.exception_handler(CareBookError)
    async def handle_carebook_error(request: Request, exc: CareBookError):
        rid = request_id_var.get("")
        logger.info(
            "[%s] %s %s → %d %s: %s",
            rid, request.method, request.url.path, exc.status_code, exc.code, exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body is not JSON, not an object, or a field has the wrong type."""
        rid = request_id_var.get("")
        errors = exc.errors()
        logger.warning("[%s] Malformed request body: %s", rid, errors)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = "Invalid request body."
        if location:
            message = f"Invalid request body: {location}: {first.get('msg', 'invalid value')}."
        error = InvalidInputError(message=message, context={"errors": errors})
        return JSONResponse(status_code=error.status_code, content=error.to_body())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "message": "An unexpected error occurred. Please try again later.",
                "code": CareBookError.code,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Each call builds new stores, so two apps never share records.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded
                      singleton.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        servers=app_settings.openapi_servers(),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.registry = build_registry(seed_demo_data=app_settings.seed_demo_data)

    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    install_openapi_30(app)
    register_exception_handlers(app)

    app.include_router(patients.router)
    app.include_router(providers.router)
    app.include_router(appointments.router)
    app.include_router(health.router)

    @app.get("/api-docs", include_in_schema=False)
    async def legacy_docs_redirect() -> RedirectResponse:
        """Older clients bookmarked the docs at /api-docs."""
        return RedirectResponse(url="/docs")

    return app


app = create_app()
