"""
Kurator Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by uvicorn (`uvicorn kurator.main:app` or `python -m kurator`).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────┐ ┌───────────┐ ┌──────┐ ┌────────────┐  │
    │  │ Req ID │→│ Preflight │→│ CORS │→│ Access Log │  │
    │  └────────┘ └───────────┘ └──────┘ └────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  GET /   GET /corpus   POST /word/add               │
    │  POST /word/delete     GET /word/get/{word}         │
    │                                                     │
    │  Exception Handlers:                                │
    │  KuratorError→400/409 │ Body→400 │ Routing→404/405  │
    │  Exception→500 (answered by Access Log middleware)  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup (fatal on any failure, no degraded mode):
    1. Initialize logging
    2. Load configuration
    3. Connect to MongoDB and ping the database
    4. Publish the WordStore on app.state

    Shutdown:
    1. Close the Motor client
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from kurator import __version__
from kurator.config import Settings, get_settings
from kurator.database import WordStore
from kurator.exceptions import KuratorError
from kurator.log_config import setup_logging
from kurator.middleware.logging import RequestLoggingMiddleware
from kurator.middleware.preflight import PreflightMiddleware
from kurator.middleware.request_id import RequestIDMiddleware, request_id_var
from kurator.responses import error_response, internal_error_response
from kurator.routes import root, words

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Connect to MongoDB on startup and close the client on shutdown.

    Raising here aborts server startup; uvicorn then exits non-zero.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info("kurator %s", __version__)
    logger.info("Trying to connect to database ...")

    store = WordStore.from_settings(settings)
    try:
        await store.ping()
    except PyMongoError as e:
        logger.critical("Cannot reach database '%s': %s", settings.db_name, e)
        store.close()
        raise
    logger.info("Connected successfully.")

    app.state.word_store = store
    host, port = settings.listen_address
    logger.info("Serving on http://%s:%d", host, port)

    yield

    logger.info("Kurator shutting down...")
    store.close()


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the global exception handlers; the only place that builds
    error responses.

    Handler hierarchy:
        KuratorError             → exc.status_code (400, 409 for unsafe password)
        RequestValidationError   → 400 Bad Request, generic message
        StarletteHTTPException   → its status (404 unmatched route, 405 wrong method)
        Exception (fallback)     → 500 Internal Server Error, generic message

    Unexpected exceptions raised by routes are answered inside the
    middleware stack by RequestLoggingMiddleware, so the 500 still gets
    X-Request-ID, CORS headers and an access log line. The Exception
    handler below runs in Starlette's ServerErrorMiddleware, outside every
    added middleware, and only sees failures of the middleware itself.

    Internal details (driver errors for 500s, validation details, tracebacks)
    go to the log only.
    """

    @app.exception_handler(KuratorError)
    async def handle_kurator_error(request: Request, exc: KuratorError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request body: %s", rid, exc.errors())
        return error_response(400, "Malformed request body")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled error: %s", rid, exc, exc_info=exc)
        return internal_error_response()


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; loaded from the environment when omitted.

    Raises:
        pydantic.ValidationError: required configuration is missing.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Kurator API",
        description="Stores a corpus of words with optional descriptions and tags.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute:
    # RequestID → Preflight → CORS → Logging → GZip → routes
    #
    # Why Preflight outside CORS: CORSMiddleware answers browser preflights
    # with an "OK" body (or a plain-text 400 for a disallowed origin), while
    # every OPTIONS answer must be an empty 200. Preflight keeps only the
    # CORS headers of that reply.
    # Why CORS outside Logging: Logging turns unexpected exceptions into the
    # 500 envelope, which then still gets CORS headers on the way out.
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(PreflightMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(words.router)

    return app


app = create_app()
