"""
Layered API — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) builds the composition root, registers
       middleware, exception handlers and routers, and returns the app.
Who:   Served by uvicorn (python -m layered_api, or uvicorn layered_api.main:app).
When:  Once at process start; the returned app handles all requests.

Application Architecture:
    ┌────────────────────────────────────────────────────────┐
    │                      FastAPI App                       │
    │                                                        │
    │  Middleware Chain:                                     │
    │  ┌──────────────┐ ┌──────────────┐                     │
    │  │  Request ID  │→│   Logging    │                     │
    │  └──────────────┘ └──────────────┘                     │
    │                                                        │
    │  Routes → Controller → Service → Repository            │
    │  ┌──────────────┐ ┌──────────────┐ ┌────────────────┐  │
    │  │  /api/users  │ │ /api/orders  │ │    /health     │  │
    │  └──────────────┘ └──────────────┘ └────────────────┘  │
    │                                                        │
    │  Exception Handlers (every failure → 500 envelope):    │
    │  ┌──────────────────────────────────────────────────┐  │
    │  │ RequestValidationError │ LayeredApiError │ other │  │
    │  └──────────────────────────────────────────────────┘  │
    └────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create tables when a relational backend is active
    3. Log the startup banner (port and endpoint URLs)

    Shutdown:
    1. Dispose the database engine, if any
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from layered_api import __version__
from layered_api.config import SERVER_PORT, Settings
from layered_api.config import settings as default_settings
from layered_api.container import Container
from layered_api.database import create_schema, dispose_engine
from layered_api.exceptions import LayeredApiError, failure_envelope
from layered_api.middleware.logging import RequestLoggingMiddleware
from layered_api.middleware.request_id import RequestIDMiddleware, request_id_var
from layered_api.routes import health, orders, users

logger = logging.getLogger(__name__)

FAILURE_STATUS = 500


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Handler: stdout (container runtimes capture it)
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def startup_banner(port: int = SERVER_PORT) -> list[str]:
    """Lines logged once the server is up."""
    return [
        f"Server is running on port {port}.",
        "API Endpoints:",
        f"  Users:  http://localhost:{port}/api/users",
        f"  Orders: http://localhost:{port}/api/orders",
    ]


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before `yield` runs on startup, code after it on shutdown.
    """
    container: Container = app.state.container
    setup_logging(container.settings.log_level)

    if container.engine is not None:
        await create_schema(container.engine)

    for line in startup_banner():
        logger.info(line)

    yield

    if container.engine is not None:
        await dispose_engine(container.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Controllers already convert service failures into 500 responses. These
    handlers cover what happens before a controller runs (body or path
    validation) and anything that escapes one, so that every failure leaves
    the API as a 500 with the {"success": false, "message": ...} body.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation failed: %s", rid, exc.errors())
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        )
        return JSONResponse(
            status_code=FAILURE_STATUS,
            content={"success": False, "message": errors or "Invalid request"},
        )

    @app.exception_handler(LayeredApiError)
    async def handle_app_error(request: Request, exc: LayeredApiError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=FAILURE_STATUS, content=exc.to_envelope())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=FAILURE_STATUS, content=failure_envelope(exc))


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Resolved settings; defaults to the module-level instance.
                  Tests pass their own to pick backends explicitly.

    Returns:
        Fully configured FastAPI instance. Its composition root is available
        as app.state.container.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Layered API",
        description=(
            "Users and orders served through controller → service → repository "
            "layers with interchangeable in-memory and relational backends."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.state.container = Container(settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → routes.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(orders.router)
    app.include_router(health.router)

    return app


# uvicorn expects `layered_api.main:app` to be importable
app = create_app()
