"""Registration API — FastAPI application factory and process entry point.

Invariants:
    - No module-level app: create_app() builds the router configuration and
      run() hands it to the uvicorn listener
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RegistrationError → flat JSON error bodies
    - Logging configured on startup via the lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Settings stored on app.state so routes read the instance the app was built with
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from registration_api.api.error_handlers import register_error_handlers
from registration_api.api.routes import greeting, health, registration
from registration_api.config import Settings, get_settings
from registration_api.infrastructure.observability import setup_logging
from registration_api.infrastructure.request_logging import add_request_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its routes, error handlers and middleware."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.version, lifespan=lifespan,
    )
    app.state.settings = settings

    if settings.access_log:
        add_request_logging(app)

    app.include_router(greeting.router)
    app.include_router(registration.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


def run() -> None:
    """Start the HTTP listener. Listener failures propagate and end the process."""
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        # request lines come from our own middleware
        access_log=False,
    )
