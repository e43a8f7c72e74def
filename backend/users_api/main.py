"""Users API — FastAPI application factory and process entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": message}
    - One DatabaseSessionManager per app, opened in lifespan, held on app.state.db
    - Missing DATABASE_URL stops startup before any socket is bound

Design Decisions:
    - create_app(settings) factory over a module-level app: tests build their own
      app and no settings are read at import time
    - Lifespan over @app.on_event: cleaner cleanup of the engine
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from users_api.api.cors import cors_headers, preflight_middleware
from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import diagnostics, health, root, users
from users_api.config import Settings, get_settings
from users_api.core.errors import ConfigurationError
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

MISSING_DATABASE_URL = "DATABASE_URL not found in environment variables"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    app.state.db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Users API started")
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None
        logger.info("Users API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its routes, error handlers and CORS headers."""
    if settings is None:
        settings = get_settings()
    app = FastAPI(title="Users API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.cors_headers = cors_headers(settings)
    app.state.db = None

    register_error_handlers(app)
    app.middleware("http")(preflight_middleware)

    # Routes — explicit registration
    app.include_router(users.router)
    app.include_router(health.router)
    app.include_router(diagnostics.router)
    app.include_router(root.router)
    return app


def load_settings() -> Settings:
    """Read settings, turning a missing/blank DATABASE_URL into ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        if any(err["loc"] == ("database_url",) for err in e.errors()):
            raise ConfigurationError(MISSING_DATABASE_URL) from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def main() -> int:
    """Load configuration, build the app and serve until interrupted."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error(e.message, extra={"error_code": e.code})
        return 1

    setup_logging(settings.log_level, settings.log_format)
    app = create_app(settings)

    logger.info(f"Server listening on port {settings.port}", extra={"port": settings.port})
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    except OSError as e:
        logger.error(f"Error starting server: {e}", extra={"port": settings.port})
        return 1
    return 0
