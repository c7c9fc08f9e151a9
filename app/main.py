"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (backstop domain-to-HTTP mapping)
- Logging configuration
- Database schema creation and engine disposal

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.infrastructure.auth.database import init_models
from app.interfaces.auth.dependencies import get_engine
from app.interfaces.auth.endpoints import router as auth_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create tables on startup, release the pool on shutdown."""
    engine = get_engine()
    await init_models(engine)
    logger.info("%s %s ready", settings.project_name, settings.version)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and error handlers.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(auth_router, prefix=settings.api_prefix)

    return app


app = create_app()
