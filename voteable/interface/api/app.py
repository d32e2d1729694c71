"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI

from voteable.interface.api.routes import health, votes
from voteable.util.di.container import create_container, setup_di
from voteable.util.logging import get_logger
from voteable.util.observability import instrument_fastapi

logger = get_logger(__name__)


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production container
    """
    app_instance = FastAPI(
        title="Voteable API",
        description="Up/down/abstain voting with denormalized vote counters",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)

    logger.info("Application created with %d routes", len(app_instance.routes))

    return app_instance
