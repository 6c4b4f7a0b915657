"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from book_concierge import BOOK_CONCIERGE_VERSION
from book_concierge.apps.api.middleware import CorrelationIdMiddleware
from book_concierge.core.logging import get_logger
from book_concierge.services import ServiceContainer, build_default_services

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the service container is built eagerly in ``create_app``."""
    services: ServiceContainer = app.state.services
    router = services.intent_router
    registered = sorted(intent.value for intent in router.handlers()) if router else []
    logger.info(
        "book concierge fulfillment starting",
        extra={"version": BOOK_CONCIERGE_VERSION, "intents": registered},
    )
    try:
        yield
    finally:
        logger.info("book concierge fulfillment stopped")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    app = FastAPI(
        title="Book Concierge Fulfillment",
        version=BOOK_CONCIERGE_VERSION,
        lifespan=lifespan,
    )
    app.state.services = services if services is not None else build_default_services()
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, webhooks  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(webhooks.router)
    return app


__all__ = ["create_app", "lifespan"]
