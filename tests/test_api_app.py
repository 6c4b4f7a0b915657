"""Tests for FastAPI app factory."""
# pylint: disable=missing-function-docstring

import asyncio

from book_concierge.apps.api.app import create_app, lifespan
from book_concierge.core.intents import IntentType


def test_create_app_has_routes():
    app = create_app()
    paths = {
        path
        for route in app.router.routes
        if (path := getattr(route, "path", getattr(route, "path_format", "")))
    }
    assert {"/", "/alive", "/webhook"} <= paths
    assert hasattr(app.state, "services")
    assert set(app.state.services.intent_router.handlers()) == set(IntentType)
    assert app.state.services.catalog is not None


def test_lifespan_runs_with_default_services():
    app = create_app()

    async def _exercise() -> None:
        async with lifespan(app):
            assert app.state.services.intent_router is not None

    asyncio.run(_exercise())


def test_api_factory_builds_app():
    from book_concierge.api_factory import (  # pylint: disable=import-outside-toplevel
        create_app as factory,
    )

    app = factory()
    assert app.title == "Book Concierge Fulfillment"
