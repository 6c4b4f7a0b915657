"""API factory entrypoint wiring default services to the FastAPI app."""

from __future__ import annotations

from book_concierge.apps.api.app import create_app as _create_app
from book_concierge.services import build_default_services


def create_app():  # noqa: D401 - FastAPI factory signature
    """Return a FastAPI app configured with the default service container."""

    return _create_app(build_default_services())


__all__ = ["create_app"]
